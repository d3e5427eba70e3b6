# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio

from fanout.cli_utils import exit_on_error, raise_startup_error_and_exit
from fanout.common.config import ServiceConfig, UserConfig
from fanout.common.enums import FailurePolicy
from fanout.common.exceptions import FanoutError
from fanout.common.fanout_logger import FanoutLogger
from fanout.common.models import BatchResult

logger = FanoutLogger(__name__)


def exit_code_for(result: BatchResult, failure_policy: FailurePolicy) -> int:
    """Map a completed batch to the process exit code, according to the failure policy."""
    if failure_policy == FailurePolicy.ANY and result.has_failures:
        return 1
    return 0


async def _run_and_export(user_config: UserConfig) -> BatchResult:
    from fanout.driver import LoadDriver
    from fanout.exporters import ExporterManager

    driver = LoadDriver.from_user_config(user_config)
    result = await driver.run_from_config()
    await ExporterManager(result, user_config).export_data()
    return result


def run_batch(user_config: UserConfig, service_config: ServiceConfig) -> int:
    """Run the batch described by the config, export the result and return the exit code."""
    from fanout.common.logging import setup_rich_logging
    from fanout.module_loader import ensure_modules_loaded

    setup_rich_logging(service_config, user_config)

    try:
        ensure_modules_loaded()
    except Exception as e:
        raise_startup_error_and_exit(
            f"Error loading modules: {e}",
            title="Error Loading Modules",
        )

    logger.debug(lambda: f"Running with user config: {user_config.model_dump_json()}")

    # ConfigurationError and DispatchFailure end the run with a panel and exit code 1
    with exit_on_error(FanoutError, title="Fanout Error", show_traceback=False):
        result = asyncio.run(_run_and_export(user_config))

    exit_code = exit_code_for(result, user_config.loadgen.failure_policy)
    if exit_code != 0:
        logger.error(
            f"{result.failed} of {result.count} invocation(s) failed with --failure-policy {user_config.loadgen.failure_policy}"
        )
    return exit_code
