# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for Fanout."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text. Any imports here
# will cause a performance penalty during this process.
################################################################################

import sys

from cyclopts import App

from fanout.cli_utils import exit_on_error
from fanout.common.config import ServiceConfig, UserConfig

app = App(name="fanout", help="Concurrent command fan-out harness for line protocol servers")


@app.command(name="run")
def run(
    user_config: UserConfig | None = None,
    service_config: ServiceConfig | None = None,
) -> int:
    """Run a batch of invocations against the target and wait for all of them to finish.

    Args:
        user_config: Target, load generator and output configuration
        service_config: Service configuration options
    """
    with exit_on_error(title="Error Running Fanout"):
        from fanout.cli_runner import run_batch
        from fanout.common.config import load_service_config

        user_config = user_config or UserConfig()
        service_config = service_config or load_service_config()

        return run_batch(user_config, service_config)


if __name__ == "__main__":
    sys.exit(app())
