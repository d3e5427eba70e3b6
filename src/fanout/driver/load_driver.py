# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from fanout.common.config import LoadGeneratorConfig, UserConfig
from fanout.common.constants import DEFAULT_INVOCATION_TIMEOUT, DEFAULT_MAX_CONCURRENCY
from fanout.common.enums import ConcurrencyMode
from fanout.common.exceptions import ConfigurationError
from fanout.common.factories import DispatchStrategyFactory, InvokerFactory
from fanout.common.mixins import FanoutLoggerMixin
from fanout.common.models import BatchResult, CommandSpec, TargetEndpoint
from fanout.common.protocols import InvokerProtocol
from fanout.driver.batch import Batch


class LoadDriver(FanoutLoggerMixin):
    """Fans a batch of invocations out against one target and joins on all of them.

    Usage:
        driver = LoadDriver(invoker, TargetEndpoint(host="127.0.0.1", port=6379))
        result = await driver.run(150, ["PING", "ECHO 'Hello World!'"], ConcurrencyMode.PARALLEL)
        assert result.succeeded + result.failed == 150
    """

    def __init__(
        self,
        invoker: InvokerProtocol,
        target: TargetEndpoint,
        max_concurrency: int | None = DEFAULT_MAX_CONCURRENCY,
        invocation_timeout: float | None = DEFAULT_INVOCATION_TIMEOUT,
        batch_timeout: float | None = None,
        loadgen_config: LoadGeneratorConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if max_concurrency is not None and max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be at least 1, got {max_concurrency}"
            )
        for name, timeout in (
            ("invocation_timeout", invocation_timeout),
            ("batch_timeout", batch_timeout),
        ):
            if timeout is not None and timeout <= 0:
                raise ConfigurationError(f"{name} must be positive, got {timeout}")

        self.invoker = invoker
        self.target = target
        self.max_concurrency = max_concurrency
        self.invocation_timeout = invocation_timeout
        self.batch_timeout = batch_timeout
        self.loadgen_config = loadgen_config

    @classmethod
    def from_user_config(cls, user_config: UserConfig) -> "LoadDriver":
        """Build a driver for the target, invoker and limits of a user config."""
        from fanout.module_loader import ensure_modules_loaded

        ensure_modules_loaded()

        target_config = user_config.target
        loadgen = user_config.loadgen
        invoker = InvokerFactory.create_instance(
            target_config.invoker, target_config=target_config
        )
        return cls(
            invoker=invoker,
            target=target_config.endpoint,
            max_concurrency=loadgen.max_concurrency,
            invocation_timeout=loadgen.invocation_timeout,
            batch_timeout=loadgen.batch_timeout,
            loadgen_config=loadgen,
        )

    async def run_from_config(self) -> BatchResult:
        """Run the batch described by the load generator config the driver was built with."""
        if self.loadgen_config is None:
            raise ConfigurationError(
                "The driver was not created with a load generator config"
            )
        return await self.run(
            self.loadgen_config.count,
            self.loadgen_config.command_spec,
            self.loadgen_config.mode,
        )

    async def run(
        self,
        count: int,
        command_spec: CommandSpec | Any,
        mode: ConcurrencyMode | str = ConcurrencyMode.PARALLEL,
    ) -> BatchResult:
        """Run `count` invocations in the given mode and wait for every one of them to finish.

        Failed invocations never abort the batch, they are counted in the result.

        Args:
            count: The number of invocations, at least 1.
            command_spec: The commands to cycle through. A CommandSpec, a CommandTemplate,
                a command string or a list of those.
            mode: The concurrency mode.

        Returns:
            The aggregate result, with `succeeded + failed == count`.

        Raises:
            ConfigurationError: If the arguments are invalid. Nothing is dispatched.
            DispatchFailure: If a worker task could not be created.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ConfigurationError(f"count must be an integer >= 1, got {count!r}")
        command_spec = CommandSpec.from_value(command_spec)
        mode = self._parse_mode(mode)

        strategy = DispatchStrategyFactory.create_instance(
            mode,
            invoker=self.invoker,
            target=self.target,
            max_concurrency=self.max_concurrency,
            invocation_timeout=self.invocation_timeout,
            batch_timeout=self.batch_timeout,
        )

        batch = Batch(count, command_spec, mode, self.target)
        self.info(
            f"Running {count} invocation(s) of [{command_spec}] against {self.target} in {mode} mode"
        )
        batch.mark_started()
        await strategy.dispatch(batch)
        batch.mark_finished()

        result = batch.to_result()
        self._log_result(result)
        return result

    @staticmethod
    def _parse_mode(mode: ConcurrencyMode | str) -> ConcurrencyMode:
        try:
            return ConcurrencyMode(mode)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown concurrency mode {mode!r}, expected one of: "
                f"{', '.join(str(m) for m in ConcurrencyMode)}"
            ) from e

    def _log_result(self, result: BatchResult) -> None:
        summary = (
            f"Batch finished in {result.duration_sec:.3f}s: "
            f"{result.succeeded} succeeded, {result.failed} failed"
        )
        if result.was_timed_out:
            self.warning(f"{summary} (batch deadline expired)")
        elif result.has_failures:
            self.notice(summary)
        else:
            self.success(summary)
