# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from cyclopts import Parameter


class CLIParameter(Parameter):
    """Configuration for a CLI parameter.

    Subclass of cyclopts.Parameter carrying the defaults Fanout uses for all of
    its CLI parameters, so every option in the config behaves the same way.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, show_env_var=False, negative=False, **kwargs)


class DisableCLI(CLIParameter):
    """Configuration for a config field that cannot be set from the CLI."""

    def __init__(self, reason: str, *args, **kwargs):
        super().__init__(*args, parse=False, **kwargs)
