# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from cyclopts import Group


class Groups:
    """Groups for the CLI.

    NOTE: The order of these groups are the order they will be displayed in the help text.
    """

    TARGET = Group.create_ordered("Target")
    LOAD_GENERATOR = Group.create_ordered("Load Generator")
    OUTPUT = Group.create_ordered("Output")
    SERVICE = Group.create_ordered("Service")
