# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class BaseMixin:
    """Base mixin class.

    Mixins always pass **kwargs to super().__init__. BaseMixin sits at the end of
    the chain and swallows whatever is left, since object.__init__ takes no arguments.
    """

    def __init__(self, **kwargs):
        super().__init__()
