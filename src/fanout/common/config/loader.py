# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from fanout.common.config.service_config import ServiceConfig


def load_service_config() -> ServiceConfig:
    """Load the service configuration from the environment and the .env file, if present."""
    return ServiceConfig()
