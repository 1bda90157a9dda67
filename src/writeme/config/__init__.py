# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from .cli_configs import Config, default_config
from .techs_config import TECHS, Shield, Tech

__all__ = ["Config", "default_config", "TECHS", "Shield", "Tech"]
