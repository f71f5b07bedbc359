# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import ErrorsConfig, load_config

__all__ = ["ErrorsConfig", "load_config"]
