# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-user daily todo and weekly/monthly planning backend."""

__version__ = "0.1.0"
