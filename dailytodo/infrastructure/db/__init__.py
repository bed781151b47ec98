# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .dialects import Dialect, normalize_url, resolve_dialect
from .session import Base, Database

__all__ = ["Base", "Database", "Dialect", "normalize_url", "resolve_dialect"]
