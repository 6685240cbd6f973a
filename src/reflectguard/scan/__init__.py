# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pipeline and dispatcher exports."""

from .dispatcher import ScanDispatcher
from .pipeline import ReflectionPipeline

__all__ = ["ReflectionPipeline", "ScanDispatcher"]
