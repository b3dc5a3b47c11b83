# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/modes/__init__.py
from .check_mode import CheckMode

__all__ = ["CheckMode"]
