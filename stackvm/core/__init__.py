# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/core/__init__.py
from .exceptions import Fatal, StackVmError, ToolInvocationError
from .logger import Log
from .utils import U

__all__ = ["Fatal", "StackVmError", "ToolInvocationError", "Log", "U"]
