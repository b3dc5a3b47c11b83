# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/config/__init__.py
from .config_loader import Config
from .vm_config import ForwardedPort, VmConfig

__all__ = ["Config", "ForwardedPort", "VmConfig"]
