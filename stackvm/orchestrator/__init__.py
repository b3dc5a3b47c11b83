# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/orchestrator/__init__.py
from .handoff import VagrantHandoff
from .orchestrator import Orchestrator
from .provider import needs_hostonly_adapter, resolve_provider

__all__ = ["Orchestrator", "VagrantHandoff", "needs_hostonly_adapter", "resolve_provider"]
