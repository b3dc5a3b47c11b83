# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/__init__.py
"""
stackvm - DevStack development VM bring-up

Runs the host-side pre-flight for a Vagrant-managed DevStack VM and then
hands off to `vagrant up`. The pre-flight makes sure the VirtualBox
host-only adapter backing the guest's public network (172.24.4.0/24) sits
at 172.24.4.225.

Usage as a library:

    from stackvm import NetworkReconciler, VBoxManage
    from stackvm.core.logger import Log

    logger = Log.setup(verbose=2)
    result = NetworkReconciler(logger, VBoxManage(logger)).run()
    print(result.outcome)
"""

__version__ = "0.1.0"

from .network import (
    AdapterRecord,
    NetworkReconciler,
    NetworkTarget,
    ReconcileOutcome,
    TargetState,
    VBoxManage,
    parse_hostonlyifs,
    select_target,
)
from .orchestrator import Orchestrator, resolve_provider

__all__ = [
    "__version__",
    "AdapterRecord",
    "NetworkReconciler",
    "NetworkTarget",
    "ReconcileOutcome",
    "TargetState",
    "VBoxManage",
    "parse_hostonlyifs",
    "select_target",
    "Orchestrator",
    "resolve_provider",
]
