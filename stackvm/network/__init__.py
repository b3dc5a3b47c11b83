# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/network/__init__.py
from .hostonly import AdapterRecord, NetworkTarget, TargetState, parse_hostonlyifs, select_target
from .reconciler import NetworkReconciler, ReconcileOutcome, ReconcileResult
from .vboxmanage import VBoxManage

__all__ = [
    "AdapterRecord",
    "NetworkTarget",
    "TargetState",
    "parse_hostonlyifs",
    "select_target",
    "NetworkReconciler",
    "ReconcileOutcome",
    "ReconcileResult",
    "VBoxManage",
]
