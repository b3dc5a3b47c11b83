# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/network/reconciler.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..core.logger import Log
from .hostonly import AdapterRecord, NetworkTarget, TargetState, select_target
from .vboxmanage import VBoxManage


class ReconcileOutcome(str, Enum):
    NO_MATCH = "no-match"
    ALREADY_CORRECT = "already-correct"
    RECONFIGURED = "reconfigured"
    WOULD_RECONFIGURE = "would-reconfigure"


@dataclass(frozen=True)
class ReconcileResult:
    outcome: ReconcileOutcome
    state: TargetState
    adapters: List[AdapterRecord] = field(default_factory=list)


class NetworkReconciler:
    """
    Pre-flight check for the host-only network backing the guest's public
    network.

    Lists host-only adapters, picks the one in the target subnet and moves it
    to the canonical address if it is not there already. Inspection or
    reconfiguration failures propagate as ToolInvocationError; nothing is
    rolled back and prior adapter state is never restored.
    """

    def __init__(
        self,
        logger: logging.Logger,
        vbox: VBoxManage,
        target: NetworkTarget = NetworkTarget(),
        *,
        dry_run: bool = False,
    ):
        self.logger = logger
        self.vbox = vbox
        self.target = target
        self.dry_run = dry_run

    def inspect(self) -> ReconcileResult:
        adapters = self.vbox.list_hostonlyifs()
        for adapter in adapters:
            if not adapter.name and adapter.ip_address.startswith(self.target.prefix):
                Log.warn(self.logger, f"Ignoring host-only adapter without a name at {adapter.ip_address}")
        state = select_target(adapters, self.target.prefix, self.target.address)
        if not state.matched:
            outcome = ReconcileOutcome.NO_MATCH
        elif state.needs_reconfigure:
            outcome = ReconcileOutcome.WOULD_RECONFIGURE
        else:
            outcome = ReconcileOutcome.ALREADY_CORRECT
        return ReconcileResult(outcome=outcome, state=state, adapters=adapters)

    def run(self) -> ReconcileResult:
        Log.step(self.logger, "Checking host-only adapters", prefix=self.target.prefix)
        result = self.inspect()
        state = result.state

        if result.outcome is ReconcileOutcome.NO_MATCH:
            self.logger.info(
                "No host-only adapter in %s0/24; one will be created at %s",
                self.target.prefix,
                self.target.address,
            )
            return result

        if result.outcome is ReconcileOutcome.ALREADY_CORRECT:
            Log.ok(self.logger, f"{state.selected_adapter} already at {self.target.address}")
            return result

        if self.dry_run:
            Log.warn(
                self.logger,
                f"dry-run: would move {state.selected_adapter} from {state.current_address} to {self.target.address}",
            )
            return result

        Log.step(
            self.logger,
            f"Reconfiguring {state.selected_adapter}",
            current=state.current_address,
            ip=self.target.address,
            netmask=self.target.netmask,
        )
        self.vbox.hostonlyif_ipconfig(state.selected_adapter, self.target.address, self.target.netmask)
        Log.ok(self.logger, f"{state.selected_adapter} set to {self.target.address}/{self.target.netmask}")
        return ReconcileResult(outcome=ReconcileOutcome.RECONFIGURED, state=state, adapters=result.adapters)
