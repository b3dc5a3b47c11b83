# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/modes/check_mode.py
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..network.reconciler import NetworkReconciler, ReconcileOutcome, ReconcileResult

_OUTCOME_TEXT = {
    ReconcileOutcome.NO_MATCH: "[yellow]no adapter in subnet[/] (one will be created on first boot)",
    ReconcileOutcome.ALREADY_CORRECT: "[green]already at canonical address[/]",
    ReconcileOutcome.WOULD_RECONFIGURE: "[red]needs reconfiguration[/]",
}


class CheckMode:
    """
    check mode:
      - list host-only adapters and show which one the reconciler would pick
      - never touches adapter state
    """

    def __init__(self, logger: logging.Logger, reconciler: NetworkReconciler, console: Optional[Console] = None):
        self.logger = logger
        self.reconciler = reconciler
        self.console = console or Console()

    def render(self, result: ReconcileResult) -> None:
        target = self.reconciler.target
        table = Table(title="Host-only adapters", expand=False)
        table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("IPAddress")
        table.add_column("In subnet", justify="center")

        for i, a in enumerate(result.adapters):
            in_subnet = a.ip_address.startswith(target.prefix)
            table.add_row(str(i), a.name or "-", a.ip_address or "-", "✔" if in_subnet else "")

        self.console.print(table)

        state = result.state
        body = [
            f"target:   {target.address}/{target.netmask} (prefix {target.prefix})",
            f"selected: {state.selected_adapter or '-'}",
            f"current:  {state.current_address or '-'}",
            f"status:   {_OUTCOME_TEXT.get(result.outcome, result.outcome.value)}",
        ]
        self.console.print(Panel("\n".join(body), title="Reconcile plan", expand=False))

    def run(self) -> int:
        result = self.reconciler.inspect()
        self.logger.debug("check: outcome=%s adapters=%d", result.outcome.value, len(result.adapters))
        self.render(result)
        return 0
