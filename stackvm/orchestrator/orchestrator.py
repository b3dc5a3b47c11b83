# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/orchestrator/orchestrator.py

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..config.vm_config import VmConfig
from ..core.exceptions import Fatal, ToolInvocationError
from ..core.logger import Log
from ..core.utils import U
from ..modes.check_mode import CheckMode
from ..network.reconciler import NetworkReconciler
from ..network.vboxmanage import VBoxManage, resolve_vboxmanage
from .handoff import VagrantHandoff
from .provider import DEFAULT_PROVIDER, needs_hostonly_adapter, resolve_provider

COMMANDS = ("up", "reconcile", "check")


class Orchestrator:
    """
    Bring-up pipeline: resolve provider, reconcile the host-only network
    (VirtualBox only), then hand off to vagrant.
    """

    def __init__(
        self,
        logger: logging.Logger,
        args: argparse.Namespace,
        config: Optional[VmConfig] = None,
        *,
        vbox: Optional[VBoxManage] = None,
        handoff: Optional[VagrantHandoff] = None,
    ):
        self.logger = logger
        self.args = args
        self.config = config or VmConfig.from_args(args)
        self._vbox = vbox
        self.handoff = handoff or VagrantHandoff(
            logger,
            self.config,
            vagrant=getattr(args, "vagrant", None) or "vagrant",
            provision=not getattr(args, "no_provision", False),
        )

        Log.trace(self.logger, "🧠 Orchestrator init: cmd=%r provider=%r", getattr(args, "cmd", None), getattr(args, "provider", None))

    @property
    def vbox(self) -> VBoxManage:
        if self._vbox is None:
            self._vbox = VBoxManage(self.logger, resolve_vboxmanage(getattr(self.args, "vboxmanage", None)))
        return self._vbox

    def _reconciler(self) -> NetworkReconciler:
        return NetworkReconciler(
            self.logger,
            self.vbox,
            self.config.network,
            dry_run=bool(getattr(self.args, "dry_run", False)),
        )

    def _reconcile(self) -> Optional[int]:
        """Returns an exit code when the bring-up must stop, else None."""
        try:
            self._reconciler().run()
        except ToolInvocationError as e:
            Log.fail(self.logger, f"Host-only network reconciliation failed: {e}", rc=e.code)
            if e.output:
                self.logger.error("%s", e.output)
            return e.code
        return None

    def run(self) -> int:
        cmd = getattr(self.args, "cmd", None) or "up"
        if cmd not in COMMANDS:
            raise Fatal(2, f"Unknown command: {cmd!r} (expected one of: {', '.join(COMMANDS)})")

        # --provider, then $VAGRANT_DEFAULT_PROVIDER, then the config file, then virtualbox.
        provider = resolve_provider(
            getattr(self.args, "provider", None),
            fallback=self.config.provider or DEFAULT_PROVIDER,
        )
        U.banner(self.logger, f"Mode: {cmd} (provider: {provider})")

        if not needs_hostonly_adapter(provider):
            self.logger.info("Provider %s does not use a host-only adapter; skipping network check", provider)
            if cmd == "check":
                return 0
        elif cmd == "check":
            try:
                return CheckMode(self.logger, self._reconciler()).run()
            except ToolInvocationError as e:
                Log.fail(self.logger, str(e), rc=e.code)
                if e.output:
                    self.logger.error("%s", e.output)
                return e.code
        else:
            rc = self._reconcile()
            if rc is not None:
                return rc

        if getattr(self.args, "dry_run", False):
            Log.ok(self.logger, "dry-run: nothing changed; vagrant up not started")
            return 0

        if cmd == "reconcile" or getattr(self.args, "skip_handoff", False):
            Log.ok(self.logger, "Network pre-flight complete; handoff skipped")
            return 0

        return self.handoff.run(provider)
