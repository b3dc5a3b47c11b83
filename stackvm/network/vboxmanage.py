# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/network/vboxmanage.py
from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from ..core.exceptions import ToolInvocationError
from ..core.utils import U
from .hostonly import AdapterRecord, parse_hostonlyifs

VBOXMANAGE_ENV = "STACKVM_VBOXMANAGE"
VBOXMANAGE_DEFAULT = "VBoxManage"


def resolve_vboxmanage(explicit: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """--vboxmanage PATH, then $STACKVM_VBOXMANAGE, then VBoxManage on PATH."""
    env = os.environ if env is None else env
    for candidate in (explicit, env.get(VBOXMANAGE_ENV)):
        if candidate and candidate.strip():
            return os.path.expanduser(candidate.strip())
    return U.which(VBOXMANAGE_DEFAULT) or VBOXMANAGE_DEFAULT


class VBoxManage:
    """
    Thin wrapper over the two VBoxManage calls the reconciler needs.

    No timeouts are applied: a hung VBoxManage blocks the bring-up.
    """

    def __init__(self, logger: logging.Logger, exe: Optional[str] = None):
        self.logger = logger
        self.exe = exe or resolve_vboxmanage()

    def _run(self, *args: str) -> str:
        cmd = [self.exe, *args]
        cp = U.run_cmd(self.logger, cmd, check=False, capture=True, fatal=True)
        output = "\n".join(s.strip() for s in (cp.stdout or "", cp.stderr or "") if s and s.strip())
        if cp.returncode != 0:
            raise ToolInvocationError(
                code=cp.returncode,
                msg=f"{os.path.basename(self.exe)} {' '.join(args[:2])} exited with status {cp.returncode}",
                command=cmd,
                output=output,
            )
        return cp.stdout or ""

    def list_hostonlyifs(self) -> List[AdapterRecord]:
        out = self._run("list", "hostonlyifs")
        adapters = parse_hostonlyifs(out)
        self.logger.debug("Found %d host-only adapter(s)", len(adapters))
        return adapters

    def hostonlyif_ipconfig(self, name: str, ip: str, netmask: str) -> str:
        return self._run("hostonlyif", "ipconfig", name, "--ip", ip, "--netmask", netmask)
