# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/orchestrator/handoff.py
from __future__ import annotations

import logging
import os
from typing import List

from ..config.vm_config import VmConfig
from ..core.exceptions import ToolInvocationError
from ..core.utils import U


class VagrantHandoff:
    """
    Hands the bring-up to `vagrant up`, which boots and provisions the VM.

    The VM settings travel as STACKVM_* environment variables; output is
    streamed to the logger line by line.
    """

    def __init__(self, logger: logging.Logger, config: VmConfig, *, vagrant: str = "vagrant", provision: bool = True):
        self.logger = logger
        self.config = config
        self.vagrant = vagrant
        self.provision = provision

    def command(self, provider: str) -> List[str]:
        cmd = [self.vagrant, "up", "--provider", provider]
        if not self.provision:
            cmd.append("--no-provision")
        return cmd

    def run(self, provider: str) -> int:
        env = dict(os.environ)
        env.update(self.config.to_env())
        cmd = self.command(provider)

        self.logger.info("🚀 Handing off to: %s (cwd=%s)", U._pretty_cmd(cmd), self.config.project_dir)
        try:
            cp = U.run_cmd(self.logger, cmd, check=False, env=env, cwd=self.config.project_dir, stream=True, fatal=True)
        except ToolInvocationError as e:
            self.logger.error("%s", e)
            return e.code

        if cp.returncode != 0:
            self.logger.error("vagrant up exited with status %d", cp.returncode)
        return cp.returncode
