# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/cli/args/validators.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from ...core.exceptions import Fatal


def _validate_project_dir(args: argparse.Namespace) -> None:
    pd = getattr(args, "project_dir", None)
    if pd is None:
        return
    path = Path(pd).expanduser()
    if not path.is_dir():
        raise Fatal(2, f"--project-dir is not a directory: {path}")


def _validate_handoff_flags(args: argparse.Namespace) -> None:
    if getattr(args, "cmd", None) in ("reconcile", "check") and getattr(args, "no_provision", False):
        raise Fatal(2, f"--no-provision has no effect with `{args.cmd}`")


def validate_args(args: argparse.Namespace, conf: Dict[str, Any]) -> None:
    """Cross-field checks that argparse cannot express. Raises Fatal(2)."""
    _validate_project_dir(args)
    _validate_handoff_flags(args)

    net = conf.get("network")
    if net is not None and not isinstance(net, dict):
        raise Fatal(2, "config `network` must be a mapping with prefix/address/netmask")
