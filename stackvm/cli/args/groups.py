# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/cli/args/groups.py
from __future__ import annotations

import argparse

from ...config.vm_config import CACHE_SCOPES
from ...orchestrator.orchestrator import COMMANDS
from ...orchestrator.provider import PROVIDER_ENV, PROVIDERS


def _add_global_config_logging(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # Global config/logging (two-phase parse relies on these)
    # ------------------------------------------------------------------
    from ... import __version__

    p.add_argument(
        "--config",
        action="append",
        default=[],
        help="YAML/JSON config file (repeatable; later overrides earlier).",
    )
    p.add_argument("--dump-config", action="store_true", help="Print merged config and exit.")
    p.add_argument("--dump-args", action="store_true", help="Print final parsed args and exit.")
    p.add_argument("--version", action="version", version=__version__)
    p.add_argument("-v", "--verbose", action="count", default=0, help="Verbosity: -vv debug, -vvv trace")
    p.add_argument("-q", "--quiet", action="count", default=0, help="Less output: -q warnings, -qq errors")
    p.add_argument("--log-file", dest="log_file", default=None, help="Write logs to file.")
    p.add_argument("--json-logs", dest="json_logs", action="store_true", help="Emit NDJSON logs on stderr.")


def _add_project_control(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "cmd",
        nargs="?",
        default=None,
        choices=COMMANDS,
        help="up: reconcile + vagrant up; reconcile: network pre-flight only; check: show plan only. Default: up",
    )
    p.add_argument(
        "--provider",
        default=None,
        help=f"Vagrant provider, e.g. {', '.join(PROVIDERS)} (else ${PROVIDER_ENV}, else config `provider`, else virtualbox).",
    )
    p.add_argument("--dry-run", dest="dry_run", action="store_true", help="Report the adapter change without applying it.")
    p.add_argument(
        "--project-dir",
        dest="project_dir",
        default=None,
        help="Directory holding the Vagrantfile (default: current directory).",
    )


def _add_tooling(p: argparse.ArgumentParser) -> None:
    p.add_argument("--vboxmanage", default=None, help="VBoxManage binary (else $STACKVM_VBOXMANAGE, else PATH).")
    p.add_argument("--vagrant", default=None, help="vagrant binary (default: vagrant on PATH).")
    p.add_argument("--skip-handoff", dest="skip_handoff", action="store_true", help="Stop after the network pre-flight.")
    p.add_argument("--no-provision", dest="no_provision", action="store_true", help="Pass --no-provision to vagrant up.")


def _add_vm_settings(p: argparse.ArgumentParser) -> None:
    # ------------------------------------------------------------------
    # VM settings (passed through to the Vagrantfile as STACKVM_*)
    # ------------------------------------------------------------------
    p.add_argument("--box", default=None, help="Vagrant box.")
    p.add_argument("--hostname", default=None, help="Guest hostname.")
    p.add_argument("--cpus", type=int, default=None, help="vCPU count.")
    p.add_argument("--memory-mb", dest="memory_mb", type=int, default=None, help="Guest memory in MiB.")
    p.add_argument("--disk-size", dest="disk_size", default=None, help="Guest disk size (e.g. 40GB).")
    p.add_argument("--private-ip", dest="private_ip", default=None, help="Private network address.")
    p.add_argument("--cache", dest="cache_enabled", action="store_true", default=None, help="Enable package caching.")
    p.add_argument("--no-cache", dest="cache_enabled", action="store_false", help="Disable package caching.")
    p.add_argument("--cache-scope", dest="cache_scope", default=None, choices=CACHE_SCOPES, help="Cache scope.")
