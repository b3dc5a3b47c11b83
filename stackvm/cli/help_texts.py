# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/cli/help_texts.py
from __future__ import annotations

# Pure help text used by argparse epilog rendering.

YAML_EXAMPLE = r"""# stackvm configuration (YAML)
#
# Run:
#   ./stackvm.py --config stackvm.yaml up
# Merge configs (later overrides earlier):
#   ./stackvm.py --config base.yaml --config laptop.yaml up
#
cmd: up                      # up | reconcile | check
provider: virtualbox         # else $VAGRANT_DEFAULT_PROVIDER, else virtualbox
project_dir: .               # directory holding the Vagrantfile

box: ubuntu/jammy64
hostname: devstack
cpus: 4
memory_mb: 8192
disk_size: 40GB
private_ip: 192.168.27.100
forwarded_ports:
  - {guest: 80, host: 8080}
  - {guest: 6080, host: 6080}
provision_scripts:
  - provision/devstack.sh
cache_enabled: true
cache_scope: box             # box | machine

network:                     # host-only adapter backing the public network
  prefix: "172.24.4."
  address: 172.24.4.225
  netmask: 255.255.255.0
"""

FEATURE_SUMMARY = r"""  • Resolves the provider: --provider, then $VAGRANT_DEFAULT_PROVIDER, then virtualbox
  • VirtualBox only: finds the host-only adapter in the public subnet and moves it to
    the canonical address when needed (never touches a correct adapter)
  • A failed reconfiguration aborts with VBoxManage's own exit status; vagrant never runs
  • `check` shows the adapters and the plan without changing anything
"""
