#!/usr/bin/env python3
# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Example: run the host-only network pre-flight from Python.

This example demonstrates:
- Listing VirtualBox host-only adapters
- Showing which adapter sits in the DevStack public subnet
- Moving it to the canonical address (skipped with --dry-run)

Usage:
    python library_reconcile.py [--dry-run]
"""

import sys

from stackvm import NetworkReconciler, ReconcileOutcome, VBoxManage
from stackvm.core.exceptions import ToolInvocationError
from stackvm.core.logger import Log


def main() -> int:
    logger = Log.setup(verbose=2)
    dry_run = "--dry-run" in sys.argv[1:]

    reconciler = NetworkReconciler(logger, VBoxManage(logger), dry_run=dry_run)
    try:
        result = reconciler.run()
    except ToolInvocationError as e:
        logger.error("Pre-flight failed (rc=%d): %s", e.code, e)
        if e.output:
            logger.error("%s", e.output)
        return e.code

    for adapter in result.adapters:
        logger.info("adapter %-10s %s", adapter.name, adapter.ip_address or "-")

    if result.outcome is ReconcileOutcome.NO_MATCH:
        logger.info("Nothing to adjust; vagrant will create the adapter")
    return 0


if __name__ == "__main__":
    sys.exit(main())
