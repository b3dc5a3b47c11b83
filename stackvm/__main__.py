# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/__main__.py
from __future__ import annotations

import logging
import sys
import traceback
from typing import List, Optional

from .cli.argument_parser import parse_args_with_config
from .config.vm_config import VmConfig
from .core.exceptions import StackVmError, format_exception_for_cli
from .orchestrator.orchestrator import Orchestrator


def _print_stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def _log(logger: Optional[logging.Logger], level: str, msg: str) -> None:
    if logger is None:
        _print_stderr(msg)
        return
    getattr(logger, level)(msg)


def run(argv: Optional[List[str]] = None) -> int:
    logger: Optional[logging.Logger] = None

    # Phase 1: parse (Fatal can happen here)
    try:
        args, conf, logger = parse_args_with_config(argv)
        config = VmConfig.from_args(args, conf)
    except StackVmError as e:
        _log(logger, "error", f"💥 {format_exception_for_cli(e)}")
        return e.code
    except KeyboardInterrupt:
        _log(logger, "warning", "Interrupted by user (Ctrl+C).")
        return 130
    except Exception as e:
        _log(logger, "error", f"💥 UNHANDLED {type(e).__name__}: {e}")
        _log(logger, "debug", traceback.format_exc())
        return 1

    # Phase 2: bring-up
    try:
        return Orchestrator(logger, args, config).run()
    except StackVmError as e:
        _log(logger, "error", format_exception_for_cli(e, verbose=getattr(args, "verbose", 0)))
        return e.code
    except KeyboardInterrupt:
        # No rollback: an adapter change may or may not have been applied.
        _log(logger, "warning", "Interrupted by user (Ctrl+C).")
        return 130
    except Exception as e:
        _log(logger, "error", f"💥 UNHANDLED {type(e).__name__}: {e}")
        _log(logger, "debug", traceback.format_exc())
        return 1


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
