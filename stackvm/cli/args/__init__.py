# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/cli/args/__init__.py
"""
Argument parsing for the stackvm CLI.
"""
from __future__ import annotations

from .builder import HelpFormatter
from .parser import build_parser, parse_args_with_config
from .validators import validate_args

__all__ = ["HelpFormatter", "build_parser", "parse_args_with_config", "validate_args"]
