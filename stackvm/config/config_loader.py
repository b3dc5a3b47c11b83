# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/config/config_loader.py
from __future__ import annotations

import argparse
import glob
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..core.exceptions import Fatal

_CONFIG_SUFFIXES = (".yaml", ".yml", ".json")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class Config:
    """
    YAML/JSON config files layered under the CLI.

    Later files override earlier ones (nested mappings merge key by key);
    the merged result becomes argparse defaults, so explicit flags win.
    """

    @staticmethod
    def expand_configs(logger: logging.Logger, cfgs: List[str]) -> List[Path]:
        """Expand files, directories (sorted *.yaml/*.yml/*.json) and globs."""
        out: List[Path] = []
        for raw in cfgs:
            p = Path(raw).expanduser()
            if p.is_dir():
                found = sorted(x for x in p.iterdir() if x.suffix.lower() in _CONFIG_SUFFIXES)
                logger.debug("Config dir %s -> %d file(s)", p, len(found))
                out.extend(found)
                continue
            if any(ch in raw for ch in "*?["):
                matches = sorted(Path(m) for m in glob.glob(str(p)))
                if not matches:
                    raise Fatal(2, f"Config glob matched nothing: {raw}")
                out.extend(matches)
                continue
            if not p.exists():
                raise Fatal(2, f"Config file not found: {p}")
            out.append(p)
        return out

    @staticmethod
    def load_one(logger: logging.Logger, path: Path) -> Dict[str, Any]:
        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() == ".json":
                data = json.loads(text) if text.strip() else {}
            else:
                data = yaml.safe_load(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise Fatal(2, f"Failed to parse config {path}: {e}", cause=e) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise Fatal(2, f"Config {path} must be a mapping at top level, got {type(data).__name__}")

        logger.debug("Loaded config %s (%d key(s))", path, len(data))
        return {str(k).replace("-", "_"): v for k, v in data.items()}

    @staticmethod
    def load_many(logger: logging.Logger, paths: List[Path]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for p in paths:
            merged = _deep_merge(merged, Config.load_one(logger, p))
        return merged

    @staticmethod
    def apply_as_defaults(logger: logging.Logger, parser: argparse.ArgumentParser, conf: Dict[str, Any]) -> None:
        """Set parser defaults for every config key that names a known option."""
        dests = {a.dest for a in parser._actions}  # noqa: SLF001
        known = {k: v for k, v in conf.items() if k in dests}
        unknown = sorted(k for k in conf if k not in dests)
        if known:
            parser.set_defaults(**known)
        if unknown:
            logger.debug("Config keys without a CLI flag (kept in config): %s", ", ".join(unknown))
