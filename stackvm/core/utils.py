# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/core/utils.py
from __future__ import annotations

import json
import logging
import shlex
import subprocess
from pathlib import Path
from shutil import which as _which
from typing import Any, Dict, List, Optional, Union

from .exceptions import ToolInvocationError


def _joined_output(stdout: Optional[str], stderr: Optional[str]) -> str:
    parts = [s.strip() for s in (stdout or "", stderr or "") if s and s.strip()]
    return "\n".join(parts)


class U:
    @staticmethod
    def which(prog: str) -> Optional[str]:
        return _which(prog)

    @staticmethod
    def json_dump(obj: Any) -> str:
        return json.dumps(obj, indent=2, sort_keys=True, default=str)

    @staticmethod
    def banner(logger: logging.Logger, title: str) -> None:
        line = "─" * max(10, len(title) + 2)
        logger.info(line)
        logger.info(f" {title}")
        logger.info(line)

    @staticmethod
    def _pretty_cmd(cmd: List[str]) -> str:
        return " ".join(shlex.quote(x) for x in cmd)

    @staticmethod
    def run_cmd(
        logger: logging.Logger,
        cmd: List[str],
        *,
        check: bool = True,
        capture: bool = False,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
        cwd: Optional[Union[str, Path]] = None,
        stream: bool = False,
        fatal: bool = False,
    ) -> subprocess.CompletedProcess:
        """
        Run a command.

        - capture=True uses subprocess.run(capture_output=True, text=True)
        - stream=True streams stdout/stderr to logger in realtime (forces capture=False)
        - fatal=True wraps failures into ToolInvocationError carrying the
          tool's exit status and captured output (otherwise re-raises
          subprocess exceptions)
        """
        pretty = U._pretty_cmd(cmd)
        logger.debug("Running: %s", pretty)

        try:
            if stream:
                proc = subprocess.Popen(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    env=env,
                    cwd=str(cwd) if cwd is not None else None,
                )
                assert proc.stdout is not None
                out_lines: List[str] = []
                for line in proc.stdout:
                    line = line.rstrip("\n")
                    out_lines.append(line)
                    logger.info(line)
                rc = proc.wait(timeout=timeout)
                stdout = "\n".join(out_lines)
                if check and rc != 0:
                    raise subprocess.CalledProcessError(rc, cmd, output=stdout, stderr="")
                return subprocess.CompletedProcess(cmd, rc, stdout=stdout, stderr="")

            return subprocess.run(
                cmd,
                check=check,
                capture_output=capture,
                text=True,
                env=env,
                timeout=timeout,
                cwd=str(cwd) if cwd is not None else None,
            )

        except subprocess.CalledProcessError as e:
            output = _joined_output(e.stdout or e.output, e.stderr)
            if output:
                logger.error("Command failed: %s (rc=%s)\n%s", pretty, e.returncode, output)
            else:
                logger.error("Command failed: %s (rc=%s, no output)", pretty, e.returncode)

            if fatal:
                raise ToolInvocationError(
                    code=e.returncode or 1,
                    msg=f"Command failed: {pretty}",
                    cause=e,
                    command=list(cmd),
                    output=output,
                ) from e
            raise

        except subprocess.TimeoutExpired as e:
            logger.error("Command timed out: %s (timeout=%ss)", pretty, timeout)
            if fatal:
                raise ToolInvocationError(code=124, msg=f"Command timed out: {pretty}", cause=e, command=list(cmd)) from e
            raise

        except FileNotFoundError as e:
            logger.error("Command not found: %s", cmd[0])
            if fatal:
                raise ToolInvocationError(code=127, msg=f"Command not found: {cmd[0]}", cause=e, command=list(cmd)) from e
            raise

        except OSError as e:
            logger.error("Command error: %s (%s)", pretty, e)
            if fatal:
                raise ToolInvocationError(code=126, msg=f"Command error: {pretty}: {e}", cause=e, command=list(cmd)) from e
            raise
