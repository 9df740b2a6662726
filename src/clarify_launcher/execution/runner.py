# src/clarify_launcher/execution/runner.py
from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union
import os

Cmd = Sequence[Union[str, "os.PathLike[str]"]]


@dataclass
class CommandRunner:
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("clarify_launcher"))
    dry_run: bool = False
    label: Optional[str] = None

    def run(
        self,
        cmd: Cmd,
        *,
        combine_output: bool = False,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
    ) -> subprocess.CompletedProcess:
        """
        Run cmd as an argv (never through a shell) and capture its output.
        With combine_output, stderr is folded into stdout in arrival order.
        """
        label = self.label or "cmd"
        cmd_str = " ".join(map(str, cmd))

        self.logger.debug(f"[{label}] $ {cmd_str}")

        if self.dry_run:
            self.logger.info(f"[{label}] dry-run: skipped execution")
            return subprocess.CompletedProcess(
                args=list(cmd),
                returncode=0,
                stdout="",
                stderr="",
            )

        start = time.time()

        result = subprocess.run(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combine_output else subprocess.PIPE,
            check=False,
            text=True,
            cwd=cwd,
            env=env,
        )

        duration = time.time() - start

        if result.stdout:
            self.logger.debug(f"[{label}][stdout]\n{result.stdout.rstrip()}")
        if result.stderr:
            self.logger.debug(f"[{label}][stderr]\n{result.stderr.rstrip()}")
        self.logger.debug(f"[{label}][exit {result.returncode}] ({duration:.2f}s)")

        return result
