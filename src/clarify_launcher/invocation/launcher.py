# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/invocation/launcher.py
from __future__ import annotations

import logging
import subprocess
from typing import Optional

from ..errors import InstallerNotFoundError
from ..execution.runner import CommandRunner
from .builder import InvocationSpec

log = logging.getLogger("clarify_launcher")


class InstallerLauncher:
    """
    Runs an InvocationSpec as a child process and hands back the result.
    The exit code is reported, not interpreted.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner(label="installer")

    def launch(self, spec: InvocationSpec) -> subprocess.CompletedProcess:
        log.info(f"Command: {spec.command_line()}")
        try:
            cp = self.runner.run(spec.argv(), cwd=spec.cwd, combine_output=True)
        except OSError as e:
            raise InstallerNotFoundError(f"unable to start {spec.executable}: {e.strerror or e}") from e

        if cp.returncode != 0:
            log.error(f"Command returned error: exit status {cp.returncode}")
        if cp.stdout:
            log.info(f"Command output:\n{cp.stdout.rstrip()}")
        return cp
