# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Optional

from ..errors import InvalidInstallDirError, JarNotFoundError

log = logging.getLogger("clarify_launcher")

INSTALLER_JAR_PATTERN = "clarify-service-installer-*"


def _walk_last_match(root: Path, pattern: str) -> Optional[Path]:
    # lexical depth-first walk, later matches win; directory symlinks are not followed
    found: Optional[Path] = None
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            inner = _walk_last_match(entry, pattern)
            if inner is not None:
                found = inner
        elif fnmatch.fnmatchcase(entry.name, pattern):
            found = entry
    return found


def find_installer_jar(install: str | Path, pattern: str = INSTALLER_JAR_PATTERN) -> Path:
    """
    Locate the service installer jar under <install>/tools/lib.

    When several files match, the last one in lexical walk order is used.
    """
    install = Path(install)
    if not install.exists():
        raise InvalidInstallDirError(install)

    lib = install / "tools" / "lib"
    if not lib.is_dir():
        raise JarNotFoundError(lib, pattern)

    jar = _walk_last_match(lib, pattern)
    if jar is None:
        raise JarNotFoundError(lib, pattern)

    log.debug(f"Installer jar: {jar}")
    return jar
