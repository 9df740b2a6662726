# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/clarify_launcher/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from pydantic import ValidationError

from ..errors import ConfigError
from .models import Topology

log = logging.getLogger("clarify_launcher")

DEFAULT_CONFIG = "nodes.yaml"


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    try:
        raw = path.read_text()
    except OSError as e:
        raise ConfigError(f"unable to read {path}: {e.strerror or e}") from e
    expanded = os.path.expandvars(raw)
    try:
        data = yaml.safe_load(expanded) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"unable to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_topology(path: str | Path = DEFAULT_CONFIG) -> Topology:
    """
    Load and validate the shared cluster topology.

    The file carries two top-level keys::

        clarify-nodes:
          - hostname: node-1
            netinterface: eth0
            address: 10.0.0.5      # optional, DNS is used when empty
            tools: /opt/tools
        clarify-common:
          install: /opt/clarify/
          share: /srv/share
          user: svc
          nomadport: 4646          # optional

    ``${ENV_VAR}`` placeholders are resolved with ``os.path.expandvars`` before
    parsing, so per-host values can come from the environment.
    """
    path = Path(path)
    data = _load_yaml(path)
    try:
        topology = Topology.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid topology in {path}:\n{e}") from e

    log.debug("Loaded %d node(s) from %s", len(topology.nodes), path)
    return topology
