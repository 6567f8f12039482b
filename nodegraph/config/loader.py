"""Locate, read and validate nodegraph.yaml."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import NodegraphConfig

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def config_search_path(cli_path: str | None = None) -> Iterator[Path]:
    """Candidate config files, most specific first: CLI > project-local > user-global."""
    if cli_path:
        yield Path(cli_path)
    yield Path("nodegraph.yaml")
    yield Path.home() / ".nodegraph" / "config.yaml"


def load_config(cli_path: str | None = None) -> NodegraphConfig:
    """The first non-empty file on the search path wins; defaults otherwise."""
    for path in config_search_path(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
        try:
            return NodegraphConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return NodegraphConfig()


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(section: dict) -> dict:
    """Substitute ${VAR} in the string values of a config section.

    Nested sections are expanded too. Unset variables become empty strings.
    """
    expanded = {}
    for key, value in section.items():
        if isinstance(value, dict):
            value = _expand_env_vars(value)
        elif isinstance(value, str):
            value = _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)
        expanded[key] = value
    return expanded


# Default YAML template for `nodegraph config init`
DEFAULT_CONFIG_TEMPLATE = """\
# nodegraph.yaml

# Graph walks
traversal:
  max_depth: 500               # deepest walk before giving up

# Logging
log_level: "info"              # debug | info | warn | error
"""
