"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import RfdProcessorConfig

PROJECT_CONFIG = "rfd-processor.yaml"

# ${NAME} or ${NAME:-fallback}
_ENV_VAR = re.compile(r"\$\{(?P<name>\w+)(?::-(?P<default>[^}]*))?\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    paths = [Path(PROJECT_CONFIG), Path.home() / ".rfd-processor" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def _read_config(path: Path) -> dict | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return raw


def load_config(cli_path: str | None = None) -> RfdProcessorConfig:
    """Resolve the config.

    The first existing, non-empty file wins: ``--config``, then
    ``./rfd-processor.yaml``, then ``~/.rfd-processor/config.yaml``. With none
    of them present the defaults apply.
    """
    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_config(path)
        if raw is None:
            continue
        try:
            return RfdProcessorConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return RfdProcessorConfig()


def _expand_env_vars(obj: object) -> object:
    """Expand ``${VAR}`` and ``${VAR:-default}`` in every string of a loaded document."""
    if isinstance(obj, str):
        return _ENV_VAR.sub(
            lambda m: os.environ.get(m.group("name"), m.group("default") or ""), obj
        )
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


# Written by `rfd-processor config init`
DEFAULT_CONFIG_TEMPLATE = """\
# rfd-processor.yaml

# Source control
vcs:
  provider: "github"           # github | local
  token_env: "GITHUB_TOKEN"
  owner: "oxidecomputer"
  repo: "rfd"
  # local_path: "."            # checkout root for the local provider

# PDF rendering
render:
  # workspace_root: "${RFD_SCRATCH:-/tmp/rfd-render}"   # defaults to the system temp dir
  command: ["asciidoctor-pdf"]
  requires: []                 # e.g. [asciidoctor-mermaid/pdf]
  attributes: {}               # passed as -a name=value

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
