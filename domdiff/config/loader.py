"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DomDiffConfig

CONFIG_ENV_VAR = "DOMDIFF_CONFIG"


def _candidate_paths(cli_path: str | None) -> list[Path]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    candidates = [
        Path(cli_path) if cli_path else None,
        Path(env_path) if env_path else None,
        Path("./domdiff.yaml"),
        Path.home() / ".domdiff" / "config.yaml",
    ]
    return [p for p in candidates if p is not None]


def load_config(cli_path: str | None = None) -> DomDiffConfig:
    """Load config with resolution order: CLI > $DOMDIFF_CONFIG > project-local > user-global > defaults.

    A --config path that does not exist is an error; the other locations are
    skipped when missing.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        try:
            with open(path) as f:
                raw = yaml.safe_load(f)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                raise ValueError(f"Invalid config in {path}: expected a mapping at top level")
            return DomDiffConfig(**_expand_env_vars(raw))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return DomDiffConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `domdiff config init`
DEFAULT_CONFIG_TEMPLATE = """\
# domdiff.yaml

# Tokens per hashed chunk (0 or 1 = one chunk per token)
chunk_size: 1

# Digest function
hash_kind: "xxh64"             # xxh64 (fast) | sha256 (cryptographic)

# Worker pool for chunk and Merkle hashing
parallel: false
max_workers: 4

# Pipeline stages
merkle: true
line_diff: true

# Digest cache
cache:
  enabled: true
  max_entries: 10000           # whole table is flushed past this size

# Logging
log_level: "info"              # debug | info | warn | error
"""
