"""Load runtime configuration and reference corpora for linksim."""

from __future__ import annotations

import hashlib
import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..utils.errors import ConfigError
from .settings import ReferenceCorpus, RuntimeConfig

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).with_name("benchmark.yaml")
CORPUS_PATH = Path(__file__).with_name("reference_pairs.yaml")

# Pattern to match env("VAR_NAME") placeholders
ENV_PATTERN = re.compile(r'env\("([^"]+)"\)')


def _resolve_env_placeholders(value: Any) -> Any:
    """Recursively resolve env("VAR") placeholders in YAML values."""
    if isinstance(value, str):
        match = ENV_PATTERN.search(value)
        if match:
            var_name = match.group(1)
            env_value = os.getenv(var_name)
            if env_value is None:
                raise ConfigError(f"Environment variable {var_name} not set (required by config)")
            return value[: match.start()] + env_value + value[match.end():]
        return value
    elif isinstance(value, dict):
        return {k: _resolve_env_placeholders(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_placeholders(item) for item in value]
    else:
        return value


def _compute_config_version(yaml_content: str) -> str:
    """SHA256 prefix of the YAML text, for version tracking."""
    return hashlib.sha256(yaml_content.encode("utf-8")).hexdigest()[:16]


def _read_yaml(path: Path) -> tuple[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise ConfigError(f"cannot read file: {exc.strerror}", path=path) from exc
    try:
        return content, yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", path=path) from exc


def load_runtime_config(path: Optional[Path] = None) -> RuntimeConfig:
    """Load runtime configuration from a YAML file.

    Args:
        path: Optional path to a config file. Defaults to CONFIG_PATH.

    Returns:
        RuntimeConfig with env placeholders resolved and
        ``metadata.config_version`` set.
    """
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    target = Path(path) if path else CONFIG_PATH
    yaml_content, data = _read_yaml(target)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("top-level YAML value must be a mapping", path=target)

    try:
        data = _resolve_env_placeholders(data)
    except ConfigError as exc:
        raise ConfigError(str(exc), path=target) from exc

    if not isinstance(data.get("metadata"), dict):
        data["metadata"] = {}
    data["metadata"]["config_version"] = _compute_config_version(yaml_content)

    try:
        config = RuntimeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}", path=target) from exc

    corpus_path = config.benchmark.corpus_path
    if corpus_path is not None and not corpus_path.is_absolute():
        config.benchmark.corpus_path = (target.parent / corpus_path).resolve()

    logger.debug("Loaded config %s (version %s)", target, data["metadata"]["config_version"])
    return config


def load_reference_corpus(path: Optional[Path] = None) -> ReferenceCorpus:
    """Load a list of reference pairs from YAML. Defaults to the bundled corpus."""
    target = Path(path) if path else CORPUS_PATH
    _, data = _read_yaml(target)
    if isinstance(data, dict):
        data = data.get("pairs")
    if not isinstance(data, list):
        raise ConfigError("expected a list of pairs (or a mapping with a 'pairs' list)", path=target)
    try:
        return ReferenceCorpus.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid reference corpus: {exc}", path=target) from exc
