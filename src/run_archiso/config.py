"""Settings loading for run_archiso."""

import logging
import os
from pathlib import Path

import tomllib
from pydantic import ValidationError

from run_archiso.errors import ConfigError
from run_archiso.models import Settings

log = logging.getLogger(__name__)

ENV_QEMU_BINARY = "RUN_ARCHISO_QEMU"
ENV_OVMF_DIR = "RUN_ARCHISO_OVMF_DIR"


def config_dir() -> Path:
    """Return the directory holding config.toml, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME", "").strip()
    root = Path(base) if base else Path.home() / ".config"
    return root / "run-archiso"


def config_file() -> Path:
    return config_dir() / "config.toml"


def _read_file(path: Path) -> dict:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    log.debug("loaded settings from %s: %s", path, data)
    return data


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from the config file, then apply environment overrides."""
    path = config_file() if path is None else path
    data = _read_file(path) if path.exists() else {}

    qemu_binary = os.environ.get(ENV_QEMU_BINARY, "").strip()
    if qemu_binary:
        data["qemu_binary"] = qemu_binary
    ovmf_dir = os.environ.get(ENV_OVMF_DIR, "").strip()
    if ovmf_dir:
        data["ovmf_dir"] = ovmf_dir

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e
