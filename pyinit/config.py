from typing import Any, Dict, List
import dataclasses
from dataclasses import dataclass, field

import getpass
import logging
import os
from pathlib import Path

import yaml

from pyinit.errors import ConfigError
from pyinit.gitignore import DEFAULT_TIMEOUT, EXTRA_IGNORE_ENTRIES, IGNORE_URL
from pyinit.options import DEFAULT_TARGETS

CONFIG_ENV_VAR = "PYINIT_CONFIG"
CONFIG_FILE = Path(".config") / "pyinit" / "config.yaml"  # relative to the home directory

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

################################################################################
# Config
################################################################################

def _default_author() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "Author"


@dataclass
class Config:
    api_url: str = IGNORE_URL
    default_targets: List[str] = field(default_factory=lambda: list(DEFAULT_TARGETS))
    extra_ignore_entries: List[str] = field(default_factory=lambda: list(EXTRA_IGNORE_ENTRIES))
    timeout: float | None = DEFAULT_TIMEOUT
    check_status: bool = True
    author: str = field(default_factory=_default_author)
    log_level: str = "WARNING"

    def __post_init__(self):
        if not isinstance(self.api_url, str) or not self.api_url:
            raise ConfigError(f"api_url must be a non-empty string, got {self.api_url!r}")
        for name in ("default_targets", "extra_ignore_entries"):
            value = getattr(self, name)
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{name} must be a list of strings, got {value!r}")
        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
                raise ConfigError(f"timeout must be a positive number or null, got {self.timeout!r}")
        if not isinstance(self.check_status, bool):
            raise ConfigError(f"check_status must be true or false, got {self.check_status!r}")
        if not isinstance(self.author, str):
            raise ConfigError(f"author must be a string, got {self.author!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_FILE


def load_config(path: Path | None = None) -> Config:
    """
    Load settings from a YAML file. A missing file means all defaults.

        api_url: https://www.toptal.com/developers/gitignore/api
        default_targets: [macos, windows, python]
        extra_ignore_entries: [.idea, .vscode]
        timeout: 10
        check_status: true
        author: Jane Doe
        log_level: WARNING
    """
    path = path if path is not None else config_path()
    if not path.is_file():
        return Config()

    try:
        with open(path, 'rt', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(raw).__name__}")

    known = {f.name for f in dataclasses.fields(Config)}
    unknown = sorted(str(k) for k in raw if k not in known)
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    values: Dict[str, Any] = dict(raw)
    return Config(**values)
