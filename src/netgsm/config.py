from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any
import os

import yaml

from .errors import InvalidConfiguration, MissingCredentials


DEFAULT_BASE_URL = "https://api.netgsm.com.tr"


@dataclass
class ClientConfig:
    usercode: str
    password: str
    base_url: str = DEFAULT_BASE_URL
    msgheader: str = ""
    encoding: str = "utf8"
    grant_type: str = "password"
    timeout: int = 60000
    query_string_auth: bool = False
    send_user_agent: bool = True
    request_options: dict[str, Any] = field(default_factory=dict)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # YAML reads numeric usercodes and passwords as int
        if self.usercode is not None and not isinstance(self.usercode, str):
            self.usercode = str(self.usercode)
        if self.password is not None and not isinstance(self.password, str):
            self.password = str(self.password)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    def validate(self) -> None:
        if not self.usercode or not self.password:
            raise MissingCredentials("usercode and password are required")
        if self.timeout <= 0:
            raise InvalidConfiguration("timeout must be a positive number of milliseconds")
        if not isinstance(self.request_options, dict):
            raise InvalidConfiguration("request_options must be a mapping")


_CONFIG_KEYS = {f.name for f in fields(ClientConfig)}


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Config file must be a mapping: {path}")
    return data


def build_client_config(raw: dict[str, Any]) -> ClientConfig:
    """Build a validated config from a plain mapping.

    ``usercode_env`` and ``password_env`` name environment variables to read
    the credentials from when the literal keys are absent.
    """
    raw = dict(raw)
    for name in ("usercode", "password"):
        env_name = raw.pop(f"{name}_env", None)
        if env_name and not raw.get(name):
            raw[name] = getenv_required(env_name)

    unknown = set(raw) - _CONFIG_KEYS
    if unknown:
        raise InvalidConfiguration(f"unknown config keys: {sorted(unknown)}")

    defaults: dict[str, Any] = {"usercode": "", "password": ""}
    defaults.update({k: v for k, v in raw.items() if v is not None})
    config = ClientConfig(**defaults)
    config.validate()
    return config


def load_client_config(path: str) -> ClientConfig:
    raw = _load_yaml(Path(path))
    section = raw.get("netgsm", {})
    if not isinstance(section, dict):
        raise InvalidConfiguration("netgsm must be a mapping")
    return build_client_config(section)


def getenv_required(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise InvalidConfiguration(f"Missing required environment variable: {name}")
    return value
