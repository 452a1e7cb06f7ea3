import os
from os import _Environ
from typing import Optional

from dotenv import dotenv_values

from rotating_credentials.exceptions.config_exceptions import (
    ConfigTypeException,
    ConfigValueException,
)

TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off", ""}


class Config:
    def __init__(self, config_file: Optional[str] = None):
        if config_file:
            raw: dict[str, str | None] = dotenv_values(config_file)
        else:
            raw: _Environ[str] = os.environ

        self.verbose: bool = self._optional_bool(raw, "VERBOSE")
        self.credentials_filepath: str = self._require_non_empty(
            raw, "CREDENTIALS_FILEPATH"
        )
        self.region: Optional[str] = raw.get("AWS_REGION") or None

    def _require(self, config: dict | _Environ[str], key: str) -> str:
        value = config.get(key)
        if value is None:
            raise ConfigValueException(f"{key} not set")
        return value

    def _require_non_empty(self, config: dict | _Environ[str], key: str) -> str:
        value = self._require(config, key).strip()
        if not value:
            raise ConfigValueException(f"{key} is empty")
        return value

    def _optional_bool(self, config: dict | _Environ[str], key: str) -> bool:
        value = config.get(key)
        if value is None:
            return False

        normalized = value.strip().lower()
        if normalized in TRUTHY:
            return True
        if normalized in FALSY:
            return False
        raise ConfigTypeException(f"{key} must be boolean")
