#!filepath: tabledb/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .query_config import QueryConfig


def package_root() -> str:
    """
    tabledb/config/app_config.py → tabledb/config → tabledb
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def default_config_path() -> str:
    return os.path.join(package_root(), "config", "base.yml")


# env var → (section, key)
ENV_OVERRIDES = {
    "TABLEDB_LOG_LEVEL": ("log", "level"),
    "TABLEDB_LOG_DIR": ("log", "dir"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: tabledb/config/base.yml
        - .env is read from the current working directory
        - TABLEDB_* env vars override the file
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        for env_key, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                raw.setdefault(section, {})[key] = value

        return cls(**raw)
