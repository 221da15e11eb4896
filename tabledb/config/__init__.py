from .app_config import AppConfig
from .log_config import LogConfig
from .query_config import QueryConfig

__all__ = ["AppConfig", "LogConfig", "QueryConfig"]
