#!filepath: tabledb/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    Project logger (thin wrapper over loguru)
    ---------------------------------------
    - stderr sink, never stdout (stdout carries the result table)
    - optional file sink with rotation / retention
    - function-level ``catch`` decorator
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level.upper()

        self._configure()

    def _configure(self) -> None:
        """
        Replace every loguru sink with this instance's sinks.
        """

        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=False,
            diagnose=False,
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                backtrace=True,
                diagnose=True,
            )

        logger.debug(f"[Logging] configured level={self.level} dir={self.log_dir}")

    def reconfigure(self, cfg) -> None:
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level.upper()
        self._configure()

    # ---------- pass-through ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_time: bool = True,
    ) -> Callable:
        """
        Log the exception (with traceback) and re-raise it.

        The wrapped call's wall time is logged at DEBUG when ``log_time``.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.opt(exception=True).debug(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg) -> Logging:
    """
    Rebuild the global ``logs`` sinks from a ``LogConfig``.
    """
    logs.reconfigure(cfg)
    return logs


# default global logs (reconfigured by init_logging)
logs = Logging()
