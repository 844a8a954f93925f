"""
Registry of named loggers and named appenders

A ``Registry`` is the lookup and creation authority for loggers. The
module-level functions operate on one process-wide default registry.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from analog.appenders.base_appender import Appender, SinkAppender
from analog.core.log_level import LogLevel
from analog.core.logger import Logger
from analog.core.logger_config import AnalogConfig


class Registry:
    """
    Maps logger names to loggers and appender names to appenders.

    The logger registered under "" is the root logger. Loggers created
    later copy the root logger's level and appenders at creation time.
    The default appender is always registered under "" after ``reset``.

    Thread Safety:
        Registry mutations are serialized with a re-entrant lock. A
        logger's own appender list is not synchronized.

    Example:
        registry = Registry()
        registry.get_logger(level=LogLevel.WARN)   # root logger at WARN
        app = registry.get_logger("app")           # inherits WARN
    """

    def __init__(self, default_appender: Optional[Appender] = None):
        """
        Initialize registry.

        Args:
            default_appender: Appender registered under "" (default: a
                              console appender)
        """
        if default_appender is None:
            default_appender = SinkAppender.console()
        self._default_appender = default_appender
        self._loggers: Dict[str, Logger] = {}
        self._appenders: Dict[str, Appender] = {}
        self._root: Optional[Logger] = None
        self._lock = threading.RLock()
        self.reset()

    @property
    def default_appender(self) -> Appender:
        return self._default_appender

    @property
    def root(self) -> Optional[Logger]:
        """The root logger, or None before it has been created."""
        return self._root

    def get_logger(self, name: str = "", level: Optional[LogLevel] = None) -> Logger:
        """
        Get or create a logger.

        An existing logger is returned unchanged, whatever ``level`` is.
        Otherwise the root logger is created first if needed (level ALL,
        default appender), and the new logger takes ``level`` or the root
        level, and a copy of the root logger's appenders.

        Args:
            name: Logger name (default: "" for the root logger)
            level: Threshold for a newly created logger
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is not None:
                return logger

            if level is not None:
                level = LogLevel.coerce(level)

            if self._root is None:
                self.add_logger("", LogLevel.ALL, [self._default_appender])

            if level is None:
                level = self._root.level
            return self.add_logger(name, level, self._root.appenders)

    def add_logger(
        self,
        name: str,
        level: Optional[LogLevel] = None,
        appenders: Optional[Iterable[Appender]] = None
    ) -> Logger:
        """
        Create and register a logger, replacing any logger of that name.

        Registering under "" replaces the root logger.
        """
        with self._lock:
            logger = Logger(name, level, appenders, registry=self)
            self._loggers[name] = logger
            if name == "":
                self._root = logger
            return logger

    def has_logger(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def get_logger_names(self) -> List[str]:
        with self._lock:
            return list(self._loggers.keys())

    def configure(self, config: Union[AnalogConfig, Mapping[str, Any]]) -> None:
        """
        Register appenders and loggers from a configuration.

        Loggers are processed in order; a logger without appenders takes
        the root logger's appenders as they are at that point, or the
        default appender when there is no root logger yet.

        Raises:
            ValueError: If a logger refers to an unregistered appender name;
                        nothing is registered in that case
        """
        if not isinstance(config, AnalogConfig):
            config = AnalogConfig.from_dict(config)

        with self._lock:
            known = set(self._appenders) | {a.name for a in config.appenders}
            for logger_cfg in config.loggers:
                for ref in logger_cfg.appenders:
                    if isinstance(ref, str) and ref not in known:
                        raise ValueError(f"Unknown appender: '{ref}'")

            for appender_cfg in config.appenders:
                self.add_appender(appender_cfg.name, appender_cfg.appender)

            for logger_cfg in config.loggers:
                if logger_cfg.appenders:
                    appenders = [self._resolve_appender(ref) for ref in logger_cfg.appenders]
                elif self._root is not None:
                    appenders = self._root.appenders
                else:
                    appenders = [self._default_appender]
                self.add_logger(logger_cfg.name, logger_cfg.level, appenders)

    def _resolve_appender(self, ref: Union[str, Appender]) -> Appender:
        if not isinstance(ref, str):
            return ref
        appender = self._appenders.get(ref)
        if appender is None:
            raise ValueError(f"Unknown appender: '{ref}'")
        return appender

    def get_appender(self, name: str) -> Optional[Appender]:
        """Get a registered appender, or None if not registered."""
        with self._lock:
            return self._appenders.get(name)

    def add_appender(self, name: str, appender: Appender) -> None:
        """Register an appender under ``name``, replacing any previous one."""
        with self._lock:
            self._appenders[name] = appender

    def get_appender_names(self) -> List[str]:
        with self._lock:
            return list(self._appenders.keys())

    def reset(self) -> None:
        """Forget all loggers and appenders; re-register the default appender."""
        with self._lock:
            self._loggers.clear()
            self._appenders.clear()
            self._appenders[""] = self._default_appender
            self._root = None

    def __repr__(self) -> str:
        return f"Registry(loggers={len(self._loggers)}, appenders={len(self._appenders)})"


_default_registry = Registry()


def get_registry() -> Registry:
    """The process-wide registry used by the module-level functions."""
    return _default_registry


def get_logger(name: str = "", level: Optional[LogLevel] = None) -> Logger:
    """Get or create a logger in the default registry."""
    return _default_registry.get_logger(name, level)


def configure(config: Union[AnalogConfig, Mapping[str, Any]]) -> None:
    """Configure the default registry."""
    _default_registry.configure(config)


def get_appender(name: str) -> Optional[Appender]:
    """Get a named appender from the default registry."""
    return _default_registry.get_appender(name)


def add_appender(name: str, appender: Appender) -> None:
    """Register a named appender in the default registry."""
    _default_registry.add_appender(name, appender)


def reset() -> None:
    """Reset the default registry to its initial state."""
    _default_registry.reset()
