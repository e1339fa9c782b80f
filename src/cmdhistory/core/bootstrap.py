"""
Bootstrap helpers for history engines.

Simplifies engine setup from code and configuration.
"""
from typing import Any, Optional

from loguru import logger

from .config import ConfigManager, HistoryOptions
from .commands.history import HistoryEngine

_UNSET = object()


class HistoryBuilder:
    """
    Fluent builder for HistoryEngine instances.
    
    Example:
        history = (HistoryBuilder(buffer)
                   .with_config(ConfigManager("config.json"))
                   .with_max_history(200)
                   .with_logging()
                   .build())
    
    A builder is meant for one thread; build() may be called repeatedly
    and each call returns a new engine.
    """
    
    def __init__(self, target: Any):
        """
        Initialize engine builder.
        
        Args:
            target: Object the engine's operations act upon
        """
        self.target = target
        self._config: Optional[ConfigManager] = None
        self._max_history: Any = _UNSET
        self._logging_configured = False
    
    def with_config(self, config: ConfigManager):
        """
        Read defaults (history capacity, logging) from a ConfigManager.
        
        Returns:
            Self for chaining
        """
        self._config = config
        return self
    
    def with_max_history(self, max_history: int):
        """
        Bound the record to max_history entries; overrides the config value.
        
        Returns:
            Self for chaining
        """
        self._max_history = max_history
        return self
    
    def unbounded(self):
        """
        Keep every executed operation; overrides the config value.
        
        Returns:
            Self for chaining
        """
        self._max_history = None
        return self
    
    def with_logging(self, enable: bool = True):
        """
        Configure logging setup on build.
        
        Returns:
            Self for chaining
        """
        self._logging_configured = enable
        return self
    
    def options(self) -> HistoryOptions:
        """Resolve the accumulated settings into immutable engine options."""
        if self._max_history is not _UNSET:
            return HistoryOptions(max_history=self._max_history)
        if self._config is not None:
            return self._config.history_options()
        return HistoryOptions()
    
    def build(self) -> HistoryEngine:
        """
        Create the engine.
        
        Returns:
            New HistoryEngine bound to the builder's target
        """
        options = self.options()
        
        if self._logging_configured:
            from .logging import setup_logging
            if self._config is not None:
                general = self._config.data.general
                setup_logging(debug_mode=general.debug_mode, log_dir=general.log_dir)
            else:
                setup_logging()
        
        engine = HistoryEngine(self.target, options)
        logger.debug(f"Built {engine!r} for {type(self.target).__name__}")
        return engine
