"""
Configuration management for seqfunk.
"""

from typing import Optional
from dataclasses import dataclass, field
import psutil


@dataclass
class SeqFunkConfig:
    """Global configuration for seqfunk pipelines."""

    # Logging
    trace_cursors: bool = False  # DEBUG-log combinator construction and cursor exhaustion

    # Profiling
    enable_profiling: bool = False
    profile_sample_interval: int = 100  # pulls between RSS samples

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))
    memory_warning_threshold: int = 64 * 1024 * 1024  # RSS growth logged during a profiled traversal

    _instance: Optional['SeqFunkConfig'] = None

    @classmethod
    def get_instance(cls) -> 'SeqFunkConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    @classmethod
    def reset(cls) -> None:
        """Restore every field of the shared instance to its default."""
        instance = cls.get_instance()
        fresh = cls()
        for name in cls.__dataclass_fields__:
            if not name.startswith('_'):
                setattr(instance, name, getattr(fresh, name))

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        sign = "-" if bytes < 0 else ""
        bytes = abs(bytes)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{sign}{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{sign}{bytes:.2f} PB"


# Global configuration instance
config = SeqFunkConfig.get_instance()
