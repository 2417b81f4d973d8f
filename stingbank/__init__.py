"""A console bank with time-based interest, crash-safe file storage and orderly shutdown."""

__version__ = "0.1.0"
__all__ = ["deposit", "user", "file_manager", "shutdown", "interaction"]