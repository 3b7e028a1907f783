from .init import reset_logging, setup_logging

__all__ = [
    "reset_logging",
    "setup_logging",
]
