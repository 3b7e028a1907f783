from .loader import ConfigError, CsvOptions, load_options

__all__ = [
    "ConfigError",
    "CsvOptions",
    "load_options",
]
