"""Project metadata for mailkit."""

__app_name__ = "mailkit"
__version__ = "0.1.0"
__description__ = "Fluent mail message builder with pluggable transports"

__all__ = ["__app_name__", "__description__", "__version__"]
