"""awsdocs version information (single source of truth, read by packaging)."""

__version__ = "0.1.0"
