"""cellwire: typed value web-codec for database cell values."""

__version__ = "0.1.0"
