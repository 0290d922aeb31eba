"""Smart Farm backend - REST API for farm monitoring."""

__version__ = "0.1.0"
