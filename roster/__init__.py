"""Single-admin employee roster manager."""

__version__ = "0.1.0"
