"""Command-line client for Vultr virtual machines."""

__version__ = "1.0.0"
