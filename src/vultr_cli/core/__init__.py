"""Core Vultr Operations Module."""

from .models import OSInfo, ServerInfo, ServerOptions
from .processors import format_table
from .provider import VultrClient, create_vultr_client

__all__ = [
    # Client
    "VultrClient",
    "create_vultr_client",
    # Models
    "ServerInfo",
    "ServerOptions",
    "OSInfo",
    # Processors
    "format_table",
]
