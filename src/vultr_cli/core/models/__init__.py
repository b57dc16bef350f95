"""Simple data models for Vultr resources."""

# Server models
from .server import (
    ServerInfo,
    ServerOptions,
)

# Operating system models
from .operating_system import OSInfo

__all__ = [
    "ServerInfo",
    "ServerOptions",
    "OSInfo",
]
