"""Vultr API access through the vultr SDK."""

from .client import VultrClient, create_vultr_client

__all__ = [
    "VultrClient",
    "create_vultr_client",
]
