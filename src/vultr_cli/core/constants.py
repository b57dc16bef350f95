#!/usr/bin/env python3
"""Core constants for the Vultr command-line client."""

# Configuration
DEFAULT_CONFIG_DIR = "~/.config/vultr-cli"
CONFIG_DIR_ENV = "VULTR_CLI_CONFIG_DIR"
API_KEY_ENV = "VULTR_API_KEY"

# Table layouts (minimum widths per column)
CREATE_COLUMNS = ("SUBID", "NAME", "DCID", "VPSPLANID", "OSID")
CREATE_WIDTHS = (12, 32, 8, 12, 8)

OS_COLUMNS = ("OSID", "NAME", "ARCH", "FAMILY", "WINDOWS", "SURCHARGE")
OS_WIDTHS = (8, 32, 8, 16, 8, 12)

BANDWIDTH_COLUMNS = ("DATE", "INCOMING", "OUTGOING")
BANDWIDTH_WIDTHS = (24, 24, 24)

SERVER_COLUMNS = (
    "SUBID",
    "STATUS",
    "IP",
    "NAME",
    "OS",
    "LOCATION",
    "VCPU",
    "RAM",
    "DISK",
    "BANDWIDTH",
    "COST",
)
SERVER_WIDTHS = (12, 16, 24, 32, 32, 32, 8, 8, 24, 12, 8)

SHOW_LABEL_WIDTH = 24
SHOW_VALUE_WIDTH = 64
SHOW_VALUE_WIDTH_FULL = 1024

# Logging
LOG_ROTATION_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5
