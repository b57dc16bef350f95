#!/usr/bin/env python3
"""
Vultr CLI
Manage Vultr virtual machines from the command line
"""

import click
from pathlib import Path

from vultr_cli import __version__
from vultr_cli.core.constants import API_KEY_ENV
from vultr_cli.utils.config import ConfigManager
from vultr_cli.utils.decorators import server_operation
from vultr_cli.utils.logger import configure_logging, setup_logger


def setup_logging(config: ConfigManager, verbose: bool = False):
    level = "DEBUG" if verbose else config.get_logging_level()
    configure_logging(level, config.get_logging_path())
    config.logger.debug(f"Using settings from {config.settings_file}")
    return setup_logger("vultr_cli.cli", "cli.log")


def subid_argument(func):
    return click.argument("server_id", metavar="SUBID")(func)


@click.group()
@click.option("--api-key", envvar=API_KEY_ENV, help="Vultr API key (default: $VULTR_API_KEY)")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    help="Directory holding settings.yaml (default: ~/.config/vultr-cli)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, api_key, config_dir, verbose):
    """Vultr CLI - manage virtual machines"""
    ctx.ensure_object(dict)

    config = ConfigManager(Path(config_dir) if config_dir else None)
    ctx.obj["config"] = config
    if api_key:
        ctx.obj["api_key"] = api_key

    logger = setup_logging(config, verbose)
    logger.debug(f"Invoking {ctx.invoked_subcommand}")


@cli.group()
def server():
    """Create, inspect and control virtual machines"""


@server.command()
@click.option("-n", "--name", required=True, help="Name of new virtual machine")
@click.option("-r", "--region", "region_id", type=int, required=True, help="Region (DCID)")
@click.option("-p", "--plan", "plan_id", type=int, required=True, help="Plan (VPSPLANID)")
@click.option("-o", "--os", "os_id", type=int, required=True, help="Operating system (OSID)")
@click.option(
    "--ipxe",
    "ipxe_chain_url",
    default="",
    help="Chainload the specified URL on bootup, via iPXE, for custom OS",
)
@click.option(
    "--iso",
    "iso_id",
    type=int,
    default=0,
    help="ISOID of a specific ISO to mount during the deployment, for custom OS",
)
@click.option(
    "-s",
    "--script",
    "script_id",
    type=int,
    default=0,
    help="SCRIPTID of a startup script to execute on boot",
)
@click.option(
    "--snapshot",
    "snapshot_id",
    default="",
    help="SNAPSHOTID to restore for the initial installation",
)
@click.option(
    "-k",
    "--sshkey",
    "ssh_key_id",
    default="",
    help="SSHKEYID of SSH key to apply to this server on install",
)
@click.option(
    "--ipv6",
    is_flag=True,
    help="Assign an IPv6 subnet to this virtual machine (where available)",
)
@click.option(
    "--private-networking",
    is_flag=True,
    help="Add private networking support for this virtual machine",
)
@click.option(
    "--autobackups",
    "auto_backups",
    is_flag=True,
    help="Enable automatic backups for this virtual machine",
)
@click.pass_context
@server_operation()
def create(ctx, **kwargs):
    """Create a new virtual machine"""
    # All processing logic is handled by the decorator
    pass


@server.command()
@subid_argument
@click.option("-n", "--name", required=True, help="New name of virtual machine")
@click.pass_context
@server_operation()
def rename(ctx, server_id, name):
    """Rename a virtual machine"""
    pass


@server.command()
@subid_argument
@click.pass_context
@server_operation()
def start(ctx, server_id):
    """Start a virtual machine (restarts it if already running)"""
    pass


@server.command()
@subid_argument
@click.pass_context
@server_operation()
def halt(ctx, server_id):
    """Halt a virtual machine (hard power off)"""
    pass


@server.command()
@subid_argument
@click.pass_context
@server_operation()
def reboot(ctx, server_id):
    """Reboot a virtual machine (hard reboot)"""
    pass


@server.command()
@subid_argument
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
@server_operation(requires_confirmation=True)
def reinstall(ctx, server_id, force):
    """Reinstall the operating system of a virtual machine"""
    pass


@server.command()
@subid_argument
@click.option("-o", "--os", "os_id", type=int, required=True, help="Operating system (OSID)")
@click.pass_context
@server_operation()
def change_os(ctx, server_id, os_id):
    """Change the operating system of a virtual machine"""
    pass


@server.command()
@subid_argument
@click.pass_context
@server_operation()
def list_os(ctx, server_id):
    """List operating systems a virtual machine can be changed to"""
    pass


@server.command()
@subid_argument
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
@server_operation(requires_confirmation=True)
def delete(ctx, server_id, force):
    """Delete a virtual machine"""
    pass


@server.command()
@subid_argument
@click.pass_context
@server_operation()
def bandwidth(ctx, server_id):
    """Show daily bandwidth usage of a virtual machine"""
    pass


@server.command("list")
@click.pass_context
@server_operation()
def list_servers(ctx):
    """List all virtual machines"""
    pass


@server.command()
@subid_argument
@click.option("-f", "--full", is_flag=True, help="Display full length of KVM URL")
@click.pass_context
@server_operation()
def show(ctx, server_id, full):
    """Show details of a virtual machine"""
    pass


cli.add_command(list_servers, name="servers")


@cli.command()
def version():
    """Show version information"""
    click.echo(f"Vultr CLI {__version__}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
