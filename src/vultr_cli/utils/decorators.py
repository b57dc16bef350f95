"""Decorator patterns for Vultr server operations."""

import click
import importlib
from functools import wraps
from typing import Callable, Type

from vultr_cli.core.provider import VultrClient, create_vultr_client
from vultr_cli.jobs.base import BaseJob
from vultr_cli.utils.exceptions import CLIError
from vultr_cli.utils.logger import setup_logger

# Command function name -> job class
JOB_REGISTRY = {
    "server": {
        "create": "vultr_cli.jobs.servers.CreateServerJob",
        "rename": "vultr_cli.jobs.servers.RenameServerJob",
        "start": "vultr_cli.jobs.servers.StartServerJob",
        "halt": "vultr_cli.jobs.servers.HaltServerJob",
        "reboot": "vultr_cli.jobs.servers.RebootServerJob",
        "reinstall": "vultr_cli.jobs.servers.ReinstallServerJob",
        "change_os": "vultr_cli.jobs.servers.ChangeOSJob",
        "list_os": "vultr_cli.jobs.servers.ListOSJob",
        "delete": "vultr_cli.jobs.servers.DeleteServerJob",
        "bandwidth": "vultr_cli.jobs.servers.BandwidthJob",
        "list_servers": "vultr_cli.jobs.servers.ListServersJob",
        "show": "vultr_cli.jobs.servers.ShowServerJob",
    },
}


def get_job_class(operation_type: str, func_name: str) -> Type[BaseJob]:
    """Resolve the job class registered for a command function.

    Raises:
        ValueError: If operation type or function name is not recognized
    """
    job_path = JOB_REGISTRY.get(operation_type, {}).get(func_name)
    if job_path is None:
        raise ValueError(f"Unknown {operation_type} operation: {func_name}")

    module_path, class_name = job_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def get_client(ctx: click.Context) -> VultrClient:
    """Return the process-wide client, building it on first use.

    A client already present in ctx.obj (e.g. injected by tests) is reused.
    """
    obj = ctx.ensure_object(dict)
    if "client" not in obj:
        api_key = obj.get("api_key")
        if not api_key and "config" in obj:
            api_key = obj["config"].get_api_key()
        obj["client"] = create_vultr_client(api_key)
    return obj["client"]


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Report a failed operation on stderr and in the error log."""
    error_msg = f"Error in {operation_name}: {str(error)}"
    click.echo(error_msg, err=True)

    # File only: the message is already on stderr
    logger = setup_logger("vultr_cli.errors", "errors.log", console=False)
    logger.error(
        error_msg,
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def vultr_operation(job_class: Type[BaseJob], requires_confirmation: bool = False):
    """Run a job with the client from the click context and print its output.

    This is the only place where a failed operation turns into a process
    exit status.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(ctx, **kwargs):
            operation_name = ctx.info_name or func.__name__
            force = kwargs.pop("force", False)

            try:
                client = get_client(ctx)
            except CLIError as e:
                handle_operation_error(operation_name, e)
                ctx.exit(1)

            if requires_confirmation and not force:
                if not click.confirm(f"Continue with {operation_name}?"):
                    click.echo("Operation cancelled by user.")
                    return

            job = job_class(client)
            try:
                output = job.execute(**kwargs)
            except CLIError as e:
                handle_operation_error(operation_name, e)
                ctx.exit(1)

            click.echo(output, nl=False)

        return wrapper

    return decorator


def operation_decorator(operation_type: str, requires_confirmation: bool = False):
    """Generic decorator for all operation types."""

    def decorator(func: Callable) -> Callable:
        job_class = get_job_class(operation_type, func.__name__)
        return vultr_operation(
            job_class=job_class,
            requires_confirmation=requires_confirmation,
        )(func)

    return decorator


def server_operation(requires_confirmation: bool = False):
    """Decorator for server-related operations."""
    return operation_decorator("server", requires_confirmation)
