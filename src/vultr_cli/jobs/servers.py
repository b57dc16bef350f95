#!/usr/bin/env python3
"""Server jobs: one class per `server` subcommand."""

from typing import Any, List, Sequence

from .base import BaseJob
from vultr_cli.core import constants
from vultr_cli.core.models import ServerInfo, ServerOptions
from vultr_cli.core.processors import format_table


def render_listing(
    columns: Sequence[str], widths: Sequence[int], rows: List[Sequence[Any]]
) -> str:
    """Header plus one line per row, or a single blank line when there are no rows."""
    if not rows:
        return "\n"
    return format_table([columns] + rows, widths)


class CreateServerJob(BaseJob):
    job_name = "create_server"

    def execute(
        self,
        name: str,
        region_id: int,
        plan_id: int,
        os_id: int,
        **options,
    ) -> str:
        server_options = ServerOptions(**options)
        self.log_call(
            f"creating '{name}' (DCID={region_id}, VPSPLANID={plan_id}, OSID={os_id})"
        )
        server = self.client.create_server(name, region_id, plan_id, os_id, server_options)

        table = format_table(
            [
                constants.CREATE_COLUMNS,
                (server.id, server.name, server.region_id, server.plan_id, os_id),
            ],
            constants.CREATE_WIDTHS,
        )
        return "Virtual machine created\n\n" + table


class RenameServerJob(BaseJob):
    job_name = "rename_server"

    def execute(self, server_id: str, name: str) -> str:
        self.log_call(f"renaming {server_id} to '{name}'")
        self.client.rename_server(server_id, name)
        return f"Virtual machine renamed to: {name}\n"


class ServerActionJob(BaseJob):
    """Single-argument action with a fixed confirmation sentence."""

    action = ""
    message = ""

    def execute(self, server_id: str) -> str:
        self.log_call(f"{self.action} on {server_id}")
        getattr(self.client, self.action)(server_id)
        return self.message + "\n"


class StartServerJob(ServerActionJob):
    job_name = "start_server"
    action = "start_server"
    message = "Virtual machine (re)started"


class HaltServerJob(ServerActionJob):
    job_name = "halt_server"
    action = "halt_server"
    message = "Virtual machine halted"


class RebootServerJob(ServerActionJob):
    job_name = "reboot_server"
    action = "reboot_server"
    message = "Virtual machine rebooted"


class ReinstallServerJob(ServerActionJob):
    job_name = "reinstall_server"
    action = "reinstall_server"
    message = "Virtual machine reinstalled"


class DeleteServerJob(ServerActionJob):
    job_name = "delete_server"
    action = "delete_server"
    message = "Virtual machine deleted"


class ChangeOSJob(BaseJob):
    job_name = "change_os"

    def execute(self, server_id: str, os_id: int) -> str:
        self.log_call(f"changing {server_id} to OSID {os_id}")
        self.client.change_os_of_server(server_id, os_id)
        return f"Virtual machine operating system changed to: {os_id}\n"


class ListOSJob(BaseJob):
    job_name = "list_os"

    def execute(self, server_id: str) -> str:
        self.log_call(f"listing operating systems for {server_id}")
        systems = self.client.list_os_for_server(server_id)
        rows = [
            (o.id, o.name, o.arch, o.family, o.windows, o.surcharge) for o in systems
        ]
        return render_listing(constants.OS_COLUMNS, constants.OS_WIDTHS, rows)


class BandwidthJob(BaseJob):
    job_name = "bandwidth"

    def execute(self, server_id: str) -> str:
        self.log_call(f"fetching bandwidth for {server_id}")
        samples = self.client.bandwidth_of_server(server_id)
        rows = [(b["date"], b["incoming"], b["outgoing"]) for b in samples]
        return render_listing(constants.BANDWIDTH_COLUMNS, constants.BANDWIDTH_WIDTHS, rows)


class ListServersJob(BaseJob):
    job_name = "list_servers"

    def execute(self) -> str:
        self.log_call("listing servers")
        servers = self.client.get_servers()
        rows = [
            (
                s.id,
                s.status,
                s.main_ip,
                s.name,
                s.os,
                s.location,
                s.vcpus,
                s.ram,
                s.disk,
                s.allowed_bandwidth,
                s.cost,
            )
            for s in servers
        ]
        return render_listing(constants.SERVER_COLUMNS, constants.SERVER_WIDTHS, rows)


class ShowServerJob(BaseJob):
    job_name = "show_server"

    def execute(self, server_id: str, full: bool = False) -> str:
        self.log_call(f"fetching {server_id}")
        server = self.client.get_server(server_id)

        # An empty SUBID is the only not-found signal server/list gives.
        if not server.exists:
            return f"No virtual machine with SUBID {server_id} found!\n"

        value_width = constants.SHOW_VALUE_WIDTH_FULL if full else constants.SHOW_VALUE_WIDTH
        return format_table(
            self._attribute_rows(server),
            (constants.SHOW_LABEL_WIDTH, value_width),
        )

    @staticmethod
    def _attribute_rows(server: ServerInfo) -> List[Sequence[Any]]:
        return [
            ("Id (SUBID):", server.id),
            ("Name:", server.name),
            ("Operating system:", server.os),
            ("Status:", server.status),
            ("Power status:", server.power_status),
            ("Location:", server.location),
            ("Region (DCID):", server.region_id),
            ("VCPU count:", server.vcpus),
            ("RAM:", server.ram),
            ("Disk:", server.disk),
            ("Allowed bandwidth:", server.allowed_bandwidth),
            ("Current bandwidth:", server.current_bandwidth),
            ("Cost per month:", server.cost),
            ("Pending charges:", server.pending_charges),
            ("Plan (VPSPLANID):", server.plan_id),
            ("IP:", server.main_ip),
            ("Netmask:", server.netmask_v4),
            ("Gateway:", server.gateway_v4),
            ("Internal IP:", server.internal_ip),
            ("IPv6 IP:", server.main_ipv6),
            ("IPv6 Network:", server.network_v6),
            ("IPv6 Network Size:", server.network_size_v6),
            ("Created date:", server.created),
            ("Default password:", server.default_password),
            ("Auto backups:", server.auto_backups),
            ("KVM URL:", server.kvm_url),
        ]
