"""Simple Server Data Models

Simple data models for Vultr virtual machines."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class ServerInfo:
    """Read-only view of a virtual machine as reported by the API.

    An empty ``id`` is the sentinel for "no such server".
    """
    id: str = ""
    name: str = ""
    region_id: int = 0
    plan_id: int = 0
    os_id: int = 0
    os: str = ""
    status: str = ""
    power_status: str = ""
    location: str = ""
    vcpus: int = 0
    ram: str = ""
    disk: str = ""
    allowed_bandwidth: str = ""
    current_bandwidth: str = ""
    cost: str = ""
    pending_charges: str = ""
    main_ip: str = ""
    netmask_v4: str = ""
    gateway_v4: str = ""
    internal_ip: str = ""
    main_ipv6: str = ""
    network_v6: str = ""
    network_size_v6: str = ""
    created: str = ""
    default_password: str = ""
    auto_backups: bool = False
    kvm_url: str = ""

    @property
    def exists(self) -> bool:
        return self.id != ""

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "ServerInfo":
        """Create ServerInfo from a server/list entry."""
        if not isinstance(data, dict):
            return cls()

        return cls(
            id=_to_str(data.get("SUBID")),
            name=_to_str(data.get("label")),
            region_id=_to_int(data.get("DCID")),
            plan_id=_to_int(data.get("VPSPLANID")),
            os_id=_to_int(data.get("OSID")),
            os=_to_str(data.get("os")),
            status=_to_str(data.get("status")),
            power_status=_to_str(data.get("power_status")),
            location=_to_str(data.get("location")),
            vcpus=_to_int(data.get("vcpu_count")),
            ram=_to_str(data.get("ram")),
            disk=_to_str(data.get("disk")),
            allowed_bandwidth=_to_str(data.get("allowed_bandwidth_gb")),
            current_bandwidth=_to_str(data.get("current_bandwidth_gb")),
            cost=_to_str(data.get("cost_per_month")),
            pending_charges=_to_str(data.get("pending_charges")),
            main_ip=_to_str(data.get("main_ip")),
            netmask_v4=_to_str(data.get("netmask_v4")),
            gateway_v4=_to_str(data.get("gateway_v4")),
            internal_ip=_to_str(data.get("internal_ip")),
            main_ipv6=_to_str(data.get("v6_main_ip")),
            network_v6=_to_str(data.get("v6_network")),
            network_size_v6=_to_str(data.get("v6_network_size")),
            created=_to_str(data.get("date_created")),
            default_password=_to_str(data.get("default_password")),
            auto_backups=_to_str(data.get("auto_backups")).lower() == "yes",
            kvm_url=_to_str(data.get("kvm_url")),
        )


@dataclass
class ServerOptions:
    """Optional modifiers for server creation. Zero values mean unset."""
    ipxe_chain_url: str = ""
    iso_id: int = 0
    script_id: int = 0
    snapshot_id: str = ""
    ssh_key_id: str = ""
    ipv6: bool = False
    private_networking: bool = False
    auto_backups: bool = False

    def to_params(self) -> Dict[str, str]:
        """Convert the set options to server/create parameters."""
        params = {}
        if self.ipxe_chain_url:
            params["ipxe_chain_url"] = self.ipxe_chain_url
        if self.iso_id:
            params["ISOID"] = str(self.iso_id)
        if self.script_id:
            params["SCRIPTID"] = str(self.script_id)
        if self.snapshot_id:
            params["SNAPSHOTID"] = self.snapshot_id
        if self.ssh_key_id:
            params["SSHKEYID"] = self.ssh_key_id
        if self.ipv6:
            params["enable_ipv6"] = "yes"
        if self.private_networking:
            params["enable_private_network"] = "yes"
        if self.auto_backups:
            params["auto_backups"] = "yes"
        return params
