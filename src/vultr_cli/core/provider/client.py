"""Simple Vultr client for server operations."""

from typing import Any, Callable, Dict, List, Optional
from vultr import Vultr
from vultr_cli.core.models import OSInfo, ServerInfo, ServerOptions
from vultr_cli.utils.exceptions import ConfigurationError, VultrAPIError
from vultr_cli.utils.logger import setup_logger


class VultrClient:
    """Thin wrapper over the ``vultr`` SDK server endpoints.

    Every method performs exactly one API call. SDK failures are raised
    as VultrAPIError; results are converted to the models in core.models.
    """

    def __init__(self, api: Vultr):
        """Initialize VultrClient."""
        self.api = api
        self.logger = setup_logger(__name__, "vultr_client.log")

    def _call(self, action: str, func: Callable, *args, **kwargs) -> Any:
        self.logger.debug(f"{action}: args={args}")
        try:
            return func(*args, **kwargs)
        except Exception as e:
            self.logger.debug(f"Error during {action}: {e}")
            raise VultrAPIError(action, str(e)) from e

    def create_server(
        self,
        name: str,
        region_id: int,
        plan_id: int,
        os_id: int,
        options: Optional[ServerOptions] = None,
    ) -> ServerInfo:
        """Create a server and return a record built from the request values."""
        params = (options or ServerOptions()).to_params()
        params["label"] = name
        response = self._call(
            "create server", self.api.server.create, region_id, plan_id, os_id, params
        )
        subid = response.get("SUBID", "") if isinstance(response, dict) else ""
        self.logger.info(f"Created server {subid} ({name})")
        return ServerInfo(
            id=str(subid),
            name=name,
            region_id=region_id,
            plan_id=plan_id,
            os_id=os_id,
        )

    def rename_server(self, server_id: str, name: str) -> None:
        self._call("rename server", self.api.server.label_set, server_id, name)

    def start_server(self, server_id: str) -> None:
        self._call("start server", self.api.server.start, server_id)

    def halt_server(self, server_id: str) -> None:
        self._call("halt server", self.api.server.halt, server_id)

    def reboot_server(self, server_id: str) -> None:
        self._call("reboot server", self.api.server.reboot, server_id)

    def reinstall_server(self, server_id: str) -> None:
        self._call("reinstall server", self.api.server.reinstall, server_id)

    def change_os_of_server(self, server_id: str, os_id: int) -> None:
        self._call("change operating system", self.api.server.os_change, server_id, os_id)

    def delete_server(self, server_id: str) -> None:
        self._call("delete server", self.api.server.destroy, server_id)

    def list_os_for_server(self, server_id: str) -> List[OSInfo]:
        """List the operating systems a server can be changed to, sorted by name."""
        response = self._call(
            "list operating systems", self.api.server.os_change_list, server_id
        )
        entries = response.values() if isinstance(response, dict) else response or []
        return sorted(
            (OSInfo.from_api(entry) for entry in entries), key=lambda o: o.name
        )

    def bandwidth_of_server(self, server_id: str) -> List[Dict[str, str]]:
        """Return daily bandwidth samples with ``date``, ``incoming`` and ``outgoing`` keys."""
        response = self._call("get bandwidth", self.api.server.bandwidth, server_id)
        if not isinstance(response, dict):
            return []

        samples: Dict[str, Dict[str, str]] = {}
        for direction in ("incoming", "outgoing"):
            for date, amount in response.get(f"{direction}_bytes") or []:
                sample = samples.setdefault(
                    str(date), {"date": str(date), "incoming": "", "outgoing": ""}
                )
                sample[direction] = str(amount)

        return [samples[date] for date in sorted(samples)]

    def get_servers(self) -> List[ServerInfo]:
        """List all servers of the account, sorted by name."""
        response = self._call("list servers", self.api.server.list)
        entries = response.values() if isinstance(response, dict) else response or []
        servers = [ServerInfo.from_api(entry) for entry in entries]
        return sorted(servers, key=lambda s: (s.name, s.id))

    def get_server(self, server_id: str) -> ServerInfo:
        """Fetch one server; an unknown SUBID yields a record with an empty id."""
        response = self._call("get server", self.api.server.list, subid=server_id)
        return ServerInfo.from_api(response)


def create_vultr_client(api_key: str) -> VultrClient:
    """Create VultrClient instance."""
    if not api_key:
        raise ConfigurationError(
            "Missing Vultr API key. Set VULTR_API_KEY, pass --api-key "
            "or add vultr.api_key to settings.yaml."
        )
    return VultrClient(Vultr(api_key))
