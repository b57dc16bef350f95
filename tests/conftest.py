"""Shared fixtures: a recording stand-in for VultrClient and a CLI runner."""

import pytest
from click.testing import CliRunner

from vultr_cli.cli import cli
from vultr_cli.core.models import ServerInfo


class FakeClient:
    """Records calls and returns canned results instead of calling the API."""

    def __init__(self):
        self.calls = []
        self.error = None
        self.servers = []
        self.server = ServerInfo()
        self.os_list = []
        self.bandwidth = []

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error

    def create_server(self, name, region_id, plan_id, os_id, options=None):
        self._record("create_server", name, region_id, plan_id, os_id, options)
        return ServerInfo(id="5678", name=name, region_id=region_id, plan_id=plan_id)

    def rename_server(self, server_id, name):
        self._record("rename_server", server_id, name)

    def start_server(self, server_id):
        self._record("start_server", server_id)

    def halt_server(self, server_id):
        self._record("halt_server", server_id)

    def reboot_server(self, server_id):
        self._record("reboot_server", server_id)

    def reinstall_server(self, server_id):
        self._record("reinstall_server", server_id)

    def change_os_of_server(self, server_id, os_id):
        self._record("change_os_of_server", server_id, os_id)

    def delete_server(self, server_id):
        self._record("delete_server", server_id)

    def list_os_for_server(self, server_id):
        self._record("list_os_for_server", server_id)
        return self.os_list

    def bandwidth_of_server(self, server_id):
        self._record("bandwidth_of_server", server_id)
        return self.bandwidth

    def get_servers(self):
        self._record("get_servers")
        return self.servers

    def get_server(self, server_id):
        self._record("get_server", server_id)
        return self.server


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def run_cli(fake_client, tmp_path):
    """Invoke the CLI with the fake client injected and an empty config dir."""
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(
            cli,
            ["--config-dir", str(tmp_path)] + list(args),
            obj={"client": fake_client},
            input=input,
        )

    return _run
