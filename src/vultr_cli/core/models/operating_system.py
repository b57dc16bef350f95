"""Operating system model for Vultr servers."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class OSInfo:
    """Operating system a server can be switched to."""
    id: int
    name: str
    arch: str = ""
    family: str = ""
    windows: bool = False
    surcharge: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "OSInfo":
        windows = data.get("windows", False)
        if isinstance(windows, str):
            windows = windows.lower() in ("true", "yes", "1")
        return cls(
            id=int(data.get("OSID", 0) or 0),
            name=str(data.get("name", "")),
            arch=str(data.get("arch", "")),
            family=str(data.get("family", "")),
            windows=bool(windows),
            surcharge=str(data.get("surcharge", "")),
        )
