"""Data exchanged with and held by the accounts manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class AccountsServerStatus:
    """Overall status reported by the accounts manager."""

    motd: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of this status."""
        return {"motd": self.motd}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AccountsServerStatus":
        """Build a status from decoded JSON, rejecting malformed documents."""
        if not isinstance(data, Mapping):
            raise ValueError(f"status must be a JSON object, got {type(data).__name__}")
        try:
            motd = data["motd"]
        except KeyError:
            raise ValueError("status is missing field 'motd'") from None
        if not isinstance(motd, str):
            raise ValueError(f"field 'motd' must be a string, got {type(motd).__name__}")
        return cls(motd=motd)


@dataclass
class AppData:
    """State shared between request handlers of the accounts manager."""