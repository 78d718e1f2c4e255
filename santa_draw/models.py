from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass(frozen=True)
class Participant:
    id: Hashable
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Assignment:
    """
    One giver -> receiver pair. Names are carried through for display only.
    """
    giver_id: Hashable
    giver_name: str
    receiver_id: Hashable
    receiver_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "giver_id": self.giver_id,
            "giver_name": self.giver_name,
            "receiver_id": self.receiver_id,
            "receiver_name": self.receiver_name,
        }
