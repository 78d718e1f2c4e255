from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..models import Participant
from .assignments import DuplicateName


_NAME_SEPARATORS = re.compile(r"[\n,]+")


class RosterError(ValueError):
    pass


@dataclass
class RosterUpdate:
    added: list[Participant] = field(default_factory=list)
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


class Roster:
    """
    In-memory participant list keyed by lower-cased name.
    Nothing here is persisted; callers hand `participants()` to the draw.
    """

    def __init__(self) -> None:
        self._people: dict[str, Participant] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._people)

    def participants(self) -> list[Participant]:
        return list(self._people.values())

    def has_name(self, name: str) -> bool:
        return name.strip().lower() in self._people

    def add(self, name: str) -> Participant:
        name = (name or "").strip()
        if not name:
            raise RosterError("Name cannot be empty")

        key = name.lower()
        if key in self._people:
            raise DuplicateName(f'"{name}" already exists')

        person = Participant(id=f"person-{self._next_id}", name=name)
        self._next_id += 1
        self._people[key] = person
        return person

    def add_many(self, text: str) -> RosterUpdate:
        """Adds names separated by newlines or commas; existing names are skipped."""
        names = [n.strip() for n in _NAME_SEPARATORS.split(text or "")]
        names = [n for n in names if n]
        if not names:
            return RosterUpdate(errors=["No valid names found"])

        unique: dict[str, str] = {}
        for name in names:
            unique.setdefault(name.lower(), name)

        new_names = [n for key, n in unique.items() if key not in self._people]
        update = RosterUpdate(skipped=len(unique) - len(new_names))
        update.added = [self.add(n) for n in new_names]
        if update.skipped:
            update.errors.append(f"{update.skipped} name(s) already exist")
        return update

    def remove(self, participant_id) -> bool:
        for key, person in self._people.items():
            if person.id == participant_id:
                del self._people[key]
                return True
        return False

    def clear(self) -> None:
        self._people.clear()
        self._next_id = 1
