from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Hashable, Protocol, Sequence

from ..models import Assignment, Participant


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class AssignmentError(RuntimeError):
    pass


class InsufficientParticipants(AssignmentError):
    pass


class DuplicateName(AssignmentError):
    pass


class DuplicateIdentifier(AssignmentError):
    pass


class AssignmentFailure(AssignmentError):
    """Internal invariant broken after shuffling and repair. Not retryable."""


def shuffle(ids: Sequence[Hashable], rng: RandomSource) -> list[Hashable]:
    """Fisher-Yates shuffle into a new list."""
    shuffled = list(ids)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def is_derangement(original: Sequence[Hashable], permuted: Sequence[Hashable]) -> bool:
    return all(a != b for a, b in zip(original, permuted))


def repair_fixed_points(original: Sequence[Hashable], permuted: list[Hashable]) -> None:
    """
    Removes self-assignments from `permuted` in place.

    Fixed points are swapped with each other two at a time. A leftover odd one
    is swapped with the first position that leaves neither slot fixed.
    """
    fixed = [i for i, (a, b) in enumerate(zip(original, permuted)) if a == b]

    for n in range(0, len(fixed) - 1, 2):
        i, j = fixed[n], fixed[n + 1]
        permuted[i], permuted[j] = permuted[j], permuted[i]

    if len(fixed) % 2:
        k = fixed[-1]
        for m in range(len(permuted)):
            if m != k and original[m] != permuted[k] and original[k] != permuted[m]:
                permuted[k], permuted[m] = permuted[m], permuted[k]
                break


def validate_assignments(assignments: Sequence[Assignment], ids: Sequence[Hashable]) -> None:
    givers = Counter(a.giver_id for a in assignments)
    receivers = Counter(a.receiver_id for a in assignments)

    for pid in ids:
        if givers[pid] != 1:
            raise AssignmentFailure(
                f"Invalid assignment: participant gives {givers[pid]} times (should be 1)"
            )
        if receivers[pid] != 1:
            raise AssignmentFailure(
                f"Invalid assignment: participant receives {receivers[pid]} times (should be 1)"
            )

    if len(assignments) != len(ids):
        raise AssignmentFailure(
            f"Invalid assignment: {len(assignments)} pairs for {len(ids)} participants"
        )
    if any(a.giver_id == a.receiver_id for a in assignments):
        raise AssignmentFailure("Invalid assignment: participant assigned to themself")


def _check_participants(participants: Sequence[Participant]) -> None:
    if len(participants) < 2:
        raise InsufficientParticipants("Need at least 2 participants to create assignments.")

    seen_ids: set[Hashable] = set()
    for p in participants:
        if p.id in seen_ids:
            raise DuplicateIdentifier(f"Duplicate participant id detected: {p.id!r}.")
        seen_ids.add(p.id)

    seen_names: set[str] = set()
    for p in participants:
        key = p.name.lower()
        if key in seen_names:
            raise DuplicateName(
                f'Duplicate name detected: "{p.name}". Please remove duplicates before drawing.'
            )
        seen_names.add(key)


def generate(
    participants: Sequence[Participant],
    rng: RandomSource | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> list[Assignment]:
    """
    Draws one receiver per participant so that nobody gives to themself.

    Givers keep the input order. Pass a seeded `random.Random` as `rng` for a
    reproducible draw; by default each call gets its own generator.
    Raises an AssignmentError subclass and returns nothing on failure.
    """
    _check_participants(participants)
    if rng is None:
        rng = random.Random()

    ids = [p.id for p in participants]
    receivers = shuffle(ids, rng)

    attempts = 0
    while attempts < max_attempts and not is_derangement(ids, receivers):
        receivers = shuffle(ids, rng)
        attempts += 1

    if not is_derangement(ids, receivers):
        logger.warning(
            "No derangement after %s reshuffles for %s participants; repairing",
            attempts,
            len(ids),
        )
        repair_fixed_points(ids, receivers)
        if not is_derangement(ids, receivers):
            raise AssignmentFailure("Failed to create valid assignments.")
    else:
        logger.debug("Derangement found after %s reshuffles", attempts)

    names = {p.id: p.name for p in participants}
    assignments = [
        Assignment(
            giver_id=giver_id,
            giver_name=names[giver_id],
            receiver_id=receiver_id,
            receiver_name=names[receiver_id],
        )
        for giver_id, receiver_id in zip(ids, receivers)
    ]

    validate_assignments(assignments, ids)
    return assignments
