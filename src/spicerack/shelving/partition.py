"""Balanced alphabetical shelf distribution.

Letters that hold at least one jar are split into contiguous runs with the
classic linear-partition dynamic program, which minimizes the jar count of the
fullest shelf. Labels are then widened so that, read in order, they cover the
whole alphabet exactly once.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence, Tuple

from spicerack.errors import ConfigurationError
from spicerack.models.shelf import Shelf, ShelfInfo
from spicerack.naming import ALPHABET

logger = logging.getLogger(__name__)

MAX_SHELVES = len(ALPHABET)


def clamp_shelf_count(num_shelves: int) -> int:
    """Bound a requested shelf count to ``1..26``.

    Zero and negative values are corrected rather than rejected, since there is
    always at least one shelf to show. Non-integers are a programming error.
    """
    if isinstance(num_shelves, bool) or not isinstance(num_shelves, int):
        raise ConfigurationError(f"Shelf count must be an integer, got {num_shelves!r}")
    return min(max(1, num_shelves), MAX_SHELVES)


def linear_partition(seq: Sequence[int], k: int) -> List[List[int]]:
    """Split ``seq`` into ``k`` non-empty contiguous groups minimizing the largest sum.

    ``k`` is capped at ``len(seq)``. When several splits reach the same optimum
    the earliest split point wins at every step of the reconstruction.
    """
    n = len(seq)
    if n == 0 or k <= 0:
        return []
    k = min(k, n)

    prefix = [0] * (n + 1)
    for i, value in enumerate(seq):
        prefix[i + 1] = prefix[i] + value

    # cost[p][i]: best maximum when the first i values go onto p groups.
    inf = float("inf")
    cost = [[inf] * (n + 1) for _ in range(k + 1)]
    split = [[0] * (n + 1) for _ in range(k + 1)]
    for i in range(1, n + 1):
        cost[1][i] = prefix[i]

    for p in range(2, k + 1):
        for i in range(p, n + 1):
            best = inf
            best_t = p - 1
            for t in range(p - 1, i):
                candidate = max(cost[p - 1][t], prefix[i] - prefix[t])
                if candidate < best:
                    best = candidate
                    best_t = t
            cost[p][i] = best
            split[p][i] = best_t

    bounds: List[Tuple[int, int]] = []
    end = n
    for p in range(k, 1, -1):
        start = split[p][end]
        bounds.append((start, end))
        end = start
    bounds.append((0, end))
    bounds.reverse()

    return [list(seq[start:stop]) for start, stop in bounds]


def _format_range(start: int, end: int) -> str:
    if start == end:
        return ALPHABET[start]
    return f"{ALPHABET[start]}-{ALPHABET[end]}"


def _split_evenly(size: int, parts: int) -> List[int]:
    base, extra = divmod(size, parts)
    return [base + 1 if index < extra else base for index in range(parts)]


def _allocate_spare_shelves(gaps: Sequence[int], spare: int) -> List[int]:
    """Hand out shelves with no letters to the free stretches of the alphabet.

    Each shelf goes to the gap that currently offers the most letters per shelf
    and still has a letter to spare; ties go to the leftmost gap.
    """
    assigned = [0] * len(gaps)
    for _ in range(spare):
        best_index = -1
        best_ratio = -1.0
        for index, size in enumerate(gaps):
            if assigned[index] >= size:
                continue
            ratio = size / (assigned[index] + 1)
            if ratio > best_ratio:
                best_ratio = ratio
                best_index = index
        if best_index < 0:  # pragma: no cover - guarded by the shelf count cap
            raise ConfigurationError("Not enough free letters to label every shelf")
        assigned[best_index] += 1
    return assigned


def distribute(counts: Mapping[str, int], num_shelves: int) -> List[Shelf]:
    """Assign letters with jars to ``num_shelves`` balanced, alphabetical shelves.

    Always returns ``clamp_shelf_count(num_shelves)`` shelves. Shelves beyond
    the number of populated letters come back with no letters but still carry a
    label carved out of an unused part of the alphabet.
    """
    shelf_count = clamp_shelf_count(num_shelves)

    populated = [letter for letter in ALPHABET if counts.get(letter, 0) > 0]
    group_count = min(shelf_count, len(populated))

    groups: List[List[str]] = []
    if group_count:
        weights = [counts[letter] for letter in populated]
        cursor = 0
        for part in linear_partition(weights, group_count):
            groups.append(populated[cursor : cursor + len(part)])
            cursor += len(part)

    # Free stretches of the alphabet: before the first group, between groups,
    # after the last group.
    spans = [(ALPHABET.index(group[0]), ALPHABET.index(group[-1])) for group in groups]
    gap_starts: List[int] = []
    gap_sizes: List[int] = []
    previous_end = -1
    for start, end in spans:
        gap_starts.append(previous_end + 1)
        gap_sizes.append(start - previous_end - 1)
        previous_end = end
    gap_starts.append(previous_end + 1)
    gap_sizes.append(len(ALPHABET) - previous_end - 1)

    spare = _allocate_spare_shelves(gap_sizes, shelf_count - group_count)

    # (first letter index, last letter index, letters) in shelf order.
    layout: List[Tuple[int, int, Tuple[str, ...]]] = []
    for gap_index, gap_start in enumerate(gap_starts):
        if spare[gap_index]:
            position = gap_start
            for width in _split_evenly(gap_sizes[gap_index], spare[gap_index]):
                layout.append((position, position + width - 1, ()))
                position += width
        if gap_index < len(groups):
            start, end = spans[gap_index]
            layout.append((start, end, tuple(groups[gap_index])))

    shelves: List[Shelf] = []
    label_start = 0
    for index, (_, end, letters) in enumerate(layout):
        label_end = len(ALPHABET) - 1 if index == len(layout) - 1 else end
        shelves.append(Shelf(letters=letters, range_label=_format_range(label_start, label_end)))
        label_start = label_end + 1

    logger.debug(
        "Distributed %s populated letter(s) onto %s shelf/shelves: %s",
        len(populated),
        shelf_count,
        [shelf.range_label for shelf in shelves],
    )
    return shelves


def shelf_infos(shelves: Sequence[Shelf], counts: Mapping[str, int]) -> List[ShelfInfo]:
    """Project shelves into label/jar-count pairs for display."""

    return [
        ShelfInfo(
            range=shelf.range_label,
            count=sum(counts.get(letter, 0) for letter in shelf.letters),
        )
        for shelf in shelves
    ]


__all__ = [
    "MAX_SHELVES",
    "clamp_shelf_count",
    "distribute",
    "linear_partition",
    "shelf_infos",
]
