"""Typo-tolerant ranking of catalog names against a free-text query."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from spicerack.models.spice import RankedSpice, Spice

DEFAULT_LIMIT = 10

EXACT_NAME_BONUS = 100.0
WORD_START_BONUS = 50.0
COVERAGE_WEIGHT = 25.0
POSITION_WEIGHT = 25
SUBSEQUENCE_WEIGHT = 20.0

_SEGMENT_SEPARATORS = (",", " ")


def _substring_score(term: str, name: str, position: int) -> float:
    score = 0.0
    if name == term:
        score += EXACT_NAME_BONUS
    if position == 0 or name[position - 1] in _SEGMENT_SEPARATORS:
        score += WORD_START_BONUS
    score += len(term) / len(name) * COVERAGE_WEIGHT
    score += max(0, POSITION_WEIGHT - position)
    return score


def _subsequence_score(term: str, name: str) -> Optional[float]:
    """Score ``term`` appearing in order, with gaps, inside ``name``.

    Returns None if some character of the term cannot be found. The fewer name
    characters scanned before the match completes, the higher the score.
    """
    matched = 0
    for scanned, char in enumerate(name, start=1):
        if char == term[matched]:
            matched += 1
            if matched == len(term):
                return SUBSEQUENCE_WEIGHT * len(term) / scanned
    return None


def score_name(terms: Sequence[str], name: str) -> Optional[float]:
    """Total score of ``name`` for lower-cased ``terms``; None unless every term matches."""

    name_lower = name.lower()
    total = 0.0
    for term in terms:
        position = name_lower.find(term)
        if position >= 0:
            total += _substring_score(term, name_lower, position)
            continue
        partial = _subsequence_score(term, name_lower)
        if partial is None:
            return None
        total += partial
    return total


def fuzzy_search(
    query: str,
    candidates: Iterable[Spice],
    limit: int = DEFAULT_LIMIT,
) -> List[RankedSpice]:
    """Rank ``candidates`` by how well their names match ``query``.

    All whitespace-separated query terms must match. Results are ordered by
    descending score; equal scores keep the order of ``candidates``.
    """
    terms = (query or "").lower().split()
    if not terms or limit <= 0:
        return []

    ranked: List[RankedSpice] = []
    for candidate in candidates:
        if not candidate.name:
            continue
        score = score_name(terms, candidate.name)
        if score is None or score <= 0:
            continue
        ranked.append(RankedSpice(name=candidate.name, category=candidate.category, score=score))

    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]
