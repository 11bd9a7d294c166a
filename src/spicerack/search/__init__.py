"""Search utilities for spicerack."""

from __future__ import annotations

from .fuzzy import DEFAULT_LIMIT, fuzzy_search, score_name

__all__ = ["DEFAULT_LIMIT", "fuzzy_search", "score_name"]
