"""
Region matching for cellar queries.

Uses tiered matching:
1. Exact normalized match on region or country
2. Whole-word match inside the region ("rioja" -> "Rioja Alta")
3. Fuzzy match with rapidfuzz for typos ("riojha" -> "Rioja")

Normalization strips accents and punctuation, so "Côtes-du-Rhône"
and "cotes du rhone" compare equal.
"""

import re
import unicodedata
from functools import lru_cache
from typing import Optional

from rapidfuzz import fuzz

from ..config import Config

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@lru_cache(maxsize=2048)
def normalize_region(text: str) -> str:
    """Lowercase, strip accents, collapse punctuation/whitespace to single spaces."""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _NON_ALNUM.sub(" ", ascii_only.lower()).strip()


class RegionMatcher:
    """Decides whether a stored wine region satisfies a region query."""

    def __init__(self, fuzzy: bool = True, threshold: Optional[float] = None):
        """
        Args:
            fuzzy: Enable tier 3 (typo-tolerant) matching.
            threshold: Minimum fuzzy score (0-1). Defaults to Config.REGION_FUZZY_THRESHOLD.
        """
        self.fuzzy = fuzzy
        self.threshold = Config.REGION_FUZZY_THRESHOLD if threshold is None else threshold

    def matches(self, query: str, region: Optional[str], country: Optional[str] = None) -> bool:
        """Return True if the query names this region (or country)."""
        query_norm = normalize_region(query)
        if not query_norm:
            return False

        region_norm = normalize_region(region) if region else ""
        country_norm = normalize_region(country) if country else ""
        if not region_norm and not country_norm:
            return False

        # Tier 1: exact
        if query_norm in (region_norm, country_norm):
            return True

        # Tier 2: whole words inside the region name
        if region_norm and f" {query_norm} " in f" {region_norm} ":
            return True

        # Tier 3: fuzzy
        if not self.fuzzy or len(query_norm) < Config.MIN_REGION_QUERY_LENGTH:
            return False
        return self.best_score(query_norm, region_norm, country_norm) >= self.threshold

    def best_score(self, query_norm: str, region_norm: str, country_norm: str = "") -> float:
        """Highest fuzzy score of the query against the region, its word windows, and the country."""
        candidates = [c for c in (region_norm, country_norm) if c]
        candidates.extend(_word_windows(region_norm, len(query_norm.split())))
        if not candidates:
            return 0.0
        return max(self._compute_fuzzy_score(query_norm, c) for c in candidates)

    def _compute_fuzzy_score(self, query: str, candidate: str) -> float:
        """
        Compute weighted fuzzy score using multiple algorithms.

        Uses rapidfuzz with configurable weights.
        """
        ratio = fuzz.ratio(query, candidate) / 100.0
        token_sort = fuzz.token_sort_ratio(query, candidate) / 100.0
        return Config.WEIGHT_RATIO * ratio + Config.WEIGHT_TOKEN_SORT * token_sort


def _word_windows(text: str, size: int) -> list[str]:
    """Contiguous runs of `size` words, e.g. size 2 of 'a b c' -> ['a b', 'b c']."""
    words = text.split()
    if size <= 0 or size >= len(words):
        return []
    return [" ".join(words[i:i + size]) for i in range(len(words) - size + 1)]
