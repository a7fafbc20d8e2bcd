"""Lexical overlap between target keywords (keyword cannibalization check)."""

from dataclasses import dataclass
from itertools import combinations

COMPETING_SIMILARITY_THRESHOLD = 0.3


@dataclass(frozen=True)
class KeywordSimilarity:
    keyword_a: str
    keyword_b: str
    ratio: float

    @property
    def is_competing(self) -> bool:
        return self.ratio > COMPETING_SIMILARITY_THRESHOLD


@dataclass(frozen=True)
class RelationshipReport:
    """All pairwise similarities for a keyword set, in input order."""

    pairs: tuple[KeywordSimilarity, ...]

    @property
    def competing(self) -> list[KeywordSimilarity]:
        return [pair for pair in self.pairs if pair.is_competing]

    @property
    def is_distinct(self) -> bool:
        return not self.competing


def _token_set(keyword: str) -> set[str]:
    return {token for token in keyword.lower().split(" ") if token}


def keyword_similarity(keyword_a: str, keyword_b: str) -> float:
    """Jaccard index of the two keywords' lowercase word sets.

    Examples:
        >>> round(keyword_similarity("solar energy", "solar power"), 3)
        0.333
    """
    set_a = _token_set(keyword_a)
    set_b = _token_set(keyword_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def analyze_relationships(keywords: list[str]) -> RelationshipReport:
    """Compare every unordered keyword pair."""
    return RelationshipReport(pairs=tuple(
        KeywordSimilarity(a, b, keyword_similarity(a, b))
        for a, b in combinations(keywords, 2)
    ))
