"""Keyword occurrence finding.

Single-word keywords are matched as whole words against the original text so
matches keep their source casing.  Multi-word keywords are matched on the
normalized token stream and mapped back to the original text by token index.
When normalization drops a punctuation-only token (``&``, ``-``) the two
token streams drift apart and the recovered span shifts accordingly; callers
rely on that behaviour staying stable.
"""

import re

from seo_audit.utils.text_processing import normalize_text, split_words


def find_occurrences(text: str, keyword: str) -> list[str]:
    """Return every literal match of ``keyword`` in ``text``, in order.

    Examples:
        >>> find_occurrences("Renewable energy is the future of energy.", "energy")
        ['energy', 'energy']
    """
    normalized_keyword = normalize_text(keyword)
    if not normalized_keyword:
        return []
    keyword_words = normalized_keyword.split(" ")

    if len(keyword_words) == 1:
        pattern = re.compile(r"\b" + re.escape(normalized_keyword) + r"\b", re.IGNORECASE)
        return pattern.findall(text)

    words = split_words(normalize_text(text))
    original_words = split_words(text)
    size = len(keyword_words)
    occurrences: list[str] = []
    for i in range(len(words) - size + 1):
        if " ".join(words[i:i + size]) == normalized_keyword:
            occurrences.append(" ".join(original_words[i:i + size]))
    return occurrences


def count_occurrences(text: str, keyword: str) -> int:
    """Number of matches :func:`find_occurrences` reports."""
    return len(find_occurrences(text, keyword))
