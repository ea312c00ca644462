"""
Ordered keyword set compared in one Google Trends query
"""
from typing import Iterable, Iterator, List

from trendmaps.errors import InvalidKeywordsError, KeywordNotSetError

MAX_KEYWORDS = 5  # Google Trends compares at most five terms


def _normalize(keyword):
    return keyword.strip() if isinstance(keyword, str) else keyword


class Keywords:
    """
    Keywords registered on a client

    Order matters: response slot ``i + 1`` holds the data of the keyword at
    position ``i``.

    Example:
        keywords = Keywords(['PS4', 'XBOX', 'PC'])
        keywords.index('XBOX')  # 1
    """

    def __init__(self, keywords: Iterable[str]):
        """
        Initialize the keyword set

        Args:
            keywords: One to five distinct, non-blank search terms

        Raises:
            InvalidKeywordsError: if the set is empty, too large, or holds
                blank or duplicate terms
        """
        if isinstance(keywords, str):
            keywords = [keywords]
        keywords = list(keywords)
        if any(not isinstance(k, str) for k in keywords):
            raise InvalidKeywordsError(f"Keywords must be strings: {keywords!r}")
        terms = [k.strip() for k in keywords]

        if not terms:
            raise InvalidKeywordsError("At least one keyword is required")
        if len(terms) > MAX_KEYWORDS:
            raise InvalidKeywordsError(
                f"Google Trends compares at most {MAX_KEYWORDS} keywords, got {len(terms)}"
            )
        if any(not term for term in terms):
            raise InvalidKeywordsError("Keywords cannot be blank")
        if len(set(terms)) != len(terms):
            raise InvalidKeywordsError(f"Keywords must be distinct: {terms}")

        self._keywords = tuple(terms)

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def index(self, keyword: str) -> int:
        """
        Zero-based position of a registered keyword

        The keyword is stripped the same way registered terms are.

        Raises:
            KeywordNotSetError: if the keyword is not registered
        """
        try:
            return self._keywords.index(_normalize(keyword))
        except ValueError:
            raise KeywordNotSetError(keyword) from None

    def __contains__(self, keyword) -> bool:
        return _normalize(keyword) in self._keywords

    def __iter__(self) -> Iterator[str]:
        return iter(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __eq__(self, other) -> bool:
        if isinstance(other, Keywords):
            return self._keywords == other._keywords
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._keywords)

    def __repr__(self) -> str:
        return f"Keywords({list(self._keywords)!r})"
