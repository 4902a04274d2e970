"""Base classes and constants for segmentation engines."""

from abc import ABC, abstractmethod
from typing import Iterator

from ..models import AnalyzedToken, Language


# Japanese part-of-speech stop tags (UniDic categories as reported by Sudachi).
# A tag matches its own category and every sub-category below it.
JAPANESE_STOP_TAGS = frozenset({
    "助詞",        # particles
    "助動詞",      # auxiliary verbs
    "接続詞",      # conjunctions
    "補助記号",    # punctuation, brackets
    "記号",        # symbols
    "空白",        # whitespace
    "感動詞-フィラー",
    "その他",
})

# Korean part-of-speech stop tags (Sejong tags as reported by Kiwi)
KOREAN_STOP_TAGS = frozenset({
    "JKS", "JKC", "JKG", "JKO", "JKB", "JKV", "JKQ", "JX", "JC",  # postpositions
    "EP", "EF", "EC", "ETN", "ETM",  # verbal endings
    "IC", "MAJ", "MM",
    "XPN", "XSN", "XSV", "XSA", "XSM",  # affixes
    "SP", "SS", "SSO", "SSC", "SE", "SO", "SF",  # punctuation
    "UN",
})

# Korean tags discarded by the tokenizer itself when punctuation is dropped
KOREAN_PUNCTUATION_TAGS = frozenset({"SF", "SP", "SS", "SSO", "SSC", "SE", "SO", "SW"})


def matches_tag(pos_path: str, tags: frozenset) -> bool:
    """Check a ``-`` joined POS path against a set of (parent) tags.

    Args:
        pos_path: e.g. ``"助詞-係助詞"`` or ``"VV-R"``
        tags: Stop tags; ``"助詞"`` covers ``"助詞-係助詞"``

    Returns:
        True if the path equals a tag or lies below one
    """
    if not pos_path:
        return False
    if pos_path in tags:
        return True
    parts = pos_path.split("-")
    return any("-".join(parts[:i]) in tags for i in range(1, len(parts)))


class SegmentationEngine(ABC):
    """Base class for segmentation engines.

    An engine is the tokenizer stage of a pipeline. It is built once per process
    and shared by every session, so ``analyze`` must be safe to call from several
    threads at once.
    """

    language: Language
    stop_tags: frozenset = frozenset()

    @abstractmethod
    def analyze(self, text: str) -> Iterator[AnalyzedToken]:
        """Segment text into raw tokens.

        Args:
            text: Input text to segment

        Yields:
            AnalyzedToken in left-to-right order
        """
        pass

    def close(self) -> None:
        """Release analyzer resources."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
