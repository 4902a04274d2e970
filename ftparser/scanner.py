"""Full-text parser scan: the per-document token iterator the host database drives.

The host opens a scan over one document, pulls tokens one at a time with their
byte length, character count and frequency, and closes the scan::

    scanner = FullTextScanner(Language.KOREAN)
    scanner.scan_begin(text)
    info = scanner.next_token()
    while info is not None:
        ...
        info = scanner.next_token()
    scanner.scan_end()
"""

import logging
from dataclasses import dataclass
from enum import IntFlag
from typing import Iterator, Optional

from .api import get_registry, segment_result
from .exceptions import ScanStateError
from .models import Language, SegmentStatus, TokenInfo
from .registry import PipelineRegistry

logger = logging.getLogger(__name__)


class AddWordFlag(IntFlag):
    """Post-processing the host applies to returned tokens."""

    MIN_MAX_WORD = 1 << 0  # drop words outside the host's length bounds
    STOPWORD = 1 << 1  # apply the host's (English) stopword list
    CASEDOWN = 1 << 2
    GROUPBY_WORD = 1 << 3  # merge identical words, summing frequencies


# Length bounds and the host stopword list reject CJK and Thai tokens
DEFAULT_ADD_WORD_FLAG = AddWordFlag.CASEDOWN | AddWordFlag.GROUPBY_WORD


@dataclass(frozen=True)
class ParserDescriptor:
    """Registration record of one language's full-text parser."""

    name: str
    language: Language
    description: str
    add_word_flag: AddWordFlag = DEFAULT_ADD_WORD_FLAG


_DESCRIPTIONS = {
    Language.JAPANESE: "Japanese language fulltext parser",
    Language.KOREAN: "Korean language fulltext parser",
    Language.THAI: "Thai language fulltext parser",
}


def parser_descriptors() -> list[ParserDescriptor]:
    """Descriptors of every supported parser."""
    return [
        ParserDescriptor(name=language.parser_name, language=language, description=_DESCRIPTIONS[language])
        for language in Language
    ]


class FullTextScanner:
    """Scan state for one document at a time."""

    def __init__(self, language: Language | str, registry: Optional[PipelineRegistry] = None):
        """Initialize the scanner.

        Args:
            language: Language to segment
            registry: Pipeline registry; the process-wide one when omitted
        """
        self.language = Language.parse(language)
        self._registry = registry
        self._tokens: Optional[list[TokenInfo]] = None
        self._index = 0
        self.status: Optional[SegmentStatus] = None

    @property
    def add_word_flag(self) -> AddWordFlag:
        return DEFAULT_ADD_WORD_FLAG

    def scan_begin(self, text: Optional[str]) -> int:
        """Segment a document and cache its tokens.

        Args:
            text: Document text

        Returns:
            Number of tokens available

        Raises:
            ScanStateError: If a scan is already open
        """
        if self._tokens is not None:
            raise ScanStateError("scan_begin() called while a scan is open")

        result = segment_result(self.language, text, self._registry or get_registry())
        self.status = result.status
        self._tokens = [TokenInfo.from_word(word) for word in result.tokens if word.strip()]
        self._index = 0
        logger.debug(f"{self.language.parser_name}: scan opened with {len(self._tokens)} tokens")
        return len(self._tokens)

    def next_token(self) -> Optional[TokenInfo]:
        """Return the next token, or None at the end of the document.

        Raises:
            ScanStateError: If no scan is open
        """
        if self._tokens is None:
            raise ScanStateError("next_token() called before scan_begin()")
        if self._index >= len(self._tokens):
            return None
        info = self._tokens[self._index]
        self._index += 1
        return info

    def scan_end(self) -> None:
        """Close the scan so the scanner can take the next document."""
        self._tokens = None
        self._index = 0
        self.status = None

    def __iter__(self) -> Iterator[TokenInfo]:
        while True:
            info = self.next_token()
            if info is None:
                return
            yield info

    def __enter__(self) -> "FullTextScanner":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.scan_end()
