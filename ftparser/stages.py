"""Filter stages applied to an engine's token stream.

Stages are immutable once built and hold no per-call state: ``apply`` wraps an
incoming token iterator in a new generator, so one stage instance can serve any
number of concurrent sessions.
"""

import re
import unicodedata
from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from .engines.base import matches_tag
from .models import AnalyzedToken, StageKind

# Half-width katakana and its voicing marks
_HALFWIDTH_KATAKANA = re.compile("[\uFF61-\uFF9F]+")
_FULLWIDTH_ASCII_OFFSET = 0xFEE0


def fold_width(text: str) -> str:
    """Normalize CJK width variants.

    Full-width ASCII (U+FF01-U+FF5E) becomes half-width and half-width katakana
    becomes full-width, with voicing marks composed onto the preceding kana.

    Args:
        text: Token text

    Returns:
        Width-normalized text
    """
    chars = [
        chr(ord(ch) - _FULLWIDTH_ASCII_OFFSET) if "\uFF01" <= ch <= "\uFF5E" else ch
        for ch in text
    ]
    folded = "".join(chars)
    return _HALFWIDTH_KATAKANA.sub(lambda m: unicodedata.normalize("NFKC", m.group(0)), folded)


class AnalysisStage(ABC):
    """Base class for filter stages."""

    kind: StageKind

    @abstractmethod
    def apply(self, tokens: Iterator[AnalyzedToken]) -> Iterator[AnalyzedToken]:
        """Wrap a token stream.

        Args:
            tokens: Upstream tokens

        Returns:
            Downstream tokens
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BaseFormFilter(AnalysisStage):
    """Replace each token with its dictionary form."""

    kind = StageKind.BASE_FORM

    def apply(self, tokens):
        for token in tokens:
            base = token.base_form
            if base and base != "*" and base != token.surface:
                yield AnalyzedToken(surface=base, pos=token.pos, base_form=base)
            else:
                yield token


class PartOfSpeechStopFilter(AnalysisStage):
    """Drop tokens whose part-of-speech falls under a stop tag."""

    kind = StageKind.POS_STOP

    def __init__(self, stop_tags: Iterable[str]):
        self.stop_tags = frozenset(stop_tags)

    def apply(self, tokens):
        for token in tokens:
            if not matches_tag(token.pos_path, self.stop_tags):
                yield token

    def __repr__(self) -> str:
        return f"PartOfSpeechStopFilter(tags={len(self.stop_tags)})"


class WidthFilter(AnalysisStage):
    """Fold full-width and half-width character variants to one width."""

    kind = StageKind.WIDTH

    def apply(self, tokens):
        for token in tokens:
            folded = fold_width(token.surface)
            if folded != token.surface:
                yield AnalyzedToken(surface=folded, pos=token.pos, base_form=token.base_form)
            else:
                yield token


class LowerCaseFilter(AnalysisStage):
    """Lowercase token text. Scripts without case pass through unchanged."""

    kind = StageKind.LOWERCASE

    def apply(self, tokens):
        for token in tokens:
            lowered = token.surface.lower()
            if lowered != token.surface:
                yield AnalyzedToken(surface=lowered, pos=token.pos, base_form=token.base_form)
            else:
                yield token


class StopwordFilter(AnalysisStage):
    """Drop tokens whose surface text is in a stopword list."""

    kind = StageKind.STOPWORD

    def __init__(self, words: Iterable[str], resource: str = ""):
        self.words = frozenset(words)
        self.resource = resource

    def apply(self, tokens):
        for token in tokens:
            if token.surface not in self.words:
                yield token

    def __repr__(self) -> str:
        return f"StopwordFilter(resource={self.resource!r}, words={len(self.words)})"
