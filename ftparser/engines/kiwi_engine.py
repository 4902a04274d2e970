"""Kiwi-based segmentation engine for Korean."""

import logging

from ..models import AnalyzedToken, Language
from .base import KOREAN_PUNCTUATION_TAGS, KOREAN_STOP_TAGS, SegmentationEngine

logger = logging.getLogger(__name__)


class KiwiSegmenter(SegmentationEngine):
    """Korean morphological segmentation using kiwipiepy.

    Tokens are Kiwi's normalized morpheme forms rather than slices of the
    input: "들었다" yields "듣", "었", "다". Queries go through the same
    analysis, so index and query terms agree.
    """

    language = Language.KOREAN
    stop_tags = KOREAN_STOP_TAGS

    def __init__(self, decompound: bool = True, discard_punctuation: bool = True):
        """Initialize Kiwi segmenter.

        Args:
            decompound: Split complex morphemes into their sub-words
            discard_punctuation: Drop punctuation tokens at the tokenizer
        """
        logger.info(f"Initializing Kiwi engine (decompound={decompound})...")
        from kiwipiepy import Kiwi

        self.decompound = decompound
        self.discard_punctuation = discard_punctuation
        self._kiwi = Kiwi()

    def analyze(self, text: str):
        for token in self._kiwi.tokenize(text, split_complex=self.decompound):
            if self.discard_punctuation and token.tag in KOREAN_PUNCTUATION_TAGS:
                continue
            yield AnalyzedToken(
                surface=token.form,
                pos=(token.tag,),
                base_form=token.lemma,
            )

    def __repr__(self) -> str:
        return f"KiwiSegmenter(decompound={self.decompound}, discard_punctuation={self.discard_punctuation})"
