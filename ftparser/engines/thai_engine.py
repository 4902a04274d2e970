"""PyThaiNLP-based segmentation engine for Thai."""

import logging

from ..models import AnalyzedToken, Language
from .base import SegmentationEngine

logger = logging.getLogger(__name__)

# Used to load the engine's dictionary at construction rather than on first call
WARMUP_TEXT = "ทดสอบ"


class ThaiSegmenter(SegmentationEngine):
    """Thai word segmentation using PyThaiNLP.

    Latin and digit runs are never merged with Thai runs, so no token spans an
    ASCII/Thai boundary.
    """

    language = Language.THAI

    def __init__(self, engine: str = "newmm"):
        """Initialize Thai segmenter.

        Args:
            engine: PyThaiNLP word_tokenize engine name
        """
        logger.info(f"Initializing PyThaiNLP engine ({engine})...")
        from pythainlp.tokenize import word_tokenize

        self.engine = engine
        self._word_tokenize = word_tokenize
        self._word_tokenize(WARMUP_TEXT, engine=engine)

    def analyze(self, text: str):
        for word in self._word_tokenize(text, engine=self.engine, keep_whitespace=False):
            yield AnalyzedToken(surface=word)

    def __repr__(self) -> str:
        return f"ThaiSegmenter(engine={self.engine!r})"
