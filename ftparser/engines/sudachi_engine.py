"""Sudachi-based segmentation engine for Japanese."""

import logging
import re
import threading
from typing import Iterator

from ..models import AnalyzedToken, Language
from .base import JAPANESE_STOP_TAGS, SegmentationEngine

logger = logging.getLogger(__name__)

# Largest input SudachiPy accepts in one tokenize() call, in UTF-8 bytes
MAX_INPUT_BYTES = 49149

# Zero-width positions just after a line break or a full stop
_CHUNK_BREAK = re.compile(r"(?<=[\n。])")


def _hard_split(text: str, max_bytes: int) -> Iterator[str]:
    """Cut text into pieces of at most max_bytes, on character boundaries."""
    while text:
        head = text.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")
        yield head
        text = text[len(head):]


def chunk_text(text: str, max_bytes: int = MAX_INPUT_BYTES) -> Iterator[str]:
    """Split text into chunks the tokenizer accepts, preserving order.

    Chunks end after a newline or ``。`` where possible. A single sentence
    longer than max_bytes is cut on a character boundary.

    Args:
        text: Input text
        max_bytes: Upper bound of each chunk in UTF-8 bytes

    Yields:
        Chunks whose concatenation is text
    """
    if len(text.encode("utf-8")) <= max_bytes:
        yield text
        return

    parts, size = [], 0
    for piece in _CHUNK_BREAK.split(text):
        if not piece:
            continue
        piece_size = len(piece.encode("utf-8"))
        if parts and size + piece_size > max_bytes:
            yield "".join(parts)
            parts, size = [], 0
        if piece_size > max_bytes:
            yield from _hard_split(piece, max_bytes)
            continue
        parts.append(piece)
        size += piece_size
    if parts:
        yield "".join(parts)


def create_tokenizer(dictionary, mode):
    """Create a tokenizer from a loaded dictionary.

    SudachiPy 0.7 renamed ``Dictionary.create`` to ``Dictionary.tokenizer``.
    """
    factory = getattr(dictionary, "tokenizer", None)
    if factory is None:
        factory = dictionary.create
    return factory(mode=mode)


class SudachiSegmenter(SegmentationEngine):
    """Japanese morphological segmentation using SudachiPy.

    The dictionary is loaded once and shared. Sudachi tokenizer objects are not
    thread-safe, so each thread lazily creates its own from the shared dictionary.
    Texts longer than the tokenizer's input limit are analyzed chunk by chunk.
    """

    language = Language.JAPANESE
    stop_tags = JAPANESE_STOP_TAGS

    def __init__(self, split_mode: str = "C", dictionary: str = "core"):
        """Initialize Sudachi segmenter.

        Args:
            split_mode: Sudachi split mode, A (shortest) to C (longest units)
            dictionary: sudachidict edition to load
        """
        logger.info(f"Initializing Sudachi engine (dict={dictionary}, mode={split_mode})...")
        from sudachipy import Dictionary, SplitMode

        self.split_mode = split_mode
        self.dictionary_name = dictionary
        self._mode = getattr(SplitMode, split_mode)
        self._dictionary = Dictionary(dict=dictionary)
        self._local = threading.local()

    def _tokenizer(self):
        tokenizer = getattr(self._local, "tokenizer", None)
        if tokenizer is None:
            tokenizer = create_tokenizer(self._dictionary, self._mode)
            self._local.tokenizer = tokenizer
        return tokenizer

    def analyze(self, text: str):
        tokenizer = self._tokenizer()
        for chunk in chunk_text(text):
            for morpheme in tokenizer.tokenize(chunk):
                pos = tuple(p for p in morpheme.part_of_speech()[:4] if p != "*")
                yield AnalyzedToken(
                    surface=morpheme.surface(),
                    pos=pos,
                    base_form=morpheme.dictionary_form(),
                )

    def close(self) -> None:
        self._local = threading.local()

    def __repr__(self) -> str:
        return f"SudachiSegmenter(split_mode={self.split_mode!r}, dictionary={self.dictionary_name!r})"
