"""Scoped token stream over one input text."""

import logging
from typing import Optional, Sequence

from .engines.base import SegmentationEngine
from .exceptions import StreamStateError
from .models import AnalyzedToken
from .stages import AnalysisStage

logger = logging.getLogger(__name__)


class TokenStream:
    """One pass of a pipeline's stage chain over one text.

    The stream is driven as reset -> increment_token until None -> end, and
    released with close. Use it as a context manager so the release also
    happens when the analyzer raises mid-stream::

        with pipeline.open_stream(text) as stream:
            stream.reset()
            token = stream.increment_token()
            while token is not None:
                ...
                token = stream.increment_token()
            stream.end()
    """

    def __init__(self, engine: SegmentationEngine, filters: Sequence[AnalysisStage], text: str):
        self._engine = engine
        self._filters = filters
        self._text = text
        self._chain = []  # engine iterator first, outermost filter last
        self._tokens = None
        self._ended = False
        self._closed = False

    def reset(self) -> None:
        """Prepare the chain for consumption from the start of the text."""
        if self._closed:
            raise StreamStateError("reset() called on a closed stream")
        self._release()
        tokens = self._engine.analyze(self._text)
        self._chain = [tokens]
        for stage in self._filters:
            tokens = stage.apply(tokens)
            self._chain.append(tokens)
        self._tokens = tokens
        self._ended = False

    def increment_token(self) -> Optional[AnalyzedToken]:
        """Pull the next token.

        Returns:
            The next token, or None once the stream is exhausted
        """
        if self._tokens is None:
            raise StreamStateError("increment_token() called before reset()")
        return next(self._tokens, None)

    def end(self) -> None:
        """Mark the end of consumption."""
        if self._tokens is None:
            raise StreamStateError("end() called before reset()")
        self._ended = True

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the underlying analyzer iterators. Safe to call twice."""
        if self._closed:
            return
        self._release()
        self._closed = True

    def _release(self) -> None:
        chain, self._chain = self._chain, []
        self._tokens = None
        for tokens in reversed(chain):
            close = getattr(tokens, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> "TokenStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
