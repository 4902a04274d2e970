"""Per-call segmentation session."""

import logging
from typing import TYPE_CHECKING

from .models import SegmentResult

if TYPE_CHECKING:
    from .pipeline import Pipeline

logger = logging.getLogger(__name__)


class SegmentationSession:
    """Drives one text through a pipeline and collects its tokens.

    A session owns nothing but its position in the stream. Any error raised
    while pulling tokens aborts the session: partial tokens are discarded and
    the result is FAILED with no tokens. The stream is released on every path.
    """

    def __init__(self, pipeline: "Pipeline", text: str):
        """Initialize a session.

        Args:
            pipeline: Constructed pipeline to drive
            text: Non-blank input text
        """
        self.pipeline = pipeline
        self.text = text

    def run(self) -> SegmentResult:
        """Run the session.

        Returns:
            SegmentResult with the tokens in input order
        """
        tokens = []
        try:
            with self.pipeline.open_stream(self.text) as stream:
                stream.reset()
                while True:
                    token = stream.increment_token()
                    if token is None:
                        break
                    word = token.surface.strip()
                    if word:
                        tokens.append(word)
                stream.end()
        except Exception as e:
            logger.warning(
                f"{self.pipeline.language.name.lower()} segmentation failed "
                f"(length={len(self.text)}): {e}"
            )
            return SegmentResult.failed()

        logger.debug(f"{self.pipeline.language.name.lower()} segmentation: {len(tokens)} tokens")
        return SegmentResult.ok(tokens)
