"""Per-call entry points used by the host database's parser plugins.

Nothing here raises in steady state: blank input, analyzer failures and an
unavailable pipeline all come back as an empty token list.
"""

import logging
import threading
from typing import Optional

from .config import Config
from .exceptions import PipelineUnavailableError
from .models import Language, SegmentResult
from .registry import PipelineRegistry

logger = logging.getLogger(__name__)

_default_registry: Optional[PipelineRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> PipelineRegistry:
    """Return the process-wide registry, creating it with default config on first use."""
    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = PipelineRegistry(Config())
            registry = _default_registry
    return registry


def configure(config: Config) -> PipelineRegistry:
    """Replace the process-wide registry with one using config.

    Pipelines built by the previous registry are released.
    """
    global _default_registry
    with _default_lock:
        previous, _default_registry = _default_registry, PipelineRegistry(config)
        registry = _default_registry
    if previous is not None:
        previous.release()
    return registry


def segment_result(
    language: Language | str,
    text: Optional[str],
    registry: Optional[PipelineRegistry] = None,
) -> SegmentResult:
    """Segment text and report the outcome.

    Args:
        language: Language or language code
        text: Input text
        registry: Registry to use; the process-wide one when omitted

    Returns:
        SegmentResult; UNAVAILABLE while the language's pipeline cannot be built
    """
    language = Language.parse(language)
    if text is None or not text.strip():
        return SegmentResult.empty_input()

    registry = registry or get_registry()
    try:
        pipeline = registry.get_pipeline(language)
    except PipelineUnavailableError as e:
        logger.warning(f"{e}; returning no tokens")
        return SegmentResult.unavailable()
    return pipeline.run(text)


def segment(
    language: Language | str,
    text: Optional[str],
    registry: Optional[PipelineRegistry] = None,
) -> list[str]:
    """Segment text into index tokens.

    Args:
        language: Language or language code
        text: Input text

    Returns:
        Tokens in input order; empty for blank input, failure or unavailability
    """
    return list(segment_result(language, text, registry).tokens)
