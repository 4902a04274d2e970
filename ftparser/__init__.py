"""ftparser - Japanese, Korean and Thai segmentation for full-text indexing."""

__version__ = "0.1.0"

from .api import configure, get_registry, segment, segment_result
from .batch import BatchSegmenter
from .config import Config, load_config
from .models import Language, SegmentResult, SegmentStatus, TokenInfo
from .pipeline import Pipeline, build_pipeline
from .registry import PipelineRegistry
from .scanner import FullTextScanner, parser_descriptors

__all__ = [
    "configure",
    "get_registry",
    "segment",
    "segment_result",
    "BatchSegmenter",
    "Config",
    "load_config",
    "Language",
    "SegmentResult",
    "SegmentStatus",
    "TokenInfo",
    "Pipeline",
    "build_pipeline",
    "PipelineRegistry",
    "FullTextScanner",
    "parser_descriptors",
]
