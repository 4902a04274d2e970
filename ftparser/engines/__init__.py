"""Segmentation engines."""

from .base import SegmentationEngine
from .kiwi_engine import KiwiSegmenter
from .sudachi_engine import SudachiSegmenter
from .thai_engine import ThaiSegmenter

__all__ = ["SegmentationEngine", "KiwiSegmenter", "SudachiSegmenter", "ThaiSegmenter"]
