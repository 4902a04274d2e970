"""Segmentation pipeline: one engine plus the filter chain of a profile."""

import logging
from typing import Optional, Sequence

from .config import Config
from .engines import KiwiSegmenter, SegmentationEngine, SudachiSegmenter, ThaiSegmenter
from .exceptions import PipelineConstructionError
from .models import Language, Profile, SegmentResult, StageKind, StageSpec
from .profiles import get_profile
from .resources import load_stopwords
from .session import SegmentationSession
from .stages import (
    AnalysisStage,
    BaseFormFilter,
    LowerCaseFilter,
    PartOfSpeechStopFilter,
    StopwordFilter,
    WidthFilter,
)
from .stream import TokenStream

logger = logging.getLogger(__name__)


class Pipeline:
    """An immutable, ordered stage chain for one (language, profile).

    Pipelines are expensive to build and cheap to run. They are built once by
    the registry and shared read-only by every session.
    """

    def __init__(
        self,
        profile: Profile,
        engine: SegmentationEngine,
        filters: Sequence[AnalysisStage] = (),
    ):
        """Initialize a pipeline.

        Args:
            profile: Profile the chain implements
            engine: Tokenizer stage
            filters: Filter stages, in profile order
        """
        filters = tuple(filters)
        expected = [spec.kind for spec in profile.filters]
        actual = [stage.kind for stage in filters]
        if expected != actual:
            raise PipelineConstructionError(
                f"Stages {actual} do not match profile {profile.name!r} {expected}"
            )
        self._profile = profile
        self._engine = engine
        self._filters = filters

    @property
    def language(self) -> Language:
        return self._profile.language

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def engine(self) -> SegmentationEngine:
        return self._engine

    @property
    def filters(self) -> tuple[AnalysisStage, ...]:
        return self._filters

    def open_stream(self, text: str) -> TokenStream:
        """Open a scoped token stream over text."""
        return TokenStream(self._engine, self._filters, text)

    def session(self, text: str) -> SegmentationSession:
        return SegmentationSession(self, text)

    def run(self, text: Optional[str]) -> SegmentResult:
        """Segment one text.

        Args:
            text: Input text; None or blank yields EMPTY_INPUT

        Returns:
            SegmentResult
        """
        if text is None or not text.strip():
            return SegmentResult.empty_input()
        return self.session(text).run()

    def close(self) -> None:
        self._engine.close()

    def __repr__(self) -> str:
        return f"Pipeline({self.language.name}, {self._profile.name}: {self._profile.describe()})"


def create_engine(language: Language, config: Config) -> SegmentationEngine:
    """Create the tokenizer engine for a language from configuration.

    Raises:
        PipelineConstructionError: If the analyzer package is missing or fails to load
    """
    language = Language.parse(language)
    try:
        if language is Language.JAPANESE:
            return SudachiSegmenter(
                split_mode=config.japanese.split_mode,
                dictionary=config.japanese.dictionary,
            )
        if language is Language.KOREAN:
            return KiwiSegmenter(
                decompound=config.korean.decompound,
                discard_punctuation=config.korean.discard_punctuation,
            )
        return ThaiSegmenter(engine=config.thai.engine)
    except ImportError as e:
        raise PipelineConstructionError(
            f"Analyzer for {language.name.lower()} is not installed: {e}"
        ) from e
    except PipelineConstructionError:
        raise
    except Exception as e:
        raise PipelineConstructionError(
            f"Failed to initialize {language.name.lower()} analyzer: {e}"
        ) from e


def create_stage(spec: StageSpec, engine: SegmentationEngine, config: Config) -> AnalysisStage:
    """Create one filter stage for a profile entry."""
    if spec.kind is StageKind.BASE_FORM:
        return BaseFormFilter()
    if spec.kind is StageKind.POS_STOP:
        return PartOfSpeechStopFilter(engine.stop_tags)
    if spec.kind is StageKind.WIDTH:
        return WidthFilter()
    if spec.kind is StageKind.LOWERCASE:
        return LowerCaseFilter()
    if spec.kind is StageKind.STOPWORD:
        if not spec.resource:
            raise PipelineConstructionError("Stopword stage requires a resource")
        return StopwordFilter(load_stopwords(spec.resource, config.stopwords), spec.resource)
    raise PipelineConstructionError(f"Cannot create a filter for {spec.kind.value}")


def assemble_pipeline(profile: Profile, engine: SegmentationEngine, config: Optional[Config] = None) -> Pipeline:
    """Build the filter chain of a profile around an existing engine."""
    config = config or Config()
    filters = [create_stage(spec, engine, config) for spec in profile.filters]
    return Pipeline(profile, engine, filters)


def build_pipeline(language: Language, config: Optional[Config] = None) -> Pipeline:
    """Build the pipeline of a language's configured profile.

    Args:
        language: Language to build
        config: Configuration; defaults when omitted

    Returns:
        Constructed Pipeline

    Raises:
        PipelineConstructionError: If the analyzer or a stage resource is unavailable
    """
    config = config or Config()
    language = Language.parse(language)
    profile = get_profile(language, config.profile_name(language))
    logger.info(f"Building {language.name.lower()} pipeline, profile {profile.name}: {profile.describe()}")

    engine = create_engine(language, config)
    try:
        pipeline = assemble_pipeline(profile, engine, config)
    except Exception:
        engine.close()
        raise

    logger.info(f"Built {pipeline!r}")
    return pipeline
