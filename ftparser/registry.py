"""Process-wide registry of constructed pipelines."""

import logging
import threading
from typing import Callable, Optional

from .config import Config
from .exceptions import PipelineUnavailableError
from .models import Language
from .pipeline import Pipeline, build_pipeline

logger = logging.getLogger(__name__)

PipelineBuilder = Callable[[Language, Config], Pipeline]


class PipelineRegistry:
    """Holds at most one live pipeline per language.

    ``get_pipeline`` builds a language's pipeline on first use with
    double-checked locking: an unlocked lookup serves the steady state, and a
    miss takes that language's lock, looks again and builds only if the slot is
    still empty. Each language has its own lock, so a slow or failing build for
    one language never blocks another.

    A failed build leaves the slot empty. Callers that were waiting on the
    failed attempt get ``PipelineUnavailableError``; the next call after that
    tries the build again.
    """

    def __init__(self, config: Optional[Config] = None, builder: PipelineBuilder = build_pipeline):
        """Initialize the registry.

        Args:
            config: Configuration passed to the builder
            builder: Callable building a pipeline for a language
        """
        self.config = config or Config()
        self._builder = builder
        self._pipelines: dict[Language, Pipeline] = {}
        self._failures: dict[Language, BaseException] = {}
        self._locks = {language: threading.Lock() for language in Language}

    def get_pipeline(self, language: Language | str) -> Pipeline:
        """Return the language's pipeline, building it on first use.

        Args:
            language: Language or language code

        Returns:
            The shared Pipeline instance

        Raises:
            PipelineUnavailableError: If the build attempt this call took part in failed
        """
        language = Language.parse(language)
        pipeline = self._pipelines.get(language)
        if pipeline is not None:
            return pipeline

        failure_seen = self._failures.get(language)
        with self._locks[language]:
            pipeline = self._pipelines.get(language)
            if pipeline is not None:
                return pipeline

            failure = self._failures.get(language)
            if failure is not None and failure is not failure_seen:
                # The attempt this caller waited on failed; leave the retry to a later call
                raise PipelineUnavailableError(language, failure)

            try:
                pipeline = self._builder(language, self.config)
            except Exception as e:
                logger.error(f"Failed to build {language.name.lower()} pipeline: {e}")
                self._failures[language] = e
                raise PipelineUnavailableError(language, e) from e

            self._failures.pop(language, None)
            self._pipelines[language] = pipeline
            return pipeline

    def is_ready(self, language: Language | str) -> bool:
        """Check whether a language's pipeline is built, without building it."""
        return Language.parse(language) in self._pipelines

    def last_failure(self, language: Language | str) -> Optional[BaseException]:
        """The error of the most recent failed build, if the slot is still empty."""
        return self._failures.get(Language.parse(language))

    def status(self) -> dict[str, str]:
        """Readiness of every language: ``ready``, ``failed`` or ``uninitialized``."""
        states = {}
        for language in Language:
            if language in self._pipelines:
                states[language.code] = "ready"
            elif language in self._failures:
                states[language.code] = "failed"
            else:
                states[language.code] = "uninitialized"
        return states

    def release(self) -> None:
        """Drop every pipeline and release its analyzer resources."""
        for language in Language:
            with self._locks[language]:
                pipeline = self._pipelines.pop(language, None)
                self._failures.pop(language, None)
            if pipeline is not None:
                pipeline.close()
                logger.info(f"Released {language.name.lower()} pipeline")
