"""Shared fixtures: a whitespace engine standing in for the real analyzers."""

import threading

import pytest

from ftparser.config import Config
from ftparser.engines.base import JAPANESE_STOP_TAGS, KOREAN_STOP_TAGS, SegmentationEngine
from ftparser.models import AnalyzedToken, Language
from ftparser.pipeline import assemble_pipeline
from ftparser.profiles import get_profile
from ftparser.registry import PipelineRegistry


class FakeEngine(SegmentationEngine):
    """Splits on whitespace and looks tags and base forms up in dictionaries.

    A token equal to ``fail_on`` raises OSError when it is reached, after the
    tokens before it have been yielded.
    """

    def __init__(self, language=Language.JAPANESE, tags=None, base_forms=None, fail_on=None):
        self.language = language
        self.stop_tags = {
            Language.JAPANESE: JAPANESE_STOP_TAGS,
            Language.KOREAN: KOREAN_STOP_TAGS,
        }.get(language, frozenset())
        self.tags = tags or {}
        self.base_forms = base_forms or {}
        self.fail_on = fail_on
        self.opened = 0
        self.released = 0
        self.closed = False
        self._lock = threading.Lock()

    def analyze(self, text):
        with self._lock:
            self.opened += 1
        try:
            for word in text.split(" "):
                if self.fail_on is not None and word == self.fail_on:
                    raise OSError(f"analyzer failed on {word!r}")
                yield AnalyzedToken(
                    surface=word,
                    pos=self.tags.get(word, ()),
                    base_form=self.base_forms.get(word),
                )
        finally:
            with self._lock:
                self.released += 1

    def close(self):
        self.closed = True


JAPANESE_TAGS = {
    "私": ("代名詞",),
    "は": ("助詞", "係助詞"),
    "学生": ("名詞", "普通名詞", "一般"),
    "です": ("助動詞",),
    "本": ("名詞", "普通名詞", "一般"),
    "を": ("助詞", "格助詞"),
    "読み": ("動詞", "一般"),
    "ました": ("助動詞",),
    "。": ("補助記号", "句点"),
}

JAPANESE_BASE_FORMS = {"読み": "読む", "ました": "ます"}


def fake_builder(**engine_kwargs):
    """Registry builder assembling real profiles around FakeEngine instances."""
    def build(language, config):
        profile = get_profile(language, config.profile_name(language))
        kwargs = dict(engine_kwargs)
        if language is Language.JAPANESE:
            kwargs.setdefault("tags", JAPANESE_TAGS)
            kwargs.setdefault("base_forms", JAPANESE_BASE_FORMS)
        return assemble_pipeline(profile, FakeEngine(language, **kwargs), config)
    return build


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def registry(config):
    """Registry whose pipelines use the fake engine."""
    reg = PipelineRegistry(config, builder=fake_builder())
    yield reg
    reg.release()


@pytest.fixture
def japanese_engine():
    return FakeEngine(Language.JAPANESE, tags=JAPANESE_TAGS, base_forms=JAPANESE_BASE_FORMS)


@pytest.fixture
def make_engine():
    """Factory for FakeEngine instances."""
    return FakeEngine


@pytest.fixture
def make_builder():
    """Factory for registry builders backed by FakeEngine."""
    return fake_builder
