"""End-to-end tests against the real analyzers, skipped when not installed."""

import re

import pytest

from ftparser.config import Config
from ftparser.models import Language, SegmentStatus
from ftparser.pipeline import build_pipeline

THAI_CHARS = re.compile(r"[฀-๿]")
ASCII_CHARS = re.compile(r"[A-Za-z0-9]")


@pytest.fixture(scope="module")
def japanese_pipeline():
    pytest.importorskip("sudachipy")
    pytest.importorskip("sudachidict_core")
    pipeline = build_pipeline(Language.JAPANESE, Config())
    yield pipeline
    pipeline.close()


@pytest.fixture(scope="module")
def korean_pipeline():
    pytest.importorskip("kiwipiepy")
    pipeline = build_pipeline(Language.KOREAN, Config())
    yield pipeline
    pipeline.close()


@pytest.fixture(scope="module")
def thai_pipeline():
    pytest.importorskip("pythainlp")
    pipeline = build_pipeline(Language.THAI, Config())
    yield pipeline
    pipeline.close()


class TestJapanese:
    """Tests for the Sudachi pipeline."""

    def test_particles_and_auxiliaries_dropped(self, japanese_pipeline):
        result = japanese_pipeline.run("私は学生です")

        assert result.status is SegmentStatus.OK
        assert "私" in result.tokens
        assert "学生" in result.tokens
        assert "は" not in result.tokens
        assert "です" not in result.tokens

    def test_full_width_latin_folded(self, japanese_pipeline):
        tokens = japanese_pipeline.run("ＯｃｅａｎＢａｓｅを使う").tokens

        assert "oceanbase" in tokens

    def test_deterministic(self, japanese_pipeline):
        text = "東京都に住んでいます。"

        assert japanese_pipeline.run(text).tokens == japanese_pipeline.run(text).tokens

    def test_text_over_tokenizer_limit(self, japanese_pipeline):
        sentence = "私は学生です。"
        single = japanese_pipeline.run(sentence).tokens

        result = japanese_pipeline.run(sentence * 3000)

        assert len((sentence * 3000).encode("utf-8")) > 49149
        assert result.status is SegmentStatus.OK
        assert len(result.tokens) == 3000 * len(single)


class TestKorean:
    """Tests for the Kiwi pipeline."""

    def test_latin_lowercased(self, korean_pipeline):
        result = korean_pipeline.run("OceanBase 검색")

        assert result.status is SegmentStatus.OK
        assert "oceanbase" in result.tokens
        assert "검색" in result.tokens

    def test_punctuation_discarded(self, korean_pipeline):
        tokens = korean_pipeline.run("안녕하세요. 반갑습니다!").tokens

        assert tokens
        assert "." not in tokens
        assert "!" not in tokens


class TestThai:
    """Tests for the PyThaiNLP pipeline."""

    def test_no_token_spans_scripts(self, thai_pipeline):
        tokens = thai_pipeline.run("Hello สวัสดี world").tokens

        assert "Hello" in tokens
        assert "world" in tokens
        for token in tokens:
            assert not (THAI_CHARS.search(token) and ASCII_CHARS.search(token))

    def test_unspaced_thai_split(self, thai_pipeline):
        tokens = thai_pipeline.run("ฐานข้อมูลภาษาไทย").tokens

        assert len(tokens) > 1
        assert "".join(tokens) == "ฐานข้อมูลภาษาไทย"
