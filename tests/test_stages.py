"""Tests for the filter stages."""

from ftparser.engines.base import JAPANESE_STOP_TAGS, KOREAN_STOP_TAGS, matches_tag
from ftparser.models import AnalyzedToken
from ftparser.stages import (
    BaseFormFilter,
    LowerCaseFilter,
    PartOfSpeechStopFilter,
    StopwordFilter,
    WidthFilter,
    fold_width,
)


def surfaces(tokens):
    return [t.surface for t in tokens]


def tok(surface, pos=(), base_form=None):
    return AnalyzedToken(surface=surface, pos=pos, base_form=base_form)


def test_fold_width_fullwidth_ascii():
    assert fold_width("ＯｃｅａｎＢａｓｅ１２３") == "OceanBase123"


def test_fold_width_halfwidth_katakana():
    assert fold_width("ｺﾝﾋﾟｭｰﾀｰ") == "コンピューター"
    assert fold_width("ｶﾞｷﾞ") == "ガギ"


def test_fold_width_leaves_other_text():
    assert fold_width("東京タワー") == "東京タワー"
    assert fold_width("สวัสดี") == "สวัสดี"


def test_matches_tag_hierarchy():
    assert matches_tag("助詞", JAPANESE_STOP_TAGS)
    assert matches_tag("助詞-係助詞", JAPANESE_STOP_TAGS)
    assert matches_tag("感動詞-フィラー", JAPANESE_STOP_TAGS)
    assert not matches_tag("感動詞", JAPANESE_STOP_TAGS)
    assert not matches_tag("名詞-普通名詞-一般", JAPANESE_STOP_TAGS)
    assert not matches_tag("", JAPANESE_STOP_TAGS)


def test_matches_tag_korean_suffixed_tags():
    assert matches_tag("JKS", KOREAN_STOP_TAGS)
    assert matches_tag("XSA-I", KOREAN_STOP_TAGS)
    assert not matches_tag("VV-R", KOREAN_STOP_TAGS)
    assert not matches_tag("NNG", KOREAN_STOP_TAGS)


def test_pos_stop_filter_drops_particles():
    stage = PartOfSpeechStopFilter(JAPANESE_STOP_TAGS)
    tokens = [
        tok("私", ("代名詞",)),
        tok("は", ("助詞", "係助詞")),
        tok("学生", ("名詞", "普通名詞")),
        tok("です", ("助動詞",)),
    ]

    assert surfaces(stage.apply(iter(tokens))) == ["私", "学生"]


def test_pos_stop_filter_keeps_untagged():
    stage = PartOfSpeechStopFilter(JAPANESE_STOP_TAGS)

    assert surfaces(stage.apply(iter([tok("abc")]))) == ["abc"]


def test_base_form_filter():
    stage = BaseFormFilter()
    tokens = [tok("読み", base_form="読む"), tok("本", base_form="本"), tok("x", base_form="*"), tok("y")]

    assert surfaces(stage.apply(iter(tokens))) == ["読む", "本", "x", "y"]


def test_width_filter_keeps_tags():
    stage = WidthFilter()
    out = list(stage.apply(iter([tok("ＡＢＣ", ("名詞",))])))

    assert out == [tok("ABC", ("名詞",))]


def test_lowercase_filter():
    stage = LowerCaseFilter()
    tokens = [tok("OceanBase"), tok("データベース"), tok("ภาษาไทย"), tok("한국어")]

    assert surfaces(stage.apply(iter(tokens))) == ["oceanbase", "データベース", "ภาษาไทย", "한국어"]


def test_stopword_filter_matches_surface():
    stage = StopwordFilter({"the", "และ"}, resource="test")
    tokens = [tok("the"), tok("cat"), tok("และ"), tok("The")]

    assert surfaces(stage.apply(iter(tokens))) == ["cat", "The"]


def test_stage_is_reusable_across_streams():
    """A stage holds no per-call state."""
    stage = LowerCaseFilter()
    first = stage.apply(iter([tok("A"), tok("B")]))
    second = stage.apply(iter([tok("C")]))

    assert next(first).surface == "a"
    assert surfaces(second) == ["c"]
    assert surfaces(first) == ["b"]
