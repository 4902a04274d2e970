"""Tests for the full-text parser scan."""

import pytest

from ftparser.exceptions import ScanStateError
from ftparser.models import Language, SegmentStatus, TokenInfo
from ftparser.scanner import AddWordFlag, FullTextScanner, parser_descriptors


def test_token_info_lengths():
    info = TokenInfo.from_word("สวัสดี")

    assert info.char_length == 6
    assert info.byte_length == 18
    assert info.frequency == 1
    assert TokenInfo.from_word("db") == TokenInfo("db", 2, 2, 1)


def test_scan_protocol(registry):
    scanner = FullTextScanner(Language.KOREAN, registry)

    assert scanner.scan_begin("OceanBase 데이터베이스") == 2
    first = scanner.next_token()
    second = scanner.next_token()

    assert first == TokenInfo("oceanbase", 9, 9, 1)
    assert second.word == "데이터베이스"
    assert second.byte_length == 18
    assert scanner.next_token() is None
    assert scanner.next_token() is None

    scanner.scan_end()
    assert scanner.scan_begin("다음") == 1


def test_scan_state_errors(registry):
    scanner = FullTextScanner("ja", registry)

    with pytest.raises(ScanStateError):
        scanner.next_token()

    scanner.scan_begin("本")
    with pytest.raises(ScanStateError):
        scanner.scan_begin("本")


def test_scan_iteration_and_context(registry):
    with FullTextScanner("th", registry) as scanner:
        scanner.scan_begin("ฐาน ข้อมูล")
        words = [info.word for info in scanner]

    assert words == ["ฐาน", "ข้อมูล"]
    with pytest.raises(ScanStateError):
        scanner.next_token()


def test_blank_document(registry):
    scanner = FullTextScanner("ko", registry)

    assert scanner.scan_begin("   ") == 0
    assert scanner.status is SegmentStatus.EMPTY_INPUT
    assert scanner.next_token() is None


def test_descriptors():
    descriptors = {d.name: d for d in parser_descriptors()}

    assert set(descriptors) == {"japanese_ftparser", "korean_ftparser", "thai_ftparser"}
    for descriptor in descriptors.values():
        assert descriptor.add_word_flag & AddWordFlag.CASEDOWN
        assert descriptor.add_word_flag & AddWordFlag.GROUPBY_WORD
        assert not descriptor.add_word_flag & AddWordFlag.STOPWORD
        assert not descriptor.add_word_flag & AddWordFlag.MIN_MAX_WORD
    assert descriptors["thai_ftparser"].language is Language.THAI
