"""Tests for the command-line interface."""

import pytest

from ftparser import cli
from ftparser.models import Language


@pytest.fixture
def fake_registry(monkeypatch, registry):
    """Route CLI commands to the fake-engine registry."""
    monkeypatch.setattr(cli, "configure", lambda config: registry)
    return registry


def test_profiles_command(capsys):
    assert cli.main(["profiles"]) == 0

    out = capsys.readouterr().out
    assert "* ja/database" in out
    assert "  ja/complete" in out
    assert "* th/minimal" in out
    assert "tokenizer -> pos_stop -> width -> lowercase" in out


def test_profiles_command_single_language(capsys):
    assert cli.main(["profiles", "--language", "ko"]) == 0

    out = capsys.readouterr().out
    assert "ko/pos_stop" in out
    assert "ja/" not in out


def test_no_command(capsys):
    assert cli.main([]) == 1


def test_segment_command(fake_registry, capsys):
    assert cli.main(["segment", "-l", "ja", "私 は 学生 です", "本 を 読み ました"]) == 0

    assert capsys.readouterr().out.splitlines() == ["私,学生", "本,読み"]


def test_batch_command(tmp_path, fake_registry, capsys):
    input_path = tmp_path / "input.txt"
    input_path.write_text("안녕 세계\n", encoding="utf-8")

    code = cli.main([
        "batch", "-l", "ko", str(input_path),
        "--results-dir", str(tmp_path / "out"),
        "--no-progress",
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "Total lines processed: 1" in out
    outputs = list((tmp_path / "out").glob("ko_*.txt"))
    assert len(outputs) == 1
    assert outputs[0].read_text(encoding="utf-8") == "안녕,세계\n"


def test_batch_missing_input(tmp_path, fake_registry, capsys):
    code = cli.main(["batch", "-l", "th", str(tmp_path / "missing.txt"), "--no-progress"])

    assert code == 1
    assert "failed" in capsys.readouterr().err


def test_unknown_profile_option(capsys):
    assert cli.main(["segment", "-l", "th", "--profile", "complete", "ข้อความ"]) == 1
    assert "complete" in capsys.readouterr().err


class TestBuildConfig:
    """Tests for build_config."""

    def test_profile_override(self):
        args = cli.build_parser().parse_args(["segment", "-l", "ja", "--profile", "complete", "x"])

        config = cli.build_config(args)

        assert config.profile_name(Language.JAPANESE) == "complete"
        assert config.profile_name(Language.KOREAN) == "database"

    def test_config_file_and_batch_options(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("thai:\n  profile: analyzer\n", encoding="utf-8")
        args = cli.build_parser().parse_args([
            "batch", "-l", "th", "in.txt",
            "--config", str(config_path),
            "--results-dir", str(tmp_path / "th_results"),
            "--no-progress",
        ])

        config = cli.build_config(args)

        assert config.profile_name("th") == "analyzer"
        assert config.batch.results_dir == tmp_path / "th_results"
        assert config.batch.progress is False
