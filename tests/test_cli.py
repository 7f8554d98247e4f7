import io
import sys

import pytest

from junjie_search.cli import main

ENGLISH_TEXT = "The quick fox jumps. A lazy dog sleeps."
CHINESE_TEXT = "我爱北京。你好世界！"


@pytest.fixture
def files(tmp_path):
    english_path = tmp_path / "test.txt"
    english_path.write_text(ENGLISH_TEXT, encoding="utf-8")
    chinese_path = tmp_path / "testChi.txt"
    chinese_path.write_text(CHINESE_TEXT, encoding="utf-8")
    return ["--english-file", str(english_path), "--chinese-file", str(chinese_path)]


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_exit_choice_returns_minus_one(monkeypatch, capsys, files):
    _feed(monkeypatch, "-1\n")
    assert main(files) == -1
    out = capsys.readouterr().out
    assert "正在进入子程序......" not in out
    assert "俊杰5.0双语搜索引擎系统" in out


def test_english_keyword_on_next_line(monkeypatch, capsys, files):
    _feed(monkeypatch, "0\nfox\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "正在进入子程序......" in out
    assert "The quick fox jumps." in out
    assert "A lazy dog sleeps." not in out


def test_english_keyword_on_same_line(monkeypatch, capsys, files):
    _feed(monkeypatch, "0 dog\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "A lazy dog sleeps." in out
    assert "The quick fox jumps." not in out


def test_english_no_match(monkeypatch, capsys, files):
    _feed(monkeypatch, "0\ncat\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "Sorry, there is no sentence matching your keyword in the text." in out


def test_chinese_discards_rest_of_choice_line(monkeypatch, capsys, files):
    _feed(monkeypatch, "1 ignored\n北京\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "我爱北京。" in out
    assert "你好世界！" not in out
    assert "查找完毕，请阅览以上数据。" in out


def test_chinese_missing_file_returns_one(monkeypatch, capsys, tmp_path):
    missing = tmp_path / "absent.txt"
    _feed(monkeypatch, "1\n北京\n")
    assert main(["--chinese-file", str(missing)]) == 1
    err = capsys.readouterr().err
    assert f"无法打开文件: {missing}" in err


def test_english_missing_file_reports_error(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "0\nfox\n")
    assert main(["--english-file", str(tmp_path / "absent.txt")]) == 0
    captured = capsys.readouterr()
    assert "Error: Could not open the file." in captured.err
    assert "Prepare time" not in captured.out


def test_unknown_choice_runs_no_engine(monkeypatch, capsys, files):
    _feed(monkeypatch, "5\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "正在进入子程序......" in out
    assert "Prepare time" not in out
    assert "矢勤矢勇，止戈长白" not in out


def test_unparsable_choice_falls_to_english_without_input(monkeypatch, capsys, files):
    _feed(monkeypatch, "abc\nfox\n")
    assert main(files) == 0
    out = capsys.readouterr().out
    assert "Welcome to the JunJie research engine 3.0(for English user)!" in out
    assert "The quick fox jumps." not in out
    assert "Sorry, there is no sentence matching your keyword in the text." in out


def test_blank_lines_before_choice_are_skipped(monkeypatch, capsys, files):
    _feed(monkeypatch, "\n\n-1\n")
    assert main(files) == -1
    assert "正在进入子程序......" not in capsys.readouterr().out