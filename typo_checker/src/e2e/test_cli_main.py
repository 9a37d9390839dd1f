import json
from pathlib import Path
import pytest
from typochecker.__main__ import main

def _seed(tmp: Path) -> tuple[str, str, str]:
    words = tmp / "words.txt"
    words.write_text("hello\nworld\n", encoding="utf-8")
    keywords = tmp / "keywords.txt"
    keywords.write_text("flask\n", encoding="utf-8")
    target = tmp / "doc.txt"
    target.write_text("helloo world\nflaskk app\n", encoding="utf-8")
    return str(words), str(keywords), str(target)

@pytest.mark.e2e
def test_cli_prints_report(tmp_path: Path, capsys):
    words, keywords, target = _seed(tmp_path)
    assert main(["-d", words, "-k", keywords, target]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "0: helloo is possibly typo. Did you mean: hello,hellos"
    assert out[1].startswith("1: flaskk is possibly typo. Did you mean: flask")

@pytest.mark.e2e
def test_cli_without_keywords_ignores_unrelated_word(tmp_path: Path, capsys):
    words, _, target = _seed(tmp_path)
    assert main(["-d", words, target]) == 0
    out = capsys.readouterr().out
    assert "flaskk" not in out

@pytest.mark.e2e
def test_cli_json_and_benchmark(tmp_path: Path, capsys):
    words, keywords, target = _seed(tmp_path)
    assert main(["-d", words, "-k", keywords, "--json", "--benchmark", target]) == 0
    captured = capsys.readouterr()
    rows = json.loads(captured.out)
    assert [r["word"] for r in rows] == ["helloo", "flaskk"]
    assert "[benchmark]" in captured.err

@pytest.mark.e2e
def test_cli_missing_dictionary_exits_non_zero(tmp_path: Path, capsys):
    _, _, target = _seed(tmp_path)
    assert main(["-d", str(tmp_path / "nope.txt"), target]) == 1
    assert "nope.txt" in capsys.readouterr().err

@pytest.mark.e2e
def test_cli_missing_target_exits_non_zero(tmp_path: Path, capsys):
    words, _, _ = _seed(tmp_path)
    assert main(["-d", words, str(tmp_path / "missing.txt")]) == 1

def test_cli_usage_errors():
    with pytest.raises(SystemExit) as ei:
        main([])
    assert ei.value.code == 2
    with pytest.raises(SystemExit):
        main(["--distance", "0", "doc.txt"])
