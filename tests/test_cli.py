"""CLI smoke tests; no nltk data is needed since the sentence model is skipped."""

import json

import pytest
from typer.testing import CliRunner

from tldr_extract.cli import app

runner = CliRunner()


@pytest.fixture
def missing_cfg(tmp_path):
    return str(tmp_path / "missing.json")


def test_init(tmp_path):
    path = tmp_path / "tldr.json"
    result = runner.invoke(app, ["init", "--config-path", str(path)])
    assert result.exit_code == 0
    assert path.exists()
    again = runner.invoke(app, ["init", "--config-path", str(path)])
    assert again.exit_code != 0


def test_keywords_json(tmp_path, missing_cfg):
    src = tmp_path / "in.txt"
    src.write_text("The market opened early. Markets rallied as the market closed.", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", missing_cfg, "--json"])
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["keywords"] == [{"keyword": "market", "frequency": 3}]
    assert report["min_occurrences"] == 2


def test_keywords_table(tmp_path, missing_cfg):
    src = tmp_path / "in.txt"
    src.write_text("market market market", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", missing_cfg])
    assert result.exit_code == 0, result.output
    assert "market" in result.stdout


def test_keywords_none(tmp_path, missing_cfg):
    src = tmp_path / "in.txt"
    src.write_text("tiny text", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", missing_cfg])
    assert result.exit_code == 0
    assert "No keywords" in result.stdout


def test_sentences_regex_json(tmp_path, missing_cfg):
    src = tmp_path / "in.txt"
    src.write_text("Short one. This sentence has more than five words in it.", encoding="utf-8")
    result = runner.invoke(
        app, ["sentences", str(src), "--config-path", missing_cfg, "--no-model", "--json", "--min-words", "5"]
    )
    assert result.exit_code == 0, result.output
    report = json.loads(result.stdout)
    assert report["sentences"] == ["This sentence has more than five words in it."]


def test_sentences_dot_correction(tmp_path, missing_cfg):
    src = tmp_path / "in.txt"
    src.write_text("The U.S. team won the final match again.", encoding="utf-8")
    result = runner.invoke(app, ["sentences", str(src), "--config-path", missing_cfg, "--no-model", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["sentences"] == ["The US team won the final match again."]


def test_bad_tokenizer(tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"tokenizer": "bogus"}')
    src = tmp_path / "in.txt"
    src.write_text("whatever", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", str(cfg)])
    assert result.exit_code == 2


def test_normalize(tmp_path):
    src = tmp_path / "in.html"
    src.write_text("<p>Mr. Smith&#8217;s &#8220;tour&#8221;</p>", encoding="utf-8")
    result = runner.invoke(app, ["normalize", str(src), "--html"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Mr Smith's \"tour\""


def test_bad_stop_words_source(tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"stop_words_source": "bogus"}')
    src = tmp_path / "in.txt"
    src.write_text("market market", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", str(cfg)])
    assert result.exit_code == 2


def test_keywords_html(tmp_path, missing_cfg):
    src = tmp_path / "in.html"
    src.write_text("<p>The market opened.</p><script>market market</script><p>Markets closed.</p>", encoding="utf-8")
    result = runner.invoke(app, ["keywords", str(src), "--config-path", missing_cfg, "--html", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["keywords"] == [{"keyword": "market", "frequency": 2}]
