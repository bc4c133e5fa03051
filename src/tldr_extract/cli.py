from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box
from .config import ExtractionConfig, write_default_config
from .keywords import rank_stems, select_keywords
from .model import SentenceModel, load_sentence_model
from .models import KeywordDTO, KeywordReport, SentenceReport
from .nlp import SnowballStemmer, make_tokenizer
from .parser import html_to_text
from .sentences import SentenceExtractor

app = typer.Typer(help="Keyword and sentence extraction for extractive summaries")
console = Console()
err_console = Console(stderr=True)

@app.callback()
def _setup(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

def _load_config(config_path: Path) -> ExtractionConfig:
    if config_path.exists():
        return ExtractionConfig.load(config_path)
    return ExtractionConfig()

def _read_input(path: Path, html: bool, cfg: Optional[ExtractionConfig] = None) -> str:
    text = path.read_text(encoding="utf-8", errors="replace")
    if html:
        text = html_to_text(text)
    return cfg.prepare(text) if cfg else text

def _tokenizer(cfg: ExtractionConfig):
    try:
        return make_tokenizer(cfg.tokenizer)
    except ValueError as ex:
        raise typer.BadParameter(str(ex), param_hint="tokenizer")

@app.command()
def init(
    config_path: Path = typer.Option("tldr.json", help="Where to create config"),
):
    """Create a default config file."""
    write_default_config(config_path)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def keywords(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text or HTML file"),
    config_path: Path = typer.Option("tldr.json", help="Config file (defaults used if missing)"),
    top: Optional[int] = typer.Option(None, help="Override max_keywords"),
    min_occurrences: Optional[int] = typer.Option(None, help="Override min_occurrences"),
    html: bool = typer.Option(False, help="Treat input as HTML"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
):
    """Most frequent keyword stems."""
    cfg = _load_config(config_path)
    if top is not None:
        cfg.max_keywords = top
    if min_occurrences is not None:
        cfg.min_occurrences = min_occurrences
    text = _read_input(source, html, cfg)

    try:
        stop_words = cfg.stop_words()
    except ValueError as ex:
        raise typer.BadParameter(str(ex), param_hint="stop_words_source")
    ranked = rank_stems(text, _tokenizer(cfg), stop_words, SnowballStemmer(cfg.language))
    chosen = select_keywords(ranked, cfg.max_keywords, cfg.min_occurrences)
    rows = []
    for w in ranked:
        # case variants of one stem are ranked separately; show the best one
        if w.stem in chosen:
            rows.append(KeywordDTO(keyword=w.stem, frequency=w.frequency))
            chosen.discard(w.stem)

    if as_json:
        report = KeywordReport(
            source=str(source), max_count=cfg.max_keywords,
            min_occurrences=cfg.min_occurrences, keywords=rows,
        )
        typer.echo(report.model_dump_json(indent=2))
        return
    if not rows:
        console.print("[yellow]No keywords[/yellow]")
        return
    table = Table(title="Keywords", box=box.SIMPLE)
    table.add_column("Keyword", style="bold")
    table.add_column("Count", justify="right")
    for r in rows:
        table.add_row(r.keyword, str(r.frequency))
    console.print(table)

@app.command()
def sentences(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text or HTML file"),
    config_path: Path = typer.Option("tldr.json", help="Config file (defaults used if missing)"),
    min_words: Optional[int] = typer.Option(None, help="Override min_words_in_sentence"),
    html: bool = typer.Option(False, help="Treat input as HTML"),
    no_model: bool = typer.Option(False, "--no-model", help="Skip the sentence model, split by regex"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
):
    """Candidate sentences with a minimum number of words."""
    cfg = _load_config(config_path)
    if min_words is not None:
        cfg.min_words_in_sentence = min_words
    text = _read_input(source, html, cfg)

    if cfg.use_sentence_model and not no_model:
        model = load_sentence_model(cfg.language)
    else:
        model = SentenceModel.absent()
    try:
        extractor = SentenceExtractor(model, _tokenizer(cfg), cfg.sentence_regex)
    except ValueError as ex:
        raise typer.BadParameter(str(ex), param_hint="sentence_regex")
    found = sorted(extractor.extract(text, cfg.min_words_in_sentence))

    if as_json:
        report = SentenceReport(source=str(source), min_words=cfg.min_words_in_sentence, sentences=found)
        typer.echo(report.model_dump_json(indent=2))
        return
    if not found:
        console.print("[yellow]No sentences[/yellow]")
        return
    for s in found:
        console.print(f"- {s}", highlight=False, markup=False, soft_wrap=True)

@app.command()
def normalize(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text or HTML file"),
    html: bool = typer.Option(False, help="Treat input as HTML"),
    fold: bool = typer.Option(True, help="Fold typographic punctuation"),
    dots: bool = typer.Option(True, help="Correct abbreviation dots"),
):
    """Print the normalised text."""
    cfg = ExtractionConfig(fold_punctuation=fold, correct_dots=dots)
    console.print(_read_input(source, html, cfg), highlight=False, markup=False, soft_wrap=True)

def main():
    app()

if __name__ == "__main__":
    main()
