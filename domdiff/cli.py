"""CLI entry point for domdiff."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from domdiff.config import DEFAULT_CONFIG_TEMPLATE, DomDiffConfig, load_config
from domdiff.corpus import generate_document
from domdiff.differ import ChangeType, LineDiffEntry
from domdiff.hashing import HashKind
from domdiff.pipeline import compare as run_compare
from domdiff.tokenizer import tokenize

app = typer.Typer(
    name="domdiff",
    help="Measure how much a markup document changed between two versions.",
)

config_app = typer.Typer(help="Manage domdiff configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: DomDiffConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> DomDiffConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to domdiff.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_document(path: Path) -> str:
    """Read a markup file, exiting with a message when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        rprint(f"[red]Error:[/red] cannot read {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(1)


def _display_line_diffs(entries: tuple[LineDiffEntry, ...]) -> None:
    table = Table(title=f"Line changes ({len(entries)})")
    table.add_column("Lines", style="cyan")
    table.add_column("Change")
    table.add_column("Preview")
    for e in entries:
        style = "green" if e.change_type is ChangeType.ADDED else "red"
        table.add_row(e.line_range, f"[{style}]{e.change_type.value}[/{style}]", escape(e.content_preview))
    rprint(table)


@app.command()
def compare(
    file_a: Path = typer.Argument(..., help="Original document"),
    file_b: Path = typer.Argument(..., help="Changed document"),
    chunk_size: Annotated[
        int | None, typer.Option("--chunk-size", "-k", min=0, help="Tokens per chunk")
    ] = None,
    hash_kind: Annotated[
        HashKind | None, typer.Option("--hash", help="Digest function")
    ] = None,
    parallel: Annotated[
        bool | None, typer.Option("--parallel/--sequential", help="Hash on a worker pool")
    ] = None,
    workers: Annotated[
        int | None, typer.Option("--workers", min=1, help="Worker pool size")
    ] = None,
    lines: Annotated[bool, typer.Option("--lines/--no-lines", help="Show line changes")] = True,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full result as JSON")] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the JSON result to a file")
    ] = None,
) -> None:
    """Compare two markup documents."""
    overrides: dict = {"line_diff": lines}
    if chunk_size is not None:
        overrides["chunk_size"] = chunk_size
    if hash_kind is not None:
        overrides["hash_kind"] = hash_kind
    if parallel is not None:
        overrides["parallel"] = parallel
    if workers is not None:
        overrides["max_workers"] = workers
    cfg = _get_config().model_copy(update=overrides)

    result = run_compare(_read_document(file_a), _read_document(file_b), cfg)

    if output is not None:
        output.write_text(json.dumps(result.to_dict(), indent=2))
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    rprint(
        f"DOM diff between {escape(str(file_a))} and {escape(str(file_b))} "
        f"is {result.diff.percent_different:.2f}%"
    )
    if lines and result.line_diffs:
        _display_line_diffs(result.line_diffs)
    if output is not None:
        rprint(f"[green]Saved[/green] result to {escape(str(output))}")


@app.command()
def tokens(
    file: Path = typer.Argument(..., help="Markup document to tokenize"),
) -> None:
    """List the tokens of a document."""
    toks = tokenize(_read_document(file))
    table = Table(title=f"Tokens ({len(toks)})")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Content")
    for t in toks:
        table.add_row(str(t.line), t.kind.value, escape(t.content))
    rprint(table)


@app.command()
def corpus(
    out_dir: Path = typer.Argument(..., help="Directory to write documents into"),
    seed: Annotated[int, typer.Option("--seed", help="Corpus seed")] = 0,
    versions: Annotated[int, typer.Option("--versions", "-n", min=1, help="Number of versions")] = 2,
    sections: Annotated[int, typer.Option("--sections", min=1, help="Sections per document")] = 4,
) -> None:
    """Write seeded synthetic document versions v0.html, v1.html, ..."""
    out_dir.mkdir(parents=True, exist_ok=True)
    for v in range(versions):
        (out_dir / f"v{v}.html").write_text(generate_document(seed, v, sections))
    rprint(f"[green]Wrote[/green] {versions} document(s) to {escape(str(out_dir))}")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(mode="json"), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default domdiff.yaml in current directory."""
    target = Path("domdiff.yaml")
    if target.exists() and not force:
        rprint("[yellow]domdiff.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
