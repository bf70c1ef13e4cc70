"""Main CLI entry point for article-renderer."""

import logging
from pathlib import Path

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..core.classifier import detect_content_type
from ..core.config import BatchConfig, Config
from ..core.format_converter import process_article_content
from ..core.utils import read_file_content, write_file_content
from ..exceptions import ArticleRendererError
from ..processors import BatchConverter

app = typer.Typer(
    name="article-renderer",
    help="Convert article bodies (markdown, HTML or plain text) to styled HTML",
    rich_markup_mode="rich",
)
console = Console()


def _load_config(config_path: Path | None) -> Config:
    """Load configuration and install the Rich log handler."""
    config = Config.load_from_file(config_path)
    logging.basicConfig(
        level=config.logging.level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return config


# ============================================================================
# Content Commands
# ============================================================================

@app.command()
def detect(
    input_file: Path = typer.Argument(..., help="File holding an article body"),
    config_path: Path | None = typer.Option(None, "--config", help="Path to a YAML configuration file"),
) -> None:
    """Show the detected content type of a file."""
    try:
        _load_config(config_path)
        content = read_file_content(input_file)
        print(str(detect_content_type(content)))
    except ArticleRendererError as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def render(
    input_file: Path = typer.Argument(..., help="File holding an article body"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file"),
    breaks: bool | None = typer.Option(
        None, "--breaks/--no-breaks", help="Convert bare newlines to <br> (overrides the config file)"
    ),
    config_path: Path | None = typer.Option(None, "--config", help="Path to a YAML configuration file"),
) -> None:
    """Render an article body to HTML."""
    try:
        config = _load_config(config_path)

        if not input_file.exists():
            print(f"[red]Error: Input file not found: {input_file}[/red]")
            raise typer.Exit(1)

        options = config.render
        if breaks is not None:
            options = options.model_copy(update={"breaks": breaks})

        html = process_article_content(read_file_content(input_file), options)

        if output:
            write_file_content(output, html)
            print(f"[green]HTML saved to: {output}[/green]")
        else:
            # Plain write so markup in the HTML is not interpreted by Rich
            typer.echo(html)

    except ArticleRendererError as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def convert(
    input_file: Path = typer.Argument(..., help="JSON file holding a list of articles"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (defaults to input file)"),
    limit: int | None = typer.Option(None, "--limit", "-l", help="Maximum number of articles to convert"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar"),
    config_path: Path | None = typer.Option(None, "--config", help="Path to a YAML configuration file"),
) -> None:
    """Convert markdown article bodies in a JSON file to HTML."""
    try:
        config = _load_config(config_path)

        if not input_file.exists():
            print(f"[red]Error: Input file not found: {input_file}[/red]")
            raise typer.Exit(1)

        if limit is not None:
            batch = BatchConfig(**{**config.batch.model_dump(), "limit": limit})
            config = config.model_copy(update={"batch": batch})

        converter = BatchConverter(config, console=console, show_progress=progress)
        result = converter.convert_file(input_file, output)

        table = Table(title="Conversion Summary")
        table.add_column("Total", style="cyan")
        table.add_column("Converted", style="green")
        table.add_column("Skipped", style="white")
        table.add_column("Errors", style="red")
        table.add_row(str(result.total), str(result.converted), str(result.skipped), str(result.errors))
        console.print(table)

        for failure in result.failures:
            console.print(f"  [red]#{failure.index + 1} {escape(failure.title)}:[/red] {escape(failure.reason)}")

        if result.errors:
            raise typer.Exit(1)

    except ArticleRendererError as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        print(f"[red]Error: Invalid option: {escape(str(e))}[/red]")
        raise typer.Exit(1)


# ============================================================================
# Configuration Commands
# ============================================================================

@app.command()
def config_show(
    config_path: Path | None = typer.Option(None, "--config", help="Path to a YAML configuration file"),
) -> None:
    """Show current configuration."""
    try:
        config = _load_config(config_path)

        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("GitHub-flavored Extensions", "Yes" if config.render.gfm else "No")
        table.add_row("Line Breaks", "Yes" if config.render.breaks else "No")
        table.add_row("Pedantic", "Yes" if config.render.pedantic else "No")
        table.add_row("Highlight Code", "Yes" if config.render.highlight else "No")
        table.add_row("Detect Code Language", "Yes" if config.render.auto_detect_language else "No")
        table.add_row("Batch Limit", str(config.batch.limit))
        table.add_row("Content Field", config.batch.content_field)
        table.add_row("Only Markdown", "Yes" if config.batch.only_markdown else "No")
        table.add_row("Log Level", config.logging.level)

        console.print(table)

    except ArticleRendererError as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


# ============================================================================
# Main Entry Point
# ============================================================================

def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
