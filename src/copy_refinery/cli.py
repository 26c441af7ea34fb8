"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from copy_refinery.clients.llm_client import LLMClient
from copy_refinery.config import load_config
from copy_refinery.models.actions import Action
from copy_refinery.models.registry import MODEL_REGISTRY
from copy_refinery.models.transform import TransformOptions, TransformRequest
from copy_refinery.services.transformer import TextTransformer

app = typer.Typer(
    name="copy-refinery",
    help="Claude-powered copy transformation relay",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _transformer(config_path: Path | None) -> TextTransformer:
    config = load_config(config_path)
    return TextTransformer(LLMClient(timeout=config.llm.timeout), config.llm)


def _check_model(model: str | None) -> None:
    if model is not None and model not in MODEL_REGISTRY:
        console.print(f"[red]Unknown model: {model}[/red]")
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run the HTTP relay server."""
    import uvicorn

    from copy_refinery.server.app import create_app

    _setup_logging(verbose)
    config = load_config(config_path)
    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
        log_level="debug" if verbose else "info",
    )


@app.command()
def transform(
    text: str = typer.Argument(help="Text to transform"),
    action: Action = typer.Option(Action.REFINE, "--action", "-a", case_sensitive=False),
    instruction: str = typer.Option(None, "--instruction", "-i", help="Required for EDIT/CUSTOM"),
    context: Path = typer.Option(None, "--context", help="File with the surrounding text"),
    style_guide: Path = typer.Option(None, "--style-guide", help="File with a style guide"),
    model: str = typer.Option(None, "--model", "-m", help="Model id"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Transform a piece of text directly against Claude."""
    _setup_logging(verbose)
    _check_model(model)
    if action.requires_instruction and not (instruction or "").strip():
        console.print(f"[red]{action.value} requires --instruction[/red]")
        raise typer.Exit(1)

    options = TransformOptions(
        instruction=instruction,
        context=context.read_text(encoding="utf-8") if context else None,
        style_guide=style_guide.read_text(encoding="utf-8") if style_guide else None,
    )
    transformer = _transformer(config_path)
    with console.status(f"{action.value} ..."):
        result = asyncio.run(
            transformer.run(TransformRequest(text=text, action=action, options=options), model=model)
        )

    if not result.success:
        console.print(f"[red]Transformation failed: {result.error}[/red]")
        raise typer.Exit(1)
    console.print(Panel(result.transformed_text, title=f"{action.value} ({result.model})"))
    if result.usage and verbose:
        console.print(
            f"[dim]{result.usage.input_tokens} in / {result.usage.output_tokens} out, "
            f"~${result.usage.estimated_cost_usd:.4f}[/dim]"
        )


@app.command("style-guide")
def style_guide(
    file: Path = typer.Argument(help="File with example text"),
    instructions: str = typer.Option("", "--instructions", help="Additional instructions"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the full guide here"),
    model: str = typer.Option(None, "--model", "-m", help="Model id"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
) -> None:
    """Derive a comprehensive and a concise style guide from example text."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    _check_model(model)
    example = file.read_text(encoding="utf-8").strip()
    if not example:
        console.print("[red]Example text is empty[/red]")
        raise typer.Exit(1)

    transformer = _transformer(config_path)
    with console.status("Analysing style..."):
        result = asyncio.run(transformer.generate_style_guide(example, instructions, model=model))

    if not result.success:
        console.print(f"[red]Style guide generation failed: {result.error}[/red]")
        raise typer.Exit(1)
    console.print(Panel(result.comprehensive_guide or "", title="Comprehensive style guide"))
    if result.concise_guide:
        console.print(Panel(result.concise_guide, title="Concise style guide"))
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.full_response or "", encoding="utf-8")
        console.print(f"[green]Saved: {output}[/green]")


@app.command()
def models() -> None:
    """List the available models."""
    default = load_config().llm.default_model
    table = Table(title="Models")
    table.add_column("id", no_wrap=True)
    table.add_column("name", no_wrap=True)
    table.add_column("pricing")
    table.add_column("description")
    for model_id, info in MODEL_REGISTRY.items():
        marker = " [green](default)[/green]" if model_id == default else ""
        table.add_row(model_id + marker, info.name, info.pricing, info.description)
    console.print(table)


@app.command()
def health(
    model: str = typer.Option(None, "--model", "-m", help="Model id"),
    config_path: Path = typer.Option(None, "--config", "-c", help="config.yaml path"),
) -> None:
    """Check that the Claude API is reachable with the configured key."""
    _check_model(model)
    status = asyncio.run(_transformer(config_path).validate_connection(model=model))
    if status.success:
        console.print(f"[green]{status.message} ({status.model})[/green]")
    else:
        console.print(f"[red]Connection failed: {status.error}[/red]")
        raise typer.Exit(1)
