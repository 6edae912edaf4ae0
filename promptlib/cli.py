"""Promptlib CLI — manage a personal prompt library from the terminal."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Settings, create_directories, load_reference_data
from .errors import PromptLibError
from .models import PromptInput, SearchFilters
from .repository import SORT_KEYS, PromptRepository

console = Console()


def _setup_logging(verbose: bool) -> None:
    """Send promptlib log records to stderr."""
    logger = logging.getLogger("promptlib")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Clear existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
    sys.exit(1)


def _print_prompt_table(prompts, title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Category")
    table.add_column("Tone")
    table.add_column("Uses", justify="right")

    for p in prompts:
        table.add_row(p.id[:8], p.title, p.category, p.tone, str(p.usage_count))

    console.print(table)


def _print_prompt(prompt) -> None:
    tags = ", ".join(prompt.tags) or "none"
    console.print(f"[bold]{prompt.title}[/bold] ({prompt.id})")
    if prompt.description:
        console.print(f"  {prompt.description}")
    console.print(
        f"  Category: {prompt.category} | Tone: {prompt.tone} | Tags: {tags}"
    )
    console.print(
        f"  Uses: {prompt.usage_count} | Updated: {prompt.updated_at[:19]}"
        + (" | example" if prompt.is_example else "")
    )
    console.print(Panel(prompt.content, title="Content"))


def _prompt_input(
    title: str | None,
    content: str | None,
    description: str | None,
    category: str | None,
    tags: tuple[str, ...],
    tone: str | None,
) -> PromptInput:
    return PromptInput(
        title=title,
        content=content,
        description=description,
        category=category,
        tags=list(tags) if tags else None,
        tone=tone,
    )


output_option = click.option(
    "--output",
    "-o",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format",
)


def _field_options(fn):
    fn = click.option("--tone", default=None, help="Tone, e.g. Formal")(fn)
    fn = click.option(
        "--tag", "tags", multiple=True, help="Tag (repeatable, replaces existing tags)"
    )(fn)
    fn = click.option("--category", default=None, help="Category name")(fn)
    fn = click.option("--description", "-d", default=None, help="Short description")(fn)
    return fn


@click.group()
@click.version_option(package_name="promptlib")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Library directory (default: $PROMPTLIB_DATA_DIR or ~/.config/promptlib)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log storage activity to stderr")
@click.pass_context
def cli(ctx, data_dir: Path | None, verbose: bool):
    """Promptlib CLI - create, search and reuse prompts."""
    load_dotenv()
    _setup_logging(verbose)
    settings = Settings.from_env(data_dir=data_dir)
    ctx.obj = {
        "settings": settings,
        "repository": PromptRepository(settings.prompts_file),
    }


@cli.command()
@click.pass_obj
def init(obj):
    """Create the library directories."""
    settings = obj["settings"]
    ready = create_directories(settings.directories())
    for directory in ready:
        console.print(f"  [green]✓[/green] {directory}")
    if len(ready) != len(settings.directories()):
        _fail("Some directories could not be created")


@cli.command(name="list")
@output_option
@click.pass_obj
def list_prompts(obj, output: str):
    """List all prompts."""
    try:
        prompts = obj["repository"].get_all()
    except PromptLibError as e:
        _fail(e.message)

    if output == "json":
        click.echo(json.dumps([p.to_dict() for p in prompts], indent=2))
    else:
        _print_prompt_table(prompts, "Prompts")


@cli.command()
@click.argument("query", required=False, default="")
@click.option("--category", default="", help="Only this category")
@click.option("--tone", default="", help="Only this tone")
@click.option("--tag", default="", help="Only prompts with this tag")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(list(SORT_KEYS)),
    default="updatedAt",
    help="Sort key",
)
@click.option(
    "--order",
    "sort_order",
    type=click.Choice(["asc", "desc"]),
    default="desc",
    help="Sort order",
)
@output_option
@click.pass_obj
def search(
    obj,
    query: str,
    category: str,
    tone: str,
    tag: str,
    sort_by: str,
    sort_order: str,
    output: str,
):
    """Search prompts by text, category, tone or tag."""
    filters = SearchFilters(
        search=query,
        category=category,
        tone=tone,
        tag=tag,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    try:
        prompts = obj["repository"].search(filters)
    except PromptLibError as e:
        _fail(e.message)

    if output == "json":
        click.echo(json.dumps([p.to_dict() for p in prompts], indent=2))
        return

    if not prompts:
        console.print("[yellow]No prompts found.[/yellow]")
        return
    _print_prompt_table(prompts, f"Results ({len(prompts)})")


@cli.command()
@click.argument("prompt_id")
@output_option
@click.pass_obj
def show(obj, prompt_id: str, output: str):
    """Show one prompt."""
    try:
        prompt = obj["repository"].get_by_id(prompt_id)
    except PromptLibError as e:
        _fail(e.message)

    if prompt is None:
        _fail(f"No prompt with id {prompt_id}")

    if output == "json":
        click.echo(json.dumps(prompt.to_dict(), indent=2))
    else:
        _print_prompt(prompt)


@cli.command()
@click.option("--title", "-t", required=True, help="Prompt title")
@click.option("--content", "-c", required=True, help="Prompt text")
@_field_options
@click.pass_obj
def add(
    obj,
    title: str,
    content: str,
    description: str | None,
    category: str | None,
    tags: tuple[str, ...],
    tone: str | None,
):
    """Save a new prompt."""
    data = _prompt_input(title, content, description, category, tags, tone)
    try:
        prompt = obj["repository"].create(data)
    except PromptLibError as e:
        _fail(e.message)

    console.print(f"[green]Created[/green] {prompt.title} ({prompt.id})")


@cli.command()
@click.argument("prompt_id")
@click.option("--title", "-t", default=None, help="New title")
@click.option("--content", "-c", default=None, help="New prompt text")
@_field_options
@click.pass_obj
def edit(
    obj,
    prompt_id: str,
    title: str | None,
    content: str | None,
    description: str | None,
    category: str | None,
    tags: tuple[str, ...],
    tone: str | None,
):
    """Change fields of a prompt. Options left out keep their values."""
    data = _prompt_input(title, content, description, category, tags, tone)
    try:
        prompt = obj["repository"].update(prompt_id, data)
    except PromptLibError as e:
        _fail(e.message)

    if prompt is None:
        _fail(f"No prompt with id {prompt_id}")
    console.print(f"[green]Updated[/green] {prompt.title} ({prompt.id})")


@cli.command()
@click.argument("prompt_id")
@click.pass_obj
def delete(obj, prompt_id: str):
    """Delete a prompt."""
    try:
        removed = obj["repository"].delete(prompt_id)
    except PromptLibError as e:
        _fail(e.message)

    if not removed:
        _fail(f"No prompt with id {prompt_id}")
    console.print(f"[green]Deleted[/green] {prompt_id}")


@cli.command()
@click.argument("prompt_id")
@click.pass_obj
def use(obj, prompt_id: str):
    """Print a prompt's text and count the use."""
    try:
        prompt = obj["repository"].increment_usage(prompt_id)
    except PromptLibError as e:
        _fail(e.message)

    if prompt is None:
        _fail(f"No prompt with id {prompt_id}")
    click.echo(prompt.content)


@cli.command()
@output_option
@click.pass_obj
def stats(obj, output: str):
    """Show library statistics."""
    try:
        s = obj["repository"].get_stats()
    except PromptLibError as e:
        _fail(e.message)

    if output == "json":
        click.echo(json.dumps(s.to_dict(), indent=2))
        return

    console.print(
        Panel(
            f"Prompts: {s.total}\n"
            f"Total uses: {s.total_usage}\n"
            f"Tags: {len(s.tags)}",
            title="Library",
        )
    )

    for heading, counts in (("Categories", s.categories), ("Tones", s.tones)):
        table = Table(title=heading)
        table.add_column("Name", style="cyan")
        table.add_column("Prompts", justify="right")
        for name, count in sorted(counts.items(), key=lambda kv: -kv[1]):
            table.add_row(name, str(count))
        console.print(table)

    if s.most_used:
        _print_prompt_table(s.most_used, "Most Used")


@cli.command()
@click.pass_obj
def categories(obj):
    """List the available categories and tones."""
    try:
        reference = load_reference_data(obj["settings"].categories_file)
    except PromptLibError as e:
        _fail(e.message)

    table = Table(title="Categories")
    table.add_column("", justify="center")
    table.add_column("Name", style="cyan")
    table.add_column("Color", style="dim")
    for c in reference.categories:
        table.add_row(c.icon, c.name, c.color)
    console.print(table)
    console.print(f"Tones: {', '.join(reference.tones)}")


def main():
    cli()


if __name__ == "__main__":
    main()
