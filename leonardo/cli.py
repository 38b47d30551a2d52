"""CLI application and commands for leo."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from leonardo import LeonardoClient
from leonardo.config import CONFIG_FILE, load_api_key, load_base_url, load_config, save_config
from leonardo.errors import LeonardoError
from leonardo.images import CreateGenerationRequest, Generation
from leonardo.prompt import ImprovePromptRequest
from leonardo.types import PresetStyle

# Key masking threshold
MIN_KEY_LENGTH_FOR_MASKING = 8

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        try:
            print(f"leo {version('leonardo-client')}")
        except PackageNotFoundError:
            print("leo (not installed)")
        raise typer.Exit


app = typer.Typer(
    name="leo",
    help="Command-line access to the Leonardo.ai image generation API.",
    no_args_is_help=True,
)


@app.callback()
def _main(
    _version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP traffic.")] = False,
) -> None:
    """Command-line access to the Leonardo.ai image generation API."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _client(api_key: str | None) -> LeonardoClient:
    try:
        return LeonardoClient(api_key=api_key)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("[dim]Set a key with: leo config --set-key YOUR_KEY[/dim]")
        raise typer.Exit(1) from e


def _fail(e: LeonardoError) -> typer.Exit:
    console.print(f"[red]Error: {e}[/red]")
    return typer.Exit(1)


def _display_generation(gen: Generation) -> None:
    table = Table(title="Generation", show_header=False, expand=True)
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("ID", gen.id or "")
    table.add_row("Status", str(getattr(gen.status, "value", gen.status) or ""))
    table.add_row("Prompt", gen.prompt or "")
    if gen.created_at:
        table.add_row("Created", gen.created_at.isoformat(sep=" ", timespec="seconds"))
    for i, img in enumerate(gen.generated_images):
        table.add_row(f"Image {i}", img.url or "")
    console.print(table)


ApiKeyOption = Annotated[str | None, typer.Option("--api-key", help="Leonardo API key")]


@app.command()
def me(api_key: ApiKeyOption = None) -> None:
    """Show account details and token balances."""
    with _client(api_key) as c:
        try:
            info = c.user.me()
        except LeonardoError as e:
            raise _fail(e) from e

    if not info.user_details:
        console.print("[yellow]No user details returned[/yellow]")
        raise typer.Exit(1)

    details = info.user_details[0]
    table = Table(title="Account", show_header=False)
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("User ID", details.user.id or "")
    table.add_row("Username", details.user.username or "")
    rows = [
        ("API Paid Tokens", details.api_paid_tokens),
        ("API Subscription Tokens", details.api_subscription_tokens),
        ("API Concurrency Slots", details.api_concurrency_slots),
        ("API Plan Renewal", details.api_plan_token_renewal_date),
        ("Subscription Tokens", details.subscription_tokens),
        ("Token Renewal", details.token_renewal_date),
    ]
    for label, value in rows:
        if value is not None:
            table.add_row(label, str(value))
    console.print(table)


@app.command()
def prompt(
    improve: Annotated[str | None, typer.Option("--improve", "-i", help="Improve this prompt instead")] = None,
    api_key: ApiKeyOption = None,
) -> None:
    """Print a random prompt, or an improved version of one."""
    with _client(api_key) as c:
        try:
            resp = c.prompt.improve(ImprovePromptRequest(prompt=improve)) if improve else c.prompt.random()
        except LeonardoError as e:
            raise _fail(e) from e

    if resp.prompt_generation is None or not resp.prompt_generation.prompt:
        console.print("[yellow]No prompt returned[/yellow]")
        raise typer.Exit(1)
    console.print(resp.prompt_generation.prompt)
    if resp.prompt_generation.api_credit_cost is not None:
        console.print(f"[dim]Credit cost: {resp.prompt_generation.api_credit_cost}[/dim]")


@app.command()
def generate(
    text: Annotated[str, typer.Argument(help="Prompt text")],
    num_images: Annotated[int | None, typer.Option("--num-images", "-n", help="Number of images")] = None,
    style: Annotated[PresetStyle | None, typer.Option("--style", "-s", help="Preset style")] = None,
    width: Annotated[int | None, typer.Option("--width", "-W", help="Image width")] = None,
    height: Annotated[int | None, typer.Option("--height", "-H", help="Image height")] = None,
    model_id: Annotated[str | None, typer.Option("--model", "-m", help="Model ID")] = None,
    wait: Annotated[bool, typer.Option("--wait", "-w", help="Poll until the images are ready")] = False,
    api_key: ApiKeyOption = None,
) -> None:
    """Start an image generation."""
    req = CreateGenerationRequest(
        prompt=text,
        num_images=num_images,
        preset_style=style,
        width=width,
        height=height,
        model_id=model_id,
    )
    with _client(api_key) as c:
        try:
            job = c.images.create_generation(req).sd_generation_job
            if not job.generation_id:
                console.print("[red]Error: no generation ID returned[/red]")
                raise typer.Exit(1)
            console.print(f"[bold]Generation ID:[/bold] {job.generation_id}")
            if job.api_credit_cost is not None:
                console.print(f"[dim]Credit cost: {job.api_credit_cost}[/dim]")
            if not wait:
                return
            with console.status("Waiting for images..."):
                gen = c.images.wait_for_generation(job.generation_id)
        except LeonardoError as e:
            raise _fail(e) from e
        except TimeoutError as e:
            console.print(f"[yellow]{e}[/yellow]")
            raise typer.Exit(1) from e

    _display_generation(gen)


@app.command()
def get(
    generation_id: Annotated[str, typer.Argument(help="Generation ID")],
    api_key: ApiKeyOption = None,
) -> None:
    """Show a generation and its image URLs."""
    with _client(api_key) as c:
        try:
            gen = c.images.get_generation(generation_id).generations_by_pk
        except LeonardoError as e:
            raise _fail(e) from e
    _display_generation(gen)


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show current config")] = False,
    set_key: Annotated[str | None, typer.Option("--set-key", help="Set Leonardo API key")] = None,
    set_base_url: Annotated[str | None, typer.Option("--set-base-url", help="Set API base URL")] = None,
) -> None:
    """Manage configuration."""
    if set_key or set_base_url:
        cfg = load_config()
        if "api" not in cfg:
            cfg["api"] = {}
        if set_key:
            cfg["api"]["key"] = set_key
        if set_base_url:
            cfg["api"]["base_url"] = set_base_url
        save_config(cfg)
        console.print(f"[green]Config saved to {CONFIG_FILE}[/green]")
        return

    if show or not (set_key or set_base_url):
        console.print(f"[bold]Config file:[/bold] {CONFIG_FILE}")
        console.print(f"[bold]Config exists:[/bold] {CONFIG_FILE.exists()}")
        console.print(f"[bold]Base URL:[/bold] {load_base_url()}")

        key = load_api_key()
        if key:
            masked = key[:4] + "..." + key[-4:] if len(key) > MIN_KEY_LENGTH_FOR_MASKING else "***"
            console.print(f"[bold]API key:[/bold] {masked}")
        else:
            console.print("[bold]API key:[/bold] [yellow]Not set[/yellow]")


def main() -> int:
    """Main entry point."""
    app()
    return 0


if __name__ == "__main__":
    sys.exit(main())
