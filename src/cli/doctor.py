"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.gemini import build_genai_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

GEMINI_API_HOST = "https://generativelanguage.googleapis.com"


async def _check_http(url: str) -> tuple[bool, str]:
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(10.0), follow_redirects=True) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_model(settings: AppSettings, model: str) -> tuple[bool, str]:
    """Resolve `model` with the configured key (validates both at once)."""

    try:
        client = build_genai_client(settings)
        info = await client.aio.models.get(model=model)
        return True, getattr(info, "display_name", None) or model
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    check_models: bool = typer.Option(
        False,
        "--check-models",
        help="Resolve every configured model with the API key (network).",
    ),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="GT Pilot Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = bool((settings.api_key or "").strip())
    if has_key:
        table.add_row("API key", "OK", "Gemini/Imagen enabled")
    else:
        table.add_row("API key", "MISSING", "Set GT_PILOT_API_KEY (or API_KEY) or run `gt-pilot doctor setup`")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    models = {
        "Chat model": settings.chat_model,
        "Intelligence model": settings.intelligence_model,
        "Visuals model": settings.visuals_model,
        "Image model": settings.image_model,
    }

    ok_http, detail_http = asyncio.run(_check_http(GEMINI_API_HOST))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    for label, model in models.items():
        if check_models and has_key:
            ok_model, detail_model = asyncio.run(_check_model(settings, model))
            table.add_row(label, "OK" if ok_model else "FAIL", f"{model} ({detail_model})")
        else:
            table.add_row(label, "CONFIGURED", model)

    _console.print(table)

    if not has_key:
        _console.print("\n[yellow]Note:[/yellow] every command except `doctor` needs the API key.")


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()
    api_key = typer.prompt("Gemini API key", hide_input=True, confirmation_prompt=False).strip()
    chat_model = typer.prompt("Chat model", default=settings.chat_model, show_default=True).strip()
    intelligence_model = typer.prompt(
        "Intelligence model", default=settings.intelligence_model, show_default=True
    ).strip()
    visuals_model = typer.prompt("Visuals model", default=settings.visuals_model, show_default=True).strip()
    image_model = typer.prompt("Image model", default=settings.image_model, show_default=True).strip()

    if not api_key:
        raise typer.BadParameter("API key is required")

    env_path = write_user_env_vars(
        {
            "GT_PILOT_API_KEY": api_key,
            "GT_PILOT_CHAT_MODEL": chat_model,
            "GT_PILOT_INTELLIGENCE_MODEL": intelligence_model,
            "GT_PILOT_VISUALS_MODEL": visuals_model,
            "GT_PILOT_IMAGE_MODEL": image_model,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
