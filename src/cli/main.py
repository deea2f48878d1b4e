"""CLI de GT Pilot.

Cada comando construye explícitamente el cliente GenAI (falla rápido si no
hay API key) y se lo pasa al servicio correspondiente. El renderizado vive
en `cli.ui_components`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console

from adapters.gemini import build_genai_client
from adapters.image_exporter import write_data_uri
from adapters.json_exporter import export_json
from cli import doctor
from cli.ui_components import (
    build_chat_reply,
    build_concepts_table,
    build_error_panel,
    print_banner,
    render_command_result,
)
from core.config import AppSettings
from core.domain.models import (
    AspectRatio,
    ChatMessage,
    CommandError,
    ImageConcept,
    Module,
    Role,
    history_from_messages,
)
from core.errors import GTPilotError
from core.log import configure_logging
from core.services.chat_relay import CHAT_FALLBACK_REPLY, ChatRelay
from core.services.command_router import CommandRouter
from core.services.visuals import (
    ImageRenderer,
    VisualConceptGenerator,
    assign_concept_ids,
    render_concept,
)

app = typer.Typer(
    no_args_is_help=True,
    help="GT Pilot: chat, command routing and visuals on the Gemini API.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

_EXIT_WORDS = {"/exit", "/quit", "exit", "quit"}


def _fail(exc: Exception) -> NoReturn:
    _console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


def _client(settings: AppSettings) -> Any:
    try:
        return build_genai_client(settings)
    except GTPilotError as exc:
        _fail(exc)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to GT_PILOT_LOG_LEVEL.",
    ),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


async def _chat_session(relay: ChatRelay, first_message: str | None) -> None:
    transcript: list[ChatMessage] = []

    async def _turn(text: str) -> None:
        history = history_from_messages(transcript)
        reply = await relay.respond(history, text)
        _console.print(build_chat_reply(reply))
        # La disculpa no entra en el historial.
        if reply == CHAT_FALLBACK_REPLY:
            return
        transcript.append(ChatMessage(role=Role.USER, content=text, module=Module.CHATBOT))
        transcript.append(ChatMessage(role=Role.MODEL, content=reply, module=Module.CHATBOT))

    if first_message is not None:
        await _turn(first_message)
        return

    while True:
        text = (await asyncio.to_thread(_console.input, "[bold cyan]you>[/bold cyan] ")).strip()
        if not text or text.lower() in _EXIT_WORDS:
            break
        await _turn(text)


@app.command()
def chat(
    ctx: typer.Context,
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Send a single message and exit instead of starting a session.",
    ),
) -> None:
    """Talk to the GT Pilot chat interface."""

    settings: AppSettings = ctx.obj
    relay = ChatRelay(_client(settings), settings)
    if message is None:
        print_banner(_console)
        _console.print("[dim]Empty line or /exit to quit.[/dim]")
    asyncio.run(_chat_session(relay, message))


@app.command()
def command(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Free-text command, e.g. 'summarize engagement for last7days'."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write the result as JSON."),
) -> None:
    """Route a command to the intelligence module."""

    settings: AppSettings = ctx.obj
    router = CommandRouter(_client(settings), settings)
    result = asyncio.run(router.route(prompt))

    _console.print(render_command_result(result))
    if json_path is not None:
        export_json(payload=result, output_path=json_path)
        _console.print(f"[green]Saved:[/green] {json_path}")
    if isinstance(result, CommandError):
        raise typer.Exit(code=1)


async def _render_all(
    renderer: ImageRenderer,
    concepts: list[ImageConcept],
) -> list[ImageConcept]:
    rendered: list[ImageConcept] = []
    for concept in concepts:
        try:
            rendered.append(await render_concept(renderer, concept))
        except GTPilotError as exc:
            _console.print(f"[yellow]Warning:[/yellow] {concept.title or concept.id}: {exc}")
            rendered.append(concept.model_copy(update={"is_generating": False}))
    return rendered


@app.command()
def concepts(
    ctx: typer.Context,
    brand: str = typer.Option(..., "--brand", help="Brand name."),
    tone: str = typer.Option(..., "--tone", help="Tone of voice."),
    brief: str = typer.Option(..., "--brief", help="Content brief."),
    render: bool = typer.Option(False, "--render", help="Render an image for every concept."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write the concepts as JSON."),
    images_dir: Optional[Path] = typer.Option(
        None,
        "--images-dir",
        help="Save rendered images as <id>.jpg in this directory (implies --render).",
    ),
) -> None:
    """Generate image concepts with the visuals module."""

    settings: AppSettings = ctx.obj
    client = _client(settings)
    generator = VisualConceptGenerator(client, settings)

    try:
        result = assign_concept_ids(asyncio.run(generator.generate(brand, tone, brief)))
    except GTPilotError as exc:
        _fail(exc)

    if render or images_dir is not None:
        result = asyncio.run(_render_all(ImageRenderer(client, settings), result))
        if images_dir is not None:
            for concept in result:
                if concept.image_url:
                    path = write_data_uri(uri=concept.image_url, output_path=images_dir / f"{concept.id}.jpg")
                    _console.print(f"[green]Saved:[/green] {path}")

    _console.print(build_concepts_table(result))
    if json_path is not None:
        export_json(payload=result, output_path=json_path)
        _console.print(f"[green]Saved:[/green] {json_path}")


@app.command()
def image(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Image prompt."),
    aspect_ratio: AspectRatio = typer.Option(AspectRatio.SQUARE, "--aspect-ratio", "-r", help="Aspect ratio."),
    output: Path = typer.Option(Path("image.jpg"), "--output", "-o", help="Where to write the JPEG."),
) -> None:
    """Render one image with the image model."""

    settings: AppSettings = ctx.obj
    renderer = ImageRenderer(_client(settings), settings)
    try:
        uri = asyncio.run(renderer.render(prompt, aspect_ratio))
    except GTPilotError as exc:
        _console.print(build_error_panel(str(exc)))
        raise typer.Exit(code=1)

    path = write_data_uri(uri=uri, output_path=output)
    _console.print(f"[green]Saved:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
