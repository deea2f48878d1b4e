"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    AspectRatio,
    CommandError,
    CommandResult,
    EngagementMetrics,
    ImageConcept,
    Module,
    PostBrief,
    ScheduledPost,
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo en modo interactivo (chat); los comandos de un disparo no lo muestran.
    """

    title = Text("GT Pilot", style="bold cyan")
    subtitle = Text("Chat • Intelligence • Visuals", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_metrics_table(metrics: EngagementMetrics) -> Table:
    table = Table(title=f"Engagement • {metrics.period}", caption=metrics.summary)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    for datum in metrics.data:
        table.add_row(Text(datum.name, style=datum.fill), f"{datum.value:,}")
    return table


def build_briefs_table(briefs: list[PostBrief]) -> Table:
    table = Table(title="Post Briefs")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Topic", style="cyan")
    table.add_column("Content", style="white")
    table.add_column("Hashtags", style="magenta")
    for idx, brief in enumerate(briefs, start=1):
        table.add_row(str(idx), brief.topic, brief.content, " ".join(brief.hashtags))
    return table


def build_schedule_panel(post: ScheduledPost) -> Panel:
    body = Text()
    body.append(post.confirmation + "\n\n")
    body.append(f"Platform: {post.platform}\n", style="bold")
    body.append(f"Datetime: {post.datetime}", style="dim")
    return Panel(body, title=Text("Scheduled", style="bold green"), border_style="green")


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message), title=Text("Error", style="bold red"), border_style="red")


def render_command_result(result: CommandResult) -> RenderableType:
    """Elige el componente según la forma del resultado del router."""

    if isinstance(result, CommandError):
        return build_error_panel(result.error)
    if isinstance(result, EngagementMetrics):
        return build_metrics_table(result)
    if isinstance(result, ScheduledPost):
        return build_schedule_panel(result)
    return build_briefs_table(list(result))


def build_concepts_table(concepts: list[ImageConcept]) -> Table:
    table = Table(title="Image Concepts")
    table.add_column("Title", style="cyan")
    table.add_column("Ratio", style="yellow", no_wrap=True)
    table.add_column("Palette", style="white")
    table.add_column("Caption", style="white")
    table.add_column("Image", style="green")
    for concept in concepts:
        if concept.image_url:
            image = "rendered"
        elif concept.is_generating:
            image = "generating"
        else:
            image = "-"
        ratio = concept.aspect_ratio
        if isinstance(ratio, AspectRatio):
            ratio = ratio.value
        table.add_row(
            str(concept.title or ""),
            str(ratio or "-"),
            ", ".join(str(color) for color in concept.palette or []),
            str(concept.caption or ""),
            image,
        )
    return table


def build_chat_reply(text: str, *, module: Module = Module.CHATBOT) -> Panel:
    return Panel(Text(text.strip()), title=Text(f"GT Pilot [{module.value}]", style="bold yellow"), border_style="yellow")
