"""Off-screen Rich rendering for command outcomes.

Renderers draw onto a captured console and hand back the text, which the
CLI prints with ``click.echo``.  Colors are only kept when stdout is a
terminal, so CliRunner and pipes get plain text.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.theme import Theme

RENDER_WIDTH = 120

MEALER_THEME = Theme(
    {
        "mealer.ok": "bold green",
        "mealer.error": "bold red",
        "mealer.op": "bold cyan",
        "mealer.key": "dim",
        "mealer.id": "bold blue",
        "mealer.title": "bold",
        "mealer.date": "dim",
    }
)


def render_to_text(draw: Callable[[Console], None], *, width: int = RENDER_WIDTH) -> str:
    """Run *draw* against a captured console and return what it printed."""
    console = Console(theme=MEALER_THEME, highlight=False, width=width)
    with console.capture() as captured:
        draw(console)
    return captured.get()
