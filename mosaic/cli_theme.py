# mosaic/cli_theme.py
"""Terminal theme for the mosaic CLI.

  - Numbered section headers ("01 · SECTION NAME")
  - Rounded tables: chain listings and path/address key-value dumps
  - One-line status markers (ok, info, warn, err)
"""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

BRAND = "M O S A I C"
RULE_WIDTH = 40

ACCENT = "#4FA3A5"
BORDER = "#9AA5B1"
MUTED = "dim"

# kind -> (marker, marker style, message style)
_STATUS = {
    "ok": ("✓", "bold green", ""),
    "info": ("›", ACCENT, MUTED),
    "warn": ("!", "bold yellow", "yellow"),
    "err": ("✗", "bold red", ""),
}


def print_version(version: str, console: Console) -> None:
    t = Text()
    t.append(BRAND, style=f"bold {ACCENT}")
    t.append(f"  v{version}", style=MUTED)
    console.print(t)


def section(title: str, console: Console, number: str) -> None:
    """Print a numbered section header followed by a rule."""
    console.print()
    t = Text(f"  {number}", style=f"bold {ACCENT}")
    t.append(" · ", style=MUTED)
    t.append(title.upper(), style="bold")
    console.print(t)
    console.print(f"  {'─' * RULE_WIDTH}", style=BORDER)


def chain_table(*columns: str) -> Table:
    """Table with a header row; columns after the first are right-aligned numbers
    unless their name ends in "address"."""
    t = Table(box=box.ROUNDED, border_style=BORDER, header_style="bold", padding=(0, 1))
    for i, name in enumerate(columns):
        numeric = i > 0 and not name.lower().endswith("address")
        t.add_column(name, justify="right" if numeric else "left")
    return t


def key_value_table(rows: Iterable[tuple[str, object]]) -> Table:
    """Headerless table of ``key: value`` rows; values are escaped, ``None`` shown as "-"."""
    t = Table(box=box.ROUNDED, border_style=BORDER, show_header=False, padding=(0, 1))
    t.add_column(style=f"bold {ACCENT}", no_wrap=True)
    t.add_column()
    for key, value in rows:
        t.add_row(key, "-" if value is None else escape(str(value)))
    return t


def status(kind: str, msg: str) -> str:
    """Rich markup for one status line; ``msg`` must already be escaped."""
    marker, marker_style, msg_style = _STATUS[kind]
    body = f"[{msg_style}]{msg}[/{msg_style}]" if msg_style else msg
    return f"  [{marker_style}]{marker}[/{marker_style}] {body}"
