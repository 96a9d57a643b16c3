"""Console utilities and theming for the JSONText CLI."""

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.pretty import Pretty
from rich.tree import Tree
from rich.theme import Theme

from jsontext.types import TypedValue

THEME = Theme(
    {
        "success": "green",
        "error": "red",
        "dim": "dim",
        "highlight": "bold cyan",
        "kind": "magenta",
    }
)


# Global console instance
console = Console(theme=THEME)


class Icons:
    """Consistent icons across the CLI."""

    SUCCESS = "✓"
    ERROR = "✗"


def print_header(title: str, subtitle: str | None = None):
    """Print a styled header."""
    content = f"[bold]{title}[/bold]"
    if subtitle:
        content += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(content, box=box.ROUNDED, border_style="cyan", padding=(0, 2)))


def print_success(message: str):
    console.print(f"[success]{Icons.SUCCESS}[/success] {message}")


def print_error(message: str, detail: str | None = None):
    console.print(f"[error]{Icons.ERROR}[/error] {message}")
    if detail:
        console.print(f"  [dim]{escape(detail)}[/dim]")


def _add_typed(tree: Tree, key: Any, value: Any):
    label = f"[highlight]{escape(str(key))}[/highlight]" if key is not None else ""
    if isinstance(value, dict):
        branch = tree.add(label or "{}")
        for k, v in value.items():
            _add_typed(branch, k, v)
    elif isinstance(value, list):
        branch = tree.add(label or "[]")
        for i, v in enumerate(value):
            _add_typed(branch, i, v)
    elif isinstance(value, TypedValue):
        tree.add(f"{label}: [kind]{value.kind}[/kind]({escape(repr(value.value))})")
    else:
        tree.add(f"{label}: [dim]{escape(repr(value))}[/dim]")


def typed_tree(data: Any, title: str = "result") -> Tree:
    """Render a typed result as a tree of kind(value) leaves."""
    tree = Tree(f"[bold]{title}[/bold]")
    if isinstance(data, dict):
        for key, value in data.items():
            _add_typed(tree, key, value)
    elif isinstance(data, list):
        for index, value in enumerate(data):
            _add_typed(tree, index, value)
    else:
        _add_typed(tree, None, data)
    return tree


def print_result(result: Any, mode: str):
    """Print a shaped query result according to its return mode."""
    if mode == "json":
        # Plain stdout so the output can be piped
        console.print(result, markup=False, highlight=False, soft_wrap=True)
    elif mode == "array":
        console.print(Pretty(result))
    elif result is None:
        console.print("[dim]No matches[/dim]")
    else:
        console.print(typed_tree(result))
