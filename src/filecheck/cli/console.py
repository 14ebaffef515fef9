"""Console presentation for the filecheck CLI."""
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.text import Text

from filecheck.diff import DiffReport


BANNER_LINES = [
    r"    ,------.,--.,--.        ,-----.,--.                  ,--.     ",
    r"    |  .---'`--'|  | ,---. '  .--./|  ,---.  ,---.  ,---.|  |,-.  ",
    r"    |  `--, ,--.|  || .-. :|  |    |  .-.  || .-. :| .--'|     /  ",
    r"    |  |`   |  ||  |\   --.'  '--'\|  | |  |\   --.\ `--.|  \  \  ",
    r"    `--'    `--'`--' `----' `-----'`--' `--' `----' `---'`--'`--' ",
]

# Cyan to magenta
BANNER_START = (0, 255, 255)
BANNER_END = (255, 0, 255)


def _markup(message: str) -> str:
    """Escape rich markup and undecodable filename characters."""
    return escape(message.encode("utf-8", "backslashreplace").decode("utf-8"))


def lerp_color(start: tuple[int, int, int], end: tuple[int, int, int], t: float) -> str:
    r, g, b = (int(s + (e - s) * t) for s, e in zip(start, end))
    return f"rgb({r},{g},{b})"


class ConsoleReporter:
    """Owns the output consoles; quiet mode keeps stdout for the report only."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        quiet: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.quiet = quiet

    def banner(self) -> None:
        if self.quiet:
            return
        last = len(BANNER_LINES) - 1
        for i, line in enumerate(BANNER_LINES):
            style = lerp_color(BANNER_START, BANNER_END, i / last)
            self.console.print(Text(line, style=style), soft_wrap=True)
        self.console.print()

    def info(self, message: str) -> None:
        if not self.quiet:
            self.console.print(f"[cyan]{_markup(message)}[/cyan]")

    def success(self, message: str) -> None:
        if not self.quiet:
            self.console.print(f"[green]{_markup(message)}[/green]")

    def warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]{_markup(message)}[/yellow]")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]{_markup(message)}[/red]")

    @contextmanager
    def progress(self, total: int) -> Iterator[Callable[..., None]]:
        """Progress bar; yields a callback advancing it by one file."""
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=self.console,
            transient=True,
            disable=self.quiet,
        ) as progress:
            task = progress.add_task("Hashing...", total=total)
            yield lambda *_: progress.advance(task)

    def show_failures(self, paths: list[str]) -> None:
        if not paths:
            return
        self.warning(f"{len(paths)} files could not be hashed:")
        for path in paths:
            self.warning(f"  {path}")

    def show_report(self, report: DiffReport) -> None:
        if not report.has_differences:
            self.console.print("[bold green]No differences found[/bold green]")
            return
        self.console.print("[yellow]Differences found:[/yellow]")
        self.console.print(report.to_json(), markup=False, soft_wrap=True)
