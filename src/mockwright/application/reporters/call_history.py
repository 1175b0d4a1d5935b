"""Call history reporter: RecordedCall sequence -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mockwright.domain.model.recorded_call import RecordedCall


@dataclass(frozen=True, slots=True)
class CallHistoryConfig:
    """Configuration for call history reporter.

    Attributes:
        max_calls: Max calls to display. None = unlimited.
        width: Console width.
        color: Emit ANSI colors (off for assertion messages).
    """

    max_calls: int | None = None
    width: int = 120
    color: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_calls is not None and self.max_calls < 0:
            raise ValueError(f"max_calls must be >= 0, got {self.max_calls}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class CallHistoryReporter:
    """Renders recorded calls as a table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: CallHistoryConfig | None = None) -> None:
        self._config = config or CallHistoryConfig()

    def report(self, calls: Sequence[RecordedCall], title: str = "Recorded calls") -> str:
        """Format calls in call order.

        Args:
            calls: Recorded calls
            title: Heading line

        Returns:
            Formatted string
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        shown = calls if self._config.max_calls is None else calls[: self._config.max_calls]

        if not calls:
            console.print(f"{escape(title)}: none")
            return output.getvalue()

        console.print(f"[bold]{escape(title)}[/bold] ({len(calls)})")

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Call", style="cyan")
        for index, call in enumerate(shown, start=1):
            table.add_row(str(index), escape(str(call)))
        console.print(table)

        hidden = len(calls) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]")

        return output.getvalue()
