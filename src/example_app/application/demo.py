"""Demonstration use case combining greeting, message cleaning, and arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.arithmetic import MathUtils
from ..domain.behaviors import build_greeting, clean_message, format_operation


@dataclass(frozen=True, slots=True)
class DemoReport:
    """Everything the demo run produced, ready to be rendered.

    Attributes:
        greeting: Canonical greeting line.
        original: Message as supplied.
        processed: Message after trimming and capitalization.
        left: Left operand of the addition.
        right: Right operand of the addition.
        total: Result of ``left + right`` under the chosen overflow mode.
    """

    greeting: str
    original: str
    processed: str
    left: int
    right: int
    total: int

    def lines(self) -> list[str]:
        """Return the console lines in output order.

        Example:
            >>> report = run_demo("  maven tutorial  ", 5, 3)
            >>> for line in report.lines():
            ...     print(line)
            Hello Maven World!
            Original: '  maven tutorial  '
            Processed: 'Maven tutorial'
            5 + 3 = 8
        """
        return [
            self.greeting,
            f"Original: '{self.original}'",
            f"Processed: '{self.processed}'",
            format_operation(self.left, "+", self.right, self.total),
        ]


def run_demo(message: str, left: int, right: int, *, math_utils: MathUtils | None = None) -> DemoReport:
    """Run the demonstration and collect its results.

    Args:
        message: Raw message to trim and capitalize.
        left: Left addition operand.
        right: Right addition operand.
        math_utils: Arithmetic helper; defaults to unbounded integers.

    Returns:
        Immutable report of the run.
    """
    utils = math_utils if math_utils is not None else MathUtils()
    return DemoReport(
        greeting=build_greeting(),
        original=message,
        processed=clean_message(message),
        left=left,
        right=right,
        total=utils.add(left, right),
    )


__all__ = ["DemoReport", "run_demo"]
