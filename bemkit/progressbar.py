"""A minimal text progress bar for loops with a known number of iterations."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["ProgressBar"]

_WIDTH = 50


def _half_toward_zero(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


class ProgressBar:
    """Progress indicator that redraws itself in place using backspaces.

    The bar must be the only thing writing to its stream while it is in use.
    Its look is set through the ``done_char``, ``todo_char``,
    ``opening_bracket_char`` and ``closing_bracket_char`` attributes, and
    ``show_bar`` switches between the full bar and the percentage alone.
    """

    def __init__(self, n: int = 0, show_bar: bool = True, output: TextIO | None = None) -> None:
        self.n_cycles = n
        self.show_bar = show_bar
        self.output: TextIO = sys.stderr if output is None else output
        self.done_char = "#"
        self.todo_char = " "
        self.opening_bracket_char = "["
        self.closing_bracket_char = "]"
        self.progress = 0
        self.last_perc = 0
        self.update_is_called = False

    def reset(self) -> None:
        """Start counting again from zero so the bar can be reused."""
        self.progress = 0
        self.update_is_called = False
        self.last_perc = 0

    def set_niter(self, niter: int) -> None:
        """Set the number of loop iterations."""
        if niter <= 0:
            raise ValueError("number of iterations null or negative")
        self.n_cycles = niter

    def _percentage(self) -> int:
        if self.n_cycles == 1:
            return 100
        return int(self.progress * 100.0 / (self.n_cycles - 1))

    def update(self) -> None:
        """Advance the bar by one iteration and redraw it."""
        if self.n_cycles == 0:
            raise RuntimeError("number of cycles not set")

        parts: list[str] = []
        if not self.update_is_called:
            if self.show_bar:
                parts.append(self.opening_bracket_char)
                parts.append(self.todo_char * _WIDTH)
                parts.append(f"{self.closing_bracket_char} 0%")
            else:
                parts.append("0%")
        self.update_is_called = True

        perc = self._percentage()
        if perc < self.last_perc:
            self._emit(parts)
            return

        if perc == self.last_perc + 1:
            if perc <= 10:
                parts.append(f"\b\b{perc}%")
            elif perc < 100:
                parts.append(f"\b\b\b{perc}%")
            elif perc == 100:
                parts.append(f"\b\b\b{perc}%")

        if self.show_bar and perc % 2 == 0:
            parts.append("\b" * len(self.closing_bracket_char))
            if perc < 10:
                parts.append("\b\b\b")
            elif perc < 100:
                parts.append("\b\b\b\b")
            elif perc == 100:
                parts.append("\b\b\b\b\b")

            remaining = _WIDTH - _half_toward_zero(perc - 1)
            parts.append("\b" * (len(self.todo_char) * max(remaining, 0)))
            parts.append(self.todo_char if perc == 0 else self.done_char)
            parts.append(self.todo_char * max(remaining - 1, 0))
            parts.append(f"{self.closing_bracket_char} {perc}%")

        self.last_perc = perc
        self.progress += 1
        self._emit(parts)

    def _emit(self, parts: list[str]) -> None:
        self.output.write("".join(parts))
        self.output.flush()