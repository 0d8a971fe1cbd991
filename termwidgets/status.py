"""The outcome of a prompt and the symbols that show it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from termwidgets.text import Span


class Status(enum.Enum):
    """The result of a prompt; a new prompt starts out pending."""

    PENDING = "pending"
    ABORTED = "aborted"
    DONE = "done"

    def is_pending(self) -> bool:
        return self is Status.PENDING

    def is_aborted(self) -> bool:
        return self is Status.ABORTED

    def is_done(self) -> bool:
        return self is Status.DONE

    def is_finished(self) -> bool:
        """Whether the prompt is done or aborted."""
        return self in (Status.DONE, Status.ABORTED)

    def symbol(self) -> Span:
        """The styled symbol drawn in front of a prompt with this status."""
        symbols = Symbols()
        return {
            Status.PENDING: symbols.pending,
            Status.ABORTED: symbols.aborted,
            Status.DONE: symbols.done,
        }[self]


@dataclass(frozen=True)
class Symbols:
    """The symbols for each status."""

    pending: Span = field(default_factory=lambda: Span("?").cyan())
    aborted: Span = field(default_factory=lambda: Span("✘").red())
    done: Span = field(default_factory=lambda: Span("✔").green())