"""Log of resolved tickets, most recent first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from helpdesk.tickets import Ticket


@dataclass
class ResolutionLog:
    """A stack of resolved tickets."""

    _stack: list[Ticket] = field(default_factory=list)

    def push(self, ticket: Ticket) -> None:
        self._stack.append(ticket)

    def peek(self) -> Ticket:
        """Return the most recently resolved ticket."""
        if not self._stack:
            raise IndexError("no resolved tickets")
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Ticket]:
        """Iterate from the most recent ticket to the oldest."""
        return reversed(self._stack)

    def show_recent(self) -> str:
        """Return a report of the most recently resolved ticket."""
        if not self._stack:
            return "No processed ticket as of now. Nothing to print.\n"
        return (
            "_____________ Displaying Most Recent Ticket Log _____________ \n"
            + self._stack[-1].details()
            + "\n"
        )

    def show_all(self) -> str:
        """Return a report of every resolved ticket, most recent first."""
        if not self._stack:
            return (
                "Cannot print ticket stack. No record in the processed "
                "tickets at the momment.\n"
            )
        header = (
            f"_____________ Displaying {len(self._stack)} "
            "Resolved Tickets _____________ \n"
        )
        return header + "".join(t.details() + "\n" for t in self)