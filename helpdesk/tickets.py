"""Support tickets and the registry of every ticket created in a session."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Iterator

ACTIVE_CLOSE_TIME = "Active Currently"
STATUS_OPEN = "Open"
STATUS_CLOSED = "Closed"


class TicketNotFoundError(LookupError):
    """Raised when a ticket that was asked for does not exist."""


def current_time() -> str:
    """Return the local time in the classic ``ctime`` form, without a newline."""
    return time.ctime()


def read_int(read_line: Callable[[], str], write: Callable[[str], object]) -> int:
    """Read lines until one holds an integer and return it.

    ``read_line`` returns one line of input, or an empty string at the end of
    input, in which case ``EOFError`` is raised.
    """
    while True:
        line = read_line()
        if not line:
            raise EOFError("no more input")
        try:
            return int(line.strip())
        except ValueError:
            write("Invalid entry. Please re-enter: ")


@dataclass
class Ticket:
    """A customer support request."""

    ticket_id: int
    customer_name: str = ""
    priority: int = 0
    description: str = ""
    open_time: str = ""
    close_time: str = ""
    status: str = STATUS_OPEN

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    @classmethod
    def new(cls, customer_name: str, priority: int, description: str) -> Ticket:
        """Create an open ticket with the next free ID, stamped with the current time."""
        return cls(
            ticket_id=next(cls._ids),
            customer_name=customer_name,
            priority=priority,
            description=description,
            open_time=current_time(),
            close_time=ACTIVE_CLOSE_TIME,
            status=STATUS_OPEN,
        )

    def close(self, close_time: str | None = None) -> None:
        """Mark the ticket closed at ``close_time`` (now, if not given)."""
        self.status = STATUS_CLOSED
        self.close_time = current_time() if close_time is None else close_time

    def details(self) -> str:
        """Return a printable description of the ticket."""
        return (
            f"Ticket ID: {self.ticket_id}\n"
            f"Customer Name: {self.customer_name}\n"
            f"Priority: {self.priority}\n"
            f"Support Request Description: {self.description}\n"
            f"Ticket Open Time: {self.open_time}\n"
            f"Ticket Close Time: {self.close_time}\n"
            f"Status: {self.status}\n"
        )


@dataclass
class TicketRegistry:
    """Every ticket created today, open or closed, in creation order."""

    _tickets: list[Ticket] = field(default_factory=list)

    def add(self, ticket: Ticket) -> None:
        self._tickets.append(ticket)

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def display(self) -> str:
        """Return a report listing every ticket."""
        if not self._tickets:
            return "List is empty.\n"
        header = (
            f"_____________ Displaying All {len(self._tickets)} Tickets "
            "Created Today (Open/Closed) _____________ \n"
        )
        return header + "".join(t.details() + "\n" for t in self._tickets)