"""The queue of tickets waiting to be assigned to an agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from helpdesk.config import SEARCH_ALGORITHMS, ConfigError
from helpdesk.tickets import Ticket, TicketNotFoundError

EMPTY_QUEUE_MESSAGE = "The ticket queue is empty."


class SortKey(Enum):
    """What the queue can be ordered by."""

    PRIORITY = "p"
    NAME = "n"
    OPEN_TIME = "t"

    def precedes(self, a: Ticket, b: Ticket) -> bool:
        """Return True if ``a`` belongs strictly before ``b``."""
        if self is SortKey.PRIORITY:
            return a.priority > b.priority
        if self is SortKey.NAME:
            return a.customer_name < b.customer_name
        return a.open_time < b.open_time


@dataclass
class TicketQueue:
    """Pending tickets, kept in priority order as they arrive."""

    _tickets: list[Ticket] = field(default_factory=list)

    def enqueue(self, ticket: Ticket) -> None:
        """Add a ticket and move it to its place by priority."""
        self._tickets.append(ticket)
        self.bubble_sort(SortKey.PRIORITY)

    def dequeue(self) -> Ticket:
        """Remove and return the ticket at the front."""
        if not self._tickets:
            raise IndexError(
                "Ticket's queue is already empty, no ticket can be popped."
            )
        return self._tickets.pop(0)

    def peek(self) -> Ticket:
        """Return the ticket at the front without removing it."""
        if not self._tickets:
            raise IndexError("Ticket queue is empty.")
        return self._tickets[0]

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def _position(self, ticket_id: int) -> int | None:
        return next(
            (i for i, t in enumerate(self._tickets) if t.ticket_id == ticket_id),
            None,
        )

    def remove(self, ticket_id: int) -> Ticket:
        """Remove and return the ticket with ``ticket_id``."""
        if not self._tickets:
            raise TicketNotFoundError("Ticket list is empty.")
        index = self._position(ticket_id)
        if index is None:
            raise TicketNotFoundError(f"Ticket ID {ticket_id} does not exist.")
        return self._tickets.pop(index)

    def discard(self, ticket_id: int) -> None:
        """Remove the ticket with ``ticket_id`` if it is queued."""
        index = self._position(ticket_id)
        if index is not None:
            del self._tickets[index]

    def find(self, ticket_id: int) -> Ticket:
        """Return the queued ticket with ``ticket_id``."""
        index = self._position(ticket_id)
        if index is None:
            raise TicketNotFoundError(f"Ticket ID {ticket_id} does not exist.")
        return self._tickets[index]

    def sort(self, key: SortKey | str, algorithm: str) -> None:
        """Sort by ``key`` with the named algorithm."""
        key = SortKey(key)
        if algorithm == "bubblesort":
            self.bubble_sort(key)
        elif algorithm == "insertionsort":
            self.insertion_sort(key)
        elif algorithm == "selectionsort":
            self.selection_sort(key)
        elif algorithm in ("quicksort", "mergesort"):
            raise ValueError(
                "Quick Sort and Merge Sort cannot be used on Queue (with linked "
                "list). Please use another sorting algorithm."
            )
        else:
            raise ConfigError("Invalid sorting choice in the config file.")

    def bubble_sort(self, key: SortKey | str) -> None:
        key = SortKey(key)
        items = self._tickets
        swapped = True
        while swapped:
            swapped = False
            for i in range(len(items) - 1):
                if key.precedes(items[i + 1], items[i]):
                    items[i], items[i + 1] = items[i + 1], items[i]
                    swapped = True

    def insertion_sort(self, key: SortKey | str) -> None:
        key = SortKey(key)
        items = self._tickets
        for i in range(1, len(items)):
            ticket = items[i]
            spot = next(
                (j for j in range(i) if not key.precedes(items[j], ticket)), i
            )
            if spot != i:
                items.insert(spot, items.pop(i))

    def selection_sort(self, key: SortKey | str) -> None:
        key = SortKey(key)
        items = self._tickets
        for i in range(len(items)):
            best = i
            for j in range(i + 1, len(items)):
                if key.precedes(items[j], items[best]):
                    best = j
            if best != i:
                items[i], items[best] = items[best], items[i]

    def _bisect(self, matches, goes_right, missing: str) -> Ticket:
        items = self._tickets
        if not items:
            raise TicketNotFoundError(EMPTY_QUEUE_MESSAGE)
        # The front ticket is probed first, then the rest is halved.
        if matches(items[0]):
            return items[0]
        if not goes_right(items[0]):
            raise TicketNotFoundError(missing)
        lo, hi = 1, len(items)
        while lo < hi:
            mid = lo + (hi - lo) // 2
            if matches(items[mid]):
                return items[mid]
            if goes_right(items[mid]):
                lo = mid + 1
            else:
                hi = mid
        raise TicketNotFoundError(missing)

    def binary_search_by_id(self, ticket_id: int) -> Ticket:
        """Binary search for an ID; the queue must be in ascending ID order."""
        return self._bisect(
            lambda t: t.ticket_id == ticket_id,
            lambda t: t.ticket_id < ticket_id,
            f"Ticket ID {ticket_id} does not exist and is not found in the database.",
        )

    def binary_search_by_name(self, name: str) -> Ticket:
        """Binary search for a customer; the queue must be in name order."""
        return self._bisect(
            lambda t: t.customer_name == name,
            lambda t: t.customer_name < name,
            f"Customer '{name}' does not exist and is not found in the database.",
        )

    def interpolation_search_by_id(self, ticket_id: int) -> Ticket:
        """Interpolation search for an ID; the queue must be in ascending ID order."""
        items = self._tickets
        if not items:
            raise TicketNotFoundError(EMPTY_QUEUE_MESSAGE)
        n = len(items)
        lo, hi = 0, n
        first = True
        while first or lo != hi:
            first = False
            start_id = items[lo].ticket_id
            end_id = items[-1].ticket_id if hi == n else items[hi].ticket_id
            if start_id == ticket_id:
                return items[lo]
            if end_id == ticket_id:
                return items[-1]
            if start_id == end_id or not start_id < ticket_id <= end_id:
                break
            count = (hi - lo) % n
            mid = lo + (ticket_id - start_id) * count // (end_id - start_id)
            if items[mid].ticket_id == ticket_id:
                return items[mid]
            if items[mid].ticket_id < ticket_id:
                lo = mid + 1
            else:
                hi = mid
        raise TicketNotFoundError(
            f"Ticket ID {ticket_id} does not exist and is not found in the database."
        )

    def linear_search_by_name(self, name: str) -> Ticket:
        """Return the first queued ticket for customer ``name``."""
        if not self._tickets:
            raise TicketNotFoundError(EMPTY_QUEUE_MESSAGE)
        for ticket in self._tickets:
            if ticket.customer_name == name:
                return ticket
        raise TicketNotFoundError(
            f"Customer '{name}' does not exist and is not found in the database."
        )

    def search(
        self,
        algorithm: str,
        ticket_id: int | None = None,
        name: str | None = None,
    ) -> Ticket:
        """Search by ID or by customer name with the configured algorithm.

        A search by name first orders the queue by name.
        """
        if algorithm not in SEARCH_ALGORITHMS:
            raise ConfigError("Invalid searching algorithm in the config file.")
        if (ticket_id is None) == (name is None):
            raise ValueError("give exactly one of ticket_id and name")
        if ticket_id is not None:
            if algorithm == "binarysearch":
                return self.binary_search_by_id(ticket_id)
            return self.interpolation_search_by_id(ticket_id)
        self.bubble_sort(SortKey.NAME)
        if algorithm == "binarysearch":
            return self.binary_search_by_name(name)
        return self.linear_search_by_name(name)

    def display(self) -> str:
        """Return a report of every pending ticket."""
        if not self._tickets:
            return "Ticket Queue is empty. Nothing to print.\n"
        header = (
            f"_____________ Displaying {len(self._tickets)} Tickets "
            "Pending Agent Assignment _____________ \n"
        )
        return header + "".join(t.details() + "\n" for t in self._tickets) + "\n"