"""Support agents and the directory that hands tickets out to them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator

from helpdesk.config import ConfigError
from helpdesk.resolution_log import ResolutionLog
from helpdesk.ticket_queue import TicketQueue
from helpdesk.tickets import Ticket, TicketNotFoundError, current_time

DEFAULT_CAPACITY = 5
STATUS_AVAILABLE = "Available"
STATUS_UNAVAILABLE = "Unavailable"

_agent_ids = itertools.count(1)


@dataclass
class Agent:
    """A support agent who works on up to ``max_capacity`` tickets at once."""

    name: str = ""
    agent_id: int = field(default_factory=lambda: next(_agent_ids))
    available: bool = True
    status: str = STATUS_AVAILABLE
    max_capacity: int = DEFAULT_CAPACITY
    tickets: list[Ticket] = field(default_factory=list)
    resolved_count: int = 0

    @property
    def assigned_count(self) -> int:
        return len(self.tickets)

    def assign(self, ticket: Ticket, queue: TicketQueue) -> Ticket:
        """Take ``ticket`` on and remove the front ticket from ``queue``.

        Raises ``IndexError`` if nothing is pending and ``ValueError`` if the
        agent is already at full capacity.
        """
        if not len(queue):
            raise IndexError(
                "There is no pending ticket to be assigned at the moment."
            )
        if self.assigned_count >= self.max_capacity:
            raise ValueError(
                f"Agent {self.name} has reached maximum ticket capacity."
            )
        self.tickets.append(ticket)
        queue.dequeue()
        if self.assigned_count == self.max_capacity:
            self.mark_unavailable()
        return ticket

    def mark_unavailable(self) -> None:
        self.set_availability(False)

    def set_availability(self, available: bool) -> None:
        self.available = available
        self.status = STATUS_AVAILABLE if available else STATUS_UNAVAILABLE

    def has_ticket(self, ticket: Ticket) -> bool:
        return any(t.ticket_id == ticket.ticket_id for t in self.tickets)

    def assigned_ticket(self, index: int) -> Ticket:
        """Return the ticket at ``index`` among those assigned."""
        if not 0 <= index < self.assigned_count:
            raise IndexError("Invalid ticket index")
        return self.tickets[index]

    def details(self) -> str:
        """Return a printable description of the agent."""
        return (
            f"Agent ID: {self.agent_id}\n"
            f"Agent Name: {self.name}\n"
            f"Status: {self.status}\n"
            f"Availability: {int(self.available)}\n"
            f"Assigned Tickets: {self.assigned_count}\n"
            f"Resolved Tickets: {self.resolved_count}\n\n"
        )

    def tickets_report(self) -> str:
        """Return a report of the tickets assigned to the agent."""
        header = (
            f"_____________ {self.assigned_count} Ticket(s) Assigned to Agent "
            f"'{self.name}' _____________\n"
        )
        return header + "".join(t.details() + "\n" for t in self.tickets) + "\n"


def _load(agent: Agent) -> int:
    return agent.assigned_count


@dataclass
class AgentDirectory:
    """Every agent on duty, in the order they were added or last sorted."""

    _agents: list[Agent] = field(default_factory=list)

    def add(self, agent: Agent) -> None:
        self._agents.append(agent)

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents)

    def assign_next(self, queue: TicketQueue) -> tuple[Agent, Ticket]:
        """Give the front ticket of ``queue`` to the least loaded available agent."""
        candidates = [
            a
            for a in self._agents
            if a.available and 0 <= a.assigned_count < DEFAULT_CAPACITY
        ]
        if not candidates:
            raise LookupError("No available agents to assign the ticket!")
        agent = min(candidates, key=_load)
        if not len(queue):
            raise IndexError(
                "There is no pending ticket to be assigned at the moment."
            )
        ticket = agent.assign(queue.peek(), queue)
        return agent, ticket

    def resolve_highest_priority(
        self, queue: TicketQueue, log: ResolutionLog
    ) -> Ticket:
        """Close the highest priority assigned ticket and log it.

        Among equal priorities the first one found, by agent order and then
        assignment order, is resolved.
        """
        best: tuple[Agent, Ticket] | None = None
        for agent in self._agents:
            for ticket in agent.tickets:
                if best is None or ticket.priority > best[1].priority:
                    best = (agent, ticket)
        if best is None:
            raise TicketNotFoundError(
                "No tickets or No Agents available to resolve!"
            )
        agent, ticket = best
        agent.tickets.remove(ticket)
        ticket.close(current_time())
        if agent.assigned_count < agent.max_capacity:
            agent.set_availability(True)
        self.log_resolved(ticket, log)
        return ticket

    def log_resolved(self, ticket: Ticket, log: ResolutionLog) -> None:
        log.push(ticket)

    def sort(self, algorithm: str) -> None:
        """Order agents by assigned ticket count, busiest first."""
        if not self._agents:
            raise ValueError("No agents added right now. Sorting cannot be done.")
        sorters = {
            "bubblesort": self.bubble_sort,
            "insertionsort": self.insertion_sort,
            "selectionsort": self.selection_sort,
            "quicksort": self.quick_sort,
            "mergesort": self.merge_sort,
        }
        try:
            sorter = sorters[algorithm]
        except KeyError:
            raise ConfigError("Invalid sorting choice in the config file.") from None
        sorter()

    def bubble_sort(self) -> None:
        items = self._agents
        for i in range(len(items)):
            swapped = False
            for j in range(len(items) - i - 1):
                if _load(items[j]) < _load(items[j + 1]):
                    items[j], items[j + 1] = items[j + 1], items[j]
                    swapped = True
            if not swapped:
                break

    def insertion_sort(self) -> None:
        items = self._agents
        for i in range(1, len(items)):
            agent = items[i]
            spot = i
            while spot > 0 and _load(items[spot - 1]) < _load(agent):
                spot -= 1
            if spot != i:
                items.insert(spot, items.pop(i))

    def selection_sort(self) -> None:
        items = self._agents
        for i in range(len(items)):
            best = i
            for j in range(i + 1, len(items)):
                if _load(items[j]) > _load(items[best]):
                    best = j
            if best != i:
                items[i], items[best] = items[best], items[i]

    @staticmethod
    def _partition(items: list[Agent], low: int, high: int) -> int:
        pivot = _load(items[low])
        start, end = low, high
        while start < end:
            while start <= high and _load(items[start]) >= pivot:
                start += 1
            while end >= low and _load(items[end]) < pivot:
                end -= 1
            if start < end:
                items[start], items[end] = items[end], items[start]
        items[low], items[end] = items[end], items[low]
        return end

    def quick_sort(self) -> None:
        items = self._agents
        pending = [(0, len(items) - 1)]
        while pending:
            low, high = pending.pop()
            if low < high:
                p = self._partition(items, low, high)
                pending.append((low, p - 1))
                pending.append((p + 1, high))

    def merge_sort(self) -> None:
        """Busiest first; among equal loads, longer names come first."""

        def first_of(left: Agent, right: Agent) -> bool:
            if _load(left) != _load(right):
                return _load(left) > _load(right)
            return len(left.name) >= len(right.name)

        def merged(items: list[Agent]) -> list[Agent]:
            if len(items) < 2:
                return items
            mid = (len(items) - 1) // 2 + 1
            left, right = merged(items[:mid]), merged(items[mid:])
            out: list[Agent] = []
            i = j = 0
            while i < len(left) and j < len(right):
                if first_of(left[i], right[j]):
                    out.append(left[i])
                    i += 1
                else:
                    out.append(right[j])
                    j += 1
            out.extend(left[i:])
            out.extend(right[j:])
            return out

        self._agents[:] = merged(self._agents)

    def display(self) -> str:
        """Return a report listing every agent."""
        if not self._agents:
            return "No Agents added in the database at the moment.\n"
        header = f"_____________ Displaying Agents: {len(self._agents)} _____________\n"
        return header + "".join(a.details() for a in self._agents)

    def agent_tickets(self, agent_id: int) -> str:
        """Return the ticket report of the agent at 1-based position ``agent_id``."""
        if not 1 <= agent_id <= len(self._agents):
            raise LookupError("Invalid Agent ID. Such Agent does not exist.")
        return self._agents[agent_id - 1].tickets_report()

    def all_assigned_tickets(self) -> str:
        """Return the ticket reports of every agent that has tickets."""
        return "".join(
            a.tickets_report() for a in self._agents if a.assigned_count
        )