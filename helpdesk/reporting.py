"""Summary reports over the tickets, the queue, the log and the agents."""

from __future__ import annotations

from helpdesk.agents import AgentDirectory
from helpdesk.resolution_log import ResolutionLog
from helpdesk.ticket_queue import TicketQueue
from helpdesk.tickets import TicketRegistry


def system_statistics(
    registry: TicketRegistry,
    queue: TicketQueue,
    log: ResolutionLog,
    agents: AgentDirectory,
) -> str:
    """Return counts of created, pending and resolved tickets."""
    return (
        "\n---------------------- System Statistics ----------------------\n"
        f"Total Tickets Created: {len(registry)}\n"
        f"Pending Tickets: {len(queue)}\n"
        f"Resolved Tickets: {len(log)}\n"
        "----------------------------------------------------------------\n"
    )


def open_tickets(queue: TicketQueue) -> str:
    """Return a framed report of the tickets waiting for an agent."""
    return (
        "\n---------------------- Open Tickets ----------------------\n"
        + queue.display()
        + "-----------------------------------------------------------\n"
    )


def agent_ticket_load(agents: AgentDirectory) -> str:
    """Return a framed report of the tickets each busy agent holds."""
    return (
        "\n---------------------- Agent Ticket Load ----------------------\n"
        + agents.all_assigned_tickets()
        + "--------------------------------------------------------------\n"
    )


def resolution_history(log: ResolutionLog) -> str:
    """Return a framed report of every resolved ticket, most recent first."""
    return (
        "\n---------------------- Ticket Resolution History ----------------------\n"
        + log.show_all()
        + "--------------------------------------------------------------------\n"
    )