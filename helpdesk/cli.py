"""Interactive menu for the support desk."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from helpdesk.agents import Agent, AgentDirectory
from helpdesk.config import DEFAULT_CONFIG_PATH, ConfigError, read_search_algorithm, read_sort_algorithm
from helpdesk.resolution_log import ResolutionLog
from helpdesk.ticket_queue import SortKey, TicketQueue
from helpdesk.tickets import Ticket, TicketNotFoundError, TicketRegistry, read_int

MENU = (
    "\n---------------------- One-Stop System Menu ----------------------\n"
    "1. Add Ticket\n"
    "2. Remove Ticket\n"
    "3. Search for Ticket\n"
    "4. Sort Tickets\n"
    "5. Display Pending Tickets\n"
    "6. Display All Tickets created today\n"
    "7. Add Agent\n"
    "8. Sort Agent by number of Tickets Assigned\n"
    "9. Display all Agents\n"
    "10. Assign Ticket to Agent\n"
    "11. Resolve Ticket\n"
    "12. Show Recent Ticket Log\n"
    "13. Show All Ticket Logs\n"
    "14. Exit\n"
    "Choose an option: "
)

EXIT_CHOICE = 14

_QUEUE_SORT_MESSAGES = {
    "bubblesort": "Tickets sorted successfully based on the chosen criterion.",
    "insertionsort": (
        "Tickets sorted successfully using insertion sort based on the chosen criterion."
    ),
    "selectionsort": (
        "Tickets sorted successfully using selection sort based on the chosen criterion."
    ),
}


class _Session:
    def __init__(
        self,
        read_line: Callable[[], str],
        write: Callable[[str], object],
        config_path: str,
    ) -> None:
        self.read_line = read_line
        self.write = write
        self.config_path = config_path
        self.registry = TicketRegistry()
        self.queue = TicketQueue()
        self.log = ResolutionLog()
        self.agents = AgentDirectory()
        self.actions = {
            1: self.add_ticket,
            2: self.remove_ticket,
            3: self.search_ticket,
            4: self.sort_tickets,
            5: lambda: self.write(self.queue.display()),
            6: lambda: self.write(self.registry.display()),
            7: self.add_agent,
            8: self.sort_agents,
            9: lambda: self.write(self.agents.display()),
            10: self.assign_ticket,
            11: self.resolve_ticket,
            12: lambda: self.write(self.log.show_recent()),
            13: lambda: self.write(self.log.show_all()),
        }

    def say(self, line: str) -> None:
        self.write(line + "\n")

    def text(self, prompt: str) -> str:
        self.write(prompt)
        line = self.read_line()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def number(self, prompt: str) -> int:
        self.write(prompt)
        return read_int(self.read_line, self.write)

    def loop(self) -> None:
        while True:
            self.write(MENU)
            choice = read_int(self.read_line, self.write)
            if choice == EXIT_CHOICE:
                self.say("Exiting program. Ba-bye!")
                return
            action = self.actions.get(choice)
            if action is None:
                self.say("Invalid option. Please try again.")
            else:
                action()

    def add_ticket(self) -> None:
        name = self.text("Enter customer name: ")
        priority = self.number("Enter priority: ")
        description = self.text("Enter Support Request Description: ")
        ticket = Ticket.new(name, priority, description)
        self.say(f"Ticket ID {ticket.ticket_id} has been added.")
        self.queue.enqueue(ticket)
        self.registry.add(ticket)

    def remove_ticket(self) -> None:
        ticket_id = self.number("Enter Ticket ID to remove: ")
        try:
            ticket = self.queue.remove(ticket_id)
        except TicketNotFoundError as exc:
            self.say(str(exc))
            return
        self.say(
            f"Ticket ID {ticket_id} registered under the name "
            f"'{ticket.customer_name}' has been removed from the tickets list."
        )

    def search_ticket(self) -> None:
        try:
            algorithm = read_search_algorithm(self.config_path)
        except ConfigError as exc:
            self.say(str(exc))
            return
        self.say("How do you want to search for the ticket? ")
        self.say("1. Search by ID\n2. Search by Customer Name")
        choice = read_int(self.read_line, self.write)
        try:
            if choice == 1:
                ticket_id = self.number("Enter the ticket ID that you wanna search: ")
                ticket = self.queue.search(algorithm, ticket_id=ticket_id)
            elif choice == 2:
                name = self.text("Enter the customer name that you wanna search: ")
                if len(self.queue) >= 2:
                    self.say(_QUEUE_SORT_MESSAGES["bubblesort"])
                ticket = self.queue.search(algorithm, name=name)
            else:
                self.say("Invalid choice.")
                return
        except TicketNotFoundError as exc:
            self.say(str(exc))
            return
        self.write("Match Found! Customer Details:\n" + ticket.details() + "\n")

    def sort_tickets(self) -> None:
        if not Path(self.config_path).is_file():
            self.say("Error opening the file.")
            return
        answer = self.text(
            "\nEnter sorting criteria (p for Priority, n for Name, "
            "t for Ticket Open Time): "
        ).strip()[:1]
        try:
            key = SortKey(answer)
        except ValueError:
            self.say("Tickets' sorting failed. Invalid sorting selection.")
            return
        try:
            algorithm = read_sort_algorithm(self.config_path)
            self.queue.sort(key, algorithm)
        except (ConfigError, ValueError) as exc:
            self.say(str(exc))
            return
        if len(self.queue) >= 2:
            self.say(_QUEUE_SORT_MESSAGES[algorithm])

    def add_agent(self) -> None:
        name = self.text("Enter Agent Name: ")
        self.agents.add(Agent(name=name))
        self.say(f"Agent '{name}' has been added to the database.")

    def sort_agents(self) -> None:
        if not len(self.agents):
            self.say("No agents added right now. Sorting cannot be done.")
            return
        self.say("Starting the sort.")
        try:
            self.agents.sort(read_sort_algorithm(self.config_path))
        except ConfigError as exc:
            self.say(str(exc))

    def assign_ticket(self) -> None:
        try:
            agent, ticket = self.agents.assign_next(self.queue)
        except (IndexError, ValueError) as exc:
            self.say(str(exc))
            return
        except LookupError as exc:
            self.say(str(exc))
            return
        self.say(f"Ticket {ticket.ticket_id} assigned to Agent {agent.name}")
        self.say(
            f"Ticket ID {ticket.ticket_id} has been dequeued from the Ticket Queue."
        )
        if not agent.available:
            self.say(f"Agent {agent.name} is now unavailable (Full capacity).")

    def resolve_ticket(self) -> None:
        try:
            ticket = self.agents.resolve_highest_priority(self.queue, self.log)
        except TicketNotFoundError as exc:
            self.say(str(exc))
            self.say(
                "You must add a ticket and an agent to continue, also make sure "
                "the ticket is first assigned to an agent."
            )
            return
        self.say(f"Resolving Ticket ID {ticket.ticket_id}...")
        self.say(f"Ticket ID {ticket.ticket_id} has been resolved and logged.")


def run(
    read_line: Callable[[], str],
    write: Callable[[str], object],
    config_path: str = DEFAULT_CONFIG_PATH,
) -> None:
    """Run the menu until the user exits or input runs out."""
    try:
        _Session(read_line, write, config_path).loop()
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Customer support desk.")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="file naming the sorting and searching algorithms",
    )
    args = parser.parse_args(argv)
    run(sys.stdin.readline, sys.stdout.write, args.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())