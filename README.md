# helpdesk

A console help desk for customer-support tickets. Tickets wait in a queue
that is kept in priority order. Each ticket goes to the least-loaded available
agent. The highest-priority assigned ticket is resolved and logged first.

## Install

    pip install .

## Run

    helpdesk
    helpdesk --config path/to/config.txt

The interactive menu offers these options:

1. Add Ticket
2. Remove Ticket
3. Search for Ticket (by ID or by customer name)
4. Sort Tickets (by priority `p`, customer name `n` or open time `t`)
5. Display Pending Tickets
6. Display All Tickets created today
7. Add Agent
8. Sort Agent by number of Tickets Assigned
9. Display all Agents
10. Assign Ticket to Agent
11. Resolve Ticket
12. Show Recent Ticket Log
13. Show All Ticket Logs
14. Exit

The menu also ends when input runs out.

Each agent holds at most five tickets at once. A full agent is marked
unavailable until one of its tickets is resolved. Resolving a ticket marks it
`Closed`, stamps its close time and pushes it onto the resolution log.

## Configuration

The sorting and searching algorithms are read from `config.txt` in the
working directory. Use `--config` to name another file.

- first line: `bubblesort`, `insertionsort`, `selectionsort`, `quicksort` or `mergesort`
- second word: `binarysearch` or `interpolationsearch`

Quick sort and merge sort apply to agents only. The ticket queue accepts
bubble, insertion and selection sort. When agents are merge sorted, agents
with the same ticket count are ordered longer name first.

A search by customer name first sorts the queue by name. A search by ID
expects the queue to be in ascending ID order, so sort it by open time first.

## Library use

```python
from helpdesk.tickets import Ticket, TicketRegistry
from helpdesk.ticket_queue import TicketQueue
from helpdesk.resolution_log import ResolutionLog
from helpdesk.agents import Agent, AgentDirectory

registry = TicketRegistry()
queue = TicketQueue()
log = ResolutionLog()
agents = AgentDirectory()

ticket = Ticket.new("Alice", 3, "Cannot log in")
queue.enqueue(ticket)
registry.add(ticket)

agents.add(Agent("Bob"))
agents.assign_next(queue)
agents.resolve_highest_priority(queue, log)
print(log.peek().details())
```

Failures are raised as exceptions:

- `TicketNotFoundError` is raised for a missing ticket.
- `IndexError` is raised for an empty queue or log.
- `LookupError` is raised when no agent is available.
- `helpdesk.config.ConfigError` is raised for a missing or invalid configuration file.

`helpdesk.reporting` provides `system_statistics`, `open_tickets`,
`agent_ticket_load` and `resolution_history`. These functions return report
text. The menu does not offer them.

## Limitations

Tickets, agents and the resolution log exist only in memory for one session.
Nothing is saved to disk, and everything is lost when the program exits.

## Tests

    pip install .[test]
    pytest