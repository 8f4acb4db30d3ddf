import pytest

from helpdesk.config import ConfigError
from helpdesk.ticket_queue import SortKey, TicketQueue
from helpdesk.tickets import Ticket, TicketNotFoundError


def make(ticket_id, name="", priority=0, open_time=""):
    return Ticket(
        ticket_id=ticket_id,
        customer_name=name,
        priority=priority,
        open_time=open_time,
    )


def queue_of(*tickets):
    queue = TicketQueue()
    for ticket in tickets:
        queue.enqueue(ticket)
    return queue


def ids(queue):
    return [t.ticket_id for t in queue]


def test_enqueue_orders_by_priority_descending():
    queue = queue_of(make(1, priority=2), make(2, priority=9), make(3, priority=5))
    priorities = [t.priority for t in queue]
    assert priorities == sorted(priorities, reverse=True)
    assert len(queue) == 3


def test_enqueue_keeps_arrival_order_for_equal_priority():
    queue = queue_of(make(1, priority=3), make(2, priority=3), make(3, priority=3))
    assert ids(queue) == [1, 2, 3]


def test_peek_and_dequeue_return_front():
    queue = queue_of(make(1, priority=1), make(2, priority=4))
    assert queue.peek().ticket_id == 2
    assert queue.dequeue().ticket_id == 2
    assert ids(queue) == [1]
    assert queue.dequeue().ticket_id == 1
    assert len(queue) == 0


def test_empty_queue_errors():
    queue = TicketQueue()
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(TicketNotFoundError):
        queue.remove(1)


def test_remove_returns_ticket_and_shrinks_queue():
    queue = queue_of(make(1, "Ann"), make(2, "Bob"), make(3, "Cy"))
    removed = queue.remove(2)
    assert removed.customer_name == "Bob"
    assert ids(queue) == [1, 3]
    with pytest.raises(TicketNotFoundError, match="Ticket ID 2 does not exist"):
        queue.remove(2)


def test_discard_is_silent_for_missing():
    queue = queue_of(make(1), make(2))
    queue.discard(7)
    assert ids(queue) == [1, 2]
    queue.discard(1)
    assert ids(queue) == [2]


def test_find():
    queue = queue_of(make(4, "Dee"), make(5, "Eve"))
    assert queue.find(5).customer_name == "Eve"
    with pytest.raises(TicketNotFoundError):
        queue.find(6)


@pytest.mark.parametrize("algorithm", ["bubblesort", "insertionsort", "selectionsort"])
@pytest.mark.parametrize("key", list(SortKey))
def test_sort_orders_by_key(algorithm, key):
    queue = queue_of(
        make(1, "Mia", 2, "Tue 3"),
        make(2, "Al", 7, "Mon 1"),
        make(3, "Zed", 1, "Wed 9"),
        make(4, "Kim", 5, "Mon 2"),
    )
    queue.sort(key, algorithm)
    tickets = list(queue)
    assert all(not key.precedes(b, a) for a, b in zip(tickets, tickets[1:]))
    assert sorted(ids(queue)) == [1, 2, 3, 4]


def test_sort_accepts_letter_keys():
    queue = queue_of(make(1, "Bo"), make(2, "Al"))
    queue.sort("n", "bubblesort")
    assert [t.customer_name for t in queue] == ["Al", "Bo"]


def test_bubble_sort_is_stable():
    queue = queue_of(make(1, "Same", 1), make(2, "Same", 1), make(3, "Abe", 1))
    queue.bubble_sort(SortKey.NAME)
    assert ids(queue) == [3, 1, 2]


def test_insertion_sort_puts_later_equal_first():
    queue = queue_of(make(1, priority=5), make(2, priority=5))
    queue.insertion_sort(SortKey.PRIORITY)
    assert ids(queue) == [2, 1]


def test_sort_rejects_quick_and_merge():
    queue = queue_of(make(1), make(2))
    for algorithm in ("quicksort", "mergesort"):
        with pytest.raises(ValueError, match="cannot be used on Queue"):
            queue.sort(SortKey.PRIORITY, algorithm)


def test_sort_rejects_unknown_algorithm_and_key():
    queue = queue_of(make(1), make(2))
    with pytest.raises(ConfigError):
        queue.sort(SortKey.PRIORITY, "heapsort")
    with pytest.raises(ValueError):
        queue.sort("x", "bubblesort")


ID_SETS = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    [1, 2, 50, 51, 100],
    [7],
    [3, 9],
]

MISSING_CASES = [
    (id_list, missing)
    for id_list in ID_SETS
    for missing in (0, max(id_list) + 1, 49)
]


@pytest.mark.parametrize("id_list", ID_SETS)
@pytest.mark.parametrize(
    "method", ["binary_search_by_id", "interpolation_search_by_id"]
)
def test_id_searches_find_every_ticket(id_list, method):
    queue = queue_of(*(make(i) for i in id_list))
    for ticket_id in id_list:
        assert getattr(queue, method)(ticket_id).ticket_id == ticket_id


@pytest.mark.parametrize("id_list,missing", MISSING_CASES)
@pytest.mark.parametrize(
    "method", ["binary_search_by_id", "interpolation_search_by_id"]
)
def test_id_searches_report_missing(id_list, missing, method):
    queue = queue_of(*(make(i) for i in id_list))
    with pytest.raises(TicketNotFoundError) as excinfo:
        getattr(queue, method)(missing)
    assert "does not exist" in str(excinfo.value)
    assert ids(queue) == sorted(id_list)


@pytest.mark.parametrize(
    "method",
    [
        "binary_search_by_id",
        "interpolation_search_by_id",
        "binary_search_by_name",
        "linear_search_by_name",
    ],
)
def test_searches_on_empty_queue(method):
    argument = 1 if method.endswith("id") else "Ann"
    with pytest.raises(TicketNotFoundError, match="The ticket queue is empty."):
        getattr(TicketQueue(), method)(argument)


def test_binary_search_by_name_on_sorted_queue():
    names = ["Ann", "Bob", "Cat", "Dan", "Eve"]
    queue = queue_of(*(make(i, n) for i, n in enumerate(names, 1)))
    for name in names:
        assert queue.binary_search_by_name(name).customer_name == name
    with pytest.raises(TicketNotFoundError, match="Customer 'Ben'"):
        queue.binary_search_by_name("Ben")


def test_linear_search_by_name_returns_first_match():
    queue = queue_of(make(1, "Zoe"), make(2, "Ann"), make(3, "Zoe"))
    assert queue.linear_search_by_name("Zoe").ticket_id == 1
    with pytest.raises(TicketNotFoundError):
        queue.linear_search_by_name("Max")


def test_search_dispatch():
    queue = queue_of(make(1, "Zoe"), make(2, "Ann"), make(3, "Kip"))
    assert queue.search("binarysearch", ticket_id=1).customer_name == "Zoe"
    assert queue.search("binarysearch", name="Kip").ticket_id == 3
    assert [t.customer_name for t in queue] == ["Ann", "Kip", "Zoe"]
    assert queue.search("interpolationsearch", name="Zoe").ticket_id == 1


def test_search_rejects_bad_arguments():
    queue = queue_of(make(1, "Zoe"))
    with pytest.raises(ConfigError):
        queue.search("linearsearch", ticket_id=1)
    with pytest.raises(ValueError):
        queue.search("binarysearch")
    with pytest.raises(ValueError):
        queue.search("binarysearch", ticket_id=1, name="Zoe")


def test_display():
    assert TicketQueue().display() == "Ticket Queue is empty. Nothing to print.\n"
    first, second = make(1, "Ann", 3), make(2, "Bob", 1)
    report = queue_of(first, second).display()
    assert "Displaying 2 Tickets Pending Agent Assignment" in report.splitlines()[0]
    assert first.details() in report
    assert report.index(first.details()) < report.index(second.details())