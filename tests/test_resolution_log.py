import pytest

from helpdesk.resolution_log import ResolutionLog
from helpdesk.tickets import Ticket


def _ticket(name):
    ticket = Ticket.new(name, 1, "issue")
    ticket.close("later")
    return ticket


def test_push_and_peek_returns_latest():
    log = ResolutionLog()
    first, second = _ticket("a"), _ticket("b")
    log.push(first)
    log.push(second)
    assert log.peek() is second
    assert len(log) == 2


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        ResolutionLog().peek()


def test_iteration_is_most_recent_first():
    log = ResolutionLog()
    tickets = [_ticket(n) for n in ("a", "b", "c")]
    for t in tickets:
        log.push(t)
    assert list(log) == tickets[::-1]


def test_show_recent_empty():
    assert ResolutionLog().show_recent() == (
        "No processed ticket as of now. Nothing to print.\n"
    )


def test_show_recent_has_latest_details():
    log = ResolutionLog()
    log.push(_ticket("old"))
    latest = _ticket("new")
    log.push(latest)
    report = log.show_recent()
    assert report.startswith(
        "_____________ Displaying Most Recent Ticket Log _____________"
    )
    assert latest.details() in report
    assert "Customer Name: old" not in report


def test_show_all_empty():
    assert ResolutionLog().show_all().startswith("Cannot print ticket stack.")


def test_show_all_lists_every_ticket_newest_first():
    log = ResolutionLog()
    older, newer = _ticket("first"), _ticket("second")
    log.push(older)
    log.push(newer)
    report = log.show_all()
    assert report.startswith("_____________ Displaying 2 Resolved Tickets")
    assert report.index("Customer Name: second") < report.index(
        "Customer Name: first"
    )
    assert report.count("Status: Closed") == 2