import pytest

from hierlog.filter import Decision, Filter
from hierlog.loggingevent import Level, LoggingEvent


class _MinLevelFilter(Filter):
    def __init__(self, minimum):
        super().__init__()
        self.minimum = minimum
        self.activated = False

    def activate_options(self):
        self.activated = True

    def decide(self, event):
        return Decision.NEUTRAL if event.level >= self.minimum else Decision.DENY


class _AcceptAll(Filter):
    def decide(self, event):
        return Decision.ACCEPT


def test_filter_is_abstract():
    with pytest.raises(TypeError):
        Filter()


def test_default_next_is_none_and_can_chain():
    first = _MinLevelFilter(Level.INFO)
    second = _AcceptAll()
    assert first.next is None
    first.next = second
    assert first.next is second
    assert first.next.decide(LoggingEvent(None, Level.TRACE, "x")) is Decision.ACCEPT


def test_decisions():
    flt = _MinLevelFilter(Level.WARN)
    assert flt.decide(LoggingEvent(None, Level.DEBUG, "x")) is Decision.DENY
    assert flt.decide(LoggingEvent(None, Level.ERROR, "x")) is Decision.NEUTRAL


def test_chain_walk_reaches_accept():
    first = _MinLevelFilter(Level.INFO)
    first.next = _AcceptAll()
    event = LoggingEvent(None, Level.WARN, "x")
    decisions = []
    current = first
    while current is not None:
        decisions.append(current.decide(event))
        current = current.next
    assert decisions == [Decision.NEUTRAL, Decision.ACCEPT]


def test_activate_options_hook():
    flt = _MinLevelFilter(Level.INFO)
    flt.activate_options()
    assert flt.activated is True
    assert flt.decide(LoggingEvent(None, Level.INFO, "x")) is Decision.NEUTRAL

    plain = _AcceptAll()
    plain.next = flt
    Filter.activate_options(plain)
    assert plain.next is flt


def test_decision_at_minimum_boundary():
    flt = _MinLevelFilter(Level.WARN)
    assert flt.decide(LoggingEvent(None, Level.WARN, "x")) is Decision.NEUTRAL
    assert flt.decide(LoggingEvent(None, Level.INFO, "x")) is Decision.DENY