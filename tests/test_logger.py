import pytest

from hierlog.logger import Logger, MessageLogger, format_args
from hierlog.loggerrepository import LoggerRepository
from hierlog.loggingevent import Level, LoggingEvent
from hierlog.logstream import LogStream


class _Repository(LoggerRepository):
    def __init__(self):
        self._threshold = Level.ALL
        self._root = Logger(self, Level.DEBUG, "")
        self._loggers = {}

    def exists(self, name):
        return name in self._loggers

    def logger(self, name):
        if name not in self._loggers:
            self._loggers[name] = Logger(self, Level.NULL, name, self._root)
        return self._loggers[name]

    def loggers(self):
        return list(self._loggers.values())

    def root_logger(self):
        return self._root

    def threshold(self):
        return self._threshold

    def set_threshold(self, level):
        self._threshold = Level.from_string(level) if isinstance(level, str) else Level(level)

    def is_disabled(self, level):
        return self._threshold > level

    def reset_configuration(self):
        self._loggers.clear()

    def shutdown(self):
        pass


class _ListAppender:
    def __init__(self):
        self.events = []

    def do_append(self, event):
        self.events.append(event)

    @property
    def messages(self):
        return [e.message for e in self.events]


@pytest.fixture
def repo():
    return _Repository()


def _child(repo, level=Level.NULL, name="c"):
    return Logger(repo, level, name, repo.root_logger())


def test_format_args_in_order():
    assert format_args("a %1 b %2", "x", "y") == "a x b y"


def test_format_args_lowest_first():
    assert format_args("%2 %1", "first", "second") == "second first"


def test_format_args_repeats_and_missing():
    assert format_args("%1-%1", "z") == "z-z"
    assert format_args("no marker", "z") == "no marker"


def test_format_args_converts_values():
    assert format_args("%1", 42) == "42"


def test_effective_level_inherits(repo):
    child = Logger(repo, Level.NULL, "child", repo.root_logger())
    assert child.level == Level.NULL
    assert child.effective_level() == Level.DEBUG
    child.set_level(Level.WARN)
    assert child.effective_level() == Level.WARN


def test_root_null_level_becomes_debug(repo):
    root = Logger(repo, Level.INFO, "")
    root.set_level(Level.NULL)
    assert root.level == Level.DEBUG


def test_child_may_take_null_level(repo):
    child = Logger(repo, Level.INFO, "c", repo.root_logger())
    assert child.level == Level.INFO
    child.set_level(Level.NULL)
    assert child.level == Level.NULL


def test_is_enabled_for_respects_threshold(repo):
    child = Logger(repo, Level.NULL, "c", repo.root_logger())
    assert child.is_debug_enabled()
    assert not child.is_trace_enabled()
    repo.set_threshold(Level.ERROR)
    assert not child.is_warn_enabled()
    assert child.is_error_enabled()
    assert child.is_fatal_enabled()
    assert not child.is_info_enabled()


def test_messages_reach_parent_appenders(repo):
    root_app, child_app = _ListAppender(), _ListAppender()
    repo.root_logger().add_appender(root_app)
    child = Logger(repo, Level.NULL, "c", repo.root_logger())
    child.add_appender(child_app)
    child.info("hello %1", "world")
    assert child_app.messages == ["hello world"]
    assert root_app.messages == ["hello world"]
    assert child_app.events[0].level == Level.INFO
    assert child_app.events[0].logger is child


def test_additivity_off_stops_at_logger(repo):
    root_app, child_app = _ListAppender(), _ListAppender()
    repo.root_logger().add_appender(root_app)
    child = Logger(repo, Level.NULL, "c", repo.root_logger())
    child.add_appender(child_app)
    child.additivity = False
    child.error("oops")
    assert child_app.messages == ["oops"]
    assert root_app.messages == []


def test_disabled_levels_are_dropped(repo):
    app = _ListAppender()
    child = Logger(repo, Level.NULL, "c", repo.root_logger())
    child.add_appender(app)
    child.trace("t")
    child.debug("d")
    child.warn("w")
    child.fatal("f")
    assert app.messages == ["d", "w", "f"]


def test_forced_log_ignores_level(repo):
    app = _ListAppender()
    child = Logger(repo, Level.OFF, "c", repo.root_logger())
    child.add_appender(app)
    child.forced_log(Level.TRACE, "forced")
    assert app.messages == ["forced"]


def test_appender_management(repo):
    a, b = _ListAppender(), _ListAppender()
    logger = Logger(repo, Level.NULL, "c", repo.root_logger())
    logger.add_appender(a)
    logger.add_appender(a)
    logger.add_appender(b)
    assert logger.appenders() == [a, b]
    logger.remove_appender(a)
    assert logger.appenders() == [b]
    logger.remove_all_appenders()
    assert logger.appenders() == []


def test_log_without_message_returns_stream(repo):
    app = _ListAppender()
    logger = Logger(repo, Level.NULL, "c", repo.root_logger())
    logger.add_appender(app)
    stream = logger.debug()
    assert isinstance(stream, LogStream)
    stream << "value=" << 7
    stream.flush()
    assert app.messages == ["value=7"]


def test_log_event_checks_level(repo):
    app = _ListAppender()
    logger = repo.logger("c")
    logger.add_appender(app)
    low = LoggingEvent(logger, Level.TRACE, "low")
    high = LoggingEvent(logger, Level.ERROR, "high")
    logger.log_event(low)
    logger.log_event(high)
    assert app.events == [high]


def test_log_with_location_sets_context(repo):
    app = _ListAppender()
    logger = Logger(repo, Level.NULL, "c", repo.root_logger())
    logger.add_appender(app)
    logger.log_with_location(Level.TRACE, "main.py", 12, "run", "at %1", "start")
    event = app.events[0]
    assert event.message == "at start"
    assert event.file_name() == "main.py"
    assert event.line_number() == 12
    assert event.function_name() == "run"


def test_message_logger(repo):
    app = _ListAppender()
    logger = repo.logger("c")
    logger.add_appender(app)
    MessageLogger(logger, Level.WARN, "f.py", 3, "fn").log("n=%1", 5)
    event = app.events[0]
    assert event.message == "n=5"
    assert event.level == Level.WARN
    assert event.line_number() == 3


def test_message_logger_stream(repo):
    app = _ListAppender()
    logger = repo.logger("c")
    logger.add_appender(app)
    stream = MessageLogger(logger, Level.ERROR).log()
    with stream:
        stream << "bad"
    assert app.messages == ["bad"]


def test_logger_requires_repository():
    with pytest.raises(ValueError):
        Logger(None, Level.DEBUG, "x")


def test_invalid_level_rejected(repo):
    with pytest.raises(ValueError):
        _child(repo).set_level(7)