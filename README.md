# hierlog

Building blocks for hierarchical logging. Loggers are named, may have a
parent, take their effective level from the nearest ancestor whose level is
not `NULL`, and pass every event on to their parent's appenders as long as
their `additivity` is on.

## What is in the package

- `hierlog.loggingevent`
  - `Level`: an `IntEnum` with `NULL`, `ALL`, `TRACE`, `DEBUG`, `INFO`,
    `WARN`, `ERROR`, `FATAL` and `OFF`; `str(level)` is its name and
    `Level.from_string("warn")` looks a level up by name.
  - `MessageContext`: file, line and function of a log statement.
  - `LoggingEvent`: level, logger, message, nested diagnostic context,
    properties (a copy of the mapped diagnostic context), thread name,
    timestamp in milliseconds since the epoch, a global sequence number,
    a `MessageContext` and a category name. `str(event)` gives
    `"LEVEL:message"`.
  - `sequence_count()`: how many events have been created so far.
  - `serialize_event(event)` / `deserialize_event(data, repository)`: encode
    an event as bytes and decode it again; the logger is looked up by name
    in the repository you pass.
- `hierlog.logger`
  - `Logger`: `set_level`, `effective_level`, `is_enabled_for` and the
    `is_<level>_enabled` checks, `add_appender` / `remove_appender` /
    `remove_all_appenders` / `appenders`, `call_appenders`, and the logging
    calls `trace`, `debug`, `info`, `warn`, `error`, `fatal`, `log`,
    `log_event`, `log_with_location` and `forced_log`. Calling a logging
    method without a message returns a `LogStream` for that level. The root
    logger (a logger without a parent) refuses the `NULL` level and uses
    `DEBUG` instead.
  - `MessageLogger`: logs at a fixed level with a fixed file, line and
    function.
  - `format_args(message, *args)`: fills `%1` … `%99` placeholders; each
    argument replaces every occurrence of the lowest-numbered placeholder
    still in the text.
- `hierlog.logstream.LogStream`: collects values written with `<<` and logs
  them as one message on `flush()` or at the end of a `with` block.
- `hierlog.mdc`: a per-thread key/value context (`put`, `get`, `remove`,
  `context`).
- `hierlog.ndc`: a per-thread stack of strings (`push`, `pop`, `peek`,
  `depth`, `clear`, `set_max_depth`).
- `hierlog.filter`: `Decision` (`ACCEPT`, `DENY`, `NEUTRAL`) and the
  abstract `Filter`, with a `next` filter and a `decide(event)` method.
- `hierlog.layouts`: the abstract `Layout`, `SimpleLayout`
  (`"INFO - message\n"`, or only `"message\n"` with `show_level=False`) and
  `SimpleTimeLayout` (`"dd.mm.YYYY HH:MM[thread] LEVEL logger - message\n"`
  in local time).
- `hierlog.loggerrepository.LoggerRepository`: the abstract interface of a
  repository that owns loggers.
- `hierlog.qmllogger.QmlLogger`: a front end whose logger is named
  `"<context>.<name>"` (context `"Qml"` by default), looked up on first use,
  with `name_changed`, `context_changed` and `level_changed` callback lists.

## What the package does not do

The package has no ready-made logger repository, no appenders, no
configuration from files or settings and no global manager. You supply a
`LoggerRepository` subclass, and an appender is any object with a
`do_append(event)` method. `Filter` objects are not applied by the package
itself; an appender of yours decides how to use them.

## Installation

```
pip install hierlog
```

## Usage

A minimal repository and appender:

```python
from hierlog.layouts import SimpleLayout
from hierlog.logger import Logger
from hierlog.loggerrepository import LoggerRepository
from hierlog.loggingevent import Level


class Repository(LoggerRepository):
    def __init__(self):
        self._root = Logger(self, Level.DEBUG, "")
        self._loggers = {}
        self._threshold = Level.ALL

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
        return level < self._threshold

    def reset_configuration(self):
        for logger in [self._root, *self._loggers.values()]:
            logger.remove_all_appenders()

    def shutdown(self):
        self.reset_configuration()


class PrintAppender:
    def __init__(self, layout):
        self.layout = layout

    def do_append(self, event):
        print(self.layout.format(event), end="")


repository = Repository()
repository.root_logger().add_appender(PrintAppender(SimpleLayout()))

logger = repository.logger("app.db")
logger.info("Loaded %1 records from %2", 42, "cache")
# INFO - Loaded 42 records from cache
```

Diagnostic contexts and streams:

```python
from hierlog import mdc, ndc
from hierlog.logstream import LogStream

ndc.push("request-7")
mdc.put("user", "alice")
logger.warn("Slow response")   # the event carries ndc "request-7" and {"user": "alice"}
ndc.pop()

with LogStream(logger, Level.DEBUG) as stream:
    stream << "value=" << 3    # logged as "value=3" when the block ends
```

## Running the tests

```
pip install -e .[test]
pytest
```