"""Line sinks that receive rendered progress lines.

A sink is any callable taking one line of text (without a newline).
:class:`~logbar.bar.ProgressBar` calls its sink once per update and
never passes control sequences, so output stays valid plain text when
redirected to a file or pipe.

Errors raised by a sink (for example :class:`BrokenPipeError`) reach
the caller of :meth:`~logbar.bar.ProgressBar.inc` unchanged.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

#: Signature of a line sink.
Sink = Callable[[str], None]


class StreamSink:
    """Write each line, newline-terminated, to a text stream.

    Attributes:
        stream: Target stream, or ``None`` for :data:`sys.stdout`
            looked up at write time (so redirection after
            construction is honoured).
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def __call__(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()


class LoggingSink:
    """Emit each line as one record on a :mod:`logging` logger.

    Args:
        logger: Logger to use; defaults to ``logging.getLogger("logbar")``.
        level: Level of the emitted records.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger("logbar")
        self.level = level

    def __call__(self, line: str) -> None:
        self.logger.log(self.level, "%s", line)


class ListSink:
    """Collect lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)
