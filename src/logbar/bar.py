"""Log-friendly progress bar.

Many progress bars redraw a single terminal line.  That breaks down
when output goes to a pipe or a log file, where earlier output cannot
be changed.  :class:`ProgressBar` never looks back: each call to
:meth:`~ProgressBar.inc` or :meth:`~ProgressBar.finish` writes one new,
complete line showing the progress so far::

    bar = ProgressBar.new(10)
    bar.inc(1)     # |████------ ... -| 10%
    bar.inc(3)     # |████████████████ ... -| 40%
    bar.finish()   # |████ ... ████| 100%

Lines go to a *sink*, any callable taking a string (see
:mod:`logbar.sinks`).  The default writes to standard output.
"""

import logging
import threading
from typing import List, Optional

from logbar.errors import InvalidConfiguration
from logbar.render import percent, progress_fraction, render_line, render_scale
from logbar.sinks import Sink, StreamSink
from logbar.style import Style

logger = logging.getLogger(__name__)


class ProgressBar:
    """Progress counter that emits one rendered line per update.

    Safe to share between threads: the counter update, rendering and
    emission of each call happen under one lock, so no increment is
    lost and emitted lines never go backwards.

    Attributes:
        total: Number of steps representing 100%.
        current: Steps completed so far, ``0 <= current <= total``.
        style: The :class:`~logbar.style.Style` used for every line.
    """

    def __init__(
        self,
        total: int,
        style: Optional[Style] = None,
        sink: Optional[Sink] = None,
    ) -> None:
        """Create a bar at zero progress.

        Args:
            total: Steps representing 100%; must be a positive integer.
            style: Rendering style; defaults to :meth:`Style.default`.
            sink: Callable receiving each rendered line; defaults to a
                :class:`~logbar.sinks.StreamSink` on standard output.

        Raises:
            InvalidConfiguration: If *total* is not a positive integer.
        """
        if isinstance(total, bool) or not isinstance(total, int):
            raise InvalidConfiguration(
                f"total must be an integer, got {type(total).__name__}"
            )
        if total <= 0:
            raise InvalidConfiguration(f"total must be positive, got {total}")

        self._total = total
        self._current = 0
        self._finished = False
        self._style = style if style is not None else Style.default()
        self._sink = sink if sink is not None else StreamSink()
        self._lock = threading.Lock()
        logger.debug("created progress bar with %d steps", total)

    @classmethod
    def new(cls, total: int, sink: Optional[Sink] = None) -> "ProgressBar":
        """Create a bar with the default style."""
        return cls(total, Style.default(), sink)

    @classmethod
    def with_style(
        cls,
        total: int,
        style: Style,
        sink: Optional[Sink] = None,
    ) -> "ProgressBar":
        """Create a bar rendered with *style*."""
        return cls(total, style, sink)

    @property
    def total(self) -> int:
        return self._total

    @property
    def current(self) -> int:
        return self._current

    @property
    def style(self) -> Style:
        return self._style

    @property
    def fraction(self) -> float:
        """Progress as a float in ``[0.0, 1.0]``."""
        return progress_fraction(self._current, self._total)

    @property
    def percent(self) -> int:
        """Progress as a floored integer percentage."""
        return percent(self._current, self._total)

    @property
    def is_complete(self) -> bool:
        return self._current >= self._total

    @property
    def finished(self) -> bool:
        """Whether :meth:`finish` has been called."""
        return self._finished

    def render(self) -> str:
        """Return the line for the current state without emitting it."""
        return render_line(self._current, self._total, self._style)

    def inc(self, amount: int = 1) -> int:
        """Advance by *amount* steps and emit one line.

        A line is emitted even when *amount* is 0 or the bar is already
        complete.  Progress saturates at :attr:`total`; negative amounts
        count as 0.

        Args:
            amount: Steps completed since the last call.

        Returns:
            The new :attr:`current` value.

        Raises:
            InvalidConfiguration: If *amount* is not an integer.  The
                bar is left unchanged and nothing is emitted.
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidConfiguration(
                f"amount must be an integer, got {type(amount).__name__}"
            )
        with self._lock:
            self._current = min(self._current + max(amount, 0), self._total)
            self._sink(self.render())
            return self._current

    def finish(self) -> int:
        """Jump to 100% and emit the completed line.

        Each call emits another line, including repeated calls.

        Returns:
            :attr:`total`.
        """
        with self._lock:
            self._current = self._total
            if not self._finished:
                logger.debug("progress bar finished at %d steps", self._total)
            self._finished = True
            self._sink(self.render())
            return self._current

    def header(self) -> List[str]:
        """Emit the scale header (labels and checkpoint ticks).

        Never called implicitly; call it before the first update to
        draw a reference scale above the progress lines.

        Returns:
            The emitted lines.
        """
        lines = render_scale(self._style)
        with self._lock:
            for line in lines:
                self._sink(line)
        return lines

    def __enter__(self) -> "ProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finish()

    def __repr__(self) -> str:
        return f"ProgressBar(current={self._current}, total={self._total})"
