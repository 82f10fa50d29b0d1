"""Visual configuration for progress bars.

This module defines the :class:`Style` value object.  A style is
immutable: every builder method returns a new instance, so one base
style can be shared between several bars that each customise it::

    base = Style.default().width(80)
    quiet = base.labels(False)
    arrows = base.tick("↓").bar("-").indicator("█")
"""

from dataclasses import dataclass, replace

from logbar.errors import InvalidConfiguration

DEFAULT_WIDTH: int = 40
"""Default bar body width in characters."""

DEFAULT_TICK: str = "|"
"""Default boundary glyph."""

DEFAULT_BAR: str = "-"
"""Default glyph for positions not yet reached."""

DEFAULT_INDICATOR: str = "█"
"""Default glyph for completed positions."""


def _check_glyph(name: str, value: object) -> str:
    """Return *value* if it is a single-character string.

    Raises:
        InvalidConfiguration: If *value* is not a ``str`` of length 1.
    """
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidConfiguration(
            f"{name} must be a single character, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class Style:
    """Rendering parameters for a :class:`~logbar.bar.ProgressBar`.

    Attributes:
        bar_width: Width of the bar body, excluding the two boundary ticks
            and the label.  Widths below 2 are accepted and render as
            the two ticks only.
        show_labels: Whether a ``XX%`` label follows the bar.
        tick_char: Glyph drawn at both ends of the bar.
        bar_char: Glyph for positions not yet reached.
        indicator_char: Glyph for completed positions.
    """

    bar_width: int = DEFAULT_WIDTH
    show_labels: bool = True
    tick_char: str = DEFAULT_TICK
    bar_char: str = DEFAULT_BAR
    indicator_char: str = DEFAULT_INDICATOR

    def __post_init__(self) -> None:
        # bool is a subclass of int
        if isinstance(self.bar_width, bool) or not isinstance(self.bar_width, int):
            raise InvalidConfiguration(
                f"width must be an integer, got {type(self.bar_width).__name__}"
            )
        _check_glyph("tick", self.tick_char)
        _check_glyph("bar", self.bar_char)
        _check_glyph("indicator", self.indicator_char)

    @classmethod
    def default(cls) -> "Style":
        """Return the default style (width 40, labels on, ``|``, ``-``, ``█``)."""
        return cls()

    @classmethod
    def new(cls) -> "Style":
        """Alias for :meth:`default`."""
        return cls.default()

    def width(self, width: int) -> "Style":
        """Return a copy with the bar body *width* replaced."""
        return replace(self, bar_width=width)

    def labels(self, labels: bool) -> "Style":
        """Return a copy with percentage labels switched on or off."""
        return replace(self, show_labels=bool(labels))

    def tick(self, tick: str) -> "Style":
        """Return a copy using *tick* as the boundary glyph."""
        return replace(self, tick_char=tick)

    def bar(self, bar: str) -> "Style":
        """Return a copy using *bar* for positions not yet reached."""
        return replace(self, bar_char=bar)

    def indicator(self, indicator: str) -> "Style":
        """Return a copy using *indicator* for completed positions."""
        return replace(self, indicator_char=indicator)
