"""Pure rendering of progress state into text lines.

Every function here depends only on its arguments: the same
``(current, total, style)`` always renders the same text.  Nothing
here writes output; :mod:`logbar.bar` hands the results to a sink.

A rendered line looks like::

    |████████████----------------------------| 30%

* a leading tick, the bar body of ``style.bar_width`` glyphs, and a
  trailing tick;
* a space and an integer percentage when labels are enabled.

Rounding policy for the number of indicator glyphs: round half up,
then keep at least one indicator for any non-zero progress and at
least one bar glyph for any incomplete progress.  A full body always
means the work is finished, and an empty body always means nothing
has been done yet.
"""

from typing import List

from logbar.style import Style

#: Candidate segment counts for the scale header, most preferred first.
SEGMENTS = (10, 5, 4, 2)

#: Minimum segment width that leaves room for a ``XX%`` label.
_MIN_SEGMENT_WIDTH = 5


def progress_fraction(current: int, total: int) -> float:
    """Return ``current / total`` clamped to ``[0.0, 1.0]``.

    A non-positive *total* counts as complete.
    """
    if total <= 0:
        return 1.0
    return max(0.0, min(1.0, current / total))


def percent(current: int, total: int) -> int:
    """Return the integer percentage of *current* out of *total*.

    The value is floored, so ``100`` appears only once *current*
    reaches *total*.

    Examples:
        >>> percent(3, 10)
        30
        >>> percent(2, 3)
        66
    """
    if total <= 0:
        return 100
    return max(0, min(100, current * 100 // total))


def fill_width(current: int, total: int, width: int) -> int:
    """Return how many body positions show the indicator glyph.

    Args:
        current: Completed steps.
        total: Steps representing 100%.
        width: Bar body width.

    Returns:
        An integer in ``[0, width]``.  ``0`` only when *current* is 0,
        *width* only when *current* has reached *total*.
    """
    if width <= 0:
        return 0
    if total <= 0:
        return width
    current = max(0, min(current, total))
    # round half up, exact in integers
    filled = (2 * current * width + total) // (2 * total)
    if 0 < current < total and width >= 2:
        filled = max(1, min(filled, width - 1))
    return filled


def render_line(current: int, total: int, style: Style) -> str:
    """Render the progress line for *current* out of *total*.

    Args:
        current: Completed steps (clamped into ``[0, total]``).
        total: Steps representing 100%.
        style: Glyphs, width and label setting.

    Returns:
        The line without a trailing newline.  A *style* narrower than
        2 renders as the two ticks with no body.
    """
    width = style.bar_width
    if width < 2:
        body = ""
    else:
        filled = fill_width(current, total, width)
        body = style.indicator_char * filled + style.bar_char * (width - filled)
    line = f"{style.tick_char}{body}{style.tick_char}"
    if style.show_labels:
        line = f"{line} {percent(current, total)}%"
    return line


def num_segments(width: int) -> int:
    """Return how many scale segments a body of *width* is split into.

    Picks the first of :data:`SEGMENTS` that divides *width* evenly
    into segments wide enough for a label, falling back to 1.
    """
    for segments in SEGMENTS:
        if width % segments == 0 and width // segments >= _MIN_SEGMENT_WIDTH:
            return segments
    return 1


def _tick_positions(width: int, segments: int) -> List[int]:
    """Return line indices of the checkpoint ticks, ends included.

    The tick for checkpoint *k* sits over the last body position that
    is filled once ``k / segments`` of the work is done.
    """
    seg_width = width // segments
    inner = [k * seg_width for k in range(1, segments)]
    return [0] + inner + [width + 1]


def _label_row(width: int, segments: int) -> str:
    """Build the ``0% ... 100%`` row with each label ending on its tick.

    Labels that would touch the previous one are left out.
    """
    row = [" "] * (width + 2)
    last_end = -2
    for k, pos in enumerate(_tick_positions(width, segments)):
        label = f"{k * 100 // segments}%"
        start = 0 if k == 0 else pos - len(label) + 1
        if start <= last_end + 1:
            continue
        row[start:start + len(label)] = list(label)
        last_end = start + len(label) - 1
    return "".join(row).rstrip()


def render_scale(style: Style) -> List[str]:
    """Render the optional scale header drawn above the progress lines.

    Produces up to two lines: a percentage label row (only when labels
    are enabled and the body is at least 4 wide) and a tick row that
    marks each checkpoint with the tick glyph.  For the default style::

        0%    20%     40%     60%     80%     100%
        |-------|-------|-------|-------|--------|

    Args:
        style: The style the bar will be rendered with.

    Returns:
        List of lines, without trailing newlines.
    """
    width = style.bar_width
    if width < 2:
        return [style.tick_char * 2]

    segments = num_segments(width)
    lines: List[str] = []
    if style.show_labels and width >= 4:
        lines.append(_label_row(width, segments))

    row = [style.tick_char] + [style.bar_char] * width + [style.tick_char]
    for pos in _tick_positions(width, segments):
        row[pos] = style.tick_char
    lines.append("".join(row))
    return lines
