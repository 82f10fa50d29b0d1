"""Exceptions raised by logbar.

Only construction and configuration can fail.  Updating and rendering a
bar never raise; out-of-range input is clamped instead.
"""


class InvalidConfiguration(ValueError):
    """A bar, style or style file was given an unusable value.

    Subclasses :class:`ValueError` so callers that already guard
    against bad values keep working.
    """
