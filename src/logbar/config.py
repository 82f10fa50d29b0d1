"""Load progress bar styles from YAML files.

A style file is a mapping with any subset of these keys::

    width: 80          # bar body width
    labels: false      # show the XX% label
    tick: "↓"          # boundary glyph
    bar: "-"           # glyph for positions not yet reached
    indicator: "█"     # glyph for completed positions

Keys that are absent keep the value of the base style.  An empty file
gives the base style unchanged.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from logbar.errors import InvalidConfiguration
from logbar.style import Style

logger = logging.getLogger(__name__)

#: Keys accepted in a style file.
STYLE_KEYS = ("width", "labels", "tick", "bar", "indicator")

_GLYPH_KEYS = ("tick", "bar", "indicator")


def validate_style_yaml(data: object) -> None:
    """Validate parsed YAML against the style file format.

    Checks:

    1. Top-level value is a mapping (or ``None`` for an empty file).
    2. Every key is one of :data:`STYLE_KEYS`.
    3. ``width`` is an integer, ``labels`` a boolean, and each glyph
       a single-character string.

    Args:
        data: The object returned by ``yaml.safe_load()``.

    Raises:
        InvalidConfiguration: Describing the first problem found.
    """
    if data is None:
        return
    if not isinstance(data, dict):
        raise InvalidConfiguration(
            "Invalid style YAML: expected a mapping, "
            f"got {type(data).__name__}"
        )

    for key in data:
        if key not in STYLE_KEYS:
            raise InvalidConfiguration(
                f"Invalid style YAML: unknown key {key!r} "
                f"(expected one of {', '.join(STYLE_KEYS)})"
            )

    # bool is a subclass of int
    width = data.get("width")
    if "width" in data and (isinstance(width, bool) or not isinstance(width, int)):
        raise InvalidConfiguration(
            f"Invalid style YAML: 'width' must be an integer "
            f"(got {type(width).__name__})"
        )

    if "labels" in data and not isinstance(data["labels"], bool):
        raise InvalidConfiguration(
            f"Invalid style YAML: 'labels' must be true or false "
            f"(got {type(data['labels']).__name__})"
        )

    for key in _GLYPH_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidConfiguration(
                f"Invalid style YAML: {key!r} must be a single character "
                f"(got {value!r})"
            )


def style_from_mapping(data: Optional[dict], base: Optional[Style] = None) -> Style:
    """Apply the keys of a validated mapping on top of *base*.

    Args:
        data: Mapping with keys from :data:`STYLE_KEYS`, or ``None``.
        base: Starting style; defaults to :meth:`Style.default`.

    Returns:
        The resulting :class:`~logbar.style.Style`.
    """
    style = base if base is not None else Style.default()
    if not data:
        return style
    if "width" in data:
        style = style.width(data["width"])
    if "labels" in data:
        style = style.labels(data["labels"])
    if "tick" in data:
        style = style.tick(data["tick"])
    if "bar" in data:
        style = style.bar(data["bar"])
    if "indicator" in data:
        style = style.indicator(data["indicator"])
    return style


def load_style(path: Union[str, Path], base: Optional[Style] = None) -> Style:
    """Load a style file.

    Args:
        path: Path to the YAML style file.
        base: Style that absent keys fall back to; defaults to
            :meth:`Style.default`.

    Returns:
        The configured :class:`~logbar.style.Style`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InvalidConfiguration: If the file is not a valid style file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Style file not found: {path}")

    logger.debug("loading style from %s", path)
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise InvalidConfiguration(f"Invalid style YAML: {exc}") from exc

    validate_style_yaml(data)
    return style_from_mapping(data, base)
