"""
Result Formatter

Two presentations of a metrics table:
- render_lines(): "label: value unit [direction]", one per metric
- render_table(): fixed-width three-column table with centered cells

    +-------------+----------+-------------------+
    |  Attribute  |  Value   | Extra Information |
    +-------------+----------+-------------------+
    |    Wind     |  3 mph   |        NW         |
    +-------------+----------+-------------------+
"""

from enum import Enum
from typing import List

from twn_weather.providers.metrics import MetricsTable


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# Column widths: Attribute, Value, Extra Information
COLUMN_WIDTHS = (13, 10, 19)
HEADERS = ("Attribute", "Value", "Extra Information")


def format_string(length: int, align: Align, source: str) -> str:
    """
    Pad ``source`` to ``length`` characters.

    Centered text gets any odd leftover space on the right. Text longer
    than ``length`` is returned as is (no truncation).
    """
    if len(source) > length:
        return source

    padding = length - len(source)
    if align is Align.CENTER:
        left = padding // 2
    elif align is Align.RIGHT:
        left = padding
    else:
        left = 0
    right = padding - left

    return f"{' ' * left}{source}{' ' * right}"


def _border() -> str:
    return "+" + "+".join("-" * width for width in COLUMN_WIDTHS) + "+"


def _row(cells, align: Align = Align.CENTER) -> str:
    padded = [format_string(width, align, cell) for width, cell in zip(COLUMN_WIDTHS, cells)]
    return "|" + "|".join(padded) + "|"


def render_table(metrics: MetricsTable, align: Align = Align.CENTER) -> str:
    """Render metrics as a bordered table (no trailing newline)."""
    lines: List[str] = [_border(), _row(HEADERS, align), _border()]

    for label, value in metrics.items():
        magnitude, unit, *extra = value.parts()
        lines.append(_row(
            (label, f"{magnitude} {unit}", extra[0] if extra else ""),
            align
        ))

    lines.append(_border())
    return "\n".join(lines)


def render_lines(metrics: MetricsTable) -> str:
    """Render metrics as plain "label: value unit [direction]" lines."""
    lines = []
    for label, value in metrics.items():
        magnitude, unit, *extra = value.parts()
        line = f"{label}: {magnitude} {unit}"
        if extra and extra[0]:
            line += f" {extra[0]}"
        lines.append(line)
    return "\n".join(lines)
