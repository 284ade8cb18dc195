"""Human-readable byte counts, signed deltas and percentages.

All rounding is decimal half-up so that ``1536`` renders as ``1.5KiB`` and
``0.05`` steps never fall victim to binary floating point.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from .diff.models import MetricDiff

KIB = 1024
MIB = 1024 * 1024

_ONE_DECIMAL = Decimal("0.1")
_TWO_DECIMALS = Decimal("0.01")


def _round(value: Decimal, places: Decimal) -> str:
    return str(value.quantize(places, rounding=ROUND_HALF_UP))


def pretty_size(num_bytes: int) -> str:
    """Format a byte count: ``512B``, ``1.5KiB``, ``2.0MiB``."""
    if num_bytes < KIB:
        return f"{num_bytes}B"
    if num_bytes < MIB:
        return f"{_round(Decimal(num_bytes) / KIB, _ONE_DECIMAL)}KiB"
    return f"{_round(Decimal(num_bytes) / MIB, _ONE_DECIMAL)}MiB"


def sign(value: int) -> str:
    return "+" if value >= 0 else "-"


def signed_delta(num_bytes: int) -> str:
    """Format a size delta with an explicit sign: ``+512B``, ``-1.0KiB``."""
    return f"{sign(num_bytes)}{pretty_size(abs(num_bytes))}"


def format_percent(metric: MetricDiff) -> str:
    """Relative change of a metric, e.g. ``+11.11%``.

    A zero base size reports ``+0.00%`` and an unchanged size reports ``-``.
    """
    if metric.old_size == 0:
        return "+0.00%"
    if metric.old_size == metric.new_size:
        return "-"

    pct = Decimal(abs(metric.difference)) * 100 / Decimal(metric.old_size)
    return f"{sign(metric.difference)}{_round(pct, _TWO_DECIMALS)}%"


def format_size(
    label: str,
    metric: Optional[MetricDiff],
    style: str,
    colorize: Optional[Callable[[str], str]] = None,
) -> str:
    """Format one labelled metric for a report.

    ``style="text"`` gives ``gzip=1.0KiB (+12B)``; ``style="markdown"`` gives
    ``gzip: 1.0KiB``.  A disabled metric renders a ``-`` placeholder.
    ``colorize`` is applied to the numeric value only.
    """
    if style not in ("text", "markdown"):
        raise ValueError(f"Unknown size style: {style!r}")

    if metric is None:
        return f"{label}=-" if style == "text" else f"{label}: -"

    num = pretty_size(metric.new_size)
    if colorize is not None:
        num = colorize(num)

    if style == "text":
        return f"{label}={num} ({signed_delta(metric.difference)})"
    return f"{label}: {num}"
