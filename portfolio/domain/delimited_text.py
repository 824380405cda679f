"""Canonical delimited text — the newline/pipe form of multi-value fields.

The same text is used as the editing surface in forms and as the storage
format in the database:

    badges / bullets   one item per line, blank lines dropped
    metrics            ``value | label`` per line, label optional

Conversion is lossless for well-formed input (no embedded newlines in an
item, no pipe inside a metric value).
"""

import json
import logging
import re
from collections.abc import Iterable

from portfolio.domain.entities import Metric

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
_LEGACY_IMAGE_SEPARATOR = re.compile(r",|\n")

METRIC_SEPARATOR = "|"


def split_lines(value: str | None) -> list[str]:
    """Split newline-delimited text into trimmed, non-blank items."""
    if not value:
        return []
    return [item.strip() for item in _LINE_BREAK.split(str(value)) if item.strip()]


def join_lines(items: Iterable[str]) -> str:
    """Join items one per line, trimming each and dropping blanks."""
    return "\n".join(item.strip() for item in items if item and item.strip())


def parse_metric(line: str) -> Metric:
    """Parse a single ``value | label`` line."""
    value, _, label = line.partition(METRIC_SEPARATOR)
    return Metric(value=value.strip(), label=label.strip())


def format_metric(metric: Metric, separator: str = METRIC_SEPARATOR) -> str:
    """Render a metric as a single line; the separator is omitted without a label."""
    value = metric.value.strip()
    label = metric.label.strip()
    if not label:
        return value
    return f"{value}{separator}{label}"


def parse_metrics(text: str | None) -> list[Metric]:
    """Parse newline-delimited metric lines."""
    return [parse_metric(line) for line in split_lines(text)]


def format_metrics(metrics: Iterable[Metric], separator: str = METRIC_SEPARATOR) -> str:
    """Serialize metrics to canonical text.

    Storage uses a bare ``|``; edit forms pass ``" | "`` for readability.
    Metrics without a value and label are dropped.
    """
    return join_lines(format_metric(m, separator) for m in metrics if m.value.strip() or m.label.strip())


def encode_images(urls: Iterable[str], limit: int | None = None) -> str:
    """Serialize an image URL list to the JSON array stored in ``images`` columns."""
    cleaned = [str(url).strip() for url in urls if url and str(url).strip()]
    if limit is not None:
        cleaned = cleaned[:limit]
    return json.dumps(cleaned)


def decode_images(value: str | None, legacy_image: str = "") -> list[str]:
    """Parse an ``images`` column back into a URL list — never None.

    An empty column falls back to the legacy single ``image`` value. A
    column that is not a JSON array (rows written by hand or by older
    builds) is split on commas/newlines.
    """
    if not value or not value.strip():
        return [legacy_image] if legacy_image else []
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.warning("Unable to parse images column, splitting as text: %r", value[:80])
        return [item.strip() for item in _LEGACY_IMAGE_SEPARATOR.split(value) if item.strip()]
    if not isinstance(parsed, list):
        return []
    urls = [str(url).strip() for url in parsed if url is not None and str(url).strip()]
    if not urls and legacy_image:
        return [legacy_image]
    return urls
