"""Solr date range fragments."""

from __future__ import annotations

from typing import Final

from SolrBuilder.core.clauses import is_valid_string
from SolrBuilder.utils.dates import INPUT_FORMATS, format_custom_date

SOLR_DATE_FORMAT: Final = "YYYY-MM-DDTHH:mm:ss"
SOLR_TIMEZONE: Final = "UTC"
WILDCARD: Final = "*"


def _to_solr_date(value: str, input_format: str) -> str:
    return format_custom_date(value, SOLR_DATE_FORMAT, input_format, output_timezone=SOLR_TIMEZONE)


def date_range(start: str, input_format: str = INPUT_FORMATS["ISO"], end: str = WILDCARD) -> str:
    """Build ``[<start>Z TO <end>]`` with both bounds in Solr date format.

    Args:
        start: Range start, parsed with ``input_format``.
        input_format: Moment-style pattern or ``INPUT_FORMATS`` key.
        end: Range end, or ``*`` for an open range.

    Returns:
        The range fragment, or an empty string when both bounds are blank.
    """
    if not is_valid_string(start) and not is_valid_string(end):
        return ""
    formatted_start = _to_solr_date(start, input_format)
    formatted_end = end if end == WILDCARD else _to_solr_date(end, input_format)
    return f"[{formatted_start}Z TO {formatted_end}]"


def date_from_now(end: str = WILDCARD, input_format: str = INPUT_FORMATS["ISO"]) -> str:
    """Build ``[NOW/DAY TO <end>]``; Solr resolves ``NOW/DAY`` server side."""
    if not is_valid_string(end):
        return ""
    formatted_end = end if end == WILDCARD else _to_solr_date(end, input_format)
    return f"[NOW/DAY TO {formatted_end}]"
