"""Output rendering for typocheck."""

from typocheck.reports.helpers import format_time
from typocheck.reports.output import (
    format_summary,
    format_verdict,
    write_summary,
    write_verdicts,
)

__all__ = [
    "format_summary",
    "format_time",
    "format_verdict",
    "write_summary",
    "write_verdicts",
]
