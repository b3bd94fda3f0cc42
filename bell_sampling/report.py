# --*-- coding:utf-8 --*--
# @time:10/16/26 10:28
# @File:report.py

from __future__ import annotations
import sys
from typing import Dict, List, Any, Optional, TextIO

RULE_WIDTH = 50


def counts_to_rows(counts: Dict[str, int]) -> List[Dict[str, Any]]:
    """
    Convert a counts dictionary into one row per bitstring.

    Parameters
    ----------
    counts : Dict[str, int]
        Mapping from bitstring to integer count.

    Returns
    -------
    List[Dict[str, Any]]
        Rows with fields: bitstring, count, prob. Rows are sorted by bitstring.
        prob is None when the total is zero.
    """
    total = sum(int(c) for c in counts.values())
    rows: List[Dict[str, Any]] = []
    for bitstring in sorted(counts):
        count = int(counts[bitstring])
        rows.append({
            "bitstring": bitstring,
            "count": count,
            "prob": (count / total) if total else None,
        })
    return rows


def format_counts(counts: Dict[str, int], title: str) -> str:
    """Render counts as a titled probability report."""
    lines = ["", title, "=" * RULE_WIDTH]
    total = sum(int(c) for c in counts.values())
    if total > 0:
        for row in counts_to_rows(counts):
            lines.append(f"  |{row['bitstring']}⟩: {row['count']} ({row['prob'] * 100.0:.2f}%)")
    lines.append(f"Total shots: {total}")
    return "\n".join(lines)


def print_counts(counts: Dict[str, int], title: str, stream: Optional[TextIO] = None) -> None:
    print(format_counts(counts, title), file=stream or sys.stdout)
