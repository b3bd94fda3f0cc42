"""Tests for the counts report."""

from __future__ import annotations

import io

import pytest

from bell_sampling.report import counts_to_rows, format_counts, print_counts


def test_rows_total_and_probabilities():
    counts = {"00": 480, "11": 500, "01": 12, "10": 8}
    rows = counts_to_rows(counts)
    assert [r["bitstring"] for r in rows] == ["00", "01", "10", "11"]
    assert sum(r["count"] for r in rows) == 1000
    assert sum(r["prob"] for r in rows) == pytest.approx(1.0)
    assert rows[0]["prob"] == pytest.approx(0.48)


def test_rows_for_zero_total_have_no_probability():
    rows = counts_to_rows({"00": 0})
    assert rows == [{"bitstring": "00", "count": 0, "prob": None}]


def test_format_lists_each_entry_once():
    counts = {"00": 3, "11": 1}
    text = format_counts(counts, "Results")
    lines = text.splitlines()
    assert lines[1] == "Results"
    assert lines[2] == "=" * 50
    assert text.count("|00⟩") == 1
    assert text.count("|11⟩") == 1
    assert "  |00⟩: 3 (75.00%)" in lines
    assert "  |11⟩: 1 (25.00%)" in lines
    assert lines[-1] == "Total shots: 4"


def test_format_percentages_sum_to_100():
    counts = {"00": 1, "01": 1, "10": 1}
    text = format_counts(counts, "Thirds")
    pcts = [float(line.split("(")[1].rstrip("%)")) for line in text.splitlines() if "⟩:" in line]
    assert sum(pcts) == pytest.approx(100.0, abs=0.02)


def test_format_empty_counts():
    text = format_counts({}, "Empty")
    assert text.splitlines()[-1] == "Total shots: 0"
    assert "%" not in text


def test_print_counts_writes_to_stream():
    buf = io.StringIO()
    print_counts({"1": 2}, "One bit", stream=buf)
    out = buf.getvalue()
    assert "  |1⟩: 2 (100.00%)" in out
    assert "Total shots: 2" in out
