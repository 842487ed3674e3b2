"""Layout validator: programmatic checks for layout defects.

Runs a suite of checks against a widget collection (and optional row
configs) and returns a list of Violation objects describing any problems
found. The engine itself never raises on these; they surface through the
CLI ``validate`` command and the test suite.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from widget_grid.layout.constants import ROW_COLUMN_CHOICES
from widget_grid.layout.geometry import overlaps
from widget_grid.parser.model import RowConfig, Widget


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_layout(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig] = (),
) -> list[Violation]:
    """Run all layout checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_unique_ids(widgets))
    violations.extend(check_anchor_sanity(widgets))
    violations.extend(check_span_sanity(widgets))
    violations.extend(check_widget_overlap(widgets))
    violations.extend(check_row_configs(widgets, row_configs))
    return violations


def check_unique_ids(widgets: Sequence[Widget]) -> list[Violation]:
    counts = Counter(w.id for w in widgets)
    return [
        Violation(
            check="unique_ids",
            severity=Severity.ERROR,
            message=f"Widget id '{wid}' is used {n} times",
            context={"widget": wid},
        )
        for wid, n in counts.items()
        if n > 1
    ]


def check_anchor_sanity(widgets: Sequence[Widget]) -> list[Violation]:
    """Check that every anchor lies at a non-negative cell."""
    return [
        Violation(
            check="anchor_sanity",
            severity=Severity.ERROR,
            message=f"Widget '{w.id}' has negative anchor ({w.row}, {w.col})",
            context={"widget": w.id},
        )
        for w in widgets
        if w.row < 0 or w.col < 0
    ]


def check_span_sanity(widgets: Sequence[Widget]) -> list[Violation]:
    return [
        Violation(
            check="span_sanity",
            severity=Severity.ERROR,
            message=(
                f"Widget '{w.id}' has span {w.row_span}x{w.col_span}; "
                f"spans must be at least 1"
            ),
            context={"widget": w.id},
        )
        for w in widgets
        if w.row_span < 1 or w.col_span < 1
    ]


def check_widget_overlap(widgets: Sequence[Widget]) -> list[Violation]:
    """Check that no two widget rectangles share a cell."""
    violations: list[Violation] = []
    for i in range(len(widgets)):
        a = widgets[i]
        for j in range(i + 1, len(widgets)):
            b = widgets[j]
            if overlaps(a, b):
                violations.append(
                    Violation(
                        check="widget_overlap",
                        severity=Severity.ERROR,
                        message=(
                            f"Widgets '{a.id}' and '{b.id}' overlap: "
                            f"A=({a.row},{a.col},{a.row_span}x{a.col_span}) "
                            f"B=({b.row},{b.col},{b.row_span}x{b.col_span})"
                        ),
                        context={"widget_a": a.id, "widget_b": b.id},
                    )
                )
    return violations


def check_row_configs(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
) -> list[Violation]:
    """Check row column counts, and warn about widgets wider than their row."""
    violations: list[Violation] = []
    columns = {}
    for config in row_configs:
        columns[config.row_index] = config.columns
        if config.columns not in ROW_COLUMN_CHOICES:
            violations.append(
                Violation(
                    check="row_columns",
                    severity=Severity.ERROR,
                    message=(
                        f"Row {config.row_index} has {config.columns} columns; "
                        f"expected one of {list(ROW_COLUMN_CHOICES)}"
                    ),
                    context={"row": config.row_index},
                )
            )

    for w in widgets:
        limit = columns.get(w.row)
        if limit is not None and w.col + w.col_span > limit:
            violations.append(
                Violation(
                    check="row_overflow",
                    severity=Severity.WARNING,
                    message=(
                        f"Widget '{w.id}' extends to column {w.col + w.col_span} "
                        f"but row {w.row} has {limit} columns"
                    ),
                    context={"widget": w.id, "row": w.row},
                )
            )
    return violations
