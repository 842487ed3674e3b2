#!/usr/bin/env python3
"""Batch render all layout fixtures to SVG in both grid and row mode.

Outputs go to /tmp/widget_grid_renders/. overlapping.json is a broken
layout on purpose and reports FAIL.

Usage:
    python scripts/render_fixtures.py [--theme light]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from widget_grid.layout.validator import Severity, validate_layout  # noqa: E402
from widget_grid.parser.layout_file import parse_layout_json  # noqa: E402
from widget_grid.render.svg import RENDER_MODES, render_svg  # noqa: E402
from widget_grid.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/widget_grid_renders")
FIXTURES_DIR = project_root / "tests" / "fixtures"
FIXTURE_FILES = sorted(FIXTURES_DIR.glob("*.json"))


def render_file(
    json_path: Path, output_dir: Path, theme_name: str
) -> tuple[str, list[str]]:
    """Parse, validate, and render a layout file in every mode.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    issues: list[str] = []

    try:
        dashboard = parse_layout_json(json_path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    for v in validate_layout(dashboard.widgets, dashboard.row_configs):
        label = "LAYOUT ERROR" if v.severity == Severity.ERROR else "warning"
        issues.append(f"{label}: {v.message}")

    for mode in RENDER_MODES:
        svg = render_svg(dashboard, THEMES[theme_name], mode=mode)
        (output_dir / f"{name}_{mode}.svg").write_text(svg + "\n")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render layout fixtures")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="dark", help="Visual theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    print(f"Rendering {len(FIXTURE_FILES)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in FIXTURE_FILES)
    any_errors = False

    for json_path in FIXTURE_FILES:
        name, issues = render_file(json_path, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
