#!/usr/bin/env python3
"""Batch dump and render all example trees to text and SVG.

Outputs go to /tmp/flex_dump_renders/.

Usage:
    python scripts/render_examples.py [--theme dark]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from flex_dump.parser import parse_tree  # noqa: E402
from flex_dump.printer import node_to_string  # noqa: E402
from flex_dump.render.svg import render_svg  # noqa: E402
from flex_dump.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/flex_dump_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(json_path: Path, output_dir: Path, theme_name: str) -> tuple[str, list[str]]:
    """Load a tree file and write its text dump and SVG diagram.

    Returns (name, list_of_issues).
    """
    name = json_path.stem

    try:
        root = parse_tree(json_path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    (output_dir / f"{name}.txt").write_text(node_to_string(root) + "\n")
    (output_dir / f"{name}.svg").write_text(render_svg(root, THEMES[theme_name]))
    return name, []


def main():
    parser = argparse.ArgumentParser(description="Batch render example trees")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="light", help="SVG theme"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max((len(f.stem) for f in all_files), default=0)
    any_errors = False

    for json_path in all_files:
        name, issues = render_file(json_path, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "FAIL"
        any_errors = any_errors or bool(issues)

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
