"""Regenerate the problem index table inside a README file."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

BEGIN_TAG = "<!-- BEGIN DIRECTORY STRUCTURE -->"
END_TAG = "<!-- END DIRECTORY STRUCTURE -->"
TABLE_HEADER = "|Problem|KeyPoint|\n|-|-|\n"
SOLUTION_FILE = "main.cpp"

_KEYPOINT = re.compile(r"// #KEYPOINT (.+)")
_ORDER = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ProblemEntry:
    """One problem directory: its name, numeric order, title and key point."""

    name: str
    order: int
    title: str
    key: str = ""


def _parse_order(name: str) -> int:
    prefix = name.split(".", 1)[0]
    match = _ORDER.match(prefix)
    if match is None:
        raise ValueError(f"problem directory name has no leading number: {name!r}")
    return int(match.group(1))


def _find_keypoint(solution: Path) -> str:
    with solution.open(encoding="utf-8", errors="replace", newline="") as handle:
        for line in handle:
            match = _KEYPOINT.search(line.rstrip("\n"))
            if match:
                return match.group(1)
    return ""


def scan_problems(directory) -> list[ProblemEntry]:
    """Collect the problem directories below ``directory``, sorted by number.

    Directories without a solution file are reported on stderr and skipped.
    """
    directory = Path(directory)
    entries = []
    for child in directory.iterdir():
        if not child.is_dir():
            continue
        name = child.name
        order = _parse_order(name)
        _, dot, rest = name.partition(".")
        title = rest if dot else name
        try:
            key = _find_keypoint(child / SOLUTION_FILE)
        except OSError:
            print(f"Failed to open {name}/{SOLUTION_FILE} for reading", file=sys.stderr)
            continue
        entries.append(ProblemEntry(name, order, title, key))
    return sorted(entries, key=lambda entry: entry.order)


def render_table(problems) -> str:
    """Render the problems as a Markdown table."""
    rows = "".join(
        f"|[{p.name}](Problems/{p.name}/{SOLUTION_FILE})|{p.key}|\n" for p in problems
    )
    return TABLE_HEADER + rows


def splice_readme(content: str, table: str) -> str:
    """Replace the text between the directory-structure tags with ``table``."""
    begin = content.find(BEGIN_TAG)
    end = content.find(END_TAG)
    if begin == -1 or end == -1 or begin >= end:
        raise ValueError("Failed to find the directory structure tags in README.md")
    begin += len(BEGIN_TAG)
    return content[:begin] + "\n" + table + content[end:]


def update_readme(readme_path, problems_dir) -> str:
    """Rewrite the README's problem table in place and return the new text."""
    readme_path = Path(readme_path)
    with readme_path.open(encoding="utf-8", newline="") as handle:
        content = handle.read()
    try:
        table = render_table(scan_problems(problems_dir))
    except OSError:
        print(f"Failed to open directory: {problems_dir}", file=sys.stderr)
        table = ""
    new_content = splice_readme(content, table)
    with readme_path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(new_content)
    return new_content


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Update the problem table in a README.")
    parser.add_argument("--readme", default="../README.md", help="README file to update")
    parser.add_argument("--problems", default="../Problems/", help="directory of problems")
    args = parser.parse_args(argv)
    try:
        update_readme(args.readme, args.problems)
    except OSError as exc:
        print(f"Failed to update {args.readme}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())