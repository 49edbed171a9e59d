"""
Command line entry point: print a file with syntax highlighting.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.document import Document
from .core.position import Position
from .core.row import DEFAULT_TAB_WIDTH
from .utils.search import SearchEngine

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="EditCore - print a file with terminal syntax highlighting"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to display"
    )
    parser.add_argument(
        "--find",
        metavar="QUERY",
        help="Only print rows containing QUERY, with the matches highlighted"
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=DEFAULT_TAB_WIDTH,
        help="Number of spaces a tab is rendered as"
    )
    parser.add_argument(
        "--line-numbers",
        action="store_true",
        help="Prefix every printed row with its line number"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr"
    )
    return parser.parse_args(argv)


def render_rows(document: Document, indices: List[int], tab_width: int,
                line_numbers: bool) -> List[str]:
    """Render the given rows of a document as terminal lines."""

    lines = []
    for index in indices:
        row = document.rows[index]
        rendered = row.render(0, len(row), tab_width)
        if line_numbers:
            rendered = f"{index + 1:>6} {rendered}"
        lines.append(rendered)

    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        document = Document.open(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    logger.info("Opened %s as %s", args.file, document.file_type_name)

    if not args.find:
        indices = list(range(len(document)))
    else:
        engine = SearchEngine(document, Position())
        results = engine.find_all(args.find)
        document.highlight(args.find)
        indices = sorted({result.position.y for result in results})
        logger.info("%d match(es) for %r", len(results), args.find)

    for line in render_rows(document, indices, args.tab_width, args.line_numbers):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
