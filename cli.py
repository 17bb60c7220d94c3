#!/usr/bin/env python3
"""
Presentation Language Graph CLI

A tool for parsing presentation-language schemas (struct, enum and
select definitions as written in protocol specifications) and generating
definition dependency graphs in various formats.
"""

import argparse
import logging
import sys
from pathlib import Path

from grammar.builder import build_graph_from_files
from grammar.parser import ParseError
from exporters import to_gml, to_gv, to_mermaid, to_json


FORMATS = ["gml", "gv", "mermaid", "json"]
DEFAULT_FORMAT = "gml"
ORIENTATIONS = ["LR", "TD", "TB", "RL", "BT"]

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="plgraph",
        description="Parse presentation-language schemas and generate definition dependency graphs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  plgraph messages.tls                     # GML output
  plgraph messages.tls -f gv | neato -Tsvg # Graphviz output
  plgraph a.tls b.tls -f mermaid           # One graph over several files
  plgraph messages.tls -f json -o g.json   # JSON output to file
  plgraph messages.tls --ignore-undefined  # Hide edges to primitive types
        """,
    )

    # Positional arguments
    parser.add_argument(
        "files",
        nargs="+",
        help="Schema files to parse",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT})",
    )

    # Mermaid-specific options
    parser.add_argument(
        "--orientation",
        choices=ORIENTATIONS,
        default="LR",
        help="Mermaid flowchart orientation (default: LR)",
    )

    parser.add_argument(
        "--ignore-undefined",
        action="store_true",
        help="Hide edges to type names that have no definition (e.g. uint8, opaque)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = [Path(name) for name in parsed.files]

    # Build the graph
    try:
        graph = build_graph_from_files(paths)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading schema: {e}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(e, file=sys.stderr)
        return 1

    include_undefined = not parsed.ignore_undefined
    logger.debug("Rendering %r as %s", graph, parsed.format)

    # Generate output
    if parsed.format == "gv":
        output = to_gv(graph, include_undefined=include_undefined)
    elif parsed.format == "mermaid":
        output = to_mermaid(
            graph,
            orientation=parsed.orientation,
            include_undefined=include_undefined,
        )
    elif parsed.format == "json":
        output = to_json(graph, include_undefined=include_undefined)
    else:  # gml (default)
        output = to_gml(graph, include_undefined=include_undefined)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output + "\n", encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
