# cli.py
"""
Argument parsing and output handling shared by the four graph tools.

Exit status: 0 on success or -h, 1 on any usage, input or parse error.
"""

import argparse
import sys

from graph_loader import GraphFormatError


class GraphArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints the full help and exits 1 on a usage error."""

    def error(self, message):
        print(f"Error: {message}", file=sys.stderr)
        self.print_help(sys.stderr)
        self.exit(1)


def build_parser(prog, description, start=None, solution=False, solution_help="show the solution"):
    """
    `start` is None (no -i flag), "required" or "ignored" (accepted, any value).
    """
    ap = GraphArgumentParser(prog=prog, description=description)
    ap.add_argument("-f", dest="file", required=True, metavar="FILE",
                    help="file containing the input graph")
    ap.add_argument("-o", dest="output", default=None, metavar="FILE",
                    help="redirect the output to FILE (default: stdout)")
    if start == "required":
        ap.add_argument("-i", dest="start", type=int, required=True, metavar="VERTEX",
                        help="start vertex")
    elif start == "ignored":
        ap.add_argument("-i", dest="start", default=None, metavar="VERTEX",
                        help="start vertex (accepted, not used)")
    if solution:
        ap.add_argument("-s", dest="show_solution", action="store_true", help=solution_help)
    return ap


def open_output(path):
    """Open the output sink; an unopenable file degrades to stdout with a warning."""
    if not path:
        return sys.stdout
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as e:
        print(f"Warning: could not open output file {path} ({e.strerror}); writing to stdout",
              file=sys.stderr)
        return sys.stdout


def write_lines(path, lines):
    out = open_output(path)
    try:
        for line in lines:
            out.write(line + "\n")
    finally:
        if out is not sys.stdout:
            out.close()
        else:
            out.flush()


def run_tool(args, compute):
    """
    Run `compute(args)` which returns the output lines, and write them to the
    sink chosen by -o. Input and parse errors are reported on stderr and nothing
    is written.
    """
    try:
        lines = compute(args)
    except OSError as e:
        print(f"Error: could not open input file {args.file} ({e.strerror})", file=sys.stderr)
        return 1
    except GraphFormatError as e:
        print(f"Error: {args.file}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    write_lines(args.output, lines)
    return 0
