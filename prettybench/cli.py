import argparse
import os
import sys
from contextlib import nullcontext

from prettybench.aggregate import aggregate
from prettybench.parse import parse_lines
from prettybench.spinner import Spinner
from prettybench.summary import normalize_unit, summarize
from prettybench.table import render_footer, render_table


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def read_lines(stream):
    # decode bytes here so stray non-UTF-8 log output stays a passthrough line
    raw = getattr(stream, 'buffer', None)
    if raw is None:
        return stream.readlines()
    return [line.decode('utf-8', errors='replace') for line in raw.readlines()]


def read_input(stream, spin=False):
    with Spinner() if spin else nullcontext():
        return read_lines(stream)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pb',
        description='Format go benchmark output into sorted tables.',
        epilog='example: go test -bench=. -benchmem | pb ms',
    )
    parser.add_argument(
        'unit', nargs='?',
        help='ns, us (or µs), ms or s; chosen from the slowest benchmark if omitted',
    )
    parser.add_argument('--no-color', action='store_true',
                        help='disable ANSI colors')
    parser.add_argument('--no-spinner', action='store_true',
                        help='do not show a spinner while reading stdin')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    requested = args.unit or os.environ.get('PB_UNIT', '')
    unit = normalize_unit(requested)
    if requested and unit is None:
        eprint(f'pb: unknown unit {requested!r}, choosing one automatically')

    spin = not args.no_spinner and sys.stderr.isatty()
    try:
        lines = read_input(stdin, spin=spin)
    except OSError as e:
        eprint(f'pb: failed to read input: {e}')
        return 1

    if not lines:
        return 0

    records, passthrough = parse_lines(lines)
    dataset = aggregate(records)
    summary = summarize(dataset, unit)
    if args.verbose:
        eprint(f'Parsed {len(records)} benchmarks in {len(dataset)} groups, '
               f'{len(passthrough)} other lines; unit {summary.unit}')

    color = not args.no_color
    if dataset:
        print(render_table(dataset, summary, color=color), file=stdout)
    print(render_footer(passthrough, color=color), file=stdout)
    return 0
