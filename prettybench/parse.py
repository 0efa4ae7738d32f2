import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

BY_WHITESPACE = re.compile(r'\s+')
RUNS_SUFFIX = re.compile(r'-\d+$', re.ASCII)
MARKER = re.compile(r'^Benchmark_?', re.IGNORECASE)
# plain ASCII numbers only: no 1_000 digit groups, no non-ASCII digits
INT = re.compile(r'[+-]?\d+', re.ASCII)
FLOAT = re.compile(
    r'[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|inf|infinity|nan)',
    re.ASCII | re.IGNORECASE,
)


@dataclass
class Record:
    name: str
    sub_iterations: Optional[int] = None
    runs: Optional[int] = None
    speed: Optional[float] = None
    bytes_per_op: Optional[int] = None
    allocs_per_op: Optional[int] = None


class Matched(NamedTuple):
    tokens: List[str]


class Passthrough(NamedTuple):
    line: str


def tokenize(line):
    return [t for t in BY_WHITESPACE.split(line) if t]


def classify(line):
    tokens = tokenize(line)
    if len(tokens) < 4 or not MARKER.match(tokens[0]):
        return Passthrough(line)
    return Matched(tokens)


def to_int(token):
    if not INT.fullmatch(token):
        return None
    return int(token)


def to_float(token):
    if not FLOAT.fullmatch(token):
        return None
    return float(token)


def split_name(token):
    """Strip the -N runs suffix and the marker, then peel off a trailing _N."""
    name = MARKER.sub('', RUNS_SUFFIX.sub('', token))
    head, sep, tail = name.rpartition('_')
    if sep:
        sub = to_int(tail)
        if sub is not None:
            return head, sub
    return name, None


def parse(tokens):
    name, sub = split_name(tokens[0])
    record = Record(
        name=name,
        sub_iterations=sub,
        runs=to_int(tokens[1]),
        speed=to_float(tokens[2]),
    )

    # only present with -benchmem: <bytes> B/op <allocs> allocs/op
    if len(tokens) >= 6:
        record.bytes_per_op = to_int(tokens[4])
        if len(tokens) > 6:
            record.allocs_per_op = to_int(tokens[6])

    return record


def parse_lines(lines):
    records = []
    passthrough = []
    for line in lines:
        match = classify(line)
        if isinstance(match, Matched):
            records.append(parse(match.tokens))
        else:
            passthrough.append(match.line)
    return records, passthrough
