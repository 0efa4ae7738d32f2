"""Format `go test -bench` output into sorted, aligned tables."""

from prettybench.parse import Record, classify, parse, parse_lines
from prettybench.aggregate import aggregate, sorted_groups
from prettybench.summary import Summary, group_extremes, normalize_unit, summarize

__version__ = '0.1.0'
