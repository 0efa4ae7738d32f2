import re

from prettybench.aggregate import sorted_groups
from prettybench.summary import group_extremes

ANSI = re.compile(r'\033\[[0-9;]*m')


def bold(s):
    return f'\033[1m{s}\033[0m'


def green(s):
    return f'\033[32m{s}\033[0m'


def red(s):
    return f'\033[31m{s}\033[0m'


def gray(s):
    return f'\033[90m{s}\033[0m'


def plain(s):
    return ANSI.sub('', s)


STATUS = {
    'PASS': green,
    'SKIP': gray,
    'FAIL': red,
}


def format_int(n):
    return '' if n is None else f'{n:,}'


def format_speed(x, unit):
    if x is None:
        return ''
    if unit == 'ns':
        return f'{x:,.0f}'
    return f'{x:,.3f}'


def headers(summary):
    cols = ['Name']
    if summary.has_sub_iterations:
        cols.append('Iterations')
    cols += ['Runs', f'{summary.unit}/op']
    if summary.has_allocation_stats:
        cols += ['B/op', 'allocations/op']
    return cols


def group_rows(name, group, summary):
    extremes = group_extremes(group)
    rows = []
    for i, r in enumerate(group):
        speed = format_speed(r.speed, summary.unit)
        if extremes and i == extremes[0]:
            speed = green(speed)
        elif extremes and i == extremes[1]:
            speed = red(speed)

        row = [bold(name) if i == 0 else '']
        if summary.has_sub_iterations:
            row.append(format_int(r.sub_iterations))
        row += [format_int(r.runs), speed]
        if summary.has_allocation_stats:
            row += [format_int(r.bytes_per_op), format_int(r.allocs_per_op)]
        rows.append(row)
    return rows


def format_row(row, widths):
    cells = []
    for i, (x, w) in enumerate(zip(row, widths)):
        pad = ' ' * (w - len(plain(x)))
        cells.append(x + pad if i == 0 else pad + x)
    return '| ' + ' | '.join(cells) + ' |'


def render_table(dataset, summary, color=True):
    header = [bold(h) for h in headers(summary)]
    groups = [group_rows(name, group, summary)
              for name, group in sorted_groups(dataset)]
    if not color:
        header = [plain(x) for x in header]
        groups = [[[plain(x) for x in row] for row in g] for g in groups]

    table = [header] + [row for g in groups for row in g]
    widths = [max(len(plain(x)) for x in col) for col in zip(*table)]
    rule = '+' + '+'.join('-' * (w + 2) for w in widths) + '+'

    lines = [rule, format_row(header, widths), rule]
    for g in groups:
        lines += [format_row(row, widths) for row in g]
        lines.append(rule)
    return '\n'.join(lines)


def render_footer(passthrough, color=True):
    lines = ['', bold('Summary:'), bold('+------+')]
    for line in passthrough:
        text = line.strip()
        if text in STATUS:
            text = STATUS[text](bold(text))
        lines.append(text)
    if not color:
        lines = [plain(x) for x in lines]
    return '\n'.join(lines)
