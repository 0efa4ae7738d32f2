import multiprocessing.pool
from dataclasses import dataclass

import numpy as np

from prettybench.aggregate import all_records

# divisor from raw ns/op to each display unit
UNITS = {
    'ns': 1.0,
    'µs': 1e3,
    'ms': 1e6,
    's': 1e9,
}
UNIT_ALIASES = {
    'us': 'µs',
    'μs': 'µs',  # greek mu
}


@dataclass
class Summary:
    has_sub_iterations: bool
    has_allocation_stats: bool
    unit: str


def normalize_unit(text):
    if not text:
        return None
    unit = text.strip().lower()
    unit = UNIT_ALIASES.get(unit, unit)
    return unit if unit in UNITS else None


def speeds(records):
    return np.array(
        [np.nan if r.speed is None else r.speed for r in records],
        dtype=float,
    )


def slowest(dataset):
    a = speeds(all_records(dataset))
    if a.size == 0 or np.isnan(a).all():
        return 0.0
    return float(np.nanmax(a))


def select_unit(slowest):
    if slowest <= 1e3:
        return 'ns'
    if slowest <= 1e6:
        return 'µs'
    if slowest <= 1e9:
        return 'ms'
    return 's'


def suggest_unit(dataset, override=None):
    if override is not None:
        return override
    return select_unit(slowest(dataset))


def has_sub_iterations(dataset):
    return any(r.sub_iterations is not None for r in all_records(dataset))


def has_allocation_stats(dataset):
    return any(
        r.bytes_per_op is not None and r.allocs_per_op is not None
        for r in all_records(dataset)
    )


def rescale(dataset, divisor):
    if divisor == 1.0:
        return
    for r in all_records(dataset):
        if r.speed is not None:
            r.speed = r.speed / divisor


def summarize(dataset, unit=None):
    """Derive the Summary of a dataset and rescale every speed to its unit.

    The three scans only read the dataset, so they are forked onto a thread
    pool and joined before the (serial) rescale. `unit` must already be
    normalized; when given it replaces the suggested unit.
    """
    if unit is not None and unit not in UNITS:
        raise ValueError(f'unknown unit {unit!r}')

    with multiprocessing.pool.ThreadPool(3) as pool:
        unit_job = pool.apply_async(suggest_unit, (dataset, unit))
        sub_job = pool.apply_async(has_sub_iterations, (dataset,))
        mem_job = pool.apply_async(has_allocation_stats, (dataset,))
        summary = Summary(
            has_sub_iterations=sub_job.get(),
            has_allocation_stats=mem_job.get(),
            unit=unit_job.get(),
        )

    rescale(dataset, UNITS[summary.unit])
    return summary


def group_extremes(group):
    """Indexes of the fastest and slowest record in a group, or None.

    None when fewer than two records carry a speed or all speeds are equal.
    """
    a = speeds(group)
    if np.count_nonzero(~np.isnan(a)) < 2:
        return None
    if np.nanmin(a) == np.nanmax(a):
        return None
    return int(np.nanargmin(a)), int(np.nanargmax(a))
