def sub_iterations_key(record):
    # untagged variants sort before any tagged one
    if record.sub_iterations is None:
        return (0, 0)
    return (1, record.sub_iterations)


def aggregate(records):
    dataset = {}
    for record in records:
        dataset.setdefault(record.name, []).append(record)
    for group in dataset.values():
        group.sort(key=sub_iterations_key)
    return dataset


def sorted_groups(dataset):
    for name in sorted(dataset):
        yield name, dataset[name]


def all_records(dataset):
    for group in dataset.values():
        yield from group
