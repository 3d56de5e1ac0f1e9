import sys

from prefixsum.IndexedSumStore import IndexedSumStore


def run_demo(stream=None):
    stream = sys.stdout if stream is None else stream

    printed = []

    def print_sum(store, index):
        prefix_sum = store.query(index)
        print(f'Sum up to index {index}: {prefix_sum}', file=stream)
        printed.append((index, prefix_sum))

    store = IndexedSumStore(10)

    store.update(0, 10)
    store.update(2, 5)
    for index in (0, 1, 2):
        print_sum(store, index)

    store.update(5, 7)
    store.update(9, 3)
    for index in (4, 5, 9):
        print_sum(store, index)

    return printed
