import numpy as np

from prefixsum.IndexedSumStore import IndexedSumStore
from prefixsum.utils import create_progbar


# (capacity, [(updates, expected prefix sums by index), ...])
SANITY_SCENARIOS = [
    (5, [
        ([(0, 1)], {0: 1, 1: 1, 2: 1}),
        ([(1, 2)], {0: 1, 1: 3, 2: 3}),
        ([(2, 3)], {0: 1, 1: 3, 2: 6}),
        ([(3, 4), (4, 5)], {0: 1, 1: 3, 2: 6, 3: 10, 4: 15}),
    ]),
    (3, [
        ([(0, 10)], {0: 10, 1: 10, 2: 10}),
        ([(1, 20)], {0: 10, 1: 30, 2: 30}),
        ([(0, 5)], {0: 15, 1: 35, 2: 35}),
    ]),
    (4, [
        ([(2, 7)], {0: 0, 1: 0, 2: 7}),
    ]),
]


def _expect(store, index, expected):
    actual = store.query(index)
    if actual != expected:
        raise AssertionError(
            f'store of capacity {store.capacity}: query({index}) returned {actual}, expected {expected}'
        )


def run_sanity_checks(scenarios=SANITY_SCENARIOS):
    """
    Replays fixed update sequences and verifies every expected prefix sum.

    :param scenarios: Iterable of (capacity, steps) where each step is a pair of
        (updates, expected) with updates a list of (index, delta) and expected a
        mapping of index to prefix sum.
    :return: The number of verified queries.
    """
    n_checked = 0
    for capacity, steps in scenarios:
        store = IndexedSumStore(capacity)
        for updates, expected in steps:
            for index, delta in updates:
                store.update(index, delta)
            for index, expected_sum in sorted(expected.items()):
                _expect(store, index, expected_sum)
                n_checked += 1
    return n_checked


def run_stress_check(capacity=1000, n_operations=10000, seed=None, max_delta=100, verbose=True):
    """
    Interleaves random updates and queries on a store and on a plain numpy
    array, failing on the first prefix sum that differs.

    :param capacity: Number of elements of the store.
    :param n_operations: Total number of updates and queries issued.
    :param seed: Seed of the random generator, None for a random one.
    :param max_delta: Deltas are drawn uniformly from [-max_delta, max_delta].
    :param verbose: Show a progress bar with the number of verified queries.
    :return: The number of verified queries.
    """
    if capacity <= 0:
        raise ValueError(f'capacity must be positive, got {capacity}')

    random_state = np.random.RandomState(seed)
    store = IndexedSumStore(capacity)
    reference = np.zeros(capacity, dtype=np.int64)

    bar = create_progbar(n_operations, stateful_metrics=['queries']) if verbose else None

    n_checked = 0
    for n_operation in range(1, n_operations + 1):
        index = random_state.randint(capacity)
        if random_state.random_sample() < 0.5:
            delta = int(random_state.randint(-max_delta, max_delta + 1))
            store.update(index, delta)
            reference[index] += delta
        else:
            _expect(store, index, int(reference[:index + 1].sum()))
            n_checked += 1

        if bar is not None:
            bar.update(n_operation, queries=n_checked)

    if bar is not None:
        bar.finish()
    return n_checked
