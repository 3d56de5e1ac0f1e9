import numbers

import numpy as np

from prefixsum.utils import lowest_set_bit, highest_power_of_two


def _check_integral(name, value):
    if isinstance(value, bool) or not isinstance(value, (numbers.Integral, np.integer)):
        raise TypeError(f'{name} must be an integer, got {type(value).__name__}')
    return int(value)


def _check_number(name, value):
    if isinstance(value, np.generic):
        value = value.item()
    if not isinstance(value, numbers.Real):
        raise TypeError(f'{name} must be a real number, got {type(value).__name__}')
    return value


class IndexedSumStore(object):
    """
    Fenwick tree over a fixed number of elements, all zero at construction.

    Point updates add a delta to one element and prefix queries return the sum
    of the elements up to an index, both in O(log capacity).
    """

    def __init__(self, capacity):
        capacity = _check_integral('capacity', capacity)
        if capacity < 0:
            raise ValueError(f'capacity must be non-negative, got {capacity}')

        self._capacity = capacity
        # accumulators[i] covers elements (i - lowbit(i), i], 1-based; slot 0 stays 0
        self.accumulators = [0] * (capacity + 1)

    @classmethod
    def from_values(cls, values):
        """
        Builds a store holding `values` in O(n).

        :param values: One-dimensional array-like of numbers.
        :return: A store whose query(k) is the sum of values[0..k].
        """
        values = np.asarray(values)
        if values.ndim != 1:
            raise ValueError(f'values must be one-dimensional, got {values.ndim} dimensions')

        store = cls(values.shape[0])
        if store.capacity == 0:
            return store

        accumulators = store.accumulators
        accumulators[1:] = [_check_number('value', value) for value in values.tolist()]
        for position in range(1, store.capacity + 1):
            parent = position + lowest_set_bit(position)
            if parent <= store.capacity:
                accumulators[parent] += accumulators[position]
        return store

    @property
    def capacity(self):
        return self._capacity

    def __len__(self):
        return self._capacity

    def __repr__(self):
        return f'{type(self).__name__}(capacity={self._capacity})'

    def _check_index(self, index):
        index = _check_integral('index', index)
        if not 0 <= index < self._capacity:
            raise IndexError(f'index {index} out of range for capacity {self._capacity}')
        return index

    def update(self, index, delta):
        """
        Adds `delta` to the element at the 0-based `index`.
        """
        position = self._check_index(index) + 1
        delta = _check_number('delta', delta)
        while position <= self._capacity:
            self.accumulators[position] += delta
            position += lowest_set_bit(position)

    def query(self, index):
        """
        Returns the sum of the elements from 0 to `index` inclusive.
        """
        position = self._check_index(index) + 1
        total = 0
        while position > 0:
            total += self.accumulators[position]
            position -= lowest_set_bit(position)
        return total

    def total(self):
        if self._capacity == 0:
            return 0
        return self.query(self._capacity - 1)

    def lower_bound(self, cumulative_sum):
        """
        Returns the smallest index whose prefix sum reaches `cumulative_sum`,
        or `capacity` if none does. Assumes all elements are non-negative.
        """
        position = 0
        remaining = cumulative_sum
        step = highest_power_of_two(self._capacity)
        while step > 0:
            next_position = position + step
            if next_position <= self._capacity and self.accumulators[next_position] < remaining:
                position = next_position
                remaining -= self.accumulators[position]
            step = int(step // 2)
        return position
