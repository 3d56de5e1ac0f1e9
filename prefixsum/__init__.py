from prefixsum.IndexedSumStore import IndexedSumStore

__all__ = [
    'IndexedSumStore'
]
