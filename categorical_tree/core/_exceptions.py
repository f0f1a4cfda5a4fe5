class DataError(Exception):
    """Data not in the expected format."""


class CorruptionError(Exception):
    """A tree does not satisfy the node contract. E.g, a split with empty slots."""
