from ._index_out_of_range_error import IndexOutOfRangeError


class ParseExponentOutOfRangeError(IndexOutOfRangeError):
    """Raised when parsed text names an exponent above the degree."""

    pass
