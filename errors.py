
class DBError(Exception):
    """Base error class"""

class ResultError(DBError):
    """Error raised while reading a query result. """

class ResultIndexError(ResultError, IndexError):
    pass

class MalformedRowError(ResultError, ValueError):
    def __init__(self, row_index: int, row_length: int, column_count: int):
        self.row_index = row_index
        self.row_length = row_length
        self.column_count = column_count
        super().__init__(
            f"Row {row_index} has {row_length} values but the result has {column_count} columns."
        )
