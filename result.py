import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from column_types import IDENTITY_TYPE, ColumnType, as_column_type
from errors import MalformedRowError, ResultIndexError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def column_key(name) -> str:
    """Plain str with the same characters as `name`, even for str subclasses such as (str, Enum) members."""
    if isinstance(name, str):
        return str.__str__(name)
    return str(name)


@dataclass
class QueryResult(Sequence):
    """
    Result of a query handed back by a database adapter.

    `columns` and `rows` keep the positional shape the adapter produced:

        result = QueryResult(["id", "title"], [(1, "a"), (2, "b")])
        result.columns   # ['id', 'title']
        result.rows      # [(1, 'a'), (2, 'b')]

    Iterating or indexing the result gives one dict per row instead:

        result[0]        # {'id': 1, 'title': 'a'}
        result.last()    # {'id': 2, 'title': 'b'}

    The dicts are built on first access and cached. Changing `columns` or
    `rows` afterwards does not rebuild them; ask the adapter for a new result
    instead. A result is not safe to share between threads before it has
    been materialized.
    """
    columns: List[str]
    rows: List[Sequence]
    column_types: Optional[Dict[str, ColumnType]] = None
    strict: bool = field(default=False, kw_only=True)
    _records: Optional[List[Record]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.column_types is None:
            self.column_types = {}

    @property
    def identity_type(self) -> ColumnType:
        return IDENTITY_TYPE

    def is_empty(self) -> bool:
        """Returns True if there are no records."""
        return len(self.rows) == 0

    def record_count(self) -> int:
        return len(self.rows)

    def __len__(self):
        return len(self.rows)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._hash_rows())

    def __reversed__(self) -> Iterator[Record]:
        return reversed(self._hash_rows())

    def each(self, callback: Optional[Callable[[Record], Any]] = None):
        """Calls `callback` for every record, or returns an iterator when no callback is given."""
        if callback is None:
            return iter(self._hash_rows())
        for record in self._hash_rows():
            callback(record)
        return self

    def __getitem__(self, index):
        records = self._hash_rows()
        try:
            return records[index]
        except IndexError:
            raise ResultIndexError(
                f"Record index {index} out of range for a result with {len(records)} records."
            ) from None

    def at(self, index: int) -> Record:
        return self[index]

    def first(self) -> Optional[Record]:
        records = self._hash_rows()
        return records[0] if records else None

    def last(self) -> Optional[Record]:
        records = self._hash_rows()
        return records[-1] if records else None

    def to_records(self) -> List[Record]:
        return self._hash_rows()

    to_hash = to_records
    to_list = to_records

    def includes_column(self, name: str) -> bool:
        return name in self.columns

    def column_type(self, name: str) -> ColumnType:
        return as_column_type(self.column_types.get(name, IDENTITY_TYPE))

    def cast_values(self, type_overrides: Optional[Dict[str, Any]] = None) -> list:
        """
        Returns the row values cast by each column's type. An entry in
        `type_overrides` wins over `column_types`. A single column result
        gives a flat list of values, otherwise a list per row.
        """
        overrides = type_overrides or {}
        types = [
            as_column_type(overrides[name]) if name in overrides else self.column_type(name)
            for name in self.columns
        ]
        casted = [[t.type_cast(value) for t, value in zip(types, row)] for row in self.rows]
        if len(self.columns) == 1:
            return [values[0] if values else None for values in casted]
        return casted

    def copy(self) -> "QueryResult":
        return QueryResult(
            list(self.columns),
            list(self.rows),
            dict(self.column_types),
            strict=self.strict,
        )

    def __copy__(self):
        return self.copy()

    def _hash_rows(self) -> List[Record]:
        if self._records is None:
            # fresh str keys, detached from whatever the caller passed as columns
            columns = [column_key(c) for c in self.columns]
            if self.strict:
                self._check_row_lengths(len(columns))
            self._records = [dict(zip(columns, row)) for row in self.rows]
            logger.debug("Materialized %d records over %d columns", len(self._records), len(columns))
        return self._records

    def _check_row_lengths(self, column_count: int):
        for i, row in enumerate(self.rows):
            if len(row) != column_count:
                logger.warning("Row %d has %d values, expected %d", i, len(row), column_count)
                raise MalformedRowError(i, len(row), column_count)
