"""
Canonical labeled table and the builders that produce it.

Builders never enumerate their input. `Table.rows` is a `DeferredRows` view
that re-applies the row transform to the caller's source on every pass:

- restartable source (list, tuple, dict, range) -> rows can be replayed
- single-pass source (generator, iterator, DB cursor) -> rows are exhausted
  after the first pass, like the source itself

Row width is never checked against the labels. `from_key_seq` and hand-built
tables can therefore hold rows of a different width; that is left to the
consumer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from foogle_charts.core.constants import (
    DEFAULT_TWO_VALUE_LABELS,
    DEFAULT_VALUE_LABEL,
    KEY_COLUMN_LABEL,
)
from foogle_charts.core.values import Value, to_value

logger = logging.getLogger(__name__)

Row = list[Value]


class DeferredRows:
    """Iterable of rows computed from `source` each time it is iterated."""

    def __init__(self, source: Iterable[Any], transform: Callable[[Any], Row]) -> None:
        self._source = source
        self._transform = transform

    def __iter__(self) -> Iterator[Row]:
        for item in self._source:
            yield self._transform(item)

    def __repr__(self) -> str:
        return f"DeferredRows(source={type(self._source).__name__})"


@dataclass(frozen=True)
class Table:
    """Ordered column labels plus rows of Values."""

    labels: tuple[str, ...]
    rows: Iterable[Row]

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def width(self) -> int:
        return len(self.labels)

    def iter_records(self) -> Iterator[list[Any]]:
        """Rows as raw Python values (one pass over `rows`)."""
        for row in self.rows:
            yield [v.value for v in row]

    def materialize(self) -> Table:
        """Enumerate rows once and return a Table whose rows can be replayed."""
        return Table(labels=self.labels, rows=tuple(list(r) for r in self.rows))


def _items(values: Iterable[Any] | Mapping[Any, Any]) -> Iterable[Any]:
    # A mapping is read as (key, value) pairs; dict views stay restartable
    if isinstance(values, Mapping):
        return values.items()
    return values


def from_key_seq(
    labels: Sequence[str],
    values: Iterable[tuple[str, Iterable[Any]]] | Mapping[str, Iterable[Any]],
) -> Table:
    """
    Build a table from (key, sequence-of-scalars) pairs.

    Labels are the key column header followed by `labels`. Each row is the
    key followed by every element of its sequence, in order. The element
    count is not compared with `labels`.
    """
    out_labels = (KEY_COLUMN_LABEL, *labels)
    logger.debug("from_key_seq: labels=%s", out_labels)

    def _row(item: tuple[str, Iterable[Any]]) -> Row:
        key, seq = item
        return [to_value(key), *(to_value(v) for v in seq)]

    return Table(labels=out_labels, rows=DeferredRows(_items(values), _row))


def from_key_value(
    label: str | None,
    values: Iterable[tuple[str, Any]] | Mapping[str, Any],
) -> Table:
    """Build a two-column table from (key, value) pairs. `label` defaults to "Value"."""
    out_labels = (KEY_COLUMN_LABEL, label if label is not None else DEFAULT_VALUE_LABEL)
    logger.debug("from_key_value: labels=%s", out_labels)

    def _row(item: tuple[str, Any]) -> Row:
        key, value = item
        return [to_value(key), to_value(value)]

    return Table(labels=out_labels, rows=DeferredRows(_items(values), _row))


def from_key_2_values(
    labels: Sequence[str] | None,
    values: Iterable[tuple[str, Any, Any]] | Mapping[str, tuple[Any, Any]],
) -> Table:
    """
    Build a three-column table from (key, v1, v2) triples.

    A mapping is read as key -> (v1, v2).
    """
    value_labels = tuple(labels) if labels is not None else DEFAULT_TWO_VALUE_LABELS
    out_labels = (KEY_COLUMN_LABEL, *value_labels)
    logger.debug("from_key_2_values: labels=%s", out_labels)

    def _row(item: tuple[str, Any, Any]) -> Row:
        key, v1, v2 = item
        return [to_value(key), to_value(v1), to_value(v2)]

    def _mapping_row(item: tuple[str, tuple[Any, Any]]) -> Row:
        key, (v1, v2) = item
        return _row((key, v1, v2))

    transform = _mapping_row if isinstance(values, Mapping) else _row
    return Table(labels=out_labels, rows=DeferredRows(_items(values), transform))
