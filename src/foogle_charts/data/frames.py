"""pandas adapters for Table."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import repeat
from typing import Any

import pandas as pd

from foogle_charts.core.errors import ValidationError
from foogle_charts.data.table import Table, from_key_seq, from_key_value


class _FrameItems:
    """(key, values) pairs read from a DataFrame on every iteration."""

    def __init__(self, df: pd.DataFrame, key_column: Any, columns: list[Any]) -> None:
        self.df = df
        self.key_column = key_column
        self.columns = columns

    def __iter__(self):
        keys = self.df.index if self.key_column is None else self.df[self.key_column]
        if self.columns:
            values = self.df[self.columns].itertuples(index=False, name=None)
        else:
            # itertuples over zero columns yields nothing; keep one empty row per key
            values = repeat((), len(self.df))
        for key, row in zip(keys, values):
            yield str(key), row


class _SeriesItems:
    def __init__(self, series: pd.Series) -> None:
        self.series = series

    def __iter__(self):
        for key, value in self.series.items():
            yield str(key), value


def table_from_dataframe(
    df: pd.DataFrame,
    key_column: Any = None,
    columns: Sequence[Any] | None = None,
) -> Table:
    """
    Build a Table from a DataFrame.

    Keys come from the index, or from `key_column` when given, and are cast
    to str. Value columns default to every remaining column. Rows stay
    deferred: each pass re-reads `df`.
    """
    if key_column is not None and key_column not in df.columns:
        raise ValidationError(
            f"Key column '{key_column}' not found. Found columns: {list(df.columns)}"
        )
    if columns is None:
        cols = [c for c in df.columns if c != key_column]
    else:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValidationError(f"DataFrame is missing columns: {missing}")
        cols = list(columns)

    return from_key_seq([str(c) for c in cols], _FrameItems(df, key_column, cols))


def table_from_series(series: pd.Series, label: str | None = None) -> Table:
    """Two-column Table from a Series; label defaults to the series name."""
    if label is None and series.name is not None:
        label = str(series.name)
    return from_key_value(label, _SeriesItems(series))


def table_to_dataframe(table: Table) -> pd.DataFrame:
    """
    Materialize a Table into a DataFrame with the table labels as columns.

    This is the one place a row-width mismatch is reported.
    """
    records = list(table.iter_records())
    bad = [i for i, r in enumerate(records) if len(r) != table.width]
    if bad:
        raise ValidationError(
            f"{len(bad)} row(s) do not match the {table.width} labels "
            f"{list(table.labels)}. First bad row index: {bad[0]}"
        )
    return pd.DataFrame.from_records(records, columns=list(table.labels))
