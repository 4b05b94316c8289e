import pandas as pd
import pytest

from foogle_charts.core.errors import ValidationError
from foogle_charts.core.values import Text
from foogle_charts.data.frames import table_from_dataframe, table_from_series, table_to_dataframe
from foogle_charts.data.table import Table, from_key_2_values


def _df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "region": ["North", "South"],
            "revenue": [10, 20],
            "cost": [1.5, 2.5],
        }
    )


def test_table_from_dataframe_with_key_column():
    t = table_from_dataframe(_df(), key_column="region")
    assert t.labels == ("", "revenue", "cost")
    assert list(t.iter_records()) == [["North", 10, 1.5], ["South", 20, 2.5]]


def test_table_from_dataframe_uses_index_by_default():
    df = _df().set_index("region")
    t = table_from_dataframe(df, columns=["cost"])
    assert t.labels == ("", "cost")
    assert list(t.iter_records()) == [["North", 1.5], ["South", 2.5]]


def test_table_from_dataframe_rows_are_replayable():
    t = table_from_dataframe(_df(), key_column="region")
    assert list(t.rows) == list(t.rows)


def test_table_from_dataframe_stringifies_keys():
    df = pd.DataFrame({"v": [1.0, 2.0]}, index=[2023, 2024])
    t = table_from_dataframe(df)
    assert [r[0] for r in t.rows] == [Text("2023"), Text("2024")]


def test_table_from_dataframe_unknown_columns():
    with pytest.raises(ValidationError):
        table_from_dataframe(_df(), key_column="missing")
    with pytest.raises(ValidationError):
        table_from_dataframe(_df(), key_column="region", columns=["nope"])


def test_table_from_series_uses_series_name():
    s = pd.Series([1.0, 2.0], index=["a", "b"], name="score")
    t = table_from_series(s)
    assert t.labels == ("", "score")
    assert list(t.iter_records()) == [["a", 1.0], ["b", 2.0]]
    assert table_from_series(s.rename(None)).labels == ("", "Value")


def test_table_to_dataframe():
    t = from_key_2_values(["lo", "hi"], [("a", 1, 2), ("b", 3, 4)])
    df = table_to_dataframe(t)
    assert list(df.columns) == ["", "lo", "hi"]
    assert df["hi"].tolist() == [2, 4]


def test_table_to_dataframe_reports_width_mismatch():
    t = Table(labels=("", "v"), rows=[[Text("a")]])
    with pytest.raises(ValidationError):
        table_to_dataframe(t)


def test_key_only_dataframe_keeps_one_row_per_key():
    df = pd.DataFrame({"k": ["a", "b"]})
    t = table_from_dataframe(df, key_column="k")
    assert t.labels == ("",)
    assert list(t.iter_records()) == [["a"], ["b"]]

    no_cols = table_from_dataframe(_df(), key_column="region", columns=[])
    assert [r[0] for r in no_cols.rows] == [Text("North"), Text("South")]
