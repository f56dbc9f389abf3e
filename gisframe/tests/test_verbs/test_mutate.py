import numpy as np
import pandas as pd
import pytest

from gisframe.schemata import UnknownColumnError
from gisframe.verbs import group_by, mutate, ntile, slice_rows


def test_mutate_adds_column(crime_df):
    actual = mutate(
        crime_df, All_Thefts=lambda df: df["Thefts"] + df["Vehicle_Thefts"]
    )
    assert list(actual.columns) == list(crime_df.columns) + ["All_Thefts"]
    assert (actual["All_Thefts"] == crime_df["Thefts"] + crime_df["Vehicle_Thefts"]).all()
    assert "All_Thefts" not in crime_df.columns


def test_mutate_replaces_in_place(small_df):
    actual = mutate(small_df, value=lambda df: df["value"] * 2)
    assert list(actual.columns) == list(small_df.columns)
    assert actual.loc[0, "value"] == 6.0


def test_mutate_sequential_and_scalars(small_df):
    actual = mutate(
        small_df,
        double=lambda df: df["count"] * 2,
        quadruple=lambda df: df["double"] * 2,
        city="Toronto",
        flag=np.arange(6) > 2,
    )
    assert list(actual["quadruple"]) == [4, 8, 8, 4, 12, 8]
    assert (actual["city"] == "Toronto").all()
    assert list(actual["flag"]) == [False, False, False, True, True, True]


def test_mutate_with_ntile(crime_df):
    actual = mutate(crime_df, robbery_rank=lambda df: ntile(df["Robberies"], 4))
    assert actual["robbery_rank"].dtype == "Int64"


def test_mutate_errors(small_df):
    with pytest.raises(UnknownColumnError):
        mutate(small_df, x=lambda df: df["nope"])
    with pytest.raises(ValueError, match="Length"):
        mutate(small_df, x=[1, 2])


def test_mutate_grouped(small_df):
    grouped = group_by(small_df, "group")
    actual = mutate(grouped, group_total=lambda df: df["count"].sum())
    assert actual.keys == ["group"]
    assert list(actual.data["group_total"]) == [5, 5, 5, 1, 5, 5]

    with pytest.raises(ValueError, match="grouping column"):
        mutate(grouped, group="w")


def test_slice_rows(small_df):
    assert list(slice_rows(small_df, [0, 1, 2])["name"]) == ["a", "b", "c"]
    assert list(slice_rows(small_df, slice(0, 2))["name"]) == ["a", "b"]
    assert list(slice_rows(small_df, -1)["name"]) == ["f"]
    assert isinstance(slice_rows(small_df, [4, 2]).index, pd.RangeIndex)


def test_mutate_series_taken_by_position(small_df):
    actual = mutate(small_df, sorted_count=lambda df: df["count"].sort_values())
    assert list(actual["sorted_count"]) == [1, 1, 2, 2, 2, 3]
    assert list(actual["count"]) == [1, 2, 2, 1, 3, 2]
