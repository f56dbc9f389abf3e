"""
Verbs that choose or reorder rows: :func:`filter`, :func:`arrange` and
:func:`slice_rows`.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd

from gisframe.grouped import GroupedFrame
from gisframe.logging import logger
from gisframe.schemata import OPERATORS, check_columns, partial_operator
from gisframe.verbs.common import Table, as_column, evaluate, rewrap, unwrap


@dataclass(frozen=True)
class Descending:
    column: str


def desc(column: str) -> Descending:
    """
    Mark a sort key of :func:`arrange` as descending.

    Examples
    --------
    >>> arrange(crime_df, desc("Arsons"), "Assaults")
    """
    return Descending(column)


def _as_mask(df: pd.DataFrame, result: pd.Series, predicate) -> pd.Series:
    dtype = result.dtype
    if not pd.api.types.is_bool_dtype(dtype):
        inferred = pd.api.types.infer_dtype(result, skipna=True)
        if not (dtype == object and inferred in ("boolean", "empty")):
            raise TypeError(
                f"Predicate {predicate!r} does not evaluate to booleans, "
                f"but to values of dtype {dtype}"
            )
    return result.astype("boolean").fillna(False).astype(bool)


def _predicate_mask(df: pd.DataFrame, predicate, keys) -> pd.Series:
    if isinstance(predicate, tuple):
        if len(predicate) != 3:
            raise ValueError(
                "A predicate tuple must be (column, operator, value), "
                f"got: {predicate!r}"
            )
        column, op, value = predicate
        check_columns(df, [column])
        if op not in OPERATORS:
            raise ValueError(
                f"Unknown operator {op!r}, expected one of {list(OPERATORS)}"
            )
        result = partial_operator(op, value)(df[column])
    elif isinstance(predicate, str) or callable(predicate):
        if keys is not None:
            grouped = GroupedFrame(df, keys)
            result = grouped.apply_per_group(lambda frame: evaluate(frame, predicate))
        else:
            result = evaluate(df, predicate)
    else:
        result = as_column(df, predicate)
    return _as_mask(df, result, predicate)


def filter(data: Table, *predicates) -> Table:
    """
    Keep the rows for which all predicates are true.

    Columns and the order of the rows are unchanged. Rows where a predicate
    evaluates to a missing value are dropped.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    *predicates
        Each predicate is one of:

        * an expression string, evaluated with ``pandas.DataFrame.eval``.
          Column names that are not valid identifiers need backticks.
        * a callable receiving the frame and returning booleans.
          A returned Series is taken by position, not aligned on its index.
        * a tuple ``(column, operator, value)``, where operator is one of
          ``<, <=, ==, !=, >=, >, in, not in``.
        * a boolean array with one value per row.

        On a GroupedFrame, expression strings and callables are evaluated per
        group.

    Returns
    -------
    filtered : pandas.DataFrame or GroupedFrame

    Examples
    --------
    >>> filter(crime_df, "Neighbourhood == 'Yonge-St.Clair'")
    >>> filter(crime_df, "Arsons > 3", "Thefts > 10")
    >>> filter(crime_df, "Arsons > 3 or Thefts > 10")
    >>> filter(crime_df, ("AREA_S_CD", "in", [27, 118, 44, 121]))
    >>> filter(crime_df, lambda df: df["Murders"] != 0)
    """
    df, keys = unwrap(data)
    mask = pd.Series(True, index=df.index)
    for predicate in predicates:
        mask &= _predicate_mask(df, predicate, keys)
    result = df.loc[mask.to_numpy()]
    logger.debug(f"filter: kept {len(result)} of {len(df)} rows")
    return rewrap(result, keys)


def arrange(data: Table, *keys: Union[str, Descending]) -> Table:
    """
    Sort the rows by one or more columns.

    Every following key breaks the ties of the keys before it. Rows that tie
    on all keys keep their original order. Missing values are placed last.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    *keys : str or Descending
        Column names; wrap a name in :func:`desc` to sort descending.

    Returns
    -------
    arranged : pandas.DataFrame or GroupedFrame
    """
    df, groupkeys = unwrap(data)
    if len(keys) == 0:
        return rewrap(df.copy(), groupkeys)

    columns = []
    ascending = []
    for key in keys:
        if isinstance(key, Descending):
            columns.append(key.column)
            ascending.append(False)
        elif isinstance(key, str):
            columns.append(key)
            ascending.append(True)
        else:
            raise TypeError(
                f"Sort keys must be column names or desc(column), got {key!r}"
            )
    check_columns(df, columns)

    result = df.sort_values(
        by=columns, ascending=ascending, kind="mergesort", na_position="last"
    )
    logger.debug(f"arrange: sorted {len(df)} rows by {columns}")
    return rewrap(result, groupkeys)


def slice_rows(data: Table, rows) -> Table:
    """
    Select rows by (zero-based) position.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    rows : int, sequence of int, or slice
        Negative positions count from the end.

    Examples
    --------
    First three rows:

    >>> slice_rows(crime_df, [0, 1, 2])
    >>> slice_rows(crime_df, slice(0, 3))
    """
    df, keys = unwrap(data)
    if isinstance(rows, (int, np.integer)):
        rows = [rows]
    result = df.iloc[rows]
    logger.debug(f"slice_rows: kept {len(result)} of {len(df)} rows")
    return rewrap(result, keys)
