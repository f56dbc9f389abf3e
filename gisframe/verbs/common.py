import re
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from gisframe.grouped import GroupedFrame
from gisframe.schemata import UnknownColumnError

Table = Union[pd.DataFrame, GroupedFrame]

_UNDEFINED_NAME = re.compile(r"name '(.+?)' is not defined")


def unwrap(data: Table) -> Tuple[pd.DataFrame, Optional[List[str]]]:
    """
    Return the underlying frame and the grouping keys (None if ungrouped).
    """
    if isinstance(data, GroupedFrame):
        return data.data, data.keys
    elif isinstance(data, pd.DataFrame):
        return data, None
    else:
        raise TypeError(
            f"Expected a pandas.DataFrame or GroupedFrame, got {type(data).__name__}"
        )


def rewrap(df: pd.DataFrame, keys: Optional[List[str]]) -> Table:
    df = df.reset_index(drop=True)
    if keys is None:
        return df
    return GroupedFrame(df, keys)


def evaluate(df: pd.DataFrame, value) -> pd.Series:
    """
    Evaluate an expression string or a callable against ``df``, translating a
    reference to a missing column into an UnknownColumnError.
    """
    try:
        if isinstance(value, str):
            result = df.eval(value)
        else:
            result = value(df)
    except UnknownColumnError:
        raise
    except pd.errors.UndefinedVariableError as e:
        match = _UNDEFINED_NAME.search(str(e))
        name = match.group(1) if match else str(e)
        raise UnknownColumnError([name], df.columns) from e
    except KeyError as e:
        missing = [arg for arg in e.args if isinstance(arg, str)]
        raise UnknownColumnError(missing or list(e.args), df.columns) from e
    return as_column(df, result)


def as_column(df: pd.DataFrame, values) -> pd.Series:
    """
    Align a scalar, array-like or Series with the rows of ``df``.
    """
    if isinstance(values, pd.Series):
        if len(values) != len(df):
            raise ValueError(
                f"Length of values ({len(values)}) does not match number of rows ({len(df)})"
            )
        return values.set_axis(df.index)
    if np.ndim(values) == 0:
        return pd.Series([values] * len(df), index=df.index)
    values = np.asarray(values)
    if values.ndim != 1:
        raise ValueError(f"Values must be one-dimensional, got shape {values.shape}")
    if len(values) != len(df):
        raise ValueError(
            f"Length of values ({len(values)}) does not match number of rows ({len(df)})"
        )
    return pd.Series(values, index=df.index)
