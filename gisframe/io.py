"""
Reading delimited text files into tables, and a compact overview of a table.
"""

import keyword
import pathlib
import re
from typing import Iterable, List, Union

import pandas as pd

from gisframe.logging import logger

_INVALID_CHARACTERS = re.compile(r"[^0-9A-Za-z_]")


def make_names(names: Iterable) -> List[str]:
    """
    Turn arbitrary column names into unique, valid Python identifiers.

    * characters other than letters, digits and underscores become ``_``;
    * names that are empty or start with a digit get an ``X`` prefix;
    * Python keywords get a ``_`` suffix;
    * repeated names get a ``_1``, ``_2``, ... suffix.

    Valid identifiers can be used as-is in the expressions of
    :func:`gisframe.verbs.filter`.

    Examples
    --------
    >>> make_names(["Fire Vehicle Incidents", "2019", "class", "a", "a"])
    ['Fire_Vehicle_Incidents', 'X2019', 'class_', 'a', 'a_1']
    """
    valid = []
    for name in names:
        name = _INVALID_CHARACTERS.sub("_", str(name).strip())
        if name == "" or name[0].isdigit():
            name = "X" + name
        if keyword.iskeyword(name):
            name = name + "_"
        valid.append(name)

    seen = set(valid)
    counts = {}
    unique = []
    for name in valid:
        if name not in counts:
            counts[name] = 0
            unique.append(name)
            continue
        candidate = name
        while candidate in seen:
            counts[name] += 1
            candidate = f"{name}_{counts[name]}"
        seen.add(candidate)
        unique.append(candidate)
    return unique


def read_csv(
    path: Union[str, pathlib.Path], check_names: bool = True, **kwargs
) -> pd.DataFrame:
    """
    Read a delimited text file into a table.

    Parameters
    ----------
    path : str or pathlib.Path
        Relative paths are relative to the working directory.
    check_names : bool, default True
        Make the column names valid, unique identifiers, see
        :func:`make_names`.
    **kwargs
        Passed on to ``pandas.read_csv``, e.g. ``sep=";"``.

    Returns
    -------
    pandas.DataFrame
        Text columns hold plain strings.

    Examples
    --------
    >>> crime_df = read_csv("data/toronto-crime.csv")
    """
    path = pathlib.Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    csv_kwargs = {"skipinitialspace": True}
    csv_kwargs.update(kwargs)
    logger.info(f"Reading delimited text from {path}")
    df = pd.read_csv(path, **csv_kwargs)

    if check_names:
        names = make_names(df.columns)
        renamed = [(a, b) for a, b in zip(df.columns, names) if a != b]
        if renamed:
            logger.debug(f"read_csv: renamed columns {renamed}")
        df.columns = names

    logger.info(f"Read {len(df)} rows of {len(df.columns)} columns from {path}")
    return df


def _preview(series: pd.Series, n: int) -> str:
    values = []
    for value in series.iloc[:n]:
        if isinstance(value, str):
            values.append(f'"{value}"')
        elif pd.isna(value):
            values.append("NA")
        else:
            values.append(str(value))
    text = " ".join(values)
    if len(series) > n:
        text += " ..."
    return text


def structure(data: pd.DataFrame, n: int = 5) -> str:
    """
    Compact overview of a table: its size and, per column, the dtype and the
    first ``n`` values.

    Examples
    --------
    >>> print(structure(crime_df))
    'DataFrame':	140 obs. of  16 variables:
     $ AREA_S_CD    : int64  1 2 3 4 5 ...
     ...
    """
    nrow, ncol = data.shape
    lines = [f"'{type(data).__name__}':\t{nrow} obs. of  {ncol} variables:"]
    width = max((len(str(column)) for column in data.columns), default=0)
    for column in data.columns:
        series = data[column]
        lines.append(
            f" $ {str(column):<{width}}: {str(series.dtype):<8} {_preview(series, n)}"
        )
    return "\n".join(lines)
