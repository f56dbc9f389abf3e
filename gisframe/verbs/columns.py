"""
Verbs that choose or compute columns: :func:`select` and :func:`mutate`.
"""

from gisframe.grouped import GroupedFrame
from gisframe.logging import logger
from gisframe.schemata import check_columns
from gisframe.verbs.common import Table, as_column, evaluate, rewrap, unwrap


def _is_exclusion(column) -> bool:
    return isinstance(column, str) and column.startswith("-") and len(column) > 1


def select(data: Table, *columns: str) -> Table:
    """
    Keep only the given columns.

    Either name the columns to keep, in the order they should appear, or name
    the columns to drop by prefixing them with ``-``. The two cannot be mixed.

    On a GroupedFrame the grouping columns are always kept; when they are not
    named they are placed in front.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    *columns : str

    Returns
    -------
    selected : pandas.DataFrame or GroupedFrame

    Examples
    --------
    >>> select(crime_df, "AREA_S_CD", "Equity_Score")
    >>> select(crime_df, "-Arsons", "-Assaults")
    """
    df, keys = unwrap(data)
    exclusions = [_is_exclusion(column) for column in columns]
    if any(exclusions) and not all(exclusions):
        raise ValueError(
            "Cannot mix columns to keep and columns to drop (prefixed with '-'): "
            f"{list(columns)}"
        )
    if len(set(columns)) != len(columns):
        raise ValueError(f"Columns are selected more than once: {list(columns)}")

    if columns and all(exclusions):
        dropped = [column[1:] for column in columns]
        check_columns(df, dropped)
        if keys is not None:
            retained = [key for key in keys if key in dropped]
            if retained:
                logger.warning(f"select: keeping grouping columns {retained}")
            dropped = [column for column in dropped if column not in keys]
        keep = [column for column in df.columns if column not in dropped]
    else:
        keep = list(columns)
        check_columns(df, keep)
        if keys is not None:
            keep = [key for key in keys if key not in keep] + keep

    logger.debug(f"select: kept {len(keep)} of {len(df.columns)} columns")
    return rewrap(df[keep].copy(), keys)


def mutate(data: Table, /, **columns) -> Table:
    """
    Add new columns or replace existing ones.

    Columns are computed in the order given, so a later column can refer to an
    earlier one. New columns are appended, replaced columns keep their
    position.

    Parameters
    ----------
    data : pandas.DataFrame or GroupedFrame
    **columns
        Name and value of each column. A value is one of:

        * a callable receiving the frame and returning a scalar or one value
          per row. On a GroupedFrame it is called once per group.
          A returned Series is taken by position, not aligned on its index:
          ``lambda df: df["Thefts"].sort_values()`` stores the sorted values.
        * an array-like with one value per row.
        * a scalar, including strings, repeated for every row.

    Returns
    -------
    mutated : pandas.DataFrame or GroupedFrame

    Examples
    --------
    >>> mutate(crime_df, All_Thefts=lambda df: df["Thefts"] + df["Vehicle_Thefts"])
    >>> mutate(group_by(crime_df, "Murders"), mean_thefts=lambda df: df["Thefts"].mean())
    """
    df, keys = unwrap(data)
    result = df.copy()
    for name, value in columns.items():
        if keys is not None and name in keys:
            raise ValueError(f"Cannot modify grouping column {name!r}")
        if callable(value):
            if keys is not None:
                grouped = GroupedFrame(result, keys)
                result[name] = grouped.apply_per_group(
                    lambda frame: evaluate(frame, value)
                )
            else:
                result[name] = evaluate(result, value)
        else:
            result[name] = as_column(result, value)
    logger.debug(f"mutate: computed columns {list(columns)}")
    return rewrap(result, keys)
