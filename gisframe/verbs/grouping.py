import pandas as pd

from gisframe.grouped import GroupedFrame
from gisframe.logging import logger
from gisframe.verbs.common import Table, unwrap


def group_by(data: Table, *columns: str) -> GroupedFrame:
    """
    Group a table by one or more columns.

    The other verbs work per group on the result: :func:`summarize` returns a
    row per group, :func:`filter` and :func:`mutate` evaluate expressions per
    group. Grouping a GroupedFrame replaces its grouping.

    Examples
    --------
    >>> arson_groups = group_by(crime_df, "Arsons")
    >>> summarize(arson_groups, mean_fire=("Fire_Vehicle_Incidents", "mean"), na_rm=True)
    """
    df, _ = unwrap(data)
    grouped = GroupedFrame(df, columns)
    logger.debug(f"group_by: {len(df)} rows in {grouped.ngroups} groups of {list(columns)}")
    return grouped


def ungroup(data: Table) -> pd.DataFrame:
    """Return the table without its grouping."""
    df, _ = unwrap(data)
    return df
