from typing import Callable, Iterator, List, Sequence, Tuple

import pandas as pd

from gisframe.schemata import check_columns


class GroupedFrame:
    """
    A table partitioned into groups by one or more key columns.

    Groups are disjoint, keep the order of their rows, and are enumerated in
    the order in which their key first occurs. Missing key values form a group
    of their own.

    Create one with :func:`gisframe.verbs.group_by` rather than directly.

    Parameters
    ----------
    data : pandas.DataFrame
    keys : sequence of str
        The grouping columns.
    """

    def __init__(self, data: pd.DataFrame, keys: Sequence[str]):
        keys = list(keys)
        if len(keys) == 0:
            raise ValueError("At least one grouping column is required")
        if len(set(keys)) != len(keys):
            raise ValueError(f"Grouping columns must be unique, got: {keys}")
        check_columns(data, keys)
        self.data = data.reset_index(drop=True)
        self.keys = keys

    def _groupby(self):
        return self.data.groupby(self.keys, sort=False, dropna=False)

    def groups(self) -> Iterator[Tuple[tuple, pd.DataFrame]]:
        """
        Yield ``(key, frame)`` for every group, in first-seen order.
        """
        for key, frame in self._groupby():
            if not isinstance(key, tuple):
                key = (key,)
            yield key, frame

    @property
    def ngroups(self) -> int:
        return self._groupby().ngroups

    def first_rows(self) -> List[int]:
        """Row position of the first row of every group."""
        return [int(frame.index[0]) for _, frame in self.groups()]

    def apply_per_group(self, func: Callable[[pd.DataFrame], pd.Series]) -> pd.Series:
        """
        Evaluate ``func`` for every group and combine the results into a
        Series aligned with :attr:`data`. ``func`` has to return a Series
        indexed like the group it receives.
        """
        pieces = [func(frame) for _, frame in self.groups()]
        if len(pieces) == 0:
            return pd.Series(index=self.data.index, dtype=object)
        return pd.concat(pieces).reindex(self.data.index)

    def __len__(self) -> int:
        return self.ngroups

    def __repr__(self) -> str:
        nrow, ncol = self.data.shape
        return (
            f"GroupedFrame: {nrow} rows x {ncol} columns, "
            f"grouped by {self.keys} ({self.ngroups} groups)\n{self.data!r}"
        )
