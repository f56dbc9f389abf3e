import numbers

import numpy as np
import pandas as pd


def ntile(values, n: int) -> pd.Series:
    """
    Divide values into ``n`` buckets of (nearly) equal size by rank.

    Values are ranked, ties broken by order of occurrence, and the ranks are
    cut into ``n`` contiguous buckets labeled 1 to ``n``. When the number of
    values is not divisible by ``n``, the first buckets hold one value more.
    Missing values are not ranked and get a missing label.

    Parameters
    ----------
    values : pandas.Series or array-like
        Numeric values.
    n : int
        Number of buckets, at least 1.

    Returns
    -------
    labels : pandas.Series of dtype Int64
        Indexed like ``values`` if it is a Series.

    Examples
    --------
    Quartiles of the equity score:

    >>> crime_df["equity_rank"] = ntile(crime_df["Equity_Score"], 4)
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValueError(f"n must be a positive integer, got: {n!r}")
    n = int(n)

    if isinstance(values, pd.Series):
        series = values
    else:
        series = pd.Series(np.asarray(values))
    if not (
        pd.api.types.is_numeric_dtype(series.dtype)
        or pd.api.types.is_datetime64_any_dtype(series.dtype)
    ):
        raise TypeError(f"ntile requires numeric values, got dtype {series.dtype}")

    rank = series.rank(method="first", na_option="keep").to_numpy(dtype=float)
    length = int(series.notna().sum())
    labels = np.full(rank.shape, np.nan)

    if length > 0:
        n_larger = length % n
        smaller_size = length // n
        larger_size = smaller_size + 1 if n_larger > 0 else smaller_size
        larger_threshold = larger_size * n_larger

        valid = ~np.isnan(rank)
        in_larger = valid & (rank <= larger_threshold)
        in_smaller = valid & (rank > larger_threshold)
        labels[in_larger] = np.floor(
            (rank[in_larger] + larger_size - 1) / larger_size
        )
        if smaller_size > 0:
            labels[in_smaller] = (
                np.floor((rank[in_smaller] - larger_threshold + smaller_size - 1) / smaller_size)
                + n_larger
            )

    return pd.Series(labels, index=series.index, name=series.name).astype("Int64")
