import math
from typing import Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import pandas as pd

from gisframe.gis.convert import to_geodataframe
from gisframe.schemata import check_columns


def plot(
    data: pd.DataFrame,
    columns: Union[str, Sequence[str], None] = None,
    ncols: int = 2,
    figsize: Optional[Tuple[float, float]] = None,
    **kwargs,
):
    """
    Plot a map per attribute column.

    Parameters
    ----------
    data : geopandas.GeoDataFrame
        Or a table that :func:`to_geodataframe` can convert.
    columns : str or sequence of str, optional
        Columns to plot. Defaults to all numeric attribute columns.
    ncols : int, default 2
        Number of panels side by side.
    figsize : tuple of two floats, optional
        This is used in plt.subplots(figsize)
    **kwargs
        Passed on to ``geopandas.GeoDataFrame.plot``, e.g. ``cmap="viridis"``.

    Returns
    -------
    fig : matplotlib.figure.Figure
    axes : numpy.ndarray of matplotlib.axes.Axes

    Examples
    --------
    >>> fig, axes = plot(tor_hazard, "Hazardous_Incidents")
    """
    gdf = to_geodataframe(data)
    geometry_name = gdf.geometry.name

    if columns is None:
        columns = [
            column
            for column in gdf.columns
            if column != geometry_name
            and pd.api.types.is_numeric_dtype(gdf[column].dtype)
            and not pd.api.types.is_bool_dtype(gdf[column].dtype)
        ]
    elif isinstance(columns, str):
        columns = [columns]
    columns = list(columns)
    check_columns(gdf, columns)
    if len(columns) == 0:
        raise ValueError("No columns to plot")

    ncols = max(1, min(ncols, len(columns)))
    nrows = math.ceil(len(columns) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=figsize, squeeze=False)

    settings = {"legend": True}
    settings.update(kwargs)
    for ax, column in zip(axes.flat, columns):
        gdf.plot(column=column, ax=ax, **settings)
        ax.set_title(column)
        ax.set_axis_off()
    for ax in axes.flat[len(columns) :]:
        ax.set_visible(False)

    return fig, axes
