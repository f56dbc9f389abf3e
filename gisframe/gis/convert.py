from typing import Optional

import geopandas as gpd
import pandas as pd
import shapely

from gisframe.schemata import ValidationError, check_columns


def to_geodataframe(
    data: pd.DataFrame,
    geometry: str = "geometry",
    x: Optional[str] = None,
    y: Optional[str] = None,
    crs=None,
) -> gpd.GeoDataFrame:
    """
    Convert a table to a GeoDataFrame.

    The geometry is taken from the ``x`` and ``y`` columns when given (as
    points), otherwise from the ``geometry`` column, holding shapely
    geometries or WKT strings.

    Parameters
    ----------
    data : pandas.DataFrame
    geometry : str, default "geometry"
    x, y : str, optional
        Coordinate columns.
    crs : optional
        Anything accepted by ``pyproj.CRS.from_user_input``. Not applied when
        ``data`` is a GeoDataFrame that already has a CRS.

    Returns
    -------
    geopandas.GeoDataFrame

    Examples
    --------
    >>> wells = pd.DataFrame({"id": [1, 2], "x": [1.0, 2.0], "y": [3.0, 4.0]})
    >>> to_geodataframe(wells, x="x", y="y", crs="EPSG:26917")
    """
    if isinstance(data, gpd.GeoDataFrame):
        gdf = data.copy()
        if crs is not None and gdf.crs is None:
            gdf = gdf.set_crs(crs)
        return gdf

    if (x is None) != (y is None):
        raise ValueError("Provide both x and y, or neither")

    if x is not None:
        check_columns(data, [x, y])
        points = gpd.points_from_xy(data[x], data[y])
        return gpd.GeoDataFrame(data.copy(), geometry=points, crs=crs)

    check_columns(data, [geometry])
    values = data[geometry]
    if pd.api.types.infer_dtype(values, skipna=True) in ("string", "empty"):
        geoms = gpd.GeoSeries.from_wkt(values, index=data.index)
    else:
        if not all(
            value is None or isinstance(value, shapely.Geometry) for value in values
        ):
            raise ValidationError(
                f"Column {geometry!r} holds neither shapely geometries nor WKT strings"
            )
        geoms = gpd.GeoSeries(values, index=data.index)

    gdf = data.copy()
    gdf[geometry] = geoms
    return gpd.GeoDataFrame(gdf, geometry=geometry, crs=crs)
