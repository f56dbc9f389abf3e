import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import geopandas as gpd
import numpy as np
import pandas as pd
from pyproj import CRS

from gisframe.logging import LogLevel, logger
from gisframe.logging.logging_decorators import standard_log_decorator
from gisframe.schemata import (
    ColumnsSchema,
    DTypeFamilySchema,
    GeometrySchema,
    UniqueColumnsSchema,
    UnknownColumnError,
    ValidationError,
    validate_schemata,
)
from gisframe.util.path import FeaturePath, decompose

PathLike = Union[str, pathlib.Path]


@dataclass
class FeatureClass:
    """
    Handle to a feature class on disk, as returned by :func:`open`.

    Attributes
    ----------
    path : FeaturePath
        Dataset, layer and driver.
    layer : str
        The layer name within the dataset.
    fields : list of str
        Attribute field names, excluding the geometry.
    dtypes : dict of str to dtype
        The dtype of every field, as read by geopandas.
    geometry_type : str or None
        E.g. ``"Polygon"``; None for a table without geometry.
    crs : pyproj.CRS or None
    """

    path: FeaturePath
    layer: str
    fields: List[str] = field(default_factory=list)
    dtypes: Dict[str, Any] = field(default_factory=dict)
    geometry_type: Optional[str] = None
    crs: Optional[CRS] = None

    def __repr__(self) -> str:
        crs = self.crs.to_string() if self.crs is not None else "None"
        return "\n".join(
            [
                "FeatureClass",
                f"  dataset       : {self.path.dataset}",
                f"  layer         : {self.layer}",
                f"  driver        : {self.path.driver}",
                f"  geometry type : {self.geometry_type}",
                f"  crs           : {crs}",
                f"  fields        : {', '.join(self.fields)}",
            ]
        )


def _layer_names(dataset: pathlib.Path) -> pd.DataFrame:
    return gpd.list_layers(dataset)


def _resolve_layer(fpath: FeaturePath, layers: pd.DataFrame) -> str:
    names = list(layers["name"])
    if fpath.layer is not None:
        if fpath.layer not in names:
            raise ValueError(
                f"Feature class {fpath.layer!r} not found in {fpath.dataset}. "
                f"Available: {', '.join(names)}"
            )
        return fpath.layer
    if fpath.layer_name in names:
        return fpath.layer_name
    if len(names) == 1:
        return names[0]
    raise ValueError(
        f"{fpath.dataset} contains several layers, append one of "
        f"{', '.join(names)} to the path"
    )


@standard_log_decorator()
def open(path: PathLike) -> FeatureClass:
    """
    Open a feature class and describe it, without loading its records.

    Parameters
    ----------
    path : str or pathlib.Path
        Feature class path, e.g. ``"data/r-arcgis-data.gdb/toronto_crime"``.
        See :mod:`gisframe.util.path` for the supported forms.

    Returns
    -------
    FeatureClass

    Raises
    ------
    FileNotFoundError
        The dataset does not exist.
    ValueError
        The path is not a feature class path, or the layer does not exist.
    """
    fpath = decompose(path)
    if not fpath.dataset.exists():
        raise FileNotFoundError(f"No such dataset: {fpath.dataset}")

    layers = _layer_names(fpath.dataset)
    layer = _resolve_layer(fpath, layers)
    geometry_type = layers.loc[layers["name"] == layer, "geometry_type"].iloc[0]

    sample = gpd.read_file(fpath.dataset, layer=layer, rows=1)
    if isinstance(sample, gpd.GeoDataFrame):
        geometry_name = sample.geometry.name
        crs = sample.crs
    else:
        geometry_name = None
        geometry_type = None
        crs = None
    fields = [column for column in sample.columns if column != geometry_name]

    return FeatureClass(
        path=fpath,
        layer=layer,
        fields=fields,
        dtypes={column: sample[column].dtype for column in fields},
        geometry_type=geometry_type,
        crs=crs,
    )


@standard_log_decorator()
def select(
    featureclass: Union[FeatureClass, PathLike],
    fields: Union[str, Sequence[str]] = "*",
    where: Optional[str] = None,
) -> gpd.GeoDataFrame:
    """
    Load the records of a feature class.

    Parameters
    ----------
    featureclass : FeatureClass, str or pathlib.Path
        Handle from :func:`open`, or a path which is opened first.
    fields : "*" or sequence of str, default "*"
        Attribute fields to load, in this order. The geometry is always
        loaded.
    where : str, optional
        SQL where clause evaluated by the data source, e.g.
        ``"Equity_Score > 50"``.

    Returns
    -------
    geopandas.GeoDataFrame
        A pandas.DataFrame for a table without geometry.

    Examples
    --------
    >>> tor_crime = open("data/r-arcgis-data.gdb/toronto_crime")
    >>> select(tor_crime, fields=["Neighbourhood", "Hazardous_Incidents"])
    >>> select(tor_crime, where="Equity_Score > 50")
    """
    if not isinstance(featureclass, FeatureClass):
        featureclass = open(featureclass)

    if isinstance(fields, str):
        if fields != "*":
            fields = [fields]
        else:
            fields = None
    if fields is not None:
        fields = list(fields)
        missing = [name for name in fields if name not in featureclass.fields]
        if missing:
            raise UnknownColumnError(missing, featureclass.fields)

    gdf = gpd.read_file(
        featureclass.path.dataset,
        layer=featureclass.layer,
        columns=fields,
        where=where,
    )
    if fields is not None:
        order = list(fields)
        if isinstance(gdf, gpd.GeoDataFrame):
            order.append(gdf.geometry.name)
        gdf = gdf[order]

    logger.info(f"Selected {len(gdf)} records from {featureclass.layer}")
    return gdf


def _check_target(fpath: FeaturePath) -> None:
    directory = fpath.dataset.parent
    if not directory.exists():
        raise FileNotFoundError(
            f"Cannot write to {fpath.dataset}: directory {directory} does not exist"
        )


def _for_writing(data: gpd.GeoDataFrame, driver: str) -> gpd.GeoDataFrame:
    """
    Replace pandas nullable integer and boolean columns, which not every
    driver accepts, by numpy equivalents.

    File geodatabases store 64-bit integers as reals, so there integer columns
    whose values fit are written as 32-bit integers.
    """
    data = data.copy()
    for column in data.columns:
        dtype = data[column].dtype
        if isinstance(dtype, pd.api.extensions.ExtensionDtype) and dtype.kind in "iub":
            if data[column].isna().any():
                data[column] = data[column].astype("float64")
            else:
                data[column] = data[column].to_numpy(dtype=dtype.numpy_dtype)
        if driver == "OpenFileGDB" and data[column].dtype.kind in "iu":
            info = np.iinfo(np.int32)
            values = data[column]
            if len(values) == 0 or (values.min() >= info.min and values.max() <= info.max):
                data[column] = values.astype(np.int32)
    return data


def _attributes(data: gpd.GeoDataFrame) -> pd.DataFrame:
    return pd.DataFrame(data.drop(columns=data.geometry.name))


@standard_log_decorator(start_level=LogLevel.INFO, end_level=LogLevel.INFO)
def write(path: PathLike, data: gpd.GeoDataFrame, overwrite: bool = False) -> None:
    """
    Write a table with geometry to a new feature class.

    If the feature class already exists, it is replaced when ``data`` has the
    same fields (names, and dtypes of the same family: boolean, numeric,
    datetime or text). Use ``overwrite=True`` to replace it regardless.

    Parameters
    ----------
    path : str or pathlib.Path
        Feature class path, e.g. ``"data/r-arcgis-data.gdb/toronto_crime_groups"``.
        A geodatabase or GeoPackage is created when it does not exist yet.
    data : geopandas.GeoDataFrame
    overwrite : bool, default False

    Raises
    ------
    FileNotFoundError
        The directory to write in does not exist.
    ValueError
        The path is not a feature class path.
    gisframe.schemata.ValidationError
        ``data`` has no geometry, duplicate column names, or the feature class
        exists with a different schema.
    """
    fpath = decompose(path)
    _check_target(fpath)
    validate_schemata(data, [GeometrySchema(), UniqueColumnsSchema()])

    layer = fpath.layer_name
    if fpath.dataset.exists() and layer in list(_layer_names(fpath.dataset)["name"]):
        existing = open(path)
        if not overwrite:
            try:
                validate_schemata(
                    _attributes(data),
                    [
                        ColumnsSchema(
                            existing.fields,
                            require_all_keys=True,
                            allow_extra_keys=False,
                        ),
                        DTypeFamilySchema(existing.dtypes),
                    ],
                )
            except ValidationError as e:
                raise ValidationError(
                    f"Feature class {path} exists with an incompatible schema: {e}"
                ) from e
        logger.warning(f"Replacing existing feature class {path}")

    kwargs = {"driver": fpath.driver}
    if fpath.layer is not None or fpath.driver == "GPKG":
        kwargs["layer"] = layer
    _for_writing(data, fpath.driver).to_file(fpath.dataset, **kwargs)
    logger.info(f"Wrote {len(data)} records to {path}")
