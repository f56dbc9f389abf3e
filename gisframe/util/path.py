"""
Feature class paths are understood with :func:`gisframe.util.path.decompose`
and constructed with :func:`gisframe.util.path.compose`.

A feature class lives either inside a container, a file geodatabase (``.gdb``
directory) or a GeoPackage, or it is a file of its own:

* ``data/r-arcgis-data.gdb/toronto_crime``
* ``data/crime.gpkg/toronto_crime``
* ``data/crime.gpkg`` (the layer named after the file)
* ``data/toronto_crime.shp``, ``.geojson``, ``.fgb``
"""

import pathlib
import tempfile
from typing import NamedTuple, Optional, Union

CONTAINER_DRIVERS = {
    ".gdb": "OpenFileGDB",
    ".gpkg": "GPKG",
}
FILE_DRIVERS = {
    ".gpkg": "GPKG",
    ".shp": "ESRI Shapefile",
    ".geojson": "GeoJSON",
    ".json": "GeoJSON",
    ".fgb": "FlatGeobuf",
}


class FeaturePath(NamedTuple):
    dataset: pathlib.Path
    layer: Optional[str]
    driver: str

    @property
    def layer_name(self) -> str:
        """The layer name, falling back on the file stem."""
        if self.layer is not None:
            return self.layer
        return self.dataset.stem


def decompose(path: Union[str, pathlib.Path]) -> FeaturePath:
    """
    Split a feature class path into dataset, layer and the GDAL driver for it.

    Parameters
    ----------
    path : str or pathlib.Path

    Returns
    -------
    FeaturePath

    Examples
    --------
    >>> decompose("data/r-arcgis-data.gdb/toronto_crime")
    FeaturePath(dataset=PosixPath('data/r-arcgis-data.gdb'), layer='toronto_crime', driver='OpenFileGDB')
    """
    path = pathlib.Path(path)
    parent_suffix = path.parent.suffix.lower()
    if parent_suffix in CONTAINER_DRIVERS:
        return FeaturePath(path.parent, path.name, CONTAINER_DRIVERS[parent_suffix])

    for part in path.parts[:-1]:
        if pathlib.Path(part).suffix.lower() in CONTAINER_DRIVERS:
            raise ValueError(
                f"Feature classes in a {part} container cannot be nested: {path}"
            )

    suffix = path.suffix.lower()
    if suffix in FILE_DRIVERS:
        return FeaturePath(path, None, FILE_DRIVERS[suffix])
    if suffix == ".gdb":
        raise ValueError(
            f"Path {path} is a geodatabase, append the feature class name: "
            f"{path / 'feature_class'}"
        )
    raise ValueError(
        f"Unrecognized feature class path: {path}. Expected a layer in a "
        f"{' or '.join(CONTAINER_DRIVERS)} container, or a file with one of: "
        f"{', '.join(FILE_DRIVERS)}"
    )


def compose(dataset: Union[str, pathlib.Path], layer: Optional[str] = None) -> pathlib.Path:
    """
    Construct a feature class path from a dataset and an optional layer name.

    Examples
    --------
    >>> compose("data/r-arcgis-data.gdb", "toronto_crime_groups")
    PosixPath('data/r-arcgis-data.gdb/toronto_crime_groups')
    """
    dataset = pathlib.Path(dataset)
    if layer is None:
        return dataset
    return dataset / layer


def temporary_directory() -> pathlib.Path:
    """Create a new, empty directory to write example data to."""
    return pathlib.Path(tempfile.mkdtemp(prefix="gisframe-"))
