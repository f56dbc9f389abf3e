import geopandas as gpd
import numpy as np
import pandas as pd
import pytest
import shapely.geometry as sg

import gisframe
from gisframe.gis import FeatureClass, open, select, write
from gisframe.gis.featureclass import _for_writing
from gisframe.schemata import UnknownColumnError, ValidationError
from gisframe.verbs import mutate, ntile


def test_open(crime_featureclass, crime_gdf):
    fc = crime_featureclass
    assert isinstance(fc, FeatureClass)
    assert fc.layer == "toronto_crime"
    assert fc.path.driver == "GPKG"
    assert fc.fields == [c for c in crime_gdf.columns if c != "geometry"]
    assert fc.geometry_type == "Polygon"
    assert fc.crs.to_epsg() == 26917
    text = repr(fc)
    assert "toronto_crime" in text
    assert "Neighbourhood" in text


def test_open_single_layer_file(tmp_path, crime_gdf):
    path = tmp_path / "crime.shp"
    crime_gdf.to_file(path)
    fc = open(path)
    assert fc.layer == "crime"
    assert fc.path.driver == "ESRI Shapefile"


def test_open_missing_dataset(tmp_path):
    with pytest.raises(FileNotFoundError):
        open(tmp_path / "nothing.gpkg" / "toronto_crime")


def test_open_missing_layer(crime_gpkg):
    with pytest.raises(ValueError, match="not found"):
        open(crime_gpkg / "toronto_fire")


def test_open_invalid_path(crime_gpkg):
    with pytest.raises(ValueError):
        open(crime_gpkg.parent / "crime.csv")


def test_select_all(crime_featureclass, crime_gdf):
    gdf = select(crime_featureclass)
    assert isinstance(gdf, gpd.GeoDataFrame)
    assert len(gdf) == len(crime_gdf)
    assert list(gdf.columns) == list(crime_gdf.columns)


def test_select_fields(crime_featureclass):
    crime_fields = ["Hazardous_Incidents", "Neighbourhood"]
    gdf = select(crime_featureclass, fields=crime_fields)
    assert list(gdf.columns) == ["Hazardous_Incidents", "Neighbourhood", "geometry"]
    assert isinstance(gdf, gpd.GeoDataFrame)

    single = select(crime_featureclass, fields="Neighbourhood")
    assert list(single.columns) == ["Neighbourhood", "geometry"]


def test_select_where(crime_featureclass, crime_gdf):
    gdf = select(crime_featureclass, where="Equity_Score > 50")
    expected = crime_gdf[crime_gdf["Equity_Score"] > 50]
    assert len(gdf) == len(expected)
    assert (gdf["Equity_Score"] > 50).all()


def test_select_path(crime_gpkg):
    gdf = select(crime_gpkg / "toronto_crime", fields=["Assaults"], where="Assaults < 150")
    assert (gdf["Assaults"] < 150).all()


def test_select_unknown_field(crime_featureclass):
    with pytest.raises(UnknownColumnError, match="Hazard"):
        select(crime_featureclass, fields=["Hazard"])


def test_write_new_layer_round_trip(crime_featureclass, crime_gpkg):
    gdf = select(crime_featureclass)
    gdf = mutate(
        gdf,
        equity_rank=lambda df: ntile(df["Equity_Score"], 4),
        robbery_rank=lambda df: ntile(df["Robberies"], 4),
    )
    output = crime_gpkg / "toronto_crime_groups"
    write(output, gdf)

    back = select(open(output))
    assert len(back) == len(gdf)
    assert list(back["equity_rank"]) == list(gdf["equity_rank"])
    assert "toronto_crime" in list(gpd.list_layers(crime_gpkg)["name"])


def test_write_single_file(tmp_path, crime_gdf):
    path = tmp_path / "crime.geojson"
    write(path, crime_gdf)
    assert len(select(path)) == len(crime_gdf)


def test_write_replaces_compatible(crime_gpkg, crime_gdf):
    path = crime_gpkg / "toronto_crime"
    smaller = crime_gdf.iloc[:3]
    write(path, smaller)
    assert len(select(path)) == 3


def test_write_incompatible_schema(crime_gpkg, crime_gdf):
    path = crime_gpkg / "toronto_crime"
    with pytest.raises(ValidationError, match="incompatible"):
        write(path, crime_gdf[["Neighbourhood", "geometry"]])

    retyped = crime_gdf.assign(Arsons=crime_gdf["Arsons"].astype(str))
    with pytest.raises(ValidationError, match="Arsons"):
        write(path, retyped)

    write(path, crime_gdf[["Neighbourhood", "geometry"]], overwrite=True)
    assert open(path).fields == ["Neighbourhood"]


def test_write_missing_directory(tmp_path, crime_gdf):
    with pytest.raises(FileNotFoundError):
        write(tmp_path / "missing" / "crime.gpkg" / "toronto_crime", crime_gdf)


def test_write_without_geometry(tmp_path, crime_df):
    with pytest.raises(ValidationError):
        write(tmp_path / "crime.gpkg" / "toronto_crime", crime_df)


def test_write_nullable_integers(tmp_path):
    gdf = gpd.GeoDataFrame(
        {
            "complete": pd.array([1, 2], dtype="Int64"),
            "partial": pd.array([1, None], dtype="Int64"),
        },
        geometry=[sg.Point(0, 0), sg.Point(1, 1)],
        crs="EPSG:26917",
    )
    path = tmp_path / "points.gpkg" / "points"
    write(path, gdf)
    back = select(path)
    assert list(back["complete"]) == [1, 2]
    assert pd.isna(back["partial"].iloc[1])


def test_write_file_geodatabase(tmp_path, crime_gdf):
    pyogrio = pytest.importorskip("pyogrio")
    if tuple(pyogrio.__gdal_version__) < (3, 6, 0):
        pytest.skip("Writing file geodatabases requires GDAL >= 3.6")
    gdf = mutate(crime_gdf, equity_rank=lambda df: ntile(df["Equity_Score"], 4))
    path = tmp_path / "r-arcgis-data.gdb" / "toronto_crime_groups"
    write(path, gdf)
    fc = gisframe.gis.open(path)
    assert fc.path.driver == "OpenFileGDB"
    assert fc.fields == [c for c in gdf.columns if c != "geometry"]

    back = select(fc)
    assert len(back) == len(gdf)
    for column in fc.fields:
        assert back[column].dtype.kind == gdf[column].dtype.kind, column
    assert list(back["equity_rank"]) == list(gdf["equity_rank"])


def test_for_writing_geodatabase_integers():
    gdf = gpd.GeoDataFrame(
        {
            "rank": pd.array([1, 4], dtype="Int64"),
            "count": np.array([3, 5], dtype=np.int64),
            "large": np.array([1, 2**40], dtype=np.int64),
        },
        geometry=[sg.Point(0, 0), sg.Point(1, 1)],
    )
    converted = _for_writing(gdf, "OpenFileGDB")
    assert converted["rank"].dtype == np.int32
    assert converted["count"].dtype == np.int32
    assert converted["large"].dtype == np.int64
    assert _for_writing(gdf, "GPKG")["count"].dtype == np.int64
