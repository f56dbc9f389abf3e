import geopandas as gpd
import pandas as pd
import pytest

import gisframe


def test_toronto_crime():
    df = gisframe.data.toronto_crime()
    assert len(df) == 140
    assert df["AREA_S_CD"].is_unique
    assert df["Neighbourhood"].iloc[0] == "Yonge-St.Clair"
    assert df["Neighbourhood"].is_unique
    assert df["Fire_Vehicle_Incidents"].isna().sum() == 5
    assert (df["Equity_Score"].between(20.0, 100.0)).all()
    total = df[gisframe.data.synthetic.MAJOR_CRIMES].sum(axis=1)
    assert (df["Total_Major_Crime_Incidents"] == total).all()


def test_toronto_crime_deterministic():
    pd.testing.assert_frame_equal(
        gisframe.data.toronto_crime(n=10, seed=4),
        gisframe.data.toronto_crime(n=10, seed=4),
    )


def test_toronto_crime_invalid():
    with pytest.raises(ValueError):
        gisframe.data.toronto_crime(n=0)


def test_toronto_crime_features():
    gdf = gisframe.data.toronto_crime_features(n=10)
    assert isinstance(gdf, gpd.GeoDataFrame)
    assert gdf.crs.to_epsg() == 26917
    assert (gdf.geometry.area == 1.0e6).all()
    assert not gdf.geometry.overlaps(gdf.geometry.shift()).any()
