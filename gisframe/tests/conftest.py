import matplotlib
import pytest

from .fixtures.crime_fixture import crime_csv, crime_df, crime_gdf, small_df
from .fixtures.featureclass_fixture import crime_featureclass, crime_gpkg

matplotlib.use("Agg")


def pytest_configure(config):
    config.addinivalue_line("markers", "example: runs the example scripts")


@pytest.fixture(autouse=True)
def reset_logger():
    import gisframe.logging
    from gisframe.logging.nulllogger import NullLogger

    yield
    gisframe.logging.logger.instance = NullLogger()
