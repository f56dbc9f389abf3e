import matplotlib.pyplot as plt
import pytest

from gisframe.gis import plot
from gisframe.schemata import UnknownColumnError


def test_plot_single_column(crime_gdf):
    fig, axes = plot(crime_gdf, "Hazardous_Incidents")
    assert axes.shape == (1, 1)
    assert axes[0, 0].get_title() == "Hazardous_Incidents"
    plt.close(fig)


def test_plot_all_numeric(crime_gdf):
    columns = ["Arsons", "Assaults", "Thefts"]
    fig, axes = plot(crime_gdf[columns + ["geometry"]], ncols=2)
    assert axes.shape == (2, 2)
    assert [ax.get_title() for ax in axes.flat[:3]] == columns
    assert not axes.flat[3].get_visible()
    plt.close(fig)


def test_plot_text_column(crime_gdf):
    fig, _ = plot(crime_gdf, ["Neighbourhood"], legend=False)
    plt.close(fig)


def test_plot_errors(crime_gdf):
    with pytest.raises(UnknownColumnError):
        plot(crime_gdf, "Hazard")
    with pytest.raises(ValueError):
        plot(crime_gdf[["Neighbourhood", "geometry"]])
