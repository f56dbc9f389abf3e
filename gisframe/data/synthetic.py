"""
Synthetic sample data, shaped like the Toronto neighbourhood crime
statistics used in the workshop example.
"""

import math

import geopandas as gpd
import numpy as np
import pandas as pd
import shapely.geometry as sg

NEIGHBOURHOOD_NAMES = [
    "Yonge-St.Clair",
    "York University Heights",
    "Lansing-Westgate",
    "Yorkdale-Glen Park",
    "Kennedy Park",
    "Taylor-Massey",
    "Humber Heights-Westmount",
    "Willowdale East",
    "Woburn",
    "Agincourt North",
    "Bay Street Corridor",
    "Church-Yonge Corridor",
    "Danforth Village-East York",
    "High Park North",
    "Leaside-Bennington",
    "Moss Park",
    "Regent Park",
    "Rosedale-Moore Park",
    "South Parkdale",
    "The Beaches",
]

# Expected counts per neighbourhood
MEAN_COUNTS = {
    "Arsons": 3.0,
    "Assaults": 150.0,
    "Break_and_Enters": 60.0,
    "Drug_Arrests": 25.0,
    "Fire_Medical_Calls": 300.0,
    "Fire_Vehicle_Incidents": 60.0,
    "Hazardous_Incidents": 40.0,
    "Murders": 0.5,
    "Robberies": 25.0,
    "Sexual_Assaults": 15.0,
    "Thefts": 10.0,
    "Vehicle_Thefts": 30.0,
}
MAJOR_CRIMES = [
    "Assaults",
    "Break_and_Enters",
    "Murders",
    "Robberies",
    "Sexual_Assaults",
    "Thefts",
    "Vehicle_Thefts",
]

# UTM zone 17N, around Toronto
CRS = "EPSG:26917"
X_ORIGIN = 620_000.0
Y_ORIGIN = 4_830_000.0
CELLSIZE = 1_000.0


def _neighbourhood_names(n: int):
    names = NEIGHBOURHOOD_NAMES[:n]
    names += [f"Neighbourhood {i + 1}" for i in range(len(names), n)]
    return names


def toronto_crime(n: int = 140, seed: int = 0) -> pd.DataFrame:
    """
    Crime and fire incident counts per neighbourhood.

    The values are random, but the same for the same ``n`` and ``seed``.
    About one in twenty-five ``Fire_Vehicle_Incidents`` values is missing.

    Parameters
    ----------
    n : int, default 140
        Number of neighbourhoods.
    seed : int, default 0

    Returns
    -------
    pandas.DataFrame
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    rng = np.random.default_rng(seed)

    df = pd.DataFrame(
        {
            "AREA_S_CD": np.arange(1, n + 1),
            "Neighbourhood": _neighbourhood_names(n),
        }
    )
    for column, mean in MEAN_COUNTS.items():
        df[column] = rng.poisson(mean, size=n)
    df["Total_Major_Crime_Incidents"] = df[MAJOR_CRIMES].sum(axis=1)
    df["Equity_Score"] = np.round(rng.uniform(20.0, 100.0, size=n), 2)

    missing = rng.choice(n, size=max(1, n // 25), replace=False)
    df["Fire_Vehicle_Incidents"] = df["Fire_Vehicle_Incidents"].astype(float)
    df.loc[missing, "Fire_Vehicle_Incidents"] = np.nan
    return df


def toronto_crime_features(n: int = 140, seed: int = 0) -> gpd.GeoDataFrame:
    """
    :func:`toronto_crime` with a square polygon per neighbourhood, laid out
    on a regular grid.

    Returns
    -------
    geopandas.GeoDataFrame
    """
    df = toronto_crime(n, seed)
    ncol = math.ceil(math.sqrt(n))
    geometry = []
    for i in range(n):
        row, col = divmod(i, ncol)
        xmin = X_ORIGIN + col * CELLSIZE
        ymax = Y_ORIGIN - row * CELLSIZE
        geometry.append(sg.box(xmin, ymax - CELLSIZE, xmin + CELLSIZE, ymax))
    return gpd.GeoDataFrame(df, geometry=geometry, crs=CRS)
