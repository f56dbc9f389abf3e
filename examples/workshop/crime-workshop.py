"""
Neighbourhood crime
===================

This example walks through a small analysis of crime and fire incident
counts per neighbourhood. It reads a CSV file, inspects and reshapes the
table, summarizes it per group, and finally moves the results in and out of
a GeoPackage and plots them on a map.

The data are synthetic, but shaped like the Toronto neighbourhood crime
statistics: one row per neighbourhood, with counts of arsons, assaults,
thefts and so on, and an equity score.
"""

# %%
# We'll start with the imports.

import matplotlib.pyplot as plt

import gisframe
from gisframe import (
    arrange,
    desc,
    filter,
    group_by,
    mutate,
    ntile,
    pipe,
    select,
    summarize,
    summarize_each,
    then,
)

# %%
# Create some sample data
# -----------------------
#
# Write the sample table to a CSV file in a temporary directory. Two of the
# column names contain spaces, as is common for exported spreadsheets.

tmp_dir = gisframe.util.temporary_directory()
csv_path = tmp_dir / "toronto-crime.csv"

sample = gisframe.data.toronto_crime()
sample = sample.rename(
    columns={
        "Fire_Vehicle_Incidents": "Fire Vehicle Incidents",
        "Total_Major_Crime_Incidents": "Total Major Crime Incidents",
    }
)
sample.to_csv(csv_path, index=False)

# %%
# Reading and inspecting
# ----------------------
#
# ``read_csv`` turns the column names into valid identifiers, so they can be
# used in expressions.

crime_df = gisframe.read_csv(csv_path)
print(gisframe.structure(crime_df))

# %%
# Filtering rows
# --------------
#
# Predicates are expressions, callables, or (column, operator, value) tuples.
# Several predicates must all hold.

yonge = filter(crime_df, "Neighbourhood == 'Yonge-St.Clair'")
busy = filter(crime_df, "Arsons > 3", "Thefts > 10")
either = filter(crime_df, "Arsons > 3 or Thefts > 10")
some_areas = filter(crime_df, ("AREA_S_CD", "in", [27, 118, 44, 121]))
murders = filter(crime_df, lambda df: df["Murders"] != 0)
print(len(yonge), len(busy), len(either), len(some_areas), len(murders))

# %%
# Selecting columns and sorting rows

equity = select(crime_df, "AREA_S_CD", "Neighbourhood", "Equity_Score")
no_arson = select(crime_df, "-Arsons", "-Assaults")
ranked = arrange(equity, desc("Equity_Score"), "Neighbourhood")
print(ranked.head())

# %%
# The same steps can be chained with ``pipe``, which reads from top to
# bottom.

safe_and_fair = pipe(
    crime_df,
    then(filter, "Equity_Score > 80"),
    then(select, "Neighbourhood", "Equity_Score", "Thefts"),
    then(arrange, "Thefts"),
)
print(safe_and_fair)

# %%
# Summarizing
# -----------
#
# Missing values make a summary missing, unless ``na_rm=True``.

overall = summarize(
    crime_df,
    mean_fire=("Fire_Vehicle_Incidents", "mean"),
    total_assaults=("Assaults", "sum"),
    na_rm=True,
)
print(overall)

per_arsons = summarize(
    group_by(crime_df, "Arsons"),
    neighbourhoods=(None, "n"),
    mean_fire=("Fire_Vehicle_Incidents", "mean"),
    na_rm=True,
)
print(arrange(per_arsons, "Arsons"))

print(summarize_each(crime_df, ["mean", "sd"], "Assaults", "Thefts"))

# %%
# New columns
# -----------
#
# ``ntile`` divides the neighbourhoods into groups of (almost) equal size.

grouped = mutate(
    crime_df,
    All_Thefts=lambda df: df["Thefts"] + df["Vehicle_Thefts"],
    equity_group=lambda df: ntile(df["Equity_Score"], 4),
)
print(
    summarize(
        group_by(grouped, "equity_group"),
        mean_thefts=("All_Thefts", "mean"),
    )
)

# %%
# Feature classes
# ---------------
#
# Store the neighbourhood polygons in a GeoPackage, as the layer
# ``toronto_crime``.

features = gisframe.data.toronto_crime_features()
gpkg = tmp_dir / "r-arcgis-data.gpkg"
gisframe.gis.write(gisframe.util.compose(gpkg, "toronto_crime"), features)

# %%
# Open the layer, and load only the fields we need.

tor_crime = gisframe.gis.open(gpkg / "toronto_crime")
print(tor_crime)

tor_hazard = gisframe.gis.select(
    tor_crime, fields=["Neighbourhood", "Hazardous_Incidents"]
)
unequal = gisframe.gis.select(tor_crime, where="Equity_Score < 50")

# %%
# Attach the groups computed above and write them to a new layer.

tor_groups = mutate(
    gisframe.gis.select(tor_crime),
    equity_group=lambda df: ntile(df["Equity_Score"], 4),
    robbery_group=lambda df: ntile(df["Robberies"], 4),
)
gisframe.gis.write(gpkg / "toronto_crime_groups", tor_groups)

# %%
# Plotting
# --------

fig, axes = gisframe.gis.plot(tor_hazard, "Hazardous_Incidents")

fig, axes = gisframe.gis.plot(
    gisframe.gis.select(gpkg / "toronto_crime_groups"),
    ["equity_group", "robbery_group"],
    cmap="viridis",
)
plt.show()
