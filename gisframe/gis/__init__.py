"""
Read and write feature classes as ``geopandas.GeoDataFrame``.

A feature class is opened with :func:`open`, which returns a lightweight
handle describing its fields, geometry type and coordinate reference system.
:func:`select` loads it, optionally only some fields and the records that
match an SQL where clause. :func:`write` persists a table as a new feature
class.

>>> import gisframe
>>> tor_crime = gisframe.gis.open("data/r-arcgis-data.gdb/toronto_crime")
>>> tor_hazard = gisframe.gis.select(tor_crime, fields=["Neighbourhood", "Hazardous_Incidents"])
>>> gisframe.gis.write("data/r-arcgis-data.gdb/toronto_crime_groups", tor_hazard)
"""

from gisframe.gis.convert import to_geodataframe
from gisframe.gis.featureclass import FeatureClass, open, select, write
from gisframe.gis.plot import plot
