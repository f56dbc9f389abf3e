# exports
from gisframe import data, gis, logging, util, verbs
from gisframe.grouped import GroupedFrame
from gisframe.io import make_names, read_csv, structure
from gisframe.pipe import pipe, then
from gisframe.schemata import UnknownColumnError, ValidationError
from gisframe.verbs import (
    arrange,
    desc,
    filter,
    group_by,
    mutate,
    ntile,
    select,
    slice_rows,
    summarize,
    summarize_each,
    ungroup,
)

__version__ = "0.1.0"
