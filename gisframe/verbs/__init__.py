"""
Verbs for manipulating tables.

Every verb takes the table as its first argument and returns a new table, so
verbs can be nested, stored in intermediate variables, or chained with
:func:`gisframe.pipe.pipe` or ``pandas.DataFrame.pipe``:

>>> from gisframe.verbs import arrange, filter, select
>>> arrange(select(filter(crime_df, "Equity_Score > 80"), "Neighbourhood", "Thefts"), "Thefts")
>>> crime_df.pipe(filter, "Equity_Score > 80").pipe(select, "Neighbourhood", "Thefts")
"""

from gisframe.verbs.columns import mutate, select
from gisframe.verbs.grouping import group_by, ungroup
from gisframe.verbs.ranking import ntile
from gisframe.verbs.rows import Descending, arrange, desc, filter, slice_rows
from gisframe.verbs.summarize import AGGREGATIONS, summarize, summarize_each
