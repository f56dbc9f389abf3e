import contextlib
import os
import pathlib
from typing import Union


@contextlib.contextmanager
def cd(path: Union[str, pathlib.Path]):
    """
    Change directory, and change it back after the with block.

    Handy for workshop material that uses paths relative to a project folder.

    Examples
    --------
    >>> with gisframe.util.cd("workshop"):
            crime_df = gisframe.io.read_csv("data/toronto-crime.csv")

    """
    curdir = os.getcwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(curdir)
