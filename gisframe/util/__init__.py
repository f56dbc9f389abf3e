"""
Miscellaneous utilities.
"""

from gisframe.util.context import cd
from gisframe.util.path import FeaturePath, compose, decompose, temporary_directory
