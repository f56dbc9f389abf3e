"""
Schemata to validate tables before they are manipulated or written.

This code is based on: https://github.com/carbonplan/xarray-schema

which has the following MIT license:

    MIT License

    Copyright (c) 2021 carbonplan

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in all
    copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
    SOFTWARE.
"""

import abc
import operator
from functools import partial
from typing import Any, Dict, Iterable, Sequence

import geopandas as gpd
import numpy as np
import pandas as pd

OPERATORS = {
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
    ">=": operator.ge,
    ">": operator.gt,
    "in": lambda a, b: a.isin(b),
    "not in": lambda a, b: ~a.isin(b),
}


def partial_operator(op: str, value: Any):
    """
    Return a function of one argument ``a`` evaluating ``a <op> value``.
    """
    # partial binds the first argument, so swap a and b with a lambda.
    return partial(lambda b, a: OPERATORS[op](a, b), value)


class ValidationError(Exception):
    pass


class UnknownColumnError(KeyError):
    """
    Raised when a column is referenced that the table does not contain.
    """

    def __init__(self, missing: Iterable[str], available: Iterable[str] = ()):
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(self.missing)

    def __str__(self) -> str:
        missing = ", ".join(repr(name) for name in self.missing)
        message = f"Unknown column(s): {missing}"
        if self.available:
            message += f". Available columns: {', '.join(map(str, self.available))}"
        return message


def check_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    """
    Raise an UnknownColumnError listing every name in ``columns`` that is not a
    column of ``df``.
    """
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise UnknownColumnError(missing, df.columns)


def dtype_family(dtype) -> str:
    """
    Coarse classification of a dtype: boolean, numeric, datetime or text.

    Integers and floats share a family, since a file format may store an
    integer column holding missing values as floating point.
    """
    kind = getattr(dtype, "kind", None)
    if kind is None:
        kind = np.dtype(dtype).kind
    if kind == "b":
        return "boolean"
    elif kind in "iuf":
        return "numeric"
    elif kind == "M":
        return "datetime"
    else:
        return "text"


class BaseSchema(abc.ABC):
    @abc.abstractmethod
    def validate(self, obj: pd.DataFrame, **kwargs) -> None:
        pass

    def __or__(self, other):
        """
        This allows us to write:

        ColumnsSchema(["a"]) | ColumnsSchema(["b"])

        And get a SchemaUnion back.
        """
        return SchemaUnion(self, other)


class SchemaUnion:
    """
    Succesful validation only requires a single succes.

    Used to validate multiple options.
    """

    def __init__(self, *args):
        ntypes = len(set(type(arg) for arg in args))
        if ntypes > 1:
            raise TypeError("schemata in a union should have the same type")
        self.schemata = tuple(args)

    def validate(self, obj: Any, **kwargs):
        errors = []
        for schema in self.schemata:
            try:
                schema.validate(obj, **kwargs)
            except ValidationError as e:
                errors.append(e)

        if len(errors) == len(self.schemata):  # All schemata failed
            message = "\n\t" + "\n\t".join(str(error) for error in errors)
            raise ValidationError(f"No option succeeded:{message}")

    def __or__(self, other):
        return SchemaUnion(*self.schemata, other)


class UniqueColumnsSchema(BaseSchema):
    """
    Column names must be unique.
    """

    def validate(self, obj: pd.DataFrame, **kwargs) -> None:
        duplicated = obj.columns[obj.columns.duplicated()]
        if len(duplicated) > 0:
            raise ValidationError(f"duplicate column names: {list(duplicated)}")


class ColumnsSchema(BaseSchema):
    """
    Validate column names.

    Parameters
    ----------
    columns : sequence of str
        Expected column names.
    require_all_keys : bool
        All expected columns have to be present.
    allow_extra_keys : bool
        Columns that are not expected are allowed.
    """

    def __init__(
        self,
        columns: Sequence[str],
        require_all_keys: bool = True,
        allow_extra_keys: bool = True,
    ) -> None:
        self.columns = list(columns)
        self.require_all_keys = require_all_keys
        self.allow_extra_keys = allow_extra_keys

    def validate(self, obj: pd.DataFrame, **kwargs) -> None:
        columns = list(obj.columns)

        if self.require_all_keys:
            missing_keys = [c for c in self.columns if c not in columns]
            if missing_keys:
                raise ValidationError(f"columns has missing keys: {missing_keys}")

        if not self.allow_extra_keys:
            extra_keys = [c for c in columns if c not in self.columns]
            if extra_keys:
                raise ValidationError(f"columns has extra keys: {extra_keys}")


class DTypeFamilySchema(BaseSchema):
    """
    Validate that columns belong to the expected dtype families, see
    :func:`dtype_family`. Columns absent from ``obj`` are skipped.
    """

    def __init__(self, dtypes: Dict[str, Any]) -> None:
        self.families = {name: dtype_family(dtype) for name, dtype in dtypes.items()}

    def validate(self, obj: pd.DataFrame, **kwargs) -> None:
        mismatches = []
        for name, expected in self.families.items():
            if name not in obj.columns:
                continue
            actual = dtype_family(obj[name].dtype)
            if actual != expected:
                mismatches.append(f"{name}: {actual} != {expected}")
        if mismatches:
            raise ValidationError(f"dtype mismatch in {', '.join(mismatches)}")


class GeometrySchema(BaseSchema):
    """
    The table has to carry an active geometry column.
    """

    def validate(self, obj: pd.DataFrame, **kwargs) -> None:
        if not isinstance(obj, gpd.GeoDataFrame):
            raise ValidationError(
                f"expected a GeoDataFrame with geometry, got {type(obj).__name__}"
            )
        try:
            obj.geometry
        except AttributeError as e:
            raise ValidationError("GeoDataFrame has no active geometry column") from e


def validate_schemata(obj: pd.DataFrame, schemata: Iterable[BaseSchema], **kwargs):
    """
    Validate against every schema, collecting all errors into a single
    ValidationError.
    """
    errors = []
    for schema in schemata:
        try:
            schema.validate(obj, **kwargs)
        except ValidationError as e:
            errors.append(e)
    if errors:
        message = "\n\t" + "\n\t".join(str(error) for error in errors)
        raise ValidationError(f"Validation failed:{message}")
