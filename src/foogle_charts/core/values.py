"""
Scalar data points.

A `Value` is one of four frozen cases: Number, Text, Boolean, DateValue.
Renderer adapters can match on the case exhaustively; `to_value` is the only
place raw Python objects get boxed.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Union

import numpy as np
import pandas as pd

from foogle_charts.core.errors import ValidationError


@dataclass(frozen=True)
class Number:
    value: int | float

    def as_number(self) -> float:
        return float(self.value)

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    value: str

    def as_number(self) -> float:
        try:
            return float(self.value)
        except ValueError as e:
            raise ValidationError(f"Text value '{self.value}' is not numeric.") from e

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Boolean:
    value: bool

    def as_number(self) -> float:
        return 1.0 if self.value else 0.0

    def as_text(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class DateValue:
    """A calendar date or a timestamp."""

    value: date | datetime

    def as_number(self) -> float:
        """Milliseconds since the epoch. Naive values and bare dates are read as UTC."""
        if isinstance(self.value, datetime):
            dt = self.value
        else:
            dt = datetime.combine(self.value, time())
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.timestamp() * 1000.0

    def as_text(self) -> str:
        return self.value.isoformat()


Value = Union[Number, Text, Boolean, DateValue]

VALUE_TYPES: tuple[type, ...] = (Number, Text, Boolean, DateValue)


def to_value(raw: Any) -> Value:
    """
    Box a raw scalar into a Value.

    numpy scalars are unwrapped first, so values read from pandas frames box
    the same way as plain Python values.
    """
    if isinstance(raw, VALUE_TYPES):
        return raw
    # datetime64.item() gives an int at ns precision; go through pandas instead
    if isinstance(raw, np.datetime64):
        raw = pd.Timestamp(raw)
    if raw is pd.NaT:
        raise ValidationError("Missing timestamp (NaT) cannot be used as a data point.")
    if isinstance(raw, np.generic):
        raw = raw.item()

    # bool is a subclass of int: check it first
    if isinstance(raw, bool):
        return Boolean(raw)
    if isinstance(raw, numbers.Integral):
        return Number(int(raw))
    if isinstance(raw, (numbers.Real, Decimal)):
        return Number(float(raw))
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, pd.Timestamp):
        return DateValue(raw.to_pydatetime())
    if isinstance(raw, (date, datetime)):
        return DateValue(raw)

    raise ValidationError(
        f"Unsupported data point {raw!r} of type {type(raw).__name__}. "
        "Expected a number, string, bool, date or datetime."
    )
