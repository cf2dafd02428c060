"""Binding table shared by the extraction and rewrite phases."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Dict, Iterator, Mapping, Optional

from swaggervars.parsers.base import BindingValue

logger = logging.getLogger("swaggervars.core.bindings")

# Go switches shortest %v floats to exponent form from 1e6 upwards
_EXPONENT_THRESHOLD = 6


def format_value(value: BindingValue) -> str:
    """Render a bound value the way Go's ``%v`` verb prints it.

    Strings are returned untouched. Booleans print as ``true``/``false``.
    Floats use the shortest round-tripping digits, switching to exponent
    form when the decimal exponent is below -4 or at least 6
    (``1e6`` -> ``1e+06``, ``2.0`` -> ``2``).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    shortest = Decimal(repr(abs(value))).normalize()
    _, digits, exponent = shortest.as_tuple()
    decimal_exponent = len(digits) + exponent - 1

    if decimal_exponent < -4 or decimal_exponent >= _EXPONENT_THRESHOLD:
        mantissa = "".join(str(d) for d in digits)
        if len(mantissa) > 1:
            mantissa = f"{mantissa[0]}.{mantissa[1:]}"
        exp_sign = "-" if decimal_exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"
    return sign + format(shortest, "f")


class BindingTable:
    """Mapping of identifier -> literal value.

    Later bindings replace earlier ones with the same name. The table is
    filled during extraction and only read while rewriting.
    """

    def __init__(self, initial: Optional[Mapping[str, BindingValue]] = None) -> None:
        self._values: Dict[str, BindingValue] = {}
        if initial:
            self.update(initial)

    def bind(self, name: str, value: BindingValue) -> None:
        previous = self._values.get(name)
        if name in self._values and previous != value:
            logger.debug("Rebinding %s: %r -> %r", name, previous, value)
        self._values[name] = value

    def update(self, bindings: Mapping[str, BindingValue]) -> None:
        for name, value in bindings.items():
            self.bind(name, value)

    def get(self, name: str) -> Optional[BindingValue]:
        return self._values.get(name)

    def resolve(self, name: str) -> Optional[str]:
        """Return the substitution text for ``name``, or None if unbound."""
        if name not in self._values:
            return None
        return format_value(self._values[name])

    def as_dict(self) -> Dict[str, BindingValue]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"BindingTable({len(self._values)} bindings)"
