from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from numbers import Integral
from typing import Union

import numpy as np

from dimunits.dimension import DimensionFormula, format_formula, make_formula
from ._opts import get_unit_options

__all__ = ['Unit', 'RealScalar', 'RealArray', 'add_unit', 'get_unit',
           'known_units']

# ======================================================================

RealScalar = Union[int, float]
"""A `RealScalar` is a shorthand defined for type checking purposes as
``Union[int, float]`` and represents a general numeric scalar."""

RealArray = Union[RealScalar, np.ndarray]
"""A `RealArray` is a shorthand defined for type checking purposes as
``Union[RealScalar, np.ndarray]`` and represents either an array or a
plain real value."""


# -- Type Definitions --------------------------------------------------

@dataclass(frozen=True)
class Unit:
    """
    ``Unit`` represents a unit of measure, consisting of a display name,
    a linear scale factor and a dimensional formula.  One of this unit is
    equal to `scale_factor` of the base unit sharing the same formula,
    e.g. ``Unit('foot', 0.3048, [(Dimension.LENGTH, 1)])``.  Base units
    have `scale_factor` = 1.

    ``Unit`` objects are immutable and derived units are made by
    multiplying, dividing or raising existing units to a power, each
    giving a new ``Unit``:

    >>> from dimunits.units import kilometer, hour
    >>> kph = kilometer() / hour()
    >>> kph.name
    'kilometer/hour'
    >>> kph.dimension_string()
    'length/time'

    .. note:: Equality (and hashing) only considers `name` and `formula`,
       not `scale_factor`.  Units rebuilt by a different sequence of
       operations, and so having a slightly different factor through
       rounding, still compare equal.

    Parameters
    ----------
    name : str
        Display name.
    scale_factor : float
        Number of base units in one of this unit.  No check is made on
        the value; zero, negative and non-finite values are accepted.
    formula : DimensionFormula, Mapping or Iterable of (Dimension, int)
        Dimensional formula.  Mappings and sequences of pairs are
        converted using ``make_formula()``.
    """
    name: str
    scale_factor: float = field(compare=False)
    formula: DimensionFormula = field(default_factory=DimensionFormula)

    def __post_init__(self):
        if not isinstance(self.formula, DimensionFormula):
            object.__setattr__(self, 'formula', make_formula(self.formula))

    # -- Binary Operators --------------------------------------------------

    def __mul__(self, rhs: Unit) -> Unit:
        """See ``combine_mul``."""
        if not isinstance(rhs, Unit):
            return NotImplemented
        return self._mul(rhs, stacklevel=5)

    def __truediv__(self, rhs: Unit) -> Unit:
        """See ``combine_div``."""
        if not isinstance(rhs, Unit):
            return NotImplemented
        return self._div(rhs, stacklevel=5)

    def __pow__(self, pwr: int) -> Unit:
        """
        Raise the unit to an integer power.  The result is named
        ``'name^pwr'``, the scale factor is raised to `pwr` and every
        exponent in the formula is multiplied by `pwr`.  Any power of
        zero gives a dimensionless unit with a scale factor of one.
        """
        if not isinstance(pwr, Integral) or isinstance(pwr, bool):
            raise TypeError(f"Unit power must be an integer, got: {pwr!r}")

        return _made_unit(f"{self.name}^{pwr}",
                          _ieee_pow(self.scale_factor, int(pwr)),
                          self.formula ** pwr, stacklevel=4)

    # -- String Magic Methods ----------------------------------------------

    def __str__(self) -> str:
        return self.name

    # -- Normal Methods ----------------------------------------------------

    def combine_div(self, rhs: Unit) -> Unit:
        """
        Divide this unit by `rhs`.  The result is named
        ``'self.name/rhs.name'``, has scale factor ``self.scale_factor /
        rhs.scale_factor`` and the exponents of `rhs` are subtracted from
        those of this unit.  Cancelled dimensions are removed.

        .. note:: Division by a unit having a zero scale factor gives an
           infinite or NaN scale factor rather than an exception.
        """
        return self._div(rhs, stacklevel=5)

    def combine_mul(self, rhs: Unit) -> Unit:
        """
        Multiply this unit by `rhs`.  The result is named
        ``'self.name*rhs.name'``, has scale factor ``self.scale_factor *
        rhs.scale_factor`` and the exponents of each dimension are summed.
        Cancelled dimensions are removed.
        """
        return self._mul(rhs, stacklevel=5)

    def dimension_string(self) -> str:
        """
        Returns the dimensional formula as a compound expression, e.g.
        ``'length/time'``.  See ``dimunits.dimension.format_formula`` for
        the format.  Unicode powers are used if the ``unicode_str``
        option is set.
        """
        return format_formula(self.formula,
                              unicode=get_unit_options().unicode_str)

    def is_compatible_with(self, other: Unit) -> bool:
        """
        Returns ``True`` if `other` has the same dimensional formula as
        this unit, i.e. values can be converted between the two.  Names
        and scale factors are not considered.
        """
        return self.formula == other.formula

    def is_dimensionless(self) -> bool:
        """Return True if the unit has no dimensions remaining."""
        return self.formula.is_dimensionless()

    # -- Private Methods ---------------------------------------------------

    # `stacklevel` is counted from the non-finite warning back to the
    # caller of the public method.

    def _div(self, rhs: Unit, stacklevel: int) -> Unit:
        return _made_unit(f"{self.name}/{rhs.name}",
                          _ieee_div(self.scale_factor, rhs.scale_factor),
                          self.formula / rhs.formula, stacklevel=stacklevel)

    def _mul(self, rhs: Unit, stacklevel: int) -> Unit:
        return _made_unit(f"{self.name}*{rhs.name}",
                          self.scale_factor * rhs.scale_factor,
                          self.formula * rhs.formula, stacklevel=stacklevel)


# -- Public Functions --------------------------------------------------

def add_unit(unit: Unit) -> Unit:
    """
    Register `unit` so that it can be retrieved by name using
    ``get_unit()``.

    Parameters
    ----------
    unit : Unit
        Unit to register under ``unit.name``.

    Returns
    -------
    unit : Unit
        The same unit, allowing use as ``x = add_unit(Unit(...))``.

    Raises
    ------
    ValueError
        If a unit is already registered using this name.
    """
    if not isinstance(unit, Unit):
        raise TypeError(f"Expected a Unit, got: {unit!r}")

    if unit.name in _KNOWN_UNITS:
        raise ValueError(f"Unit '{unit.name}' already defined.")

    _KNOWN_UNITS[unit.name] = unit
    return unit


def get_unit(name: str) -> Unit:
    """
    Returns the registered unit having exactly this `name`, e.g.
    ``get_unit('mile')``.  Compound expressions such as ``'km/hr'`` are
    not parsed.

    Raises
    ------
    ValueError
        If no unit is registered under `name`.
    """
    try:
        return _KNOWN_UNITS[name]
    except KeyError:
        raise ValueError(f"Unknown unit '{name}'.") from None


def known_units() -> list[str]:
    """Returns the names of all registered units in registration order."""
    return list(_KNOWN_UNITS)


# == Private Attributes & Functions ====================================

_KNOWN_UNITS: dict[str, Unit] = {}


def _ieee_div(num: RealArray, den: RealArray) -> RealArray:
    """
    Division following IEEE rules, so that a zero divisor gives ``inf``
    or ``nan`` instead of raising.  Scalars are returned as ``float``.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        res = np.true_divide(num, den)
    return float(res) if np.ndim(res) == 0 else res


def _ieee_pow(base: float, pwr: int) -> float:
    """As for ``_ieee_div``, for integer powers of a scalar."""
    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        res = np.power(np.float64(base), pwr)
    return float(res)


def _made_unit(name: str, scale_factor: float, formula: DimensionFormula,
               stacklevel: int) -> Unit:
    """
    Build a unit resulting from an operation, issuing a warning if
    requested when the scale factor is not finite.
    """
    _check_finite(scale_factor, f"Unit '{name}' has non-finite scale "
                                f"factor {scale_factor}.",
                  stacklevel=stacklevel)
    return Unit(name, scale_factor, formula)


def _check_finite(x: RealArray, msg: str, stacklevel: int):
    if get_unit_options().warn_nonfinite and not np.all(np.isfinite(x)):
        warnings.warn(msg, RuntimeWarning, stacklevel=stacklevel)
