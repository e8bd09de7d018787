from __future__ import annotations

from numbers import Number
from typing import NamedTuple

import numpy as np

from dimunits.exception import IncompatibleDimensionsError
from ._base import RealArray, Unit, _check_finite, _ieee_div, get_unit
from ._defs import foot, kilogram, meter, second

__all__ = ['Quantity', 'convert_quantity', 'quantity']


# ======================================================================

class Quantity(NamedTuple):
    """
    ``Quantity`` represents a physical amount, consisting of a value and
    the ``Unit`` it is expressed in.  The value may be a plain number or
    a ``numpy`` array of values all having the same unit.

    ``Quantity`` objects are implemented as a namedtuple and are thus
    immutable.  Conversion gives a new ``Quantity``; the original is
    unchanged.

    >>> from dimunits.units import foot, meter
    >>> length = Quantity(10, foot())
    >>> print(f"{length.convert_to(meter()):.3f}")
    3.048 meter
    """
    value: RealArray
    unit: Unit

    # -- Alternate Constructors --------------------------------------------

    @classmethod
    def feet(cls, value: RealArray) -> Quantity:
        return cls(value, foot())

    @classmethod
    def kilograms(cls, value: RealArray) -> Quantity:
        return cls(value, kilogram())

    @classmethod
    def meters(cls, value: RealArray) -> Quantity:
        return cls(value, meter())

    @classmethod
    def seconds(cls, value: RealArray) -> Quantity:
        return cls(value, second())

    # -- Binary Operators --------------------------------------------------

    def __add__(self, rhs):
        """Addition is not supported; see ``convert_to``."""
        return NotImplemented

    def __radd__(self, lhs):
        return NotImplemented

    def __mul__(self, rhs: RealArray) -> Quantity:
        """
        Multiplying by a plain number or array scales the value, keeping
        the same unit.  Other operands (including ``Quantity`` and
        ``Unit``) are not supported.

        >>> from dimunits.units import meter
        >>> Quantity(2.0, meter()) * 3
        Quantity(6.0, 'meter')
        """
        if not isinstance(rhs, (Number, np.ndarray)):
            return NotImplemented
        return Quantity(self.value * rhs, self.unit)

    def __rmul__(self, lhs: RealArray) -> Quantity:
        """See ``__mul__``."""
        return self.__mul__(lhs)

    # -- Comparison Operators ----------------------------------------------

    def __eq__(self, rhs) -> bool:
        """
        Quantities are equal when they have equal units and all values
        are equal.  No conversion is made; see ``is_close``.
        """
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return (self.unit == rhs.unit and
                bool(np.array_equal(self.value, rhs.value)))

    def __ne__(self, rhs) -> bool:
        if not isinstance(rhs, Quantity):
            return NotImplemented
        return not self.__eq__(rhs)

    __hash__ = tuple.__hash__

    # Operands such as ``ndarray`` defer to the reflected operators.
    __array_ufunc__ = None

    # -- String Magic Methods ----------------------------------------------

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec) + f" {self.unit.name}"

    def __repr__(self) -> str:
        return f"Quantity({self.value!r}, '{self.unit.name}')"

    def __str__(self) -> str:
        return self.__format__('')

    # -- Normal Methods ----------------------------------------------------

    def convert_to(self, to_unit: Unit | str) -> Quantity:
        """
        Generate new ``Quantity`` object converted to the requested unit.

        The value is first expressed in the base unit shared by both
        units (multiplying by the current scale factor) then divided by
        the scale factor of `to_unit`.  Units having pathological scale
        factors (zero, infinite, NaN) give infinite or NaN values rather
        than an error.

        Parameters
        ----------
        to_unit : Unit or str
            Target unit, or the name of a registered unit.

        Returns
        -------
        Quantity
            Converted value using `to_unit`.

        Raises
        ------
        IncompatibleDimensionsError
            If the dimensional formulas of the two units differ.
        """
        return self._convert(to_unit, stacklevel=4)

    def convert_value_to(self, to_unit: Unit | str) -> RealArray:
        """
        As for ``convert_to()``, returning only the converted value.

        .. note:: Unit information is lost.
        """
        return self._convert(to_unit, stacklevel=4).value

    def is_close(self, other: Quantity, rtol: float = 1e-9,
                 atol: float = 0.0) -> bool:
        """
        Returns ``True`` if `other` represents the same amount as this
        quantity within the given tolerances.  `other` is first converted
        into this quantity's unit, then compared using ``numpy.isclose``.
        For arrays, all elements must be close.

        Raises
        ------
        IncompatibleDimensionsError
            If the units of the two quantities are not compatible.
        """
        other_value = other._convert(self.unit, stacklevel=4).value
        return bool(np.all(np.isclose(self.value, other_value, rtol=rtol,
                                      atol=atol)))

    # -- Private Methods ---------------------------------------------------

    def _convert(self, to_unit: Unit | str, stacklevel: int) -> Quantity:
        # `stacklevel` is counted from the non-finite warning back to the
        # caller of the public method.
        to_unit = _as_unit(to_unit)
        if not self.unit.is_compatible_with(to_unit):
            raise IncompatibleDimensionsError(self.unit.name, to_unit.name)

        base_value = self.value * self.unit.scale_factor
        res_value = _ieee_div(base_value, to_unit.scale_factor)
        _check_finite(res_value, f"Converting '{self.unit.name}' -> "
                                 f"'{to_unit.name}' gave non-finite value.",
                      stacklevel=stacklevel)
        return Quantity(res_value, to_unit)


# ----------------------------------------------------------------------

def convert_quantity(value: RealArray, from_unit: Unit | str,
                     to_unit: Unit | str) -> RealArray:
    """
    Convert `value` currently in `from_unit` to the requested `to_unit`.
    This is used for doing conversions without using ``Quantity``
    objects.

    Examples
    --------
    >>> from dimunits.units import inch, millimeter
    >>> mm_length = convert_quantity(1.0, inch(), millimeter())
    >>> print(f"Length = {mm_length:.1f} mm.")
    Length = 25.4 mm.

    Parameters
    ----------
    value : scalar or array-like
        Value (not ``Quantity`` object) for conversion.
    from_unit : Unit or str
        Unit (or registered name) of `value`.
    to_unit : Unit or str
        Target unit (or registered name).

    Returns
    -------
    result : scalar or array-like
        Converted value using the new unit.

    Raises
    ------
    IncompatibleDimensionsError
        If the dimensional formulas of the two units differ.
    """
    return Quantity(value, _as_unit(from_unit))._convert(
        to_unit, stacklevel=4).value


def quantity(value: RealArray, unit: Unit | str) -> Quantity:
    """
    Factory function for constructing a ``Quantity``, allowing the unit
    to be given by its registered name:

    >>> quantity(5, 'mile')
    Quantity(5, 'mile')

    Only single registered names are accepted.  Compound units should be
    built using ``Unit`` operators.

    Raises
    ------
    ValueError
        If `unit` is a name that is not registered.
    """
    return Quantity(value, _as_unit(unit))


# -- Private Functions -------------------------------------------------

def _as_unit(unit: Unit | str) -> Unit:
    if isinstance(unit, str):
        return get_unit(unit)
    return unit
