"""
Dimensions (:mod:`dimunits.dimension`)
======================================

.. currentmodule:: dimunits.dimension

The closed set of physical dimensions and the ``DimensionFormula`` type
used to express the dimensional formula of a unit as integer exponents
over that set.

Examples
--------
A formula is built from (dimension, exponent) pairs.  If a dimension is
repeated, the last entry wins:

>>> f = make_formula([(Dimension.LENGTH, 1), (Dimension.TIME, -1)])
>>> str(f)
'length/time'
>>> make_formula([(Dimension.MASS, 1), (Dimension.MASS, 3)])
DimensionFormula({'mass': 3})

Formulas combine by summing / subtracting exponents.  Entries that
cancel are removed, leaving an empty (dimensionless) formula:

>>> length = make_formula([(Dimension.LENGTH, 1)])
>>> length / length
DimensionFormula({})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from numbers import Integral

__all__ = ['Dimension', 'DimensionFormula', 'SI_BASE_DIMENSIONS',
           'base_dimensions', 'dimension_name', 'format_formula',
           'make_formula']


# ======================================================================

class Dimension(Enum):
    """
    Fundamental categories of physical measurement.  Each member's value
    is the lowercase noun used when rendering dimensional formulas; these
    names are stable and form part of the rendered output.

    The first seven members are the SI base dimensions, see
    ``base_dimensions()``.
    """
    LENGTH = 'length'
    MASS = 'mass'
    TIME = 'time'
    TEMPERATURE = 'temperature'
    CURRENT = 'current'
    AMOUNT = 'amount'  # Amount of substance.
    INTENSITY = 'intensity'  # Luminous intensity.
    ANGLE = 'angle'  # Plane angle.
    INFORMATION = 'information'
    CURRENCY = 'currency'

    @property
    def label(self) -> str:
        """Lowercase noun for this dimension, e.g. 'length'."""
        return self.value

    def __str__(self) -> str:
        return self.value


SI_BASE_DIMENSIONS = (Dimension.LENGTH, Dimension.MASS, Dimension.TIME,
                      Dimension.TEMPERATURE, Dimension.CURRENT,
                      Dimension.AMOUNT, Dimension.INTENSITY)
"""The seven SI base dimensions in canonical order."""


def base_dimensions() -> tuple[Dimension, ...]:
    """
    Returns the seven SI base dimensions in canonical order: length,
    mass, time, temperature, current, amount, intensity.
    """
    return SI_BASE_DIMENSIONS


def dimension_name(dimension: Dimension) -> str:
    """Returns the lowercase noun for `dimension`."""
    return dimension.label


# ----------------------------------------------------------------------

class DimensionFormula(Mapping):
    """
    ``DimensionFormula`` is an immutable mapping of ``Dimension`` ->
    integer exponent giving the physical type of a unit, e.g. velocity
    is ``{LENGTH: 1, TIME: -1}``.

    Formulas are always held in lowest terms: entries with a zero
    exponent are removed when the formula is made, so an empty formula
    represents a dimensionless quantity.  Equality does not depend on
    the order of the entries and a formula compares equal to any other
    mapping holding the same pairs.  Formulas are hashable.

    Multiplication and division of formulas sum / subtract the exponents
    of each dimension, and raising to an integer power scales them.

    .. note:: ``DimensionFormula`` objects are not normally created
       directly.  Refer to ``make_formula()`` for normal construction.
    """
    __slots__ = ('_exps',)

    def __init__(self, exps: Mapping[Dimension, int] = None):
        clean = {}
        for dimension, pwr in (exps or {}).items():
            _check_entry(dimension, pwr)
            if pwr != 0:
                clean[dimension] = int(pwr)

        self._exps = clean

    # -- Mapping Methods ---------------------------------------------------

    def __getitem__(self, dimension: Dimension) -> int:
        return self._exps[dimension]

    def __iter__(self) -> Iterator[Dimension]:
        return iter(self._exps)

    def __len__(self) -> int:
        return len(self._exps)

    def __eq__(self, rhs) -> bool:
        if not isinstance(rhs, Mapping):
            return NotImplemented
        return self._exps == dict(rhs.items())

    def __hash__(self) -> int:
        return hash(frozenset(self._exps.items()))

    # -- Binary Operators --------------------------------------------------

    def __mul__(self, rhs: DimensionFormula) -> DimensionFormula:
        """Sum the exponents of each dimension."""
        if not isinstance(rhs, DimensionFormula):
            return NotImplemented

        res = dict(self._exps)
        for dimension, pwr in rhs.items():
            res[dimension] = res.get(dimension, 0) + pwr

        return DimensionFormula(res)  # Cancelled entries dropped here.

    def __truediv__(self, rhs: DimensionFormula) -> DimensionFormula:
        """Subtract the exponents of `rhs` from each dimension."""
        if not isinstance(rhs, DimensionFormula):
            return NotImplemented

        res = dict(self._exps)
        for dimension, pwr in rhs.items():
            res[dimension] = res.get(dimension, 0) - pwr

        return DimensionFormula(res)

    def __pow__(self, pwr: int) -> DimensionFormula:
        """Multiply every exponent by the integer `pwr`."""
        if not isinstance(pwr, Integral) or isinstance(pwr, bool):
            raise TypeError(f"Formula power must be an integer, got: "
                            f"{pwr!r}")

        return DimensionFormula({d: p * pwr for d, p in self._exps.items()})

    # -- String Magic Methods ----------------------------------------------

    def __repr__(self) -> str:
        entries = ', '.join(f"'{d.label}': {p}" for d, p in self._sorted())
        return f"DimensionFormula({{{entries}}})"

    def __str__(self) -> str:
        return format_formula(self)

    # -- Normal Methods ----------------------------------------------------

    def is_dimensionless(self) -> bool:
        """Returns ``True`` if no dimensions remain in the formula."""
        return not self._exps

    def _sorted(self) -> list[tuple[Dimension, int]]:
        # Declaration order of Dimension.
        return [(d, self._exps[d]) for d in Dimension if d in self._exps]


# ----------------------------------------------------------------------

def format_formula(formula: Mapping[Dimension, int], *,
                   unicode: bool = False) -> str:
    """
    Render a dimensional formula as a compound expression, for example
    ``{MASS: 1, LENGTH: 1, TIME: -2}`` gives ``'length*mass/time^2'``.

    Terms with positive exponents form the numerator and those with
    negative exponents form the denominator.  A term is shown as the
    dimension name alone if the exponent magnitude is 1, otherwise as
    ``name^n``.  Terms on each side are joined with ``*``:

        - No denominator: ``numerator``.
        - No numerator: ``1/denominator``.
        - Otherwise: ``numerator/denominator``.

    An empty (dimensionless) formula gives an empty string.

    .. note:: The order of terms within the numerator or the denominator
       is not part of the contract.  At present they follow the
       declaration order of ``Dimension``.

    Parameters
    ----------
    formula : Mapping[Dimension, int]
        Formula to render.
    unicode : bool, default = False
        If ``True`` exponents are shown as unicode superscripts (e.g.
        ``time²``) instead of using ``^``.

    Returns
    -------
    str
    """
    num_parts, den_parts = [], []
    for dimension in Dimension:
        pwr = formula.get(dimension, 0)
        if pwr == 0:
            continue

        term = dimension.label
        if abs(pwr) != 1:
            if unicode:
                term += _to_ucode_super(f'{abs(pwr)}')
            else:
                term += f'^{abs(pwr)}'

        if pwr > 0:
            num_parts.append(term)
        else:
            den_parts.append(term)

    num_str, den_str = '*'.join(num_parts), '*'.join(den_parts)
    if not den_str:
        return num_str
    if not num_str:
        return '1/' + den_str
    return num_str + '/' + den_str


def make_formula(pairs: Iterable[tuple[Dimension, int]] |
                 Mapping[Dimension, int] = ()) -> DimensionFormula:
    """
    Build a formula from a sequence of ``(Dimension, exponent)`` pairs.

    This is a constructor, not a combinator: if the same dimension
    appears more than once the later entry replaces the earlier one.
    Use unit (or formula) multiplication to combine exponents.  Zero
    exponents are dropped.

    Parameters
    ----------
    pairs : Iterable[(Dimension, int)] or Mapping[Dimension, int]
        Dimension / exponent entries.

    Returns
    -------
    DimensionFormula

    Raises
    ------
    TypeError
        If a key is not a ``Dimension`` or an exponent is not an integer.
    """
    if isinstance(pairs, DimensionFormula):
        return pairs
    if isinstance(pairs, Mapping):
        pairs = pairs.items()

    exps = {}
    for dimension, pwr in pairs:
        exps[dimension] = pwr  # Last write wins.

    return DimensionFormula(exps)


# -- Private Functions -------------------------------------------------

_UCODE_SS_CHARS = ('⁻⁰¹²³⁴⁵⁶⁷⁸⁹', '-0123456789')


def _check_entry(dimension, pwr):
    if not isinstance(dimension, Dimension):
        raise TypeError(f"Formula keys must be Dimension members, got: "
                        f"{dimension!r}")
    if not isinstance(pwr, Integral) or isinstance(pwr, bool):
        raise TypeError(f"Exponent for '{dimension.label}' must be an "
                        f"integer, got: {pwr!r}")


def _to_ucode_super(ss: str) -> str:
    """
    Convert numeric characters in the string ``ss`` to unicode superscript.
    """
    result = ''
    for c in ss:
        idx = _UCODE_SS_CHARS[1].find(c)
        if idx >= 0:
            result += _UCODE_SS_CHARS[0][idx]
        else:
            result += c
    return result
