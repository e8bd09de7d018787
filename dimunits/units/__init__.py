"""
Units (:mod:`dimunits.units`)
=============================

.. currentmodule:: dimunits.units

Units, unit algebra and unit-aware quantities.

Examples
--------

Standard units are made using the catalog of factory functions, which
take no arguments.  A ``Quantity`` pairs a value with a unit and can be
converted to any unit having the same dimensional formula:

>>> distance = Quantity(5, mile())
>>> print(f"{distance.convert_to(kilometer()):.5f}")
8.04672 kilometer

Units of the same name can also be retrieved from the registry, so the
following is equivalent:

>>> print(f"{quantity(5, 'mile').convert_to('kilometer'):.5f}")
8.04672 kilometer

Converting between units with different dimensional formulas raises an
error:

>>> Quantity(90, kilogram()).convert_to(second())
... # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
IncompatibleDimensionsError: Cannot convert from kilogram to second -
incompatible dimensions

Compound units are built by multiplying and dividing units, which
combines their names, scale factors and dimensional formulas.  Operators
are evaluated left to right as usual, so ``a / b * c`` is ``(a / b) * c``:

>>> speed = kilometer() / hour()
>>> speed.name, speed.dimension_string()
('kilometer/hour', 'length/time')
>>> print(f"{Quantity(1.0, speed).convert_to(meter() / second()):.4f}")
0.2778 meter/second

Other units can be made directly from a name, scale factor and formula,
and optionally registered by name:

>>> from dimunits.dimension import Dimension
>>> furlong = add_unit(Unit('furlong', 201.168, [(Dimension.LENGTH, 1)]))
>>> get_unit('furlong') == furlong
True
"""

from ._base import (Unit, RealArray, RealScalar, add_unit, get_unit,
                    known_units)
from ._defs import *  # Sets up standard units.
from ._defs import __all__ as _defs_all
from ._opts import (UnitOptions, get_unit_options, set_unit_options,
                    unit_options)
from ._quantity import Quantity, convert_quantity, quantity

__all__ = ['Unit', 'RealArray', 'RealScalar', 'add_unit', 'get_unit',
           'known_units', 'UnitOptions', 'get_unit_options',
           'set_unit_options', 'unit_options', 'Quantity',
           'convert_quantity', 'quantity', *_defs_all]
