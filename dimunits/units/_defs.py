import math
from typing import Callable

from dimunits.dimension import Dimension
from ._base import Unit, add_unit

__all__ = ['meter', 'kilometer', 'centimeter', 'millimeter', 'inch', 'foot',
           'yard', 'mile', 'nautical_mile', 'kilogram', 'gram', 'pound',
           'second', 'millisecond', 'minute', 'hour', 'day', 'kelvin',
           'ampere', 'mole', 'candela', 'radian', 'degree', 'revolution',
           'bit', 'byte', 'kilobyte', 'kibibyte', 'megabyte', 'mebibyte']


# ======================================================================

def _catalog_unit(name: str, scale_factor: float,
                  dimension: Dimension) -> Callable[[], Unit]:
    """
    Register a linear unit of a single dimension and return a factory
    function for it having the same name.  Each call of the factory gives
    a new ``Unit``.
    """
    def factory() -> Unit:
        return Unit(name, scale_factor, [(dimension, 1)])

    factory.__name__ = factory.__qualname__ = name
    factory.__doc__ = (f"Returns the '{name}' unit of {dimension.label} "
                       f"(1 {name} = {scale_factor} base units).")
    add_unit(factory())
    return factory


# == Base Unit Definitions =============================================

# -- Length ------------------------------------------------------------

meter = _catalog_unit('meter', 1.0, Dimension.LENGTH)
kilometer = _catalog_unit('kilometer', 1000.0, Dimension.LENGTH)
centimeter = _catalog_unit('centimeter', 0.01, Dimension.LENGTH)
millimeter = _catalog_unit('millimeter', 0.001, Dimension.LENGTH)
inch = _catalog_unit('inch', 0.0254, Dimension.LENGTH)  # Intl. inch.
foot = _catalog_unit('foot', 0.3048, Dimension.LENGTH)  # Intl. foot.
yard = _catalog_unit('yard', 0.9144, Dimension.LENGTH)
mile = _catalog_unit('mile', 1609.344, Dimension.LENGTH)  # Intl. mile.
nautical_mile = _catalog_unit('nautical_mile', 1852.0, Dimension.LENGTH)

# -- Mass --------------------------------------------------------------

kilogram = _catalog_unit('kilogram', 1.0, Dimension.MASS)
gram = _catalog_unit('gram', 0.001, Dimension.MASS)
pound = _catalog_unit('pound', 0.45359237, Dimension.MASS)  # Intl. pound.

# -- Time --------------------------------------------------------------

second = _catalog_unit('second', 1.0, Dimension.TIME)
millisecond = _catalog_unit('millisecond', 0.001, Dimension.TIME)
minute = _catalog_unit('minute', 60.0, Dimension.TIME)
hour = _catalog_unit('hour', 3600.0, Dimension.TIME)
day = _catalog_unit('day', 86400.0, Dimension.TIME)

# -- Temperature -------------------------------------------------------

# Absolute scale only; offset scales are not linear.
kelvin = _catalog_unit('kelvin', 1.0, Dimension.TEMPERATURE)

# -- Electric Current --------------------------------------------------

ampere = _catalog_unit('ampere', 1.0, Dimension.CURRENT)

# -- Amount of Substance -----------------------------------------------

mole = _catalog_unit('mole', 1.0, Dimension.AMOUNT)

# -- Luminous Intensity ------------------------------------------------

candela = _catalog_unit('candela', 1.0, Dimension.INTENSITY)

# -- Plane Angle -------------------------------------------------------

radian = _catalog_unit('radian', 1.0, Dimension.ANGLE)
degree = _catalog_unit('degree', math.pi / 180, Dimension.ANGLE)
revolution = _catalog_unit('revolution', 2 * math.pi, Dimension.ANGLE)

# -- Information -------------------------------------------------------

bit = _catalog_unit('bit', 1.0, Dimension.INFORMATION)
byte = _catalog_unit('byte', 8.0, Dimension.INFORMATION)
kilobyte = _catalog_unit('kilobyte', 8.0e3, Dimension.INFORMATION)
kibibyte = _catalog_unit('kibibyte', 8.0 * 1024, Dimension.INFORMATION)
megabyte = _catalog_unit('megabyte', 8.0e6, Dimension.INFORMATION)
mebibyte = _catalog_unit('mebibyte', 8.0 * 1024 ** 2, Dimension.INFORMATION)

# Note: Currency is registered as a dimension only; no currency units are
# defined as there is no fixed rate between them.
