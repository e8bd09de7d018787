"""
.. This module acts as the top-level API documentation.

.. module: dimunits

Dimensional analysis and unit algebra.  Physical dimensions are
described in :mod:`dimunits.dimension`; units, their algebra and
unit-aware quantities are in :mod:`dimunits.units`.  The commonly used
names are also available directly from this package.

.. autosummary::
    :toctree: generated/

    dimension
    units
    exception
"""

__version__ = "0.1.0"

import sys

from dimunits.dimension import (Dimension, DimensionFormula,
                                SI_BASE_DIMENSIONS, base_dimensions,
                                dimension_name, format_formula, make_formula)
from dimunits.exception import ConversionError, IncompatibleDimensionsError
from dimunits.units import *

# ======================================================================

assert sys.version_info >= (3, 10)
