from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling units.  See
    'get_unit_options' and  'set_unit_options' for full details.
    """
    unicode_str: bool = False
    warn_nonfinite: bool = False

    def __post_init__(self):
        """Check certain values"""
        for f in fields(self):
            if not isinstance(getattr(self, f.name), bool):
                raise TypeError(f"Require bool for '{f.name}', got: "
                                f"{getattr(self, f.name)!r}")


# Create single instance and set defaults.
_unit_options = UnitOptions()


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a UnitOptions object containing the options.  For a
        full description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.

    Parameters
    ----------
    unicode_str : bool, default = False
        Generate unicode characters for superscripts when dimensional
        formulas are rendered, e.g. ``time²`` instead of ``time^2``.

    warn_nonfinite : bool, default = False
        Issue a ``RuntimeWarning`` if a unit operation or conversion
        produces a scale factor or value that is infinite or NaN (e.g.
        dividing by a unit having a zero scale factor).  The value itself
        still propagates unchanged.

    See Also
    --------
    get_unit_options, unit_options

    Examples
    --------
    By default the square value is represented with a caret:
    >>> from dimunits.units import meter, set_unit_options
    >>> (meter() * meter()).dimension_string()
    'length^2'

    If this is enabled, the unicode character is used instead:
    >>> set_unit_options(unicode_str=True)
    >>> (meter() * meter()).dimension_string()
    'length²'
    >>> set_unit_options(unicode_str=False)
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)


@contextmanager
def unit_options(**kwargs) -> Iterator[UnitOptions]:
    """
    Context manager applying `set_unit_options` with the given arguments
    for the duration of a ``with`` block.  The previous options are
    restored on exit, including if an exception is raised.

    >>> from dimunits.units import meter, second
    >>> with unit_options(unicode_str=True):
    ...     (meter() / second() ** 2).dimension_string()
    'length/time²'
    """
    global _unit_options
    saved = _unit_options
    set_unit_options(**kwargs)
    try:
        yield get_unit_options()
    finally:
        _unit_options = saved
