# ======================================================================

class ConversionError(ValueError):
    """
    This exception is raised when a value cannot be converted between two
    units.  The names of both units are retained to allow the reason for
    the failure to be determined.
    """

    def __init__(self, *args, from_unit: str = None, to_unit: str = None):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        from_unit : str, default = None
            Name of the unit being converted from.
        to_unit : str, default = None
            Name of the target unit.
        """
        super().__init__(*args)
        self.from_unit, self.to_unit = from_unit, to_unit


class IncompatibleDimensionsError(ConversionError):
    """
    Raised when a conversion is attempted between units that have
    different dimensional formulas (e.g. kilogram -> second).
    """

    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(f"Cannot convert from {from_unit} to {to_unit} - "
                         f"incompatible dimensions", from_unit=from_unit,
                         to_unit=to_unit)

    def __reduce__(self):
        # Constructor takes both unit names positionally.
        return type(self), (self.from_unit, self.to_unit)
