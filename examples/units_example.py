#!/usr/bin/env python3

# Examples of units.

from dimunits import (ConversionError, Quantity, Unit, foot, hour,
                      kilogram, kilometer, meter, mile, minute, second)


# ----------------------------------------------------------------------------

def main():
    print("1. Creating quantities:")
    distance = Quantity.meters(100.0)
    print(f"Distance = {distance}")

    print("\n2. Successful conversions:")
    length = Quantity(10.0, foot())
    print_conversion(length, meter())
    print_conversion(Quantity(90.0, minute()), second())

    print("\n3. Error handling:")
    weight = Quantity.kilograms(90.0)
    print_conversion(weight, second())

    print("\n4. Compound units:")
    run = Quantity(5.0, mile())
    print(f"You ran {run}, which is {run.convert_to(kilometer()):.3f}")

    speed = Quantity(100.0, kilometer() / hour())
    print(f"Speed = {speed} [{speed.convert_to(meter() / second()):.4G}]")
    print(f"Dimensions of {speed.unit} are "
          f"'{speed.unit.dimension_string()}'")

    force = kilogram() * meter() / second() ** 2
    print(f"Dimensions of {force} are '{force.dimension_string()}'")


def print_conversion(original: Quantity, to_unit: Unit):
    """Print 'X unit -> Y unit' or the conversion error."""
    try:
        converted = original.convert_to(to_unit)
    except ConversionError as e:
        print(f"Error: {e}")
    else:
        print(f"{original} -> {converted}")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
