import math
from unittest import TestCase


# noinspection PyUnusedLocal
class TestUnit(TestCase):
    def test___init__(self):
        from dimunits.dimension import Dimension, make_formula
        from dimunits.units import Unit

        # Formula given as pairs is converted.
        x = Unit('newton', 1.0, [(Dimension.MASS, 1), (Dimension.LENGTH, 1),
                                 (Dimension.TIME, -2)])
        self.assertEqual(x.name, 'newton')
        self.assertEqual(x.scale_factor, 1.0)
        self.assertEqual(x.formula, make_formula([
            (Dimension.TIME, -2), (Dimension.LENGTH, 1), (Dimension.MASS, 1)]))

        # No validation of name or factor.
        x = Unit('', -2.5, [])
        self.assertEqual(x.scale_factor, -2.5)
        self.assertTrue(x.is_dimensionless())
        x = Unit('odd', math.nan, {Dimension.ANGLE: 1})
        self.assertTrue(math.isnan(x.scale_factor))

        # Units are immutable.
        with self.assertRaises(AttributeError):
            x.name = 'other'

    def test___eq__(self):
        from dimunits.dimension import Dimension
        from dimunits.units import Unit, foot, meter

        # Scale factor is not considered.
        x = Unit('meter', 1.0000000001, [(Dimension.LENGTH, 1)])
        self.assertEqual(x, meter())
        self.assertEqual(hash(x), hash(meter()))
        self.assertEqual(len({x, meter()}), 1)

        # Rounding from a chain of operations doesn't matter.
        sq_ft_a = Unit('sq_ft', 0.3048 ** 2, [(Dimension.LENGTH, 2)])
        sq_ft_b = Unit('sq_ft', (foot() * foot()).scale_factor,
                       [(Dimension.LENGTH, 2)])
        self.assertEqual(sq_ft_a, sq_ft_b)

        # Name and formula are.
        self.assertNotEqual(Unit('metre', 1.0, [(Dimension.LENGTH, 1)]),
                            meter())
        self.assertNotEqual(Unit('meter', 1.0, [(Dimension.LENGTH, 2)]),
                            meter())
        self.assertNotEqual(meter(), 'meter')

    def test_is_compatible_with(self):
        from dimunits.dimension import Dimension
        from dimunits.units import (Unit, foot, hour, kilogram, meter,
                                    second, mile, kilometer)

        self.assertTrue(meter().is_compatible_with(foot()))
        self.assertTrue(foot().is_compatible_with(meter()))
        self.assertFalse(meter().is_compatible_with(second()))
        self.assertFalse(second().is_compatible_with(meter()))

        # Names and factors are ignored.
        odd = Unit('odd', 0.0, [(Dimension.LENGTH, 1), (Dimension.TIME, -1)])
        self.assertTrue(odd.is_compatible_with(mile() / hour()))

        # Symmetry over a mixed set of units.
        units = [meter(), foot(), second(), kilogram(), odd,
                 kilometer() / hour(), meter() / second(),
                 meter() / meter(), Unit('scalar', 3.0, [])]
        for a in units:
            for b in units:
                self.assertEqual(a.is_compatible_with(b),
                                 b.is_compatible_with(a))
                self.assertEqual(a.is_compatible_with(b),
                                 a.formula == b.formula)

        # Dimensionless units are compatible with each other only.
        self.assertTrue((meter() / meter()).is_compatible_with(
            Unit('scalar', 3.0, [])))
        self.assertFalse((meter() / meter()).is_compatible_with(meter()))

    def test_combine_mul(self):
        from dimunits.dimension import Dimension
        from dimunits.units import foot, kilogram, meter, second

        x = kilogram().combine_mul(meter())
        self.assertEqual(x.name, 'kilogram*meter')
        self.assertEqual(x.scale_factor, 1.0)
        self.assertEqual(x.formula, {Dimension.MASS: 1, Dimension.LENGTH: 1})

        # Self multiplication.
        x = foot() * foot()
        self.assertEqual(x.name, 'foot*foot')
        self.assertAlmostEqual(x.scale_factor, 0.09290304, places=12)
        self.assertEqual(x.formula, {Dimension.LENGTH: 2})

        # Cancellation gives a dimensionless result.
        x = (meter() / second()) * (second() / meter())
        self.assertTrue(x.is_dimensionless())
        self.assertEqual(len(x.formula), 0)
        self.assertEqual(x.dimension_string(), '')

        # Formula is commutative, name is not.
        a, b = meter() / second(), kilogram()
        self.assertEqual((a * b).formula, (b * a).formula)
        self.assertNotEqual((a * b).name, (b * a).name)

        with self.assertRaises(TypeError):
            x = meter() * 2

    def test_combine_div(self):
        from dimunits.dimension import Dimension
        from dimunits.units import (Unit, foot, hour, kilometer, meter,
                                    minute, second)

        x = kilometer().combine_div(hour())
        self.assertEqual(x.name, 'kilometer/hour')
        self.assertAlmostEqual(x.scale_factor, 1000 / 3600, places=12)
        self.assertEqual(x.formula, {Dimension.LENGTH: 1, Dimension.TIME: -1})

        # Not commutative in name or formula.
        a, b = meter(), second()
        self.assertNotEqual((a / b).name, (b / a).name)
        self.assertNotEqual((a / b).formula, (b / a).formula)

        # Dividing by itself gives identity.
        for u in (meter(), foot(), minute(), kilometer() / hour()):
            x = u / u
            self.assertTrue(x.is_dimensionless())
            self.assertEqual(x.scale_factor, 1.0)

        # Zero divisor propagates as infinity / NaN, not an error.
        zero = Unit('zero', 0.0, [(Dimension.TIME, 1)])
        x = meter() / zero
        self.assertTrue(math.isinf(x.scale_factor))
        self.assertEqual(x.formula, {Dimension.LENGTH: 1, Dimension.TIME: -1})
        x = Unit('nil', 0.0, [(Dimension.LENGTH, 1)]) / zero
        self.assertTrue(math.isnan(x.scale_factor))

        with self.assertRaises(TypeError):
            x = meter() / 2.0

    def test_associativity(self):
        from dimunits.units import foot, hour, kilogram, mile, second

        a, b, c = mile(), foot(), hour()
        lhs, rhs = (a * b) * c, a * (b * c)
        self.assertEqual(lhs.formula, rhs.formula)
        self.assertTrue(math.isclose(lhs.scale_factor, rhs.scale_factor,
                                     rel_tol=1e-12))

        # Left to right evaluation of mixed operators.
        a, b, c = kilogram(), second(), second()
        x = a / b * c
        self.assertEqual(x.name, 'kilogram/second*second')
        self.assertEqual(x, (a / b) * c)
        self.assertEqual(x.formula, a.formula)
        y = a / (b * c)
        self.assertNotEqual(x.formula, y.formula)
        self.assertEqual(y.dimension_string(), 'mass/time^2')

    def test___pow__(self):
        from dimunits.dimension import Dimension
        from dimunits.units import Unit, kilometer, meter, second

        x = meter() ** 2
        self.assertEqual(x.name, 'meter^2')
        self.assertEqual(x.formula, {Dimension.LENGTH: 2})
        self.assertEqual(x.dimension_string(), 'length^2')

        x = kilometer() ** 3
        self.assertAlmostEqual(x.scale_factor, 1e9)
        x = kilometer() ** -1
        self.assertAlmostEqual(x.scale_factor, 1e-3)
        self.assertEqual(x.dimension_string(), '1/length')

        x = second() ** 0
        self.assertTrue(x.is_dimensionless())
        self.assertEqual(x.scale_factor, 1.0)

        # Zero factors behave as for division.
        x = Unit('zero', 0.0, [(Dimension.TIME, 1)]) ** -1
        self.assertTrue(math.isinf(x.scale_factor))

        with self.assertRaises(TypeError):
            x = meter() ** 0.5

    def test_dimension_string(self):
        from dimunits.units import (Unit, kilogram, meter, second,
                                    unit_options)
        from dimunits.dimension import Dimension

        self.assertEqual((meter() / second()).dimension_string(),
                         'length/time')
        self.assertEqual(meter().dimension_string(), 'length')
        self.assertEqual((meter() / meter()).dimension_string(), '')
        self.assertEqual((meter() / second() / second()).dimension_string(),
                         'length/time^2')
        self.assertEqual(Unit('hertz', 1.0, [(Dimension.TIME, -1)])
                         .dimension_string(), '1/time')

        newton = Unit('newton', 1.0, [(Dimension.MASS, 1),
                                      (Dimension.LENGTH, 1),
                                      (Dimension.TIME, -2)])
        res = newton.dimension_string()
        for part in ('mass', 'length', 'time^2'):
            self.assertIn(part, res)
        num, den = res.split('/')
        self.assertEqual(set(num.split('*')), {'mass', 'length'})
        self.assertEqual(den, 'time^2')

        # Same result when derived from other units.
        derived = kilogram() * meter() / second() ** 2
        self.assertEqual(derived.formula, newton.formula)
        self.assertEqual(derived.dimension_string(), res)

        with unit_options(unicode_str=True):
            self.assertEqual((meter() / second() ** 2).dimension_string(),
                             'length/time²')
        self.assertEqual((meter() / second() ** 2).dimension_string(),
                         'length/time^2')

    def test___str__(self):
        from dimunits.units import hour, kilometer

        self.assertEqual(str(kilometer() / hour()), 'kilometer/hour')


class TestCatalog(TestCase):
    def test_base_units(self):
        from dimunits.dimension import Dimension
        from dimunits import units

        expected = {'meter': Dimension.LENGTH, 'kilogram': Dimension.MASS,
                    'second': Dimension.TIME,
                    'kelvin': Dimension.TEMPERATURE,
                    'ampere': Dimension.CURRENT, 'mole': Dimension.AMOUNT,
                    'candela': Dimension.INTENSITY,
                    'radian': Dimension.ANGLE, 'bit': Dimension.INFORMATION}
        for name, dimension in expected.items():
            u = getattr(units, name)()
            self.assertEqual(u.name, name)
            self.assertEqual(u.scale_factor, 1.0)
            self.assertEqual(u.formula, {dimension: 1})

    def test_canonical_constants(self):
        from dimunits.units import (byte, degree, foot, hour, inch,
                                    kilometer, mile, minute)

        self.assertEqual(foot().scale_factor, 0.3048)
        self.assertEqual(mile().scale_factor, 1609.344)
        self.assertEqual(inch().scale_factor, 0.0254)
        self.assertEqual(kilometer().scale_factor, 1000.0)
        self.assertEqual(minute().scale_factor, 60.0)
        self.assertEqual(hour().scale_factor, 3600.0)
        self.assertEqual(degree().scale_factor, math.pi / 180)
        self.assertEqual(byte().scale_factor, 8.0)

    def test_other_derived(self):
        from dimunits.units import (day, kibibyte, mebibyte, nautical_mile,
                                    pound, revolution, yard)

        self.assertEqual(day().scale_factor, 86400.0)
        self.assertEqual(yard().scale_factor, 0.9144)
        self.assertEqual(nautical_mile().scale_factor, 1852.0)
        self.assertEqual(pound().scale_factor, 0.45359237)
        self.assertEqual(revolution().scale_factor, 2 * math.pi)
        self.assertEqual(kibibyte().scale_factor, 8192.0)
        self.assertEqual(mebibyte().scale_factor, 8388608.0)

    def test_factory(self):
        from dimunits.units import meter

        self.assertEqual(meter.__name__, 'meter')
        self.assertIsNot(meter(), meter())
        self.assertEqual(meter(), meter())


class TestRegistry(TestCase):
    def tearDown(self):
        from dimunits.units._base import _KNOWN_UNITS
        _KNOWN_UNITS.pop('league', None)

    def test_get_unit(self):
        from dimunits.units import get_unit, known_units, mile

        self.assertEqual(get_unit('mile'), mile())
        self.assertEqual(get_unit('mile').scale_factor, 1609.344)
        self.assertIn('byte', known_units())
        self.assertEqual(known_units()[0], 'meter')

        with self.assertRaises(ValueError):
            get_unit('km/hr')  # Expressions are not parsed.
        with self.assertRaises(ValueError):
            get_unit('parsec')

    def test_add_unit(self):
        from dimunits.dimension import Dimension
        from dimunits.units import Unit, add_unit, get_unit, meter

        league = add_unit(Unit('league', 4828.032, [(Dimension.LENGTH, 1)]))
        self.assertIs(get_unit('league'), league)

        with self.assertRaises(ValueError):
            add_unit(Unit('meter', 1.0, [(Dimension.LENGTH, 1)]))
        with self.assertRaises(TypeError):
            add_unit('meter')
        self.assertEqual(get_unit('meter').scale_factor, 1.0)

    def test_add_unit_repeated(self):
        from dimunits.dimension import Dimension
        from dimunits.units import Unit, add_unit, get_unit

        # Each test starts with only the catalog registered.
        with self.assertRaises(ValueError):
            get_unit('league')
        add_unit(Unit('league', 4828.032, [(Dimension.LENGTH, 1)]))
        self.assertEqual(get_unit('league').scale_factor, 4828.032)
