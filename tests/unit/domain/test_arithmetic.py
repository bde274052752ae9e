"""Unit tests for quantity arithmetic.

Tests addition, scaling, derivation rules and error cases.
"""

from decimal import Decimal

import pytest

from quantiq.domain.arithmetic import (
    DerivationRules,
    Operator,
    derivations,
    divide_quantities,
    multiply_quantities,
    standard_derivations,
    sum_quantities,
)
from quantiq.domain.errors import (
    DivisionByZeroError,
    IncompatibleUnitsError,
    InvalidAmountError,
    QuantityError,
    UnsupportedOperationError,
)
from quantiq.domain.factories import (
    celsius,
    centimeters,
    feet,
    grams,
    hours,
    inches,
    kilometers,
    meters,
    milligrams,
    seconds,
)
from quantiq.domain.quantity import Area, Mass, Speed
from quantiq.domain.units import (
    AreaUnits,
    LengthUnits,
    MassUnits,
    QuantityKind,
    SpeedUnits,
)


class TestAddSubtract:
    """Test suite for addition and subtraction."""

    def test_add_same_unit(self) -> None:
        """Test that 4 in + 20 in is exactly 2 ft."""
        total = inches(4) + inches(20)
        assert total.amount == 24
        feet_value = total.with_unit(LengthUnits.FEET)
        assert feet_value.amount == 2
        assert isinstance(feet_value.amount, int)

    def test_add_converts_right_operand(self) -> None:
        """Test that the result takes the left unit."""
        total = inches(4) + feet(1)
        assert total.amount == 16
        assert total.unit == LengthUnits.INCHES

    def test_add_keeps_left_origin(self) -> None:
        """Test that the result keeps the left origin unit."""
        left = centimeters(100).with_unit(LengthUnits.METERS)
        total = left + meters(1)
        assert total.amount == 2
        assert total.origin_unit == LengthUnits.CENTIMETERS

    def test_scale_then_add_mixed_units(self) -> None:
        """Test 23 g * 2 + 500 mg = 46.5 g."""
        total = Mass(23, MassUnits.GRAMS) * 2 + milligrams(500)
        assert total == grams(46.5)
        assert total.amount == Decimal("46.5")
        assert total.unit == MassUnits.GRAMS

    def test_subtract(self) -> None:
        """Test subtraction across units."""
        difference = feet(1) - inches(6)
        assert difference.amount == Decimal("0.5")
        assert difference.unit == LengthUnits.FEET

    def test_subtract_to_negative(self) -> None:
        """Test that results may be negative."""
        assert (grams(1) - grams(3)).amount == -2

    def test_add_different_kinds_raises(self) -> None:
        """Test that Length + Mass raises IncompatibleUnitsError."""
        with pytest.raises(IncompatibleUnitsError):
            meters(1) + grams(1)
        with pytest.raises(IncompatibleUnitsError):
            meters(1) - grams(1)

    def test_add_number_raises(self) -> None:
        """Test that bare numbers cannot be added."""
        with pytest.raises(UnsupportedOperationError):
            meters(1) + 1
        with pytest.raises(TypeError):
            5 - meters(1)

    def test_float_representation_wins_over_int(self) -> None:
        """Test that an int left operand adopts the right representation."""
        total = grams(1) + grams(0.5)
        assert isinstance(total.amount, float)
        assert total.amount == 1.5

    def test_decimal_left_keeps_decimal(self) -> None:
        """Test that the left representation wins otherwise."""
        total = grams(Decimal("0.1")) + grams(2)
        assert total.amount == Decimal("2.1")
        mixed = grams(0.5) + grams(Decimal("1"))
        assert isinstance(mixed.amount, float)
        assert mixed.amount == 1.5

    def test_float_right_operand_on_decimal_has_no_binary_noise(self) -> None:
        """Test that a float meeting a Decimal sum enters through its repr."""
        total = grams(Decimal("1")) + grams(0.1)
        assert total.amount == Decimal("1.1")
        assert total == grams(Decimal("1.1"))
        difference = grams(Decimal("1")) - grams(0.1)
        assert difference.amount == Decimal("0.9")

    def test_float_in_other_unit_on_decimal(self) -> None:
        """Test that the repr rule applies before unit conversion."""
        total = grams(Decimal("0.2")) + milligrams(0.5)
        assert total.amount == Decimal("0.2005")

    def test_wide_decimals_keep_their_digits(self) -> None:
        """Test that sums keep more than 28 digits when the operands carry them."""
        left = grams(Decimal("1.23456789012345678901234567891"))
        right = grams(Decimal("0.00000000000000000000000000001"))
        assert (left + right).amount == Decimal("1.23456789012345678901234567892")

    def test_temperature_adds_in_left_unit(self) -> None:
        """Test naive addition of temperatures."""
        assert (celsius(10) + celsius(5)).amount == 15


class TestScalar:
    """Test suite for scalar multiplication and division."""

    def test_scale_keeps_unit_and_origin(self) -> None:
        """Test that scaling leaves unit and origin alone."""
        q = centimeters(3).with_unit(LengthUnits.MILLIMETERS) * 2
        assert q.amount == 60
        assert q.unit == LengthUnits.MILLIMETERS
        assert q.origin_unit == LengthUnits.CENTIMETERS

    def test_reflected_scale(self) -> None:
        """Test scalar on the left."""
        assert (3 * grams(2)).amount == 6

    def test_float_scalar_on_decimal(self) -> None:
        """Test that float scalars keep Decimal amounts free of binary noise."""
        assert (grams(Decimal("1.1")) * 0.1).amount == Decimal("0.11")

    def test_float_scalar_on_int(self) -> None:
        """Test that an int amount adopts a float scalar."""
        result = grams(2) * 1.5
        assert isinstance(result.amount, float)
        assert result.amount == 3.0

    def test_divide(self) -> None:
        """Test scalar division."""
        assert (grams(9) / 2).amount == Decimal("4.5")
        assert (grams(9.0) / 2).amount == 4.5

    def test_divide_by_zero_raises(self) -> None:
        """Test that division by zero raises DivisionByZeroError."""
        with pytest.raises(DivisionByZeroError):
            grams(1) / 0
        with pytest.raises(ZeroDivisionError):
            grams(1) / Decimal(0)

    def test_number_divided_by_quantity_raises(self) -> None:
        """Test that 2 / q is not supported."""
        with pytest.raises(UnsupportedOperationError):
            2 / grams(1)

    def test_non_numeric_scalar_raises(self) -> None:
        """Test that strings are not scalars."""
        with pytest.raises(UnsupportedOperationError):
            grams(1) * "2"

    @pytest.mark.parametrize(
        "scalar", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")]
    )
    def test_non_finite_scalar_raises(self, scalar) -> None:
        """Test that NaN and infinite scalars raise InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            grams(1) * scalar
        with pytest.raises(InvalidAmountError):
            scalar * grams(1)
        with pytest.raises(QuantityError):
            grams(1) / scalar

    def test_float_overflow_raises(self) -> None:
        """Test that a float result beyond the float range raises InvalidAmountError."""
        with pytest.raises(InvalidAmountError):
            grams(1e308) * 10
        with pytest.raises(InvalidAmountError):
            grams(1e308) / 1e-10

    def test_unary_operators(self) -> None:
        """Test negation, abs and truthiness."""
        assert (-grams(2)).amount == -2
        assert abs(grams(-2)).amount == 2
        assert +grams(2) == grams(2)
        assert not grams(0)
        assert grams(0.1)


class TestDerivations:
    """Test suite for quantity x quantity operations."""

    def test_multiply_without_rule_raises(self) -> None:
        """Test that q * q needs a registered rule."""
        with pytest.raises(UnsupportedOperationError, match="derivation"):
            meters(2) * meters(3)

    def test_divide_without_rule_raises(self) -> None:
        """Test that q / q needs a registered rule."""
        with pytest.raises(UnsupportedOperationError):
            meters(2) / seconds(1)

    def test_registered_rule_enables_operator(self) -> None:
        """Test Length * Length = Area in the canonical unit."""
        derivations.register(QuantityKind.LENGTH, "*", QuantityKind.LENGTH, QuantityKind.AREA)
        area = centimeters(200) * meters(3)
        assert isinstance(area, Area)
        assert area.unit == AreaUnits.SQUARE_METERS
        assert area.amount == 6

    def test_multiply_rule_is_symmetric(self) -> None:
        """Test that multiplication rules cover both operand orders."""
        rules = DerivationRules()
        rules.register(QuantityKind.SPEED, Operator.MULTIPLY, QuantityKind.TIME, QuantityKind.LENGTH)
        assert len(rules) == 2
        assert (
            rules.result_kind(QuantityKind.TIME, Operator.MULTIPLY, QuantityKind.SPEED)
            is QuantityKind.LENGTH
        )

    def test_divide_rule_is_directional(self) -> None:
        """Test that division rules cover one order only."""
        rules = standard_derivations()
        assert (
            rules.result_kind(QuantityKind.LENGTH, Operator.DIVIDE, QuantityKind.TIME)
            is QuantityKind.SPEED
        )
        assert rules.result_kind(QuantityKind.TIME, Operator.DIVIDE, QuantityKind.LENGTH) is None

    def test_explicit_rules_argument(self) -> None:
        """Test passing rules without touching the process-wide table."""
        speed = divide_quantities(kilometers(Decimal(36)), hours(1), rules=standard_derivations())
        assert isinstance(speed, Speed)
        assert speed.unit == SpeedUnits.METERS_PER_SECOND
        assert speed.amount == Decimal(10)
        assert len(derivations) == 0

    def test_multiply_with_rules(self) -> None:
        """Test Speed * Time = Length."""
        distance = multiply_quantities(
            Speed(10, SpeedUnits.METERS_PER_SECOND), seconds(30), rules=standard_derivations()
        )
        assert distance == meters(300)

    def test_float_operand_on_decimal_derivation(self) -> None:
        """Test that a float operand meets a Decimal one through its repr."""
        area = multiply_quantities(
            meters(Decimal("1.1")), meters(0.1), rules=standard_derivations()
        )
        assert area.amount == Decimal("0.11")

    def test_divide_by_zero_quantity_raises(self) -> None:
        """Test that dividing by a zero quantity raises."""
        with pytest.raises(DivisionByZeroError):
            divide_quantities(meters(1), seconds(0), rules=standard_derivations())

    def test_clear(self) -> None:
        """Test that clear removes every rule."""
        rules = standard_derivations()
        rules.clear()
        assert len(rules) == 0


class TestSum:
    """Test suite for summing sequences."""

    def test_sum_quantities(self) -> None:
        """Test summing in the first element's unit."""
        total = sum_quantities([inches(4), feet(1), inches(8)])
        assert total.amount == 24
        assert total.unit == LengthUnits.INCHES

    def test_sum_with_start(self) -> None:
        """Test summing into a start value."""
        total = sum_quantities([inches(12)], start=feet(1))
        assert total.amount == 2
        assert total.unit == LengthUnits.FEET

    def test_sum_empty_raises(self) -> None:
        """Test that an empty sum needs a start value."""
        with pytest.raises(ValueError):
            sum_quantities([])

    def test_builtin_sum(self) -> None:
        """Test that the builtin sum works from its int 0 start."""
        assert sum([grams(1), grams(2), milligrams(500)]) == grams(Decimal("3.5"))
