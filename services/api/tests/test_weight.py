import pytest

from app.services.unit_conversion import InvalidUnitError
from app.services.weight import WeightUnit, weight_converter


def test_kilograms_to_pounds():
    # 1000 g / 453.592 = 2.20462
    assert weight_converter.convert(1, WeightUnit.KILOGRAMS, WeightUnit.POUNDS) == pytest.approx(2.205, abs=1e-3)


def test_pounds_to_ounces():
    assert weight_converter.convert(1, WeightUnit.POUNDS, WeightUnit.OUNCES) == pytest.approx(16.0)


def test_milligrams_to_grams():
    assert weight_converter.convert(1500, WeightUnit.MILLIGRAMS, WeightUnit.GRAMS) == 1.5


def test_ounces_to_grams():
    assert weight_converter.convert(1, WeightUnit.OUNCES, WeightUnit.GRAMS) == 28.3495


def test_grams_to_kilograms():
    assert weight_converter.convert(250, WeightUnit.GRAMS, WeightUnit.KILOGRAMS) == 0.25


def test_parse_symbols_not_accepted():
    # Only full names are accepted
    for name in ("kg", "lb", "oz", "g", "mg"):
        with pytest.raises(InvalidUnitError):
            weight_converter.parse_unit(name)


def test_parse_case_insensitive():
    assert weight_converter.parse_unit("Pounds") is WeightUnit.POUNDS
    assert weight_converter.parse_unit("KILOGRAMS") is WeightUnit.KILOGRAMS


def test_all_unit_names_in_declaration_order():
    assert weight_converter.all_unit_names() == ["milligrams", "grams", "kilograms", "ounces", "pounds"]


def test_all_unit_symbols():
    assert weight_converter.all_unit_symbols() == {
        "milligrams": "mg",
        "grams": "g",
        "kilograms": "kg",
        "ounces": "oz",
        "pounds": "lb",
    }


def test_grams_to_pounds_divides_by_forward_factor():
    # 100000 g / 453.592, not 100000 g * 0.002205
    assert weight_converter.convert(100, WeightUnit.KILOGRAMS, WeightUnit.POUNDS) == 220.4624
