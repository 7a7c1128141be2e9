import json
import math

import pytest

from reda.number import Number, Suffix, num


def test_prefix_factor_and_suffix():
    assert Suffix.GIGA.factor() == 1e9
    assert Suffix.MICRO.symbol() == "u"
    assert Suffix.parse("K") is Suffix.KILO
    with pytest.raises(ValueError):
        Suffix.parse("z")


def test_suffix_parse_is_exact():
    assert Suffix.parse("") is Suffix.NONE
    with pytest.raises(ValueError):
        Suffix.parse("k")


def test_number_new_and_to_float():
    n = Number(3.3, Suffix.KILO)
    assert n.to_float() == 3300.0


def test_number_from_float():
    n = Number.from_float(1e-6)
    assert n.suffix is Suffix.MICRO
    assert abs(n.value - 1.0) < 1e-6

    n2 = Number.from_float(1e3)
    assert n2.suffix is Suffix.KILO


def test_from_float_zero_and_tiny():
    assert Number.from_float(0.0) == Number(0.0, Suffix.NONE)
    tiny = Number.from_float(1e-15)
    assert tiny.suffix is Suffix.NONE
    assert tiny.value == 1e-15


def test_from_float_negative_uses_magnitude():
    n = Number.from_float(-2500.0)
    assert n.suffix is Suffix.KILO
    assert n.value == pytest.approx(-2.5)


def test_number_parse():
    a = Number.parse("3.3K")
    assert a.suffix is Suffix.KILO
    assert abs(a.value - 3.3) < 1e-6

    b = Number.parse("2.2u")
    assert b.suffix is Suffix.MICRO
    assert abs(b.value - 2.2) < 1e-6

    c = Number.parse("100")
    assert c.suffix is Suffix.NONE
    assert c.value == 100.0

    with pytest.raises(ValueError):
        Number.parse("3.3X")


def test_parse_lowercase_kilo_and_whitespace():
    assert Number.parse("  4.7k ") == Number(4.7, Suffix.KILO)
    assert Number.parse(" 3.3 K ") == Number(3.3, Suffix.KILO)


def test_parse_rejects_underscores_and_empty():
    with pytest.raises(ValueError):
        Number.parse("1_0")
    with pytest.raises(ValueError):
        Number.parse("")
    with pytest.raises(ValueError):
        Number.parse("K")


def test_display():
    a = Number(1.23456, Suffix.MILLI)
    assert f"{a}" == "1.23456m"


def test_display_whole_and_large_values():
    assert str(Number(3.0)) == "3"
    assert str(Number(1e6)) == "1000000"
    assert str(Number(1e-9)) == "0.000000001"
    assert str(Number(-1.23)) == "-1.23"


def test_display_precision():
    n = Number(3.1415926, Suffix.KILO)
    assert f"{n:.2}" == "3.14K"
    assert format(n, ".4f") == "3.1416K"
    with pytest.raises(ValueError):
        format(n, "x")


def test_number_arithmetic():
    a = Number(3.3, Suffix.KILO)
    b = Number(2.2, Suffix.MICRO)

    c = a + b
    assert abs(c.to_float() - 3300.0000022) < 1e-6

    d = a - b
    assert abs(d.to_float() - 3299.9999978) < 1e-6

    e = a * b
    assert abs(e.to_float() - 3300.0 * 2.2e-6) < 1e-9

    f = a / b
    assert abs(f.to_float() - (3300.0 / 2.2e-6)) < 1e-3

    g = num(7.3) % num(2.0)
    assert g == math.fmod(7.3, 2.0)


def test_remainder_keeps_dividend_sign():
    r = num(-7.3) % 2.0
    assert r.to_float() == pytest.approx(-1.3)


def test_number_float_arithmetic():
    a = Number(3.3, Suffix.KILO)
    b = a + 1.0
    assert abs(b.to_float() - 3301.0) < 1e-6


def test_reverse_float_arithmetic():
    assert 10 / num(2) == Number(5.0, Suffix.NONE)
    assert (1.0 - num(250, "m")).to_float() == pytest.approx(0.75)
    assert (2 * num(3, "k")) == Number(6.0, Suffix.KILO)


def test_division_by_zero_follows_ieee():
    assert (num(1) / 0.0).to_float() == math.inf
    assert (num(-1) / num(0)).to_float() == -math.inf
    assert (num(0) / 0.0).is_nan()
    assert (num(3) % 0.0).is_nan()


def test_negation_keeps_suffix():
    assert -Number(2.5, Suffix.NANO) == Number(-2.5, Suffix.NANO)


def test_equality_is_fieldwise_but_float_compare_is_scaled():
    assert Number(1.0, Suffix.KILO) != Number(1000.0, Suffix.NONE)
    assert Number(1.0, Suffix.KILO) == 1000.0
    assert 1000.0 == Number(1.0, Suffix.KILO)


def test_ordering_uses_scaled_value():
    assert Number(1.0, Suffix.KILO) > Number(999.0)
    assert Number(1.0, Suffix.MILLI) < 0.002
    values = sorted([num(1, "k"), num(5), num(2, "m")])
    assert values == [num(2, "m"), num(5), num(1, "k")]


def test_num_macro():
    a = num(3.3, "k")
    assert a.suffix is Suffix.KILO
    assert a.value == 3.3

    b = num(1.0, "u")
    assert b.suffix is Suffix.MICRO
    assert b.value == 1.0

    c = num(100)
    assert c.suffix is Suffix.NONE
    assert c.value == 100.0

    count = 100
    c = num(count)
    assert c.value == 100.0


def test_num_rejects_unknown_suffix():
    with pytest.raises(ValueError):
        num(1, "x")


def test_unary_functions_keep_suffix():
    n = Number(4.0, Suffix.MILLI)
    assert n.sqrt() == Number(2.0, Suffix.MILLI)
    assert Number(-1.5, Suffix.KILO).abs() == Number(1.5, Suffix.KILO)
    assert Number(2.0).powf(3.0) == Number(8.0)


def test_round_half_away_from_zero():
    assert Number(2.5).round() == Number(3.0)
    assert Number(-2.5).round() == Number(-3.0)
    assert Number(2.4).round() == Number(2.0)


def test_floor_ceil_trunc_fract():
    x = Number(-2.75)
    assert x.floor() == Number(-3.0)
    assert x.ceil() == Number(-2.0)
    assert x.trunc() == Number(-2.0)
    assert x.fract().value == pytest.approx(-0.75)


def test_out_of_domain_gives_nan_or_infinity():
    assert Number(-1.0).sqrt().is_nan()
    assert Number(0.0).ln().value == -math.inf
    assert Number(-1.0).log10().is_nan()
    assert Number(2.0).asin().is_nan()
    assert Number(0.0).recip().value == math.inf
    assert Number(1000.0).exp().value == math.inf
    assert not Number(math.inf).is_finite()


def test_atan2_uses_scaled_values_and_keeps_suffix():
    r = Number(1.0, Suffix.KILO).atan2(Number(1000.0))
    assert r.suffix is Suffix.KILO
    assert r.value == pytest.approx(math.pi / 4)


def test_degrees_radians():
    assert Number(math.pi).to_degrees().value == pytest.approx(180.0)
    assert Number(90.0).to_radians().value == pytest.approx(math.pi / 2)


def test_serialize_number():
    n = Number(1.5, Suffix.MILLI)
    assert json.dumps(str(n)) == '"1.5m"'


def test_deserialize_number():
    n = Number.parse(json.loads('"2.2u"'))
    assert n == Number(2.2, Suffix.MICRO)


def test_serialize_deserialize_roundtrip():
    original = Number(3.3, Suffix.NANO)
    parsed = Number.parse(json.loads(json.dumps(str(original))))
    assert parsed == original


def test_deserialize_invalid_number():
    with pytest.raises(ValueError):
        Number.parse(json.loads('"bad_number"'))


def test_deserialize_number_no_suffix():
    n = Number.parse(json.loads('"42.0"'))
    assert n == Number(42.0, Suffix.NONE)


def test_zero_and_predicates():
    z = Number.zero()
    assert z.is_zero()
    assert z == Number(0.0, Suffix.NONE)
    assert Number(math.nan).is_nan()
    assert not Number(1.0, Suffix.GIGA).is_zero()