import json

import pytest

from reda.complexnum import Complex
from reda.number import Number, Suffix, num


def test_real_only():
    c = Complex.parse("1.5")
    assert c.re == Number(1.5, Suffix.NONE)
    assert c.im == Number(0.0, Suffix.NONE)

    c = Complex.parse("2.2u")
    assert c.re == Number(2.2, Suffix.MICRO)
    assert c.im == Number(0.0, Suffix.NONE)


def test_imag_only():
    c = Complex.parse("+3.3j")
    assert c.re == Number(0.0, Suffix.NONE)
    assert c.im == Number(3.3, Suffix.NONE)

    c = Complex.parse("-5.5mj")
    assert c.re == Number(0.0, Suffix.NONE)
    assert c.im == Number(-5.5, Suffix.MILLI)

    c = Complex.parse("5.5mj")
    assert c.re == Number(0.0, Suffix.NONE)
    assert c.im == Number(5.5, Suffix.MILLI)


def test_real_imag():
    c = Complex.parse("1.1+2.2j")
    assert c.re == Number(1.1, Suffix.NONE)
    assert c.im == Number(2.2, Suffix.NONE)

    c = Complex.parse("-3.0-4.4uj")
    assert c.re == Number(-3.0, Suffix.NONE)
    assert c.im == Number(-4.4, Suffix.MICRO)

    c = Complex.parse("10.5-7.5nj")
    assert c.re == Number(10.5, Suffix.NONE)
    assert c.im == Number(-7.5, Suffix.NANO)


@pytest.mark.parametrize("text", ["hello", "1.2+badj", "1.2+3.3", "j3.3"])
def test_error_cases(text):
    with pytest.raises(ValueError):
        Complex.parse(text)


def test_creation():
    c = Complex(num(3.0), num(4.0))
    assert c.re == num(3.0)
    assert c.im == num(4.0)
    assert Complex(3.0, 4) == c


def test_creation_rejects_other_types():
    with pytest.raises(TypeError):
        Complex("3", 4.0)


def test_equality():
    a = Complex(num(1.0), num(2.0))
    b = Complex(num(1.0), num(2.0))
    c = Complex(num(1.0), num(3.0))
    assert a == b
    assert not (a == c)


def test_addition():
    a = Complex(num(1.0), num(2.0))
    b = Complex(num(3.0), num(4.0))
    assert a + b == Complex(num(4.0), num(6.0))


def test_subtraction():
    a = Complex(num(5.0), num(7.0))
    b = Complex(num(3.0), num(4.0))
    assert a - b == Complex(num(2.0), num(3.0))


def test_multiplication():
    a = Complex(num(1.0), num(2.0))
    b = Complex(num(3.0), num(4.0))
    assert a * b == Complex(num(-5.0), num(10.0))


def test_division_inverts_multiplication():
    a = Complex(num(1.0), num(2.0))
    b = Complex(num(3.0), num(4.0))
    q = (a * b) / b
    assert q.re.to_float() == pytest.approx(1.0)
    assert q.im.to_float() == pytest.approx(2.0)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Complex(num(1.0), num(1.0)) / Complex(num(0.0), num(0.0))


def test_conjugate():
    a = Complex(num(5.0), num(-7.0))
    assert a.conjugate() == Complex(num(5.0), num(7.0))


def test_magnitude_squared():
    c = Complex(num(3.0), num(4.0))
    assert c.norm_sqr() == num(25.0)


def test_abs_and_arg():
    c = Complex(num(3.0), num(4.0))
    assert c.abs().to_float() == pytest.approx(5.0)
    assert Complex(num(0.0), num(1.0)).arg().to_float() == pytest.approx(1.5707963267948966)


def test_parts():
    c = Complex(num(1.0), num(2.0, "m"))
    assert c.parts() == (num(1.0), num(2.0, "m"))


def test_display():
    assert str(Complex(num(0.0), num(0.0))) == "0"
    assert str(Complex(num(3.0), num(4.0))) == "3+4j"
    assert str(Complex(num(3.0), num(-4.0))) == "3-4j"
    assert str(Complex(num(0.0), num(-2.5, "u"))) == "-2.5uj"
    assert format(Complex(num(1.234), num(-2.5)), ".1") == "1.2-2.5j"


def test_serialize_deserialize_complex_real_only():
    c = Complex.parse("3.3u")
    encoded = json.dumps(str(c))
    assert encoded == '"3.3u"'
    assert Complex.parse(json.loads(encoded)) == c


def test_serialize_deserialize_complex_imag_only():
    c = Complex.parse("2.2mj")
    encoded = json.dumps(str(c))
    assert encoded == '"2.2mj"'
    assert Complex.parse(json.loads(encoded)) == c


def test_serialize_deserialize_complex_full():
    c = Complex.parse("1.5+2.5uj")
    encoded = json.dumps(str(c))
    assert encoded == '"1.5+2.5uj"'
    assert Complex.parse(json.loads(encoded)) == c