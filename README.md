# reda

Circuit quantities and ngspice results in Python, with no third-party
dependencies.

- `reda.number`: `Number` is a float paired with a `Suffix` (`G`, `M`, `K`,
  `m`, `u`, `n`, `p`, or none).
- `reda.complexnum`: `Complex` has two `Number` parts.
- `reda.units`: typed quantities such as `Voltage`, `Current` and `Resistance`,
  and `UnitComplex` for phasors.
- `reda.quantity`: `quantity()` builds a typed quantity from a value and a
  string that holds the suffix and the unit.
- `reda.rawfile`: `RawFile` reads ngspice binary raw output.
- `reda.server`: `NgSpiceServer` runs an `ngspice` executable on a netlist.
- `reda.errors`: `NgSpiceError` and its subclasses.

## Installation

```
pip install .
```

## Numbers

```python
from reda.number import Number, Suffix, num

a = Number.parse("3.3K")          # "k" is accepted for kilo too
assert a.suffix is Suffix.KILO
assert a.to_float() == 3300.0

b = num(2.2, "u")                 # same as Number(2.2, Suffix.MICRO)
print(a + b)                      # printed with the suffix that fits the result
print(Number.from_float(1e-6))    # 1u
print(format(num(1.23456, "m"), ".2f"))   # 1.23m
```

Arithmetic (`+ - * / %`) works on numbers and plain `int`/`float` values. It is
done in base units, and the result goes through `Number.from_float`, which
picks the largest suffix that does not exceed the magnitude. Negation keeps the
suffix. Ordering compares base values. `==` between two numbers compares value
and suffix. `==` against a plain float compares the base value.

Numbers also have element-wise maths methods that act on the stored value and
keep the suffix: `abs`, `ceil`, `floor`, `round`, `trunc`, `fract`, `sqrt`,
`exp`, `ln`, `log10`, `log2`, `recip`, trigonometric and hyperbolic functions,
`to_degrees`, `to_radians`, and `powf`. `atan2` works on base values.
`Number.parse` raises `ValueError` for text it cannot read.

## Complex values

```python
from reda.complexnum import Complex

c = Complex.parse("-3.0-4.4uj")
print(c.conjugate())        # -3+4.4uj
print(Complex.parse("1.5+2.5uj") * Complex.parse("2"))
print(c.norm_sqr(), c.abs(), c.arg())
```

`str()` gives the same form that `Complex.parse` reads, such as `"3.3u"`,
`"2.2mj"` or `"1.5+2.5uj"`. Division by a zero complex value raises
`ZeroDivisionError`.

## Typed units

```python
from reda.units import Current, Resistance, Time, Voltage
from reda.quantity import quantity

v = Voltage.parse("12V")
r = quantity(6.0, "Ω")
i = v / r                   # a Current
print(i)                    # 2A

print(Resistance.parse("2.2KΩ") * Current.parse("1mA"))   # a Voltage
print(quantity(2, "us").to_frequency())                   # a Frequency
print(Time.parse("100s") / Time.parse("100s"))            # a plain Number: 1
```

A string must end in the unit's symbol to parse. `Voltage.parse("5.6A")`
raises `ValueError("Expect end with 'V'")`. You can add, subtract and compare
quantities only with quantities of the same unit. You can multiply or divide a
quantity by a scalar. Products and quotients of two quantities follow these
rules:

- `V = Ω·A`, `W = V·A`, `J = W·s`, `Q = F·V`, `Q = A·s`
- `m = m/s·s`, `W = N·m/s`, `J = N·m`, `N = Pa·m²`, `m² = m·m`
- `Wb = T·m²`, `Wb = V·s`

Each rule also gives the two matching quotients. `Frequency * Time` gives a
plain `Number`. Any other pair raises `TypeError`.

`quantity(value, suffix_unit)` accepts the suffixes `m k K M G u n p` or none.
It also accepts unit spellings such as `v` for volts and `HZ`/`hz` for hertz.

## Reading raw files

```python
from reda.rawfile import RawFile, clean_name

raw = RawFile.parse(data, num_points=101)   # data: bytes of a binary raw file
print(raw.plotname, raw.flags)
for variable in raw.variables:
    print(clean_name(variable.name), variable.vartype, len(variable.data))

times = raw.time_vector()      # list of Time, or None
sweep = raw.v_sweep()          # list of Voltage for a DC voltage sweep
```

Real data points come out as `Number` and complex ones as `Complex`.
`frequency_vector()` returns the real parts of the `frequency` vector. A
malformed file raises `RawFileError`, a subclass of `ValueError`.

## Running ngspice

```python
from reda.server import NgSpiceServer

netlist = """* divider
V1 in 0 DC 5
R1 in out 1k
R2 out 0 2k
.op
.end
"""

raw = NgSpiceServer("ngspice").run(netlist)
for variable in raw.variables:
    print(variable.name, variable.data)
```

`NgSpiceServer.run` starts `ngspice -s`, writes the netlist to its standard
input, and parses the raw data it writes to standard output. The point count
comes from the first `@@@` line on standard error (see `parse_point_count`).
Failures raise `NgSpiceError` or one of its subclasses, such as
`MissingPointsError` or `ParseRawFileError`.

## What this package does not do

- It does not build netlists. You write the netlist text yourself.
- It does not turn raw files into operating-point, DC, transient or AC
  analysis objects. You get the raw variables and the helper vectors above.
- It does not load ngspice as a shared library. It only runs the executable
  as a separate process.

## Tests

```
pip install ".[test]"
pytest
```