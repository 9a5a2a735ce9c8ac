import cmath

import pytest

from easycomplex import PI, DomainError, PoleError, PolarComplex, RectangularComplex
import easycomplex.config

VALUES = [0.7 - 0.4j, -1.2 + 2.0j, 3.0 + 0.0j, 0.0 - 1.5j]

FUNCTIONS = [
    ("cos", cmath.cos),
    ("sin", cmath.sin),
    ("tan", cmath.tan),
    ("cosh", cmath.cosh),
    ("sinh", cmath.sinh),
    ("tanh", cmath.tanh),
]


@pytest.mark.parametrize("name, reference", FUNCTIONS)
@pytest.mark.parametrize("value", VALUES)
def test_rectangular_matches_cmath(name, reference, value):
    z = RectangularComplex.convert(value)
    result = getattr(z, name)()
    assert isinstance(result, RectangularComplex)
    assert complex(result) == pytest.approx(reference(value), rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("name, reference", FUNCTIONS)
@pytest.mark.parametrize("value", VALUES)
def test_polar_delegates_through_rectangular(name, reference, value):
    z = PolarComplex.convert(value)
    result = getattr(z, name)()
    assert isinstance(result, PolarComplex)
    assert result.isclose(reference(value))


def test_cos_equals_sin_at_quarter_pi():
    z = RectangularComplex(PI / 4)
    assert z.cos().isclose(z.sin(), abs_tol=1e-12)
    p = PolarComplex(PI / 4)
    assert p.cos().isclose(p.sin(), abs_tol=1e-12)


def test_values_at_zero():
    zero = RectangularComplex(0, 0)
    assert zero.cos().as_tuple() == (1.0, 0.0)
    assert zero.sin() == 0
    assert zero.tan() == 0
    assert zero.cosh().as_tuple() == (1.0, 0.0)
    assert zero.tanh() == 0


def test_pythagorean_identity():
    z = RectangularComplex(0.7, -0.4)
    s, c = z.sin(), z.cos()
    assert (s * s + c * c).isclose(1)


class TestPoles:
    @pytest.mark.parametrize("x", [PI / 2, -PI / 2])
    def test_tan_at_pole(self, x):
        with pytest.raises(PoleError):
            RectangularComplex(x, 0).tan()

    def test_polar_tan_at_pole(self):
        with pytest.raises(PoleError):
            PolarComplex(PI / 2, 0).tan()

    def test_tanh_at_pole(self):
        with pytest.raises(PoleError):
            RectangularComplex(0, PI / 2).tanh()
        with pytest.raises(PoleError):
            PolarComplex(PI / 2, PI / 2).tanh()

    def test_pole_error_is_a_domain_error(self):
        with pytest.raises(DomainError):
            RectangularComplex(PI / 2, 0).tan()

    def test_near_pole_is_finite(self):
        z = RectangularComplex(PI / 2 + 1e-3, 0).tan()
        assert z.real == pytest.approx(-1000.0, rel=1e-3)

    def test_tolerance_is_configurable(self, monkeypatch):
        monkeypatch.setattr(easycomplex.config, "POLE_TOLERANCE", 1e-3)
        with pytest.raises(PoleError):
            RectangularComplex(PI / 2 + 0.01, 0).tan()


class TestLargeArguments:
    @pytest.mark.parametrize("value", [400 + 0j, -400 + 0.3j, 25 - 1.0j, 1e6 + 2.0j])
    def test_tanh_saturates(self, value):
        result = RectangularComplex.convert(value).tanh()
        assert complex(result) == pytest.approx(cmath.tanh(value), rel=1e-12, abs=1e-12)

    @pytest.mark.parametrize("value", [1 + 400j, 0.3 - 400j, -1.0 + 25j, 2.0 - 1e6j])
    def test_tan_saturates(self, value):
        result = RectangularComplex.convert(value).tan()
        assert complex(result) == pytest.approx(cmath.tan(value), rel=1e-12, abs=1e-12)

    def test_no_nan_from_overflow(self):
        assert RectangularComplex(400, 0).tanh().as_tuple() == (1.0, 0.0)
        assert RectangularComplex(1, 400).tan().imag == 1.0
        assert PolarComplex(400, PI / 2).tan().isclose(1j)
