import numpy as np
import pytest

from conftest import utc
from geomag.exceptions import EpochOutOfRangeError
from geomag.models.model import Model, ModelKind
from geomag.models.synthesis import extrapolate_model, interpolate_model, synthesize_model


def test_interpolate_midpoint(dipole_set):
    model = synthesize_model(dipole_set, 2002.5)
    assert model.kind is ModelKind.INTERPOLATED
    assert model.epoch == 2002.5
    np.testing.assert_allclose(model.coefficients[:3], [-29950.0, -1525.0, 4950.0])


def test_interpolate_endpoints_are_exact(igrf13):
    for index in (0, 9, 23, 24):
        snapshot = igrf13[index]
        model = synthesize_model(igrf13, snapshot.epoch)
        np.testing.assert_array_equal(model.coefficients, snapshot.coefficients)


def test_interpolate_from_datetime(igrf13):
    model = synthesize_model(igrf13, utc(2017, 1, 1))
    expected = igrf13[23].coefficients + 0.4 * (igrf13[24].coefficients - igrf13[23].coefficients)
    np.testing.assert_allclose(model.coefficients, expected, atol=1e-9)


def test_extrapolate(dipole_set):
    model = synthesize_model(dipole_set, 2013.0)
    assert model.kind is ModelKind.EXTRAPOLATED
    assert model.epoch == 2013.0
    np.testing.assert_allclose(model.coefficients[:3], [-29770.0, -1615.0, 4740.0])


def test_extrapolate_igrf13(igrf13):
    model = synthesize_model(igrf13, utc(2027, 1, 1))
    assert model.kind is ModelKind.EXTRAPOLATED
    assert model.g(1, 0) == pytest.approx(-29404.8 + 7 * 5.7)
    # Between the last predictive epoch and the end of the SV window
    assert synthesize_model(igrf13, 2022.0).kind is ModelKind.EXTRAPOLATED
    assert synthesize_model(igrf13, 2019.0).kind is ModelKind.INTERPOLATED


def test_extrapolation_starts_at_last_snapshot(igrf13):
    at_boundary = synthesize_model(igrf13, 2020.0)
    just_after = synthesize_model(igrf13, 2020.0 + 1e-9)
    np.testing.assert_allclose(at_boundary.coefficients, just_after.coefficients, atol=1e-6)


def test_synthesize_before_first_epoch(igrf13):
    with pytest.raises(EpochOutOfRangeError):
        synthesize_model(igrf13, 1899.5)


def test_interpolate_zero_span():
    model = Model(2000.0, ModelKind.DEFINITIVE, [1.0, 2.0])
    result = interpolate_model(2000.0, model, model)
    np.testing.assert_array_equal(result.coefficients, model.coefficients)
    assert result.kind is ModelKind.INTERPOLATED


def test_synthesis_does_not_mutate_inputs(dipole_set):
    before = [model.coefficients.copy() for model in dipole_set]
    synthesize_model(dipole_set, 2004.0)
    synthesize_model(dipole_set, 2020.0)
    for model, coefficients in zip(dipole_set, before):
        np.testing.assert_array_equal(model.coefficients, coefficients)


def test_extrapolate_model_direct():
    last = Model(2020.0, ModelKind.PREDICTIVE, [100.0, -50.0])
    sv = Model(2025.0, ModelKind.SECULAR_VARIATION, [2.0, 1.0])
    model = extrapolate_model(2021.5, last, sv)
    np.testing.assert_allclose(model.coefficients[:2], [103.0, -48.5])
