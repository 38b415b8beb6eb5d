import numpy as np
import pytest

from conftest import utc
from geomag.exceptions import InvalidCoordinateKindError
from geomag.models.coordinates import (
    WGS84_A,
    WGS84_B,
    CoordinateKind,
    Ecef,
    GeocentricSpherical,
    Wgs84,
    geodetic_to_spherical_frame,
    spherical_frame,
)

EPOCH = utc(2020, 1, 1)


def test_equator_on_ellipsoid():
    frame = geodetic_to_spherical_frame(0.0, 0.0, 0.0)
    assert frame.radius == pytest.approx(WGS84_A)
    assert frame.cos_delta == pytest.approx(1.0)
    assert frame.sin_delta == pytest.approx(0.0, abs=1e-12)
    assert frame.cos_theta == pytest.approx(0.0, abs=1e-12)
    assert frame.sin_theta == pytest.approx(1.0)


@pytest.mark.parametrize("latitude", [90.0, -90.0])
def test_poles_on_ellipsoid(latitude):
    frame = geodetic_to_spherical_frame(np.radians(latitude), 0.0, 0.0)
    assert frame.radius == pytest.approx(WGS84_B)
    assert frame.cos_theta == pytest.approx(np.sign(latitude))
    assert frame.sin_theta == pytest.approx(0.0, abs=1e-12)


def test_altitude_adds_radially_at_equator():
    frame = geodetic_to_spherical_frame(0.0, 0.3, 1000.0)
    assert frame.radius == pytest.approx(WGS84_A + 1000.0)
    assert frame.longitude == 0.3


@pytest.mark.parametrize("latitude", [-75.0, -30.0, 10.0, 45.0, 60.0, 89.0])
@pytest.mark.parametrize("altitude", [0.0, 5000.0, 400e3])
def test_geodetic_to_geocentric_matches_cartesian(latitude, altitude):
    # Geocentric latitude from the ellipsoid's cartesian form
    phi = np.radians(latitude)
    e2 = 1.0 - (WGS84_B / WGS84_A) ** 2
    n = WGS84_A / np.sqrt(1.0 - e2 * np.sin(phi) ** 2)
    p = (n + altitude) * np.cos(phi)
    z = (n * (1.0 - e2) + altitude) * np.sin(phi)

    frame = geodetic_to_spherical_frame(phi, 0.0, altitude)
    assert frame.radius == pytest.approx(np.hypot(p, z), rel=1e-12)
    assert frame.cos_theta == pytest.approx(z / np.hypot(p, z), abs=1e-12)
    assert frame.sin_theta == pytest.approx(p / np.hypot(p, z), abs=1e-12)
    # delta is the angle between geodetic and geocentric verticals
    delta = phi - np.arctan2(z, p)
    assert frame.cos_delta == pytest.approx(np.cos(delta), abs=1e-12)
    assert frame.sin_delta == pytest.approx(np.sin(delta), abs=1e-12)


def test_geocentric_spherical_is_identity_rotation():
    position = GeocentricSpherical.from_degrees(EPOCH, 30.0, -60.0, 6871200.0)
    frame = spherical_frame(position)
    assert frame.radius == 6871200.0
    assert (frame.cos_delta, frame.sin_delta) == (1.0, 0.0)
    assert frame.cos_theta == pytest.approx(0.5)
    assert frame.sin_theta == pytest.approx(np.sqrt(3) / 2)
    assert frame.longitude == pytest.approx(np.radians(-60.0))


def test_ecef_to_geocentric_spherical():
    r = 7000e3
    lat, lon = np.radians(20.0), np.radians(-100.0)
    position = Ecef(EPOCH, r * np.cos(lat) * np.cos(lon), r * np.cos(lat) * np.sin(lon), r * np.sin(lat))
    spherical = position.to_geocentric_spherical()
    assert spherical.kind is CoordinateKind.GEOCENTRIC_SPHERICAL
    assert spherical.epoch == EPOCH
    assert spherical.radius == pytest.approx(r)
    assert spherical.latitude == pytest.approx(lat)
    assert spherical.longitude == pytest.approx(lon)
    assert spherical_frame(position) == spherical_frame(spherical)


def test_ecef_origin_is_rejected():
    with pytest.raises(ValueError):
        Ecef(EPOCH, 0.0, 0.0, 0.0).to_geocentric_spherical()


def test_kind_discriminator():
    assert Wgs84.from_degrees(EPOCH, 1.0, 2.0).kind is CoordinateKind.WGS84
    assert GeocentricSpherical(EPOCH, 0.0, 0.0, 7e6).kind is CoordinateKind.GEOCENTRIC_SPHERICAL
    assert Ecef(EPOCH, 7e6, 0.0, 0.0).kind is CoordinateKind.ECEF


def test_from_degrees():
    position = Wgs84.from_degrees(EPOCH, 45.0, -90.0, 12.0)
    assert position.latitude == pytest.approx(np.pi / 4)
    assert position.longitude == pytest.approx(-np.pi / 2)
    assert position.altitude == 12.0
    assert "45.000000 deg" in str(position)


def test_unsupported_position():
    class Geomagnetic:
        kind = "geomagnetic"
        epoch = EPOCH

    with pytest.raises(InvalidCoordinateKindError):
        spherical_frame(Geomagnetic())
    with pytest.raises(InvalidCoordinateKindError):
        spherical_frame((0.0, 0.0, 0.0))
