"""
Observer positions and the geodetic/geocentric coordinate kernel.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import ClassVar, NamedTuple, Union

import numpy as np

from geomag.exceptions import InvalidCoordinateKindError

# WGS-84 ellipsoid
WGS84_A = 6378137.0      # Semi-major axis [m]
WGS84_B = 6356752.3142   # Semi-minor axis [m]


class CoordinateKind(Enum):
    """Frame a position is expressed in."""
    WGS84 = auto()
    GEOCENTRIC_SPHERICAL = auto()
    ECEF = auto()


@dataclass(frozen=True)
class Wgs84:
    """Geodetic position on the WGS-84 ellipsoid."""
    epoch: datetime
    latitude: float    # Geodetic latitude [rad]
    longitude: float   # [rad]
    altitude: float    # Height above the ellipsoid [m]
    kind: ClassVar[CoordinateKind] = CoordinateKind.WGS84

    @classmethod
    def from_degrees(cls, epoch: datetime, latitude: float, longitude: float,
                     altitude: float = 0.0) -> 'Wgs84':
        return cls(epoch, np.radians(latitude), np.radians(longitude), altitude)

    def __str__(self) -> str:
        return (f"WGS84(epoch={self.epoch.isoformat()}, "
                f"latitude={np.degrees(self.latitude):.6f} deg, "
                f"longitude={np.degrees(self.longitude):.6f} deg, "
                f"altitude={self.altitude:.3f} m)")


@dataclass(frozen=True)
class GeocentricSpherical:
    """Geocentric spherical position."""
    epoch: datetime
    latitude: float    # Geocentric latitude [rad]
    longitude: float   # [rad]
    radius: float      # Distance from the Earth's centre [m]
    kind: ClassVar[CoordinateKind] = CoordinateKind.GEOCENTRIC_SPHERICAL

    @classmethod
    def from_degrees(cls, epoch: datetime, latitude: float, longitude: float,
                     radius: float) -> 'GeocentricSpherical':
        return cls(epoch, np.radians(latitude), np.radians(longitude), radius)

    def __str__(self) -> str:
        return (f"GeocentricSpherical(epoch={self.epoch.isoformat()}, "
                f"latitude={np.degrees(self.latitude):.6f} deg, "
                f"longitude={np.degrees(self.longitude):.6f} deg, "
                f"radius={self.radius:.3f} m)")


@dataclass(frozen=True)
class Ecef:
    """Earth-centred, Earth-fixed cartesian position [m]."""
    epoch: datetime
    x: float
    y: float
    z: float
    kind: ClassVar[CoordinateKind] = CoordinateKind.ECEF

    def to_geocentric_spherical(self) -> GeocentricSpherical:
        r = float(np.sqrt(self.x**2 + self.y**2 + self.z**2))
        if r == 0.0:
            raise ValueError("ECEF position at the Earth's centre has no direction")
        return GeocentricSpherical(
            epoch=self.epoch,
            latitude=float(np.arcsin(self.z / r)),
            longitude=float(np.arctan2(self.y, self.x)),
            radius=r
        )

    def __str__(self) -> str:
        return (f"ECEF(epoch={self.epoch.isoformat()}, "
                f"x={self.x:.3f} m, y={self.y:.3f} m, z={self.z:.3f} m)")


Position = Union[Wgs84, GeocentricSpherical, Ecef]


class SphericalFrame(NamedTuple):
    """Geocentric evaluation frame of an observer."""
    radius: float      # [m]
    cos_theta: float   # cos(geocentric colatitude)
    sin_theta: float   # sin(geocentric colatitude)
    longitude: float   # [rad]
    cos_delta: float   # Rotation from geocentric to the observer's local vertical
    sin_delta: float


def geodetic_to_spherical_frame(latitude: float, longitude: float,
                                altitude: float) -> SphericalFrame:
    """
    Convert a WGS-84 geodetic position to the geocentric evaluation frame.

    Args:
        latitude: Geodetic latitude [rad]
        longitude: Longitude [rad]
        altitude: Height above the ellipsoid [m]
    """
    aa = WGS84_A * WGS84_A
    bb = WGS84_B * WGS84_B
    h = altitude

    # Geodetic colatitude
    cos_theta_gd = np.sin(latitude)
    sin_theta_gd = np.cos(latitude)

    a2_sin2 = aa * sin_theta_gd * sin_theta_gd
    b2_cos2 = bb * cos_theta_gd * cos_theta_gd
    rho2 = a2_sin2 + b2_cos2
    rho = np.sqrt(rho2)
    r = np.sqrt((aa * a2_sin2 + bb * b2_cos2) / rho2 + h * h + 2.0 * h * rho)

    cos_delta = (h + rho) / r
    sin_delta = (aa - bb) / rho * sin_theta_gd * cos_theta_gd / r

    cos_theta = cos_theta_gd * cos_delta - sin_theta_gd * sin_delta
    sin_theta = sin_theta_gd * cos_delta + cos_theta_gd * sin_delta

    return SphericalFrame(float(r), float(cos_theta), float(sin_theta),
                          float(longitude), float(cos_delta), float(sin_delta))


def spherical_frame(position: Position) -> SphericalFrame:
    """Geocentric evaluation frame for any supported position."""
    kind = getattr(position, 'kind', None)
    if kind is CoordinateKind.WGS84:
        return geodetic_to_spherical_frame(position.latitude, position.longitude,
                                           position.altitude)
    if kind is CoordinateKind.ECEF:
        position = position.to_geocentric_spherical()
        kind = position.kind
    if kind is CoordinateKind.GEOCENTRIC_SPHERICAL:
        return SphericalFrame(
            radius=float(position.radius),
            cos_theta=float(np.sin(position.latitude)),
            sin_theta=float(np.cos(position.latitude)),
            longitude=float(position.longitude),
            cos_delta=1.0,
            sin_delta=0.0
        )
    raise InvalidCoordinateKindError(kind)
