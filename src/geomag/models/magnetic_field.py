from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from threading import Lock
from typing import Optional, Union

import numpy as np

from geomag.models.coordinates import Position, Wgs84, spherical_frame
from geomag.models.igrf import Igrf, field_in_frame
from geomag.models.model import Model, ModelSet
from geomag.utils.time import EpochLike, to_fractional_years


class MagFluxUnit(Enum):
    """Output unit of the magnetic flux density."""
    NANOTESLA = "nT"
    MICROTESLA = "uT"
    TESLA = "T"
    GAUSS = "G"
    SI = "SI"
    CGS = "CGS"
    MKS = "MKS"
    MKSA = "MKSA"

    @property
    def scale(self) -> float:
        """Multiplier from nT to this unit."""
        return _UNIT_SCALES[self]

    @property
    def symbol(self) -> str:
        return _UNIT_SYMBOLS[self]

    @classmethod
    def parse(cls, text: Union[str, 'MagFluxUnit']) -> 'MagFluxUnit':
        """Look up a unit by value ('nT') or name ('nanotesla'), case-insensitively."""
        if isinstance(text, cls):
            return text
        for unit in cls:
            if text.lower() in (unit.value.lower(), unit.name.lower()):
                return unit
        raise ValueError(f"Unknown magnetic flux unit: {text}")


_UNIT_SCALES = {
    MagFluxUnit.NANOTESLA: 1.0,
    MagFluxUnit.MICROTESLA: 1.0e-3,
    MagFluxUnit.TESLA: 1.0e-9,
    MagFluxUnit.GAUSS: 1.0e-5,
    MagFluxUnit.SI: 1.0e-9,
    MagFluxUnit.CGS: 1.0e-5,
    MagFluxUnit.MKS: 1.0e-9,
    MagFluxUnit.MKSA: 1.0e-9,
}

_UNIT_SYMBOLS = {
    MagFluxUnit.NANOTESLA: "nT",
    MagFluxUnit.MICROTESLA: "uT",
    MagFluxUnit.TESLA: "T",
    MagFluxUnit.GAUSS: "G",
    MagFluxUnit.SI: "T",
    MagFluxUnit.CGS: "G",
    MagFluxUnit.MKS: "T",
    MagFluxUnit.MKSA: "T",
}


@dataclass(frozen=True)
class MagneticFieldComponents:
    """Magnetic elements derived from a NED flux density vector."""
    north: float
    east: float
    down: float
    total: float
    horizontal: float
    inclination: float  # [rad], positive downwards
    declination: float  # [rad], positive east of north

    @classmethod
    def from_vector(cls, field_vector: np.ndarray) -> 'MagneticFieldComponents':
        north, east, down = (float(v) for v in field_vector)
        horizontal = float(np.hypot(north, east))
        return cls(
            north=north,
            east=east,
            down=down,
            total=float(np.linalg.norm([north, east, down])),
            horizontal=horizontal,
            inclination=float(np.arctan2(down, horizontal)),
            declination=float(np.arctan2(east, north))
        )

    @property
    def inclination_deg(self) -> float:
        return float(np.degrees(self.inclination))

    @property
    def declination_deg(self) -> float:
        return float(np.degrees(self.declination))


@dataclass
class MagneticFieldState:
    """Magnetic field state."""
    field_vector: np.ndarray  # NED, output unit
    field_strength: float     # Output unit
    timestamp: datetime
    unit: MagFluxUnit
    components: MagneticFieldComponents


def field(model_set: ModelSet, position: Position,
          epoch: Optional[EpochLike] = None) -> np.ndarray:
    """
    Magnetic flux density (B_N, B_E, B_D) in nT.

    Args:
        model_set: Coefficient snapshots
        position: Observer position
        epoch: Overrides position.epoch when given
    """
    return Igrf(model_set).field(position, epoch)


def components(field_vector: np.ndarray) -> MagneticFieldComponents:
    """Derived components of a NED flux density vector."""
    return MagneticFieldComponents.from_vector(field_vector)


def field_scaled(model_set: ModelSet, position: Position,
                 unit: Union[MagFluxUnit, str],
                 epoch: Optional[EpochLike] = None) -> np.ndarray:
    """Magnetic flux density in the requested unit."""
    return field(model_set, position, epoch) * MagFluxUnit.parse(unit).scale


class MagneticFieldModel:
    def __init__(self, model_set: Optional[ModelSet] = None,
                 unit: Union[MagFluxUnit, str] = MagFluxUnit.SI,
                 cache_size: int = 16):
        """
        Initialize magnetic field model.

        Args:
            model_set: Coefficient snapshots, built-in IGRF-13 if omitted
            unit: Output unit of the flux density
            cache_size: Number of synthesised models kept, keyed by epoch
        """
        self.igrf = Igrf(model_set)
        self.unit = MagFluxUnit.parse(unit)
        self.cache_size = cache_size

        # Synthesised models by fractional year
        self._cache: 'OrderedDict[float, Model]' = OrderedDict()
        self._cache_lock = Lock()

    @classmethod
    def from_file(cls, path, unit: Union[MagFluxUnit, str] = MagFluxUnit.SI,
                  cache_size: int = 16) -> 'MagneticFieldModel':
        """Build a model from an IAGA coefficient file."""
        return cls(ModelSet.from_file(path), unit, cache_size)

    @property
    def model_set(self) -> ModelSet:
        return self.igrf.model_set

    def set_output_unit(self, unit: Union[MagFluxUnit, str]):
        self.unit = MagFluxUnit.parse(unit)

    def synthesize(self, epoch: EpochLike) -> Model:
        """Coefficients valid at an epoch, memoised."""
        t = to_fractional_years(epoch)
        if self.cache_size <= 0:
            return self.igrf.synthesize(t)
        with self._cache_lock:
            model = self._cache.get(t)
            if model is not None:
                self._cache.move_to_end(t)
                return model
        model = self.igrf.synthesize(t)
        with self._cache_lock:
            self._cache[t] = model
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return model

    def calculate_magnetic_field(self, position: Position,
                                 epoch: Optional[EpochLike] = None) -> np.ndarray:
        """
        Calculate Earth's magnetic field vector at given position.

        Returns:
            (B_N, B_E, B_D) in the output unit
        """
        frame = spherical_frame(position)
        model = self.synthesize(position.epoch if epoch is None else epoch)
        return field_in_frame(model, frame) * self.unit.scale

    def __call__(self, position: Position,
                 epoch: Optional[EpochLike] = None) -> np.ndarray:
        return self.calculate_magnetic_field(position, epoch)

    def at(self, epoch: datetime, latitude: float, longitude: float,
           altitude: float = 0.0) -> np.ndarray:
        """Field at a WGS-84 position given in degrees and metres."""
        return self.calculate_magnetic_field(
            Wgs84.from_degrees(epoch, latitude, longitude, altitude))

    def components(self, position: Position) -> MagneticFieldComponents:
        """Derived components in the output unit."""
        return MagneticFieldComponents.from_vector(self.calculate_magnetic_field(position))

    def state(self, position: Position) -> MagneticFieldState:
        field_vector = self.calculate_magnetic_field(position)
        field_components = MagneticFieldComponents.from_vector(field_vector)
        return MagneticFieldState(
            field_vector=field_vector,
            field_strength=field_components.total,
            timestamp=position.epoch,
            unit=self.unit,
            components=field_components
        )
