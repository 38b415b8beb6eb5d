import bisect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from geomag.exceptions import (
    EmptyModelSetError,
    EpochOutOfRangeError,
    MalformedCoefficientFileError,
)
from geomag.utils.time import EpochLike, to_fractional_years

logger = logging.getLogger(__name__)

MAX_DEGREE = 13
COEFFICIENT_SIZE = MAX_DEGREE * (MAX_DEGREE + 2) + 1


class ModelKind(Enum):
    """Kind of a coefficient snapshot. Values are the coefficient-file labels."""
    DEFINITIVE = "DGRF"
    PREDICTIVE = "IGRF"
    SECULAR_VARIATION = "SV"
    INTERPOLATED = "interpolated"
    EXTRAPOLATED = "extrapolated"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> 'ModelKind':
        """Map a 'c/s' column label to a kind; unknown labels map to UNKNOWN."""
        for kind in (cls.DEFINITIVE, cls.PREDICTIVE, cls.SECULAR_VARIATION):
            if kind.value == label.upper():
                return kind
        return cls.UNKNOWN


def coefficient_index(row: str, n: int, m: int) -> int:
    """
    Position of a Gauss coefficient in the flat coefficient array.

    Args:
        row: 'g' or 'h'
        n: degree, 1..MAX_DEGREE
        m: order, 0..n

    Returns:
        Zero-based index into Model.coefficients
    """
    base = n * n - 1
    if m == 0:
        return base
    return base + 2 * m - (1 if row == 'g' else 0)


def _as_coefficients(values: Sequence[float]) -> np.ndarray:
    values = np.asarray(values, dtype=float).ravel()
    if values.size > COEFFICIENT_SIZE:
        raise ValueError(f"Expected at most {COEFFICIENT_SIZE} coefficients, got {values.size}")
    coefficients = np.zeros(COEFFICIENT_SIZE)
    coefficients[:values.size] = values
    coefficients.flags.writeable = False
    return coefficients


@dataclass(frozen=True, eq=False)
class Model:
    """Gauss coefficients of one model snapshot."""
    epoch: float                # Fractional year
    kind: ModelKind
    coefficients: np.ndarray = field(default_factory=lambda: _as_coefficients(()))  # [nT] or [nT/yr]

    def __post_init__(self):
        object.__setattr__(self, 'epoch', float(self.epoch))
        object.__setattr__(self, 'coefficients', _as_coefficients(self.coefficients))

    @property
    def is_secular_variation(self) -> bool:
        return self.kind is ModelKind.SECULAR_VARIATION

    def g(self, n: int, m: int) -> float:
        """g(n, m) coefficient."""
        return float(self.coefficients[coefficient_index('g', n, m)])

    def h(self, n: int, m: int) -> float:
        """h(n, m) coefficient; zero for m == 0."""
        if m == 0:
            return 0.0
        return float(self.coefficients[coefficient_index('h', n, m)])

    def __repr__(self) -> str:
        return f"Model(epoch={self.epoch}, kind={self.kind.name})"


class ModelSet:
    """
    Ordered, immutable sequence of model snapshots.

    The secular variation snapshot, if present, must be the last element.
    Its coefficients are annual rates relative to the preceding snapshot.
    """

    def __init__(self, models: Optional[Sequence[Model]] = None):
        """
        Initialize a model set.

        Args:
            models: Snapshots ordered by epoch. When omitted the built-in
                IGRF-13 coefficients are used.
        """
        if models is None:
            models = _default_models()
        self._models: Tuple[Model, ...] = tuple(models)
        self._validate()
        self._core = tuple(m for m in self._models if not m.is_secular_variation)
        self._core_epochs = [m.epoch for m in self._core]
        logger.debug(f"Model set created with {len(self._models)} snapshots")

    @classmethod
    def default(cls) -> 'ModelSet':
        """Built-in IGRF-13 model set."""
        return cls(_default_models())

    @classmethod
    def from_file(cls, path) -> 'ModelSet':
        """Read a model set from an IAGA coefficient file."""
        from geomag.models.coefficient_file import read_model_set
        return read_model_set(path)

    def _validate(self):
        for i, model in enumerate(self._models):
            if model.is_secular_variation and i != len(self._models) - 1:
                raise MalformedCoefficientFileError(
                    "Secular variation must be the last model of the set")
        epochs = [m.epoch for m in self._models if not m.is_secular_variation]
        for previous, current in zip(epochs, epochs[1:]):
            if current <= previous:
                raise MalformedCoefficientFileError(
                    f"Model epochs must strictly increase ({previous} >= {current})")

    def select(self, epoch: EpochLike) -> Tuple[Model, Model]:
        """
        Select the snapshots straddling an epoch.

        Args:
            epoch: Requested time (datetime or fractional year)

        Returns:
            (last, next). next is the secular variation snapshot when the
            epoch lies beyond the last definitive/predictive snapshot.
        """
        if not self._models:
            raise EmptyModelSetError()
        t = to_fractional_years(epoch)

        if not self._core:
            raise EpochOutOfRangeError(t, self._models[0].epoch, self._models[0].epoch)
        first, last = self._core_epochs[0], self._core_epochs[-1]
        if t < first:
            raise EpochOutOfRangeError(t, first, last)

        if t > last:
            sv = self.secular_variation
            if sv is None:
                raise EpochOutOfRangeError(t, first, last)
            logger.debug(f"Epoch {t:.4f} beyond {last:.4f}, using secular variation")
            return self._core[-1], sv

        i = bisect.bisect_left(self._core_epochs, t)
        if i == 0:
            if len(self._models) == 1:
                return self._core[0], self._core[0]
            return self._core[0], self._models[1]
        return self._core[i - 1], self._core[i]

    @property
    def secular_variation(self) -> Optional[Model]:
        if self._models and self._models[-1].is_secular_variation:
            return self._models[-1]
        return None

    @property
    def epochs(self) -> List[float]:
        return [m.epoch for m in self._models]

    @property
    def span(self) -> Tuple[float, float]:
        """First and last definitive/predictive epoch."""
        if not self._core:
            raise EmptyModelSetError()
        return self._core_epochs[0], self._core_epochs[-1]

    def __len__(self) -> int:
        return len(self._models)

    def __getitem__(self, index: int) -> Model:
        return self._models[index]

    def __iter__(self) -> Iterator[Model]:
        return iter(self._models)

    def __repr__(self) -> str:
        return f"ModelSet({len(self._models)} models)"


def _default_models() -> List[Model]:
    from geomag.models.igrf13 import IGRF13
    return [Model(epoch, ModelKind.from_label(label), coefficients)
            for epoch, label, coefficients in IGRF13]
