"""
Temporal synthesis of Gauss coefficients.
"""

import logging

from geomag.models.model import Model, ModelKind, ModelSet
from geomag.utils.time import EpochLike, to_fractional_years

logger = logging.getLogger(__name__)


def interpolate_model(epoch: float, last: Model, next: Model) -> Model:
    """
    Linearly interpolate between two snapshots.

    Args:
        epoch: Fractional year, normally last.epoch <= epoch <= next.epoch
        last: Snapshot before the epoch
        next: Snapshot after the epoch
    """
    span = next.epoch - last.epoch
    if span == 0.0:
        coefficients = last.coefficients.copy()
    else:
        # Weighted form is exact at both endpoints
        fraction = (epoch - last.epoch) / span
        coefficients = (1.0 - fraction) * last.coefficients + fraction * next.coefficients
    return Model(epoch, ModelKind.INTERPOLATED, coefficients)


def extrapolate_model(epoch: float, last: Model, secular_variation: Model) -> Model:
    """
    Linearly extrapolate a snapshot using secular variation as annual rate.

    Args:
        epoch: Fractional year
        last: Latest definitive/predictive snapshot
        secular_variation: Annual rates [nT/yr]
    """
    years = epoch - last.epoch
    coefficients = last.coefficients + years * secular_variation.coefficients
    return Model(epoch, ModelKind.EXTRAPOLATED, coefficients)


def synthesize_model(model_set: ModelSet, epoch: EpochLike) -> Model:
    """Build the coefficients valid at an epoch from a model set."""
    t = to_fractional_years(epoch)
    last, next = model_set.select(t)
    if next.is_secular_variation:
        logger.debug(f"Extrapolating {last.epoch:.1f} model to {t:.4f}")
        return extrapolate_model(t, last, next)
    logger.debug(f"Interpolating {last.epoch:.1f}-{next.epoch:.1f} models at {t:.4f}")
    return interpolate_model(t, last, next)
