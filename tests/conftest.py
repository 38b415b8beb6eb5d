from datetime import datetime, timezone

import numpy as np
import pytest

from geomag.models.model import Model, ModelKind, ModelSet


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def igrf13():
    """Built-in IGRF-13 model set."""
    return ModelSet.default()


@pytest.fixture
def dipole_set():
    """Three snapshots with a drifting axial dipole plus secular variation."""
    def dipole(g10, g11=0.0, h11=0.0):
        coefficients = np.zeros(3)
        coefficients[:] = [g10, g11, h11]
        return coefficients

    return ModelSet([
        Model(2000.0, ModelKind.DEFINITIVE, dipole(-30000.0, -1500.0, 5000.0)),
        Model(2005.0, ModelKind.DEFINITIVE, dipole(-29900.0, -1550.0, 4900.0)),
        Model(2010.0, ModelKind.PREDICTIVE, dipole(-29800.0, -1600.0, 4800.0)),
        Model(2015.0, ModelKind.SECULAR_VARIATION, dipole(10.0, -5.0, -20.0)),
    ])
