"""
Reader and writer for IAGA IGRF coefficient files.

Layout of the files distributed at https://www.ngdc.noaa.gov/IAGA/vmod/:

    # comment lines
    c/s   IGRF  ...  DGRF  ...  IGRF     SV
    g/h n m 1900.0 ... 1945.0 ... 2020.0 2020-25
    g  1  0 -31543 ... -30594 ... -29404.8  5.7
    h  1  1   5922 ...   5810 ...   4652.5 -25.9
"""

import logging
import os
from typing import IO, List, Optional, Union

import numpy as np

from geomag.exceptions import MalformedCoefficientFileError
from geomag.models.model import (
    COEFFICIENT_SIZE,
    MAX_DEGREE,
    Model,
    ModelKind,
    ModelSet,
    coefficient_index,
)

logger = logging.getLogger(__name__)

COMMENT_HEADER = "#"
KIND_HEADER = "c/s"
EPOCH_HEADER = "g/h"
G_HEADER = "g"
H_HEADER = "h"


def parse_epoch(token: str) -> float:
    """
    Parse a column epoch.

    'yyyy.y' is read as is; a range 'yyyy-yy' uses its lower bound only,
    so '2020-25' is 2020.0.
    """
    lower = token.split("-", 1)[0] if "-" in token[1:] else token
    return float(lower)


def read_model_set(source: Union[str, os.PathLike, IO[str]]) -> ModelSet:
    """
    Read a model set from a coefficient file.

    Args:
        source: Path or open text stream

    Returns:
        ModelSet with one snapshot per column
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r", encoding="utf-8") as stream:
            model_set = _read(stream)
        logger.info(f"Loaded {len(model_set)} models from {source}")
        return model_set
    return _read(source)


def _read(stream: IO[str]) -> ModelSet:
    kinds: Optional[List[ModelKind]] = None
    epochs: Optional[List[float]] = None
    coefficients: Optional[np.ndarray] = None
    rows = 0

    for line_number, line in enumerate(stream, start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith(COMMENT_HEADER):
            continue
        header = tokens[0]

        if header == KIND_HEADER:
            kinds = []
            for label in tokens[1:]:
                kind = ModelKind.from_label(label)
                if kind is ModelKind.UNKNOWN:
                    raise MalformedCoefficientFileError(f"Unknown model kind {label!r}", line_number)
                kinds.append(kind)
            if not kinds:
                raise MalformedCoefficientFileError("No model kinds listed", line_number)
            coefficients = np.zeros((len(kinds), COEFFICIENT_SIZE))

        elif header == EPOCH_HEADER:
            if kinds is None:
                raise MalformedCoefficientFileError("Epoch row before the 'c/s' row", line_number)
            epochs = []
            for token in tokens[3:]:
                try:
                    epochs.append(parse_epoch(token))
                except ValueError:
                    raise MalformedCoefficientFileError(f"Invalid epoch {token!r}", line_number)
            if len(epochs) != len(kinds):
                raise MalformedCoefficientFileError(
                    f"{len(epochs)} epochs for {len(kinds)} models", line_number)

        elif header in (G_HEADER, H_HEADER):
            if kinds is None or epochs is None:
                raise MalformedCoefficientFileError(
                    "Coefficient row before the 'c/s' and 'g/h' rows", line_number)
            index = _row_index(header, tokens, line_number)
            values = tokens[3:]
            if len(values) > len(kinds):
                raise MalformedCoefficientFileError(
                    f"{len(values)} values for {len(kinds)} models", line_number)
            for column, cell in enumerate(values):
                try:
                    coefficients[column, index] = float(cell)
                except ValueError:
                    logger.debug(f"Line {line_number}: skipped cell {cell!r} in column {column}")
            rows += 1

        else:
            logger.debug(f"Line {line_number}: ignored row {header!r}")

    if kinds is None:
        raise MalformedCoefficientFileError("Missing 'c/s' model kind row")
    if epochs is None:
        raise MalformedCoefficientFileError("Missing 'g/h' epoch row")
    if rows == 0:
        raise MalformedCoefficientFileError("No coefficient rows")

    return ModelSet([Model(epoch, kind, values)
                     for epoch, kind, values in zip(epochs, kinds, coefficients)])


def _row_index(header: str, tokens: List[str], line_number: int) -> int:
    if len(tokens) < 3:
        raise MalformedCoefficientFileError("Coefficient row without degree and order", line_number)
    try:
        n, m = int(tokens[1]), int(tokens[2])
    except ValueError:
        raise MalformedCoefficientFileError(
            f"Invalid degree/order {tokens[1]!r} {tokens[2]!r}", line_number)
    if not (1 <= n <= MAX_DEGREE and 0 <= m <= n):
        raise MalformedCoefficientFileError(f"Degree/order ({n}, {m}) out of range", line_number)
    if header == H_HEADER and m == 0:
        raise MalformedCoefficientFileError(f"h({n}, 0) does not exist", line_number)
    return coefficient_index(header, n, m)


def write_model_set(model_set: ModelSet, stream: IO[str],
                    max_degree: int = MAX_DEGREE,
                    comment: Optional[str] = None):
    """
    Write a model set in the coefficient-file layout.

    Args:
        model_set: Snapshots to write, secular variation last
        stream: Open text stream
        max_degree: Highest degree written
        comment: Optional comment line
    """
    models = list(model_set)
    for model in models:
        if ModelKind.from_label(model.kind.value) is ModelKind.UNKNOWN:
            raise ValueError(f"{model.kind.name} models cannot be written to a coefficient file")
    if comment:
        stream.write(f"{COMMENT_HEADER} {comment}\n")
    stream.write(" ".join([KIND_HEADER, "", ""] + [m.kind.value for m in models]) + "\n")
    stream.write(" ".join([EPOCH_HEADER, "n", "m"] + _epoch_labels(models)) + "\n")

    for n in range(1, max_degree + 1):
        for m in range(n + 1):
            rows = [G_HEADER] if m == 0 else [G_HEADER, H_HEADER]
            for row in rows:
                index = coefficient_index(row, n, m)
                cells = [_format_value(model.coefficients[index]) for model in models]
                stream.write(" ".join([row, str(n), str(m)] + cells) + "\n")


def _epoch_labels(models: List[Model]) -> List[str]:
    labels = []
    for i, model in enumerate(models):
        if model.is_secular_variation and i > 0:
            start = models[i - 1].epoch
            end = model.epoch if model.epoch > start else start + 5.0
            first = f"{start:.0f}" if start.is_integer() else _format_epoch(start)
            labels.append(f"{first}-{int(round(end)) % 100:02d}")
        else:
            labels.append(_format_epoch(model.epoch))
    return labels


def _format_epoch(epoch: float) -> str:
    label = f"{epoch:.1f}"
    return label if float(label) == epoch else repr(epoch)


def _format_value(value: float) -> str:
    return f"{value:.10g}"
