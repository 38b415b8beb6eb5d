import io

import numpy as np
import pytest

from geomag.exceptions import MalformedCoefficientFileError
from geomag.models.coefficient_file import parse_epoch, read_model_set, write_model_set
from geomag.models.model import Model, ModelKind, ModelSet, coefficient_index

SAMPLE = """\
# 13th Generation International Geomagnetic Reference Field (excerpt)
# Schmidt semi-normalised spherical harmonic coefficients, degree n=1,13
# in units nanoTesla for IGRF and definitive DGRF main-field models
c/s DGRF DGRF IGRF SV
g/h n m 2010.0 2015.0 2020.0 2020-25
g 1 0 -29496.57 -29441.46 -29404.8 5.7
g 1 1 -1586.42 -1501.77 -1450.9 7.4
h 1 1 4944.26 4795.99 4652.5 -25.9
g 2 0 -2396.06 -2445.88 -2499.6 -11.0
g 2 1 3026.34 3012.2 2982.0 -7.0
h 2 1 -2708.54 -2845.41 -2991.6 -30.2
"""


def read(text):
    return read_model_set(io.StringIO(text))


def test_parse_epoch():
    assert parse_epoch("1900.0") == 1900.0
    assert parse_epoch("2020-25") == 2020.0
    assert parse_epoch("2017.5") == 2017.5


def test_read_sample():
    model_set = read(SAMPLE)
    assert model_set.epochs == [2010.0, 2015.0, 2020.0, 2020.0]
    assert [m.kind for m in model_set] == [ModelKind.DEFINITIVE, ModelKind.DEFINITIVE,
                                           ModelKind.PREDICTIVE, ModelKind.SECULAR_VARIATION]
    model = model_set[2]
    assert model.g(1, 0) == -29404.8
    assert model.h(1, 1) == 4652.5
    assert model.g(2, 1) == 2982.0
    assert model.h(2, 1) == -2991.6
    assert model.g(2, 2) == 0.0
    assert model_set.secular_variation.g(1, 1) == 7.4


def test_rows_in_any_order():
    lines = SAMPLE.splitlines()
    shuffled = "\n".join(lines[:5] + list(reversed(lines[5:]))) + "\n"
    a, b = read(SAMPLE), read(shuffled)
    for x, y in zip(a, b):
        np.testing.assert_array_equal(x.coefficients, y.coefficients)


def test_unparsable_cell_keeps_column():
    text = SAMPLE.replace("g 1 1 -1586.42 -1501.77", "g 1 1 -1586.42 n/a")
    model_set = read(text)
    assert model_set[1].g(1, 1) == 0.0
    assert model_set[2].g(1, 1) == -1450.9
    assert model_set[3].g(1, 1) == 7.4


def test_short_row_leaves_trailing_models_zero():
    text = SAMPLE.replace("g 2 0 -2396.06 -2445.88 -2499.6 -11.0", "g 2 0 -2396.06")
    model_set = read(text)
    assert model_set[0].g(2, 0) == -2396.06
    assert model_set[3].g(2, 0) == 0.0


def test_read_path(tmp_path):
    path = tmp_path / "coeffs.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert len(read_model_set(path)) == 4
    assert len(read_model_set(str(path))) == 4
    assert len(ModelSet.from_file(path)) == 4


@pytest.mark.parametrize("text, message", [
    ("", "c/s"),
    ("# only comments\n", "c/s"),
    ("c/s DGRF\ng 1 0 1.0\n", "before"),
    ("g/h n m 2000.0\n", "before"),
    ("c/s DGRF XGRF\ng/h n m 2000.0 2005.0\n", "XGRF"),
    ("c/s DGRF IGRF\ng/h n m 2000.0\n", "1 epochs for 2 models"),
    ("c/s DGRF\ng/h n m year\n", "year"),
    ("c/s DGRF\n", "g/h"),
    ("c/s DGRF\ng/h n m 2000.0\n", "No coefficient rows"),
    ("c/s DGRF\ng/h n m 2000.0\ng 1 0 1.0 2.0\n", "2 values"),
    ("c/s DGRF\ng/h n m 2000.0\ng 14 0 1.0\n", "out of range"),
    ("c/s DGRF\ng/h n m 2000.0\ng 2 3 1.0\n", "out of range"),
    ("c/s DGRF\ng/h n m 2000.0\nh 1 0 1.0\n", "h\\(1, 0\\)"),
    ("c/s DGRF\ng/h n m 2000.0\ng one 0 1.0\n", "degree/order"),
    ("c/s SV DGRF\ng/h n m 2000.0 2005.0\ng 1 0 1.0 2.0\n", "Secular"),
])
def test_malformed(text, message):
    with pytest.raises(MalformedCoefficientFileError, match=message):
        read(text)


def test_malformed_reports_line_number():
    with pytest.raises(MalformedCoefficientFileError) as info:
        read("# header\nc/s DGRF\ng/h n m 2000.0\ng 0 0 1.0\n")
    assert info.value.line_number == 4


def test_write_round_trip(igrf13):
    stream = io.StringIO()
    write_model_set(igrf13, stream, comment="IGRF-13")
    text = stream.getvalue()
    lines = text.splitlines()
    assert lines[0] == "# IGRF-13"
    assert lines[1].split()[1:4] == ["IGRF", "IGRF", "IGRF"]
    assert lines[2].split()[-2:] == ["2020.0", "2020-25"]
    assert len(lines) == 3 + 195

    model_set = read(text)
    assert len(model_set) == len(igrf13)
    for original, restored in zip(igrf13, model_set):
        assert original.kind is restored.kind
        np.testing.assert_array_equal(original.coefficients, restored.coefficients)
    assert model_set.epochs[:-1] == igrf13.epochs[:-1]


def test_write_truncated():
    model_set = ModelSet([Model(2000.0, ModelKind.DEFINITIVE, [1.0, 2.0, 3.0, 4.0])])
    stream = io.StringIO()
    write_model_set(model_set, stream, max_degree=2)
    rows = stream.getvalue().splitlines()[2:]
    assert rows[:4] == ["g 1 0 1", "g 1 1 2", "h 1 1 3", "g 2 0 4"]
    assert len(rows) == 8


def test_write_fractional_epoch():
    model_set = ModelSet([Model(2017.25, ModelKind.PREDICTIVE, [1.0])])
    stream = io.StringIO()
    write_model_set(model_set, stream, max_degree=1)
    assert read(stream.getvalue()).epochs == [2017.25]


def test_write_rejects_synthesized_models(igrf13):
    from geomag.models.synthesis import synthesize_model

    model_set = ModelSet([synthesize_model(igrf13, 2017.0)])
    with pytest.raises(ValueError):
        write_model_set(model_set, io.StringIO())


def test_index_matches_file_order():
    order = []
    for n in range(1, 14):
        for m in range(n + 1):
            order.append(coefficient_index("g", n, m))
            if m:
                order.append(coefficient_index("h", n, m))
    assert order == list(range(195))


def test_write_fractional_epoch_before_secular_variation():
    model_set = ModelSet([
        Model(2012.0, ModelKind.DEFINITIVE, [1.0]),
        Model(2017.5, ModelKind.PREDICTIVE, [2.0]),
        Model(2022.5, ModelKind.SECULAR_VARIATION, [0.1]),
    ])
    stream = io.StringIO()
    write_model_set(model_set, stream, max_degree=1)
    assert stream.getvalue().splitlines()[1].split()[-3:] == ["2012.0", "2017.5", "2017.5-22"]

    restored = read(stream.getvalue())
    assert restored.epochs == [2012.0, 2017.5, 2017.5]
    assert restored.secular_variation.g(1, 0) == 0.1
