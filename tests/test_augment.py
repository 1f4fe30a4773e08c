from __future__ import annotations

import csv
import io
import math

import pytest

from insolation import augment
from insolation.core.errors import LatitudeRangeError
from insolation.reference import solar
from insolation.reference.time_scales import centuries_since_epoch


_CSV = """station,date,latitude,tmax
A,2015-06-01,47.5,21.3
B,2015-06-01,NA,19.0
C,2015-06-01,95.0,18.2
D,2015-06-01,abc,17.1
E,2015-12-01T12:00:00Z,-33.9,28.4
F,2015-06-01,,20.0
"""


def test_parse_instant():
    d = augment.parse_instant("2015-06-01")
    assert d.tzinfo is not None and d.hour == 0
    assert augment.parse_instant("2015-06-01T12:00:00Z") == augment.parse_instant("2015-06-01T12:00:00")
    assert augment.parse_instant("2015-06-01T14:00:00+02:00") == augment.parse_instant("2015-06-01T12:00:00")

def test_latitude_radians():
    assert augment.latitude_radians(90.0) == math.pi / 2
    with pytest.raises(LatitudeRangeError):
        augment.latitude_radians(-90.5)
    with pytest.raises(ValueError):
        augment.latitude_radians(float("nan"))

def test_augment_csv_filters_and_appends():
    src = io.StringIO(_CSV)
    dst = io.StringIO()
    summary = augment.augment_csv(src, dst)

    assert summary == augment.AugmentSummary(rows_in=6, rows_out=2, rows_skipped=4)

    rows = list(csv.DictReader(io.StringIO(dst.getvalue())))
    assert [r["station"] for r in rows] == ["A", "E"]
    assert list(rows[0].keys()) == ["station", "date", "latitude", "tmax", "insolation_kwh_m2", "max_elevation_cos"]
    # original columns untouched
    assert rows[0]["tmax"] == "21.3"

    T = centuries_since_epoch(augment.parse_instant("2015-06-01"))
    lat = math.radians(47.5)
    assert float(rows[0]["insolation_kwh_m2"]) == pytest.approx(solar.insolation(T, lat), abs=1e-6)
    assert float(rows[0]["max_elevation_cos"]) == pytest.approx(solar.max_sun_elevation_cosine(T, lat), abs=1e-6)

    # southern summer is brighter than northern winter at similar |lat|
    assert float(rows[1]["insolation_kwh_m2"]) > 10.0

def test_augment_custom_columns():
    src = io.StringIO("day,lat\n2001-03-20,0\n")
    dst = io.StringIO()
    summary = augment.augment_csv(src, dst, date_col="day", lat_col="lat", digits=3)
    assert summary.rows_out == 1
    row = next(csv.DictReader(io.StringIO(dst.getvalue())))
    assert len(row["insolation_kwh_m2"].split(".")[1]) == 3

def test_augment_missing_column():
    with pytest.raises(KeyError):
        augment.augment_csv(io.StringIO("date,lon\n2001-01-01,3\n"), io.StringIO())

def test_augment_main(tmp_path, capsys):
    src = tmp_path / "weather.csv"
    dst = tmp_path / "weather_sun.csv"
    src.write_text(_CSV, encoding="utf-8")

    assert augment.main([str(src), str(dst)]) == 0
    out = capsys.readouterr().out
    assert "Rows written : 2" in out
    assert "Rows skipped : 4" in out
    assert dst.read_text(encoding="utf-8").startswith("station,date,latitude,tmax,insolation_kwh_m2,max_elevation_cos\n")

def test_augment_skips_bad_dates_and_short_rows():
    text = (
        "date,latitude,tmax\n"
        "2015-06-01,10,20.1\n"
        ",20,19.0\n"
        "2015-13-45,20,19.5\n"
        "NA,20,18.0\n"
        "2015-06-02\n"
        "2015-06-03,30\n"
        "2015-06-04,40,22.0,extra\n"
    )
    dst = io.StringIO()
    summary = augment.augment_csv(io.StringIO(text), dst)

    assert summary == augment.AugmentSummary(rows_in=7, rows_out=3, rows_skipped=4)
    rows = list(csv.DictReader(io.StringIO(dst.getvalue())))
    assert [r["date"] for r in rows] == ["2015-06-01", "2015-06-03", "2015-06-04"]
    # short row keeps an empty cell for the missing column
    assert rows[1]["tmax"] == ""
    assert all(r["insolation_kwh_m2"] for r in rows)

def test_augment_main_reports_skipped_dates(tmp_path, capsys):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    src.write_text("date,latitude\n2015-06-01,10\n,20\n2015-06-03,30\n", encoding="utf-8")

    assert augment.main([str(src), str(dst)]) == 0
    out = capsys.readouterr().out
    assert "Rows skipped : 1 (missing or invalid date or latitude)" in out
    assert len(dst.read_text(encoding="utf-8").splitlines()) == 3
