# tests/test_diagnostics.py

import pytest


def test_annual_cycle_shapes():
    np = pytest.importorskip("numpy")
    from insolation.diagnostics import annual_cycle

    doy, q = annual_cycle.build_cycle(np, 2004, [0.0, 60.0])
    assert doy[-1] == 366  # leap year
    assert q.shape == (2, 366)
    assert (q >= 0.0).all()
    # high latitude swings far more over the year than the equator
    assert np.ptp(q[1]) > 4 * np.ptp(q[0])

def test_annual_cycle_main_writes_png(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from insolation.diagnostics import annual_cycle

    out = tmp_path / "cycle.png"
    assert annual_cycle.main(["--year", "2001", "--lat", "0", "--lat", "70", "--out", str(out)]) == 0
    assert out.exists() and out.stat().st_size > 0
    assert "mean" in capsys.readouterr().out

def test_latitude_means():
    np = pytest.importorskip("numpy")
    scipy_integrate = pytest.importorskip("scipy.integrate")
    from insolation.diagnostics import latitude_means

    lats = [-90.0, -45.0, 0.0, 45.0, 90.0]
    means = latitude_means.annual_means(np, scipy_integrate.trapezoid, 2001, lats)
    assert means.shape == (5,)
    assert 9.5 < means[2] < 10.4
    # equator receives more over a year than the poles or midlatitudes
    assert means[2] > means[1] > means[0]
    assert means[2] > means[3] > means[4]

    mar, sep = latitude_means.equinox_values(2001, lats)
    assert mar[2] / means[2] == pytest.approx(1.0, abs=0.08)

def test_latitude_means_main(capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("scipy")
    from insolation.diagnostics import latitude_means

    assert latitude_means.main(["--step", "30"]) == 0
    out = capsys.readouterr().out
    assert "Annual mean insolation, 2001" in out
    # rows for both poles
    assert " -90.0 " in out
    assert "  90.0 " in out

def test_require_ephemeris_missing(monkeypatch):
    import sys
    from insolation.core.errors import OptionalDependencyError
    from insolation.ephemeris import require_ephemeris

    monkeypatch.setitem(sys.modules, "skyfield", None)
    with pytest.raises(OptionalDependencyError, match="insolation\\[ephemeris\\]"):
        require_ephemeris()

def test_validate_declination_rejects_range_outside_de421():
    from insolation.diagnostics.ephem import validate_declination

    with pytest.raises(SystemExit):
        validate_declination.main(["--year-start", "1800"])
    with pytest.raises(SystemExit):
        validate_declination.main(["--year-start", "2000", "--year-end", "1990"])
