# tests/test_cli.py

import pytest

from insolation import cli


def test_solar_polar_day(capsys):
    assert cli.main(["solar", "--date", "2000-06-21", "--lat", "80"]) == 0
    out = capsys.readouterr().out
    assert "Polar day: sun does not set." in out
    assert "Insolation" in out

def test_solar_polar_night_southern(capsys):
    assert cli.main(["solar", "--date", "2000-06-21T12:00:00", "--lat", "-80"]) == 0
    out = capsys.readouterr().out
    assert "Polar night: sun does not rise." in out
    assert "= 0.000000 kWh/m^2/day" in out

def test_solar_default_is_j2000(capsys):
    assert cli.main(["solar"]) == 0
    out = capsys.readouterr().out
    assert "T (Julian centuries from J2000.0) = 0.000000000000" in out
    assert "Day length                 = 12.0000 h" in out

def test_solar_rejects_bad_latitude():
    with pytest.raises(SystemExit) as exc:
        cli.main(["solar", "--lat", "95"])
    assert exc.value.code == 2

def test_args_at_epoch(capsys):
    assert cli.main(["args"]) == 0
    out = capsys.readouterr().out
    assert "eps    = 23.4392911111" in out
    assert "e      = 0.0167086170" in out
    assert "UTC = 2000-01-01T12:00:00+00:00" in out

def test_args_from_date(capsys):
    assert cli.main(["args", "--date", "2100-01-01T12:00:00"]) == 0
    out = capsys.readouterr().out
    assert "T (Julian centuries from J2000.0) = 1.000000000000" in out

def test_augment_subcommand(tmp_path, capsys):
    src = tmp_path / "in.csv"
    dst = tmp_path / "out.csv"
    src.write_text("date,latitude\n2010-01-01,10\n2010-01-02,-100\n", encoding="utf-8")
    assert cli.main(["augment", str(src), str(dst)]) == 0
    assert "Rows skipped : 1" in capsys.readouterr().out
    assert len(dst.read_text(encoding="utf-8").splitlines()) == 2

def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["nope"])

def test_solar_rejects_bad_date(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["solar", "--date", "2015-02-30"])
    assert exc.value.code == 2
    assert "invalid --date" in capsys.readouterr().err

def test_args_rejects_bad_date(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["args", "--date", "yesterday"])
    assert exc.value.code == 2
    assert "invalid --date" in capsys.readouterr().err
