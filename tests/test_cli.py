"""CLI tests."""
import sys

import pytest

from bac_estimator.main import main


def test_cli_prints_estimates(capsys):
    code = main(["--weight", "180", "--height", "70", "--male", "--beer", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Current BAC: 0.000%" in out
    assert "Beers (12oz, 4.5%): 70" in out
    assert "Legal intoxication limit" in out


def test_cli_metric_female_shots(capsys):
    code = main(["--metric", "--weight", "70", "--height", "165", "--female", "--shot", "10", "--target", "0.05"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Current BAC: 0.003%" in out
    assert "0.05% BAC" in out


def test_cli_requires_gender(capsys):
    code = main(["--weight", "180", "--height", "70"])
    assert code == 1
    assert "required" in capsys.readouterr().err


def test_cli_graph_without_matplotlib(monkeypatch, tmp_path, capsys):
    monkeypatch.setitem(sys.modules, "matplotlib", None)
    code = main(["--weight", "180", "--height", "70", "--male", "--graph", str(tmp_path / "t.png")])
    assert code == 1
    assert "matplotlib" in capsys.readouterr().err


def test_cli_graph_saves_file(tmp_path, capsys):
    pytest.importorskip("matplotlib")
    path = tmp_path / "out" / "targets.png"
    code = main(["--weight", "180", "--height", "70", "--male", "--graph", str(path)])
    assert code == 0
    assert path.exists()


def test_cli_counts_above_slider_range(capsys):
    code = main(["--metric", "--weight", "70", "--height", "165", "--female", "--shot", "20"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Current BAC: 0.022%" in out


def test_cli_rejects_both_genders(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--weight", "180", "--height", "70", "--male", "--female"])
    assert exc.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_cli_rejects_negative_counts():
    with pytest.raises(SystemExit):
        main(["--weight", "180", "--height", "70", "--male", "--beer", "-1"])


def test_cli_prints_safety_and_resources(capsys):
    main(["--weight", "180", "--height", "70", "--male"])
    out = capsys.readouterr().out
    assert "Important Safety Information" in out
    assert "Never drink and drive" in out
    assert "800-662-4357" in out
    assert "aa.org" in out
    assert "naadac.org" in out
