"""Session state, advice and chart data tests."""
import pytest

from bac_estimator.advice import DISCLAIMER, get_advice, safety_info, target_warning
from bac_estimator.calculations import BodyMetrics
from bac_estimator.drinks import DrinkKind
from bac_estimator.graph import target_chart_data
from bac_estimator.session import SessionState


def configured():
    return SessionState(weight="180", height="70", units="imperial").with_gender("male")


def test_actions_return_new_state():
    s0 = SessionState()
    s1 = s0.add_drink("beer")
    assert s0.drinks == ()
    assert len(s1.drinks) == 1
    assert s1.drinks[0].kind is DrinkKind.BEER
    assert s1.drinks[0].count == 1
    with pytest.raises(Exception):
        s1.weight = 10


def test_set_count_clamps_to_slider_range():
    s = SessionState().add_drink("wine").add_drink("shot")
    assert s.set_drink_count(0, 25).drinks[0].count == 10
    assert s.set_drink_count(1, 0).drinks[1].count == 1
    assert s.set_drink_count(1, "4").drinks[1].count == 4
    with pytest.raises(IndexError):
        s.set_drink_count(5, 2)


def test_remove_and_clear():
    s = SessionState().add_drink("beer").add_drink("wine").add_drink("shot")
    removed = s.remove_drink(1)
    assert [d.kind.value for d in removed.drinks] == ["beer", "shot"]
    assert removed.clear_drinks().drinks == ()
    with pytest.raises(IndexError):
        removed.remove_drink(2)


def test_add_unknown_drink_raises():
    with pytest.raises(ValueError):
        SessionState().add_drink("mead")


def test_unavailable_until_complete():
    s = SessionState(weight="180", height="70")
    assert s.metrics() is None
    assert s.current_bac() is None
    assert s.drinks_for_target() is None
    s = s.with_gender("female")
    assert s.metrics() is not None
    assert s.current_bac() == 0.0
    assert s.drinks_for_target().wines == s.drinks_for_target().shots


def test_switch_units_converts_values():
    s = configured().switch_units("metric")
    assert s.units == "metric"
    assert s.weight == 81.6
    assert s.height == 177.8
    back = s.switch_units("imperial")
    assert back.weight == pytest.approx(180, abs=0.11)
    assert back.height == pytest.approx(70, abs=0.11)
    assert s.switch_units("metric") is s
    with pytest.raises(ValueError):
        s.switch_units("cubits")


def test_switch_units_drops_unparseable():
    s = SessionState(weight="", height="abc").switch_units("metric")
    assert s.weight is None
    assert s.height is None


def test_target_defaults_on_bad_value():
    s = SessionState().with_target("0.15")
    assert s.target_bac == 0.15
    assert s.with_target("bad").target_bac == 0.08


def test_dict_round_trip_and_malformed_input():
    s = configured().add_drink("beer").set_drink_count(0, 3).add_drink("shot").with_target(0.05)
    again = SessionState.from_dict(s.to_dict())
    assert again == s

    messy = SessionState.from_dict({
        "weight": {"x": 1},
        "units": "cubits",
        "gender": "other",
        "target_bac": -1,
        "drinks": [["beer", 2], ["mead", 1], "junk", ["shot", 99]],
    })
    assert messy.weight is None
    assert messy.units == "imperial"
    assert messy.gender is None
    assert messy.target_bac == 0.08
    assert [(d.kind.value, d.count) for d in messy.drinks] == [("beer", 2), ("shot", 10)]
    assert SessionState.from_dict(None) == SessionState()


def test_drink_count_total():
    s = SessionState().add_drink("beer").set_drink_count(0, 3).add_drink("wine")
    assert s.drink_count == 4


def test_advice_levels():
    assert get_advice(None) is None
    assert get_advice(0.0)["status"] == "none"
    assert get_advice(0.01)["status"] == "below_levels"
    high = get_advice(0.09)
    assert high["status"] == "level"
    assert high["level"] == 0.08
    assert high["over_legal_limit"] is True
    assert get_advice(0.06)["over_legal_limit"] is False
    assert high["disclaimer"] == DISCLAIMER
    assert "dangerous" in target_warning()


def test_target_chart_data():
    rows = target_chart_data(BodyMetrics(weight=180, height=70, gender="male"))
    assert [r["label"] for r in rows] == ["0.02", "0.05", "0.08", "0.10", "0.15"]
    assert rows[2]["beers"] == 70
    assert all(r["wines"] == r["shots"] for r in rows)
    assert target_chart_data(BodyMetrics(weight=180, height=70, gender=None)) == []


def test_safety_info():
    info = safety_info()
    assert "educational purposes only" in info["notice"]["message"]
    assert "legal drinking age" in info["notice"]["message"]
    assert [r["name"] for r in info["resources"]] == [
        "SAMHSA's National Helpline",
        "Alcoholics Anonymous",
        "National Association for Addiction Professionals",
    ]
    info["resources"].clear()
    assert len(safety_info()["resources"]) == 3
