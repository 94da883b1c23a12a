"""BAC Estimator Flask app.

Run from project root:
    python app.py
"""

import logging
import os
from typing import Any

from flask import Flask, jsonify, request, session as flask_session

from bac_estimator import units as unit_conv
from bac_estimator.advice import get_advice, safety_info, target_warning
from bac_estimator.calculations import (
    BodyMetrics,
    estimate_current_bac,
    estimate_drinks_for_target,
    parse_positive,
)
from bac_estimator.drinks import Drink, list_drink_kinds, parse_count, parse_kind
from bac_estimator.levels import DEFAULT_TARGET_BAC, list_levels
from bac_estimator.session import SessionState

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SECRET_KEY"] = os.environ.get("APP_SECRET_KEY", "dev-only-change-me")
app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SECURE"] = os.environ.get("SESSION_COOKIE_SECURE", "0") == "1"

SESSION_KEY = "bac_estimator"
MAX_DRINK_ENTRIES = 50


def _bad_request(message: str):
    logger.warning("rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), 400


def _json_body() -> dict[str, Any] | None:
    """Request JSON as a dict; {} when absent, None when not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def get_state() -> SessionState:
    return SessionState.from_dict(flask_session.get(SESSION_KEY))


def set_state(state: SessionState) -> None:
    flask_session[SESSION_KEY] = state.to_dict()


def _results_payload(metrics: BodyMetrics | None, drinks, target_bac: float) -> dict[str, Any]:
    bac = estimate_current_bac(metrics, drinks)
    targets = estimate_drinks_for_target(metrics, target_bac)
    available = bac is not None
    return {
        "available": available,
        "current_bac": round(bac, 4) if available else None,
        "target_bac": target_bac,
        "drinks_for_target": targets.to_dict() if targets is not None else None,
        "target_warning": target_warning() if targets is not None else None,
        "advice": get_advice(bac),
        "safety": safety_info(),
    }


def _state_payload(state: SessionState) -> dict[str, Any]:
    return {
        **state.to_dict(),
        "unit_labels": unit_conv.unit_labels(state.units),
        "drink_count": state.drink_count,
        **_results_payload(state.metrics(), state.drinks, state.target_bac),
    }


def _parse_drinks(raw: Any) -> list[Drink] | None:
    if raw is None:
        return []
    if not isinstance(raw, list) or len(raw) > MAX_DRINK_ENTRIES:
        return None
    drinks = []
    for item in raw:
        if not isinstance(item, dict):
            return None
        try:
            kind = parse_kind(item.get("kind"))
            count = parse_count(item.get("count", 1))
            drinks.append(Drink(kind, count))
        except (TypeError, ValueError):
            return None
    return drinks


@app.route("/healthz")
def healthz():
    return jsonify({"ok": True})


@app.route("/api/levels")
def api_levels():
    return jsonify({"levels": list_levels(), "default": DEFAULT_TARGET_BAC})


@app.route("/api/drink-kinds")
def api_drink_kinds():
    return jsonify({"drink_kinds": list_drink_kinds()})


@app.route("/api/resources")
def api_resources():
    return jsonify(safety_info())


@app.route("/api/convert", methods=["POST"])
def api_convert():
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    value = parse_positive(data.get("value"))
    if value is None:
        return _bad_request("value must be a positive number")
    try:
        converted = unit_conv.convert(
            value,
            str(data.get("from", "")),
            str(data.get("to", "")),
            str(data.get("dimension", "")),
        )
    except ValueError as exc:
        return _bad_request(str(exc))
    return jsonify({"value": converted})


@app.route("/api/estimate", methods=["POST"])
def api_estimate():
    """Stateless estimate from a full form payload."""
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    units = data.get("units", unit_conv.IMPERIAL)
    if units not in unit_conv.UNIT_SYSTEMS:
        return _bad_request("units must be imperial or metric")
    drinks = _parse_drinks(data.get("drinks"))
    if drinks is None:
        return _bad_request("drinks must be a list of {kind, count} with kind beer, wine or shot")
    target = parse_positive(data.get("target_bac"))
    metrics = BodyMetrics.from_raw(data.get("weight"), data.get("height"), data.get("gender"), units)
    payload = _results_payload(metrics, drinks, target if target is not None else DEFAULT_TARGET_BAC)
    payload["unit_labels"] = unit_conv.unit_labels(units)
    return jsonify(payload)


@app.route("/api/state")
def api_state():
    return jsonify(_state_payload(get_state()))


@app.route("/api/profile", methods=["POST"])
def api_profile():
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    state = get_state()
    if "weight" in data:
        state = state.with_weight(data["weight"])
    if "height" in data:
        state = state.with_height(data["height"])
    if "gender" in data:
        state = state.with_gender(data["gender"])
    if "target_bac" in data:
        state = state.with_target(data["target_bac"])
    set_state(state)
    logger.info("profile updated (units=%s complete=%s)", state.units, state.metrics() is not None)
    return jsonify(_state_payload(state))


@app.route("/api/units", methods=["POST"])
def api_units():
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    units = str(data.get("units", "")).strip().lower()
    if units not in unit_conv.UNIT_SYSTEMS:
        return _bad_request("units must be imperial or metric")
    state = get_state().switch_units(units)
    set_state(state)
    logger.info("units switched to %s", units)
    return jsonify(_state_payload(state))


@app.route("/api/drink", methods=["POST"])
def api_drink():
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    state = get_state()
    if len(state.drinks) >= MAX_DRINK_ENTRIES:
        return _bad_request(f"at most {MAX_DRINK_ENTRIES} drink entries")
    try:
        state = state.add_drink(data.get("kind"))
    except ValueError:
        return _bad_request("kind must be beer, wine or shot")
    set_state(state)
    logger.info("drink added: %s", state.drinks[-1].kind.value)
    return jsonify(_state_payload(state))


@app.route("/api/drink/<int:index>", methods=["POST"])
def api_drink_count(index: int):
    data = _json_body()
    if data is None:
        return _bad_request("request body must be a JSON object")
    try:
        state = get_state().set_drink_count(index, data.get("count"))
    except IndexError as exc:
        return _bad_request(str(exc))
    set_state(state)
    return jsonify(_state_payload(state))


@app.route("/api/drink/<int:index>/remove", methods=["POST"])
def api_drink_remove(index: int):
    try:
        state = get_state().remove_drink(index)
    except IndexError as exc:
        return _bad_request(str(exc))
    set_state(state)
    logger.info("drink %d removed", index)
    return jsonify(_state_payload(state))


@app.route("/api/reset", methods=["POST"])
def api_reset():
    state = get_state().clear_drinks()
    set_state(state)
    return jsonify(_state_payload(state))


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "0") == "1")
