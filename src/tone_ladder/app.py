from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Mapping

from flask import Flask, Response, jsonify, request

from . import DEFAULTS
from .config import DEFAULT_CONFIG, EngineConfig
from .diagnostics import compare_modes
from .errors import InvalidArgument, InvalidColorFormat, ToneLadderError
from .export import css_variables, token_prefix
from .ramp import RampRequest, ToneLadder

log = logging.getLogger(__name__)


def parse_number(args: Mapping[str, str], name: str, cast: type) -> Any:
    raw = args.get(name)
    if raw is None or raw.strip() == "":
        return DEFAULTS[name]
    try:
        return cast(raw)
    except ValueError:
        raise InvalidArgument(name, raw, f"Expected {cast.__name__}") from None


def request_from_args(args: Mapping[str, str], config: EngineConfig) -> RampRequest:
    """Build a validated RampRequest from query parameters, defaults filling gaps."""
    return RampRequest.create(
        args.get("base") or DEFAULTS["base_hex"],
        parse_number(args, "temperature", float),
        parse_number(args, "steps", int),
        (args.get("mode") or DEFAULTS["mode"]).strip().lower(),
        config,
    )


def _error(exc: ToneLadderError):
    body: dict[str, Any] = {"error": str(exc)}
    if isinstance(exc, InvalidArgument):
        body["parameter"] = exc.parameter
    elif isinstance(exc, InvalidColorFormat):
        body["parameter"] = "base"
    return jsonify(body), 400


# ----------------------------- Flask app ----------------------------------


def create_app(config_overrides: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.update(ENGINE_CONFIG=DEFAULT_CONFIG)
    if config_overrides:
        app.config.update(config_overrides)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def ladder() -> ToneLadder:
        return ToneLadder(config=app.config["ENGINE_CONFIG"])

    @app.route("/modes")
    def modes():
        engine: EngineConfig = app.config["ENGINE_CONFIG"]
        return jsonify({name: asdict(m) for name, m in engine.modes.items()})

    @app.route("/ramp")
    def ramp():
        try:
            req = request_from_args(request.args, app.config["ENGINE_CONFIG"])
        except ToneLadderError as exc:
            return _error(exc)
        try:
            palette = ladder().ramp(req.base_hex, req.temperature, req.steps, req.mode)
        except Exception as exc:
            log.exception("Ramp generation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify({"request": asdict(req), "ramp": palette})

    @app.route("/compare")
    def compare():
        args = request.args.to_dict()
        args.setdefault("mode", DEFAULTS["mode"])
        try:
            req = request_from_args(args, app.config["ENGINE_CONFIG"])
            result = compare_modes(
                req.base_hex,
                req.temperature,
                req.steps,
                config=app.config["ENGINE_CONFIG"],
            )
        except ToneLadderError as exc:
            return _error(exc)
        return jsonify(
            {
                "base": req.base_hex,
                "temperature": req.temperature,
                "steps": req.steps,
                "conservative": result.conservative.deltas,
                "painterly": result.painterly.deltas,
                "painterly_larger": result.painterly_larger,
            }
        )

    @app.route("/export")
    def export():
        try:
            req = request_from_args(request.args, app.config["ENGINE_CONFIG"])
            palette = ladder().ramp(req.base_hex, req.temperature, req.steps, req.mode)
            prefix = token_prefix(
                request.args.get("label", ""),
                req.base_hex,
                req.temperature,
                req.mode,
                req.steps,
            )
            text = css_variables(palette, prefix, request.args.get("format", "short"))
        except ToneLadderError as exc:
            return _error(exc)
        return Response(text + "\n", mimetype="text/plain")

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
