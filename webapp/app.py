from __future__ import annotations

from flask import Flask, jsonify, make_response, request

from seqalign.operations import MalformedOperations
from seqalign.params import AlignParams
from seqalign.plot import configure_headless_matplotlib
from seqalign.renderer import render
from seqalign.service import align_pair, export_alignment, get_session

configure_headless_matplotlib()

app = Flask(__name__)


def _require_text(payload: dict, name: str) -> str:
    value = payload.get(name)
    if value is None:
        raise KeyError(name)
    return str(value)


@app.post("/api/align")
def api_align():
    payload = request.get_json(silent=True) or {}
    try:
        seq_a = _require_text(payload, "seq_a")
        seq_b = _require_text(payload, "seq_b")
    except KeyError as exc:
        return jsonify({"error": f"{exc.args[0]} is required"}), 400

    try:
        params = AlignParams.from_payload(payload.get("params") or {})
        report = align_pair(seq_a, seq_b, params)
    except Exception as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify(report.to_payload())


@app.post("/api/render")
def api_render():
    payload = request.get_json(silent=True) or {}
    try:
        seq_a = _require_text(payload, "seq_a")
        seq_b = _require_text(payload, "seq_b")
        operations = _require_text(payload, "operations")
    except KeyError as exc:
        return jsonify({"error": f"{exc.args[0]} is required"}), 400

    try:
        view = render(seq_a, seq_b, operations.strip())
    except MalformedOperations as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({"top": view.top, "glyphs": view.glyphs, "bottom": view.bottom})


@app.post("/api/export")
def api_export():
    payload = request.get_json(silent=True) or {}
    token = str(payload.get("token", "")).strip()
    fmt = str(payload.get("format", "svg")).strip().lower()

    if not token:
        return jsonify({"error": "token is required"}), 400

    try:
        report = get_session(token)
        blob = export_alignment(report, fmt)
    except Exception as exc:
        return jsonify({"error": str(exc)}), 400

    mime = "image/svg+xml" if fmt == "svg" else "image/png"
    filename = f"alignment_export.{fmt}"

    response = make_response(blob)
    response.headers["Content-Type"] = mime
    response.headers["Content-Disposition"] = f"attachment; filename={filename}"
    return response


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=True, threaded=False)
