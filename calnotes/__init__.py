import logging
from datetime import date
from typing import Callable, Optional

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from .calendar_session import CalendarSession
from .config import NotesConfig
from .dates import coerce_date, date_key, format_date_fr
from .exceptions import (
    InvalidInputError,
    NoteNotFoundError,
    NotesError,
    NotesStoreError,
)
from .notes_service import NotesService, note_to_dict
from .store import NotesStore, create_store

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[NotesStore] = None,
    config: Optional[NotesConfig] = None,
    today: Optional[Callable[[], date]] = None,
):
    config = config or NotesConfig.from_env()
    store = store or create_store(config)

    app = Flask(__name__)
    app.secret_key = config.secret_key

    session = CalendarSession(store, today=today)
    session.refresh()
    service = NotesService(session)
    app.extensions["calnotes.session"] = session
    app.extensions["calnotes.service"] = service

    def json_body() -> dict:
        body = request.get_json(silent=True)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise InvalidInputError("Expected a JSON object")
        return body

    def notes_payload(key: str) -> list:
        return [note_to_dict(n) for n in service.list_for_date(key)]

    @app.errorhandler(InvalidInputError)
    def invalid_input(e):
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.errorhandler(NoteNotFoundError)
    def note_not_found(e):
        return jsonify({"status": "error", "message": str(e)}), 404

    @app.errorhandler(NotesStoreError)
    def store_error(e):
        logger.error(f"Notes store error: {e}")
        return jsonify({"status": "error", "message": str(e)}), 502

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify(
            {
                "status": "ok",
                "note_dates": len(session.index),
                "refresh_failures": session.consecutive_failures,
            }
        )

    # JSON API

    @app.route("/api/calendar", methods=["GET"])
    def get_calendar():
        return jsonify(session.snapshot())

    @app.route("/api/calendar/navigate", methods=["POST"])
    def navigate():
        delta = json_body().get("delta")
        if isinstance(delta, bool) or not isinstance(delta, int) or delta not in (-1, 1):
            raise InvalidInputError(f"Invalid delta: {delta!r}. Expected -1 or 1.")
        session.navigate(delta)
        return jsonify(session.snapshot())

    @app.route("/api/calendar/select", methods=["POST"])
    def select():
        selected = session.select(json_body().get("date"))
        data = session.snapshot()
        data["date_selected"] = selected.date_key
        return jsonify(data)

    @app.route("/api/calendar/today", methods=["POST"])
    def today_view():
        selected = session.go_to_today()
        data = session.snapshot()
        data["date_selected"] = selected.date_key
        return jsonify(data)

    @app.route("/api/calendar/refresh", methods=["POST"])
    def refresh():
        result = session.refresh()
        data = session.snapshot()
        data["refresh"] = {"ok": result.ok, "error": result.error}
        return jsonify(data)

    @app.route("/api/notes", methods=["GET"])
    def list_notes():
        key = date_key(coerce_date(request.args.get("date", "")))
        return jsonify(
            {"date": key, "label": format_date_fr(key), "notes": notes_payload(key)}
        )

    @app.route("/api/notes", methods=["POST"])
    def create_note():
        body = json_body()
        note = service.create(body.get("date"), body.get("title"), body.get("content"))
        return jsonify({"status": "success", "note": note_to_dict(note)}), 201

    @app.route("/api/notes/<note_id>", methods=["PUT"])
    def update_note(note_id):
        body = json_body()
        note = service.update(note_id, body.get("title"), body.get("content"))
        return jsonify({"status": "success", "note": note_to_dict(note)})

    @app.route("/api/notes/<note_id>", methods=["DELETE"])
    def delete_note(note_id):
        service.delete(note_id)
        return jsonify({"status": "success"})

    # HTML page and form handlers

    @app.route("/", methods=["GET"])
    def index():
        if "date" in request.args:
            try:
                session.select(request.args["date"])
            except InvalidInputError as e:
                flash(str(e))

        data = session.snapshot()
        selected = data["selected"]
        try:
            notes = notes_payload(selected)
        except NotesStoreError as e:
            logger.error(f"Could not load notes for {selected}: {e}")
            flash("Impossible de charger les notes")
            notes = []

        edit_id = request.args.get("edit")
        editing = next((n for n in notes if n["id"] == edit_id), None)
        return render_template(
            "index.html",
            calendar=data,
            notes=notes,
            editing=editing,
            selected_label=format_date_fr(selected),
        )

    @app.route("/calendar/navigate", methods=["POST"])
    def navigate_form():
        try:
            session.navigate(1 if int(request.form.get("delta", "1")) > 0 else -1)
        except ValueError:
            flash("Navigation invalide")
        return redirect(url_for("index"))

    @app.route("/notes", methods=["POST"])
    def create_note_form():
        key = request.form.get("date", "")
        try:
            service.create(key, request.form.get("title"), request.form.get("content"))
        except NotesError as e:
            flash(str(e))
        return redirect(url_for("index", date=key) if key else url_for("index"))

    @app.route("/notes/<note_id>", methods=["POST"])
    def update_note_form(note_id):
        try:
            service.update(note_id, request.form.get("title"), request.form.get("content"))
        except NotesError as e:
            flash(str(e))
            return redirect(url_for("index", edit=note_id))
        return redirect(url_for("index"))

    @app.route("/notes/<note_id>/delete", methods=["POST"])
    def delete_note_form(note_id):
        try:
            service.delete(note_id)
        except NotesError as e:
            flash(str(e))
        return redirect(url_for("index"))

    return app
