from flask import Flask, render_template, request, jsonify, session, flash, redirect, url_for
from dotenv import load_dotenv
import logging
import os
import re
import uuid
from pathlib import Path

from people.errors import RegistryError, ValidationError, NotFoundError
from people.ids import ID_STRATEGIES

from session.context import SessionContext


# -------------------------------------------------
# Setup
# -------------------------------------------------

load_dotenv()
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

ID_STRATEGY = os.getenv("PERSON_ID_STRATEGY", "random")
if ID_STRATEGY not in ID_STRATEGIES:
    logger.warning(f"Unknown PERSON_ID_STRATEGY {ID_STRATEGY!r}, using 'random'.")
    ID_STRATEGY = "random"

ROOT_DIR = Path(__file__).resolve().parent

app = Flask(
    __name__,
    template_folder=str(ROOT_DIR / "templates"),
)
app.secret_key = os.getenv("FLASK_SECRET_KEY", "dev-secret")

SESSION_CONTEXTS = {}

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# -------------------------------------------------
# Helpers: session context + form parsing
# -------------------------------------------------

def get_session_context():
    if "session_id" not in session:
        session["session_id"] = str(uuid.uuid4())

    sid = session["session_id"]
    if sid not in SESSION_CONTEXTS:
        SESSION_CONTEXTS[sid] = SessionContext(id_factory=ID_STRATEGIES[ID_STRATEGY])
    return SESSION_CONTEXTS[sid]


def parse_age(raw):
    """
    Form ages arrive as text: keep the leading integer ("31 anos" -> 31).
    Returns None when there is none, which validation then rejects.
    """
    if raw is None:
        return None
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def read_person_form(form) -> dict:
    return {
        "name": form.get("nome", ""),
        "age": parse_age(form.get("idade")),
        "city": form.get("cidade", ""),
    }


def drop_blank_fields(fields: dict) -> dict:
    # an empty input on the edit form means "keep the current value"
    return {k: v for k, v in fields.items() if v not in (None, "")}


def error_response(error: RegistryError):
    body = {"error": error.message, "kind": error.kind}
    if isinstance(error, ValidationError):
        body["field"] = error.field
        return jsonify(body), 400
    if isinstance(error, NotFoundError):
        body["id"] = error.person_id
        return jsonify(body), 404
    return jsonify(body), 400


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# -------------------------------------------------
# Form routes
# -------------------------------------------------

@app.route("/")
def index():
    ctx = get_session_context()
    with ctx.lock:
        people = ctx.registry.list()
    return render_template(
        "index.html",
        people=people,
        list_visible=ctx.list_visible,
    )


@app.route("/pessoas", methods=["POST"])
def submit_person():
    ctx = get_session_context()
    person_id = request.form.get("id", "").strip()
    fields = read_person_form(request.form)

    try:
        with ctx.lock:
            if person_id:
                ctx.registry.update(person_id, drop_blank_fields(fields))
                message = "Pessoa atualizada com sucesso!"
            else:
                ctx.registry.add(fields)
                message = "Pessoa cadastrada com sucesso!"
    except RegistryError as e:
        logger.error(f"Erro ao processar pessoa: {e.message}")
        flash(f"Erro ao processar pessoa: {e.message}", "error")
    else:
        flash(message, "success")

    return redirect(url_for("index"))


@app.route("/pessoas/deletar", methods=["POST"])
def delete_person_form():
    ctx = get_session_context()
    person_id = request.form.get("id-deletar", "").strip()

    try:
        with ctx.lock:
            ctx.registry.delete(person_id)
    except RegistryError as e:
        logger.error(f"Erro ao deletar pessoa: {e.message}")
        flash(f"Erro ao deletar pessoa: {e.message}", "error")
    else:
        flash("Pessoa deletada com sucesso!", "success")

    return redirect(url_for("index"))


@app.route("/pessoas/listar", methods=["POST"])
def toggle_list():
    ctx = get_session_context()
    ctx.toggle_list()
    return redirect(url_for("index"))


# -------------------------------------------------
# JSON API
# -------------------------------------------------

@app.route("/api/people", methods=["GET"])
def list_people():
    ctx = get_session_context()
    with ctx.lock:
        people = ctx.registry.list()
    return jsonify([p.to_dict() for p in people])


@app.route("/api/people", methods=["POST"])
def add_person_api():
    ctx = get_session_context()
    try:
        with ctx.lock:
            person = ctx.registry.add(json_body())
    except RegistryError as e:
        logger.error(f"Erro ao processar pessoa: {e.message}")
        return error_response(e)
    return jsonify(person.to_dict()), 201


@app.route("/api/people/<person_id>", methods=["GET"])
def get_person_api(person_id):
    ctx = get_session_context()
    try:
        with ctx.lock:
            person = ctx.registry.get(person_id)
    except RegistryError as e:
        return error_response(e)
    return jsonify(person.to_dict())


@app.route("/api/people/<person_id>", methods=["PATCH"])
def update_person_api(person_id):
    ctx = get_session_context()
    try:
        with ctx.lock:
            person = ctx.registry.update(person_id, json_body())
    except RegistryError as e:
        logger.error(f"Erro ao processar pessoa: {e.message}")
        return error_response(e)
    return jsonify(person.to_dict())


@app.route("/api/people/<person_id>", methods=["DELETE"])
def delete_person_api(person_id):
    ctx = get_session_context()
    try:
        with ctx.lock:
            ctx.registry.delete(person_id)
    except RegistryError as e:
        logger.error(f"Erro ao deletar pessoa: {e.message}")
        return error_response(e)
    return jsonify({"status": "deleted", "id": person_id})


if __name__ == "__main__":
    app.run(debug=True)
