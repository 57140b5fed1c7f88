"""
PolySolver — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/polysolver.json``.
"""

import hashlib
import json
import logging
import os
import time
from datetime import datetime

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "polysolver.json")

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "variable": "X",              # the unknown, matched case-insensitively
    "mode": "formula",            # "formula" or "numerical"
    "show_verification": False,   # print substitution checks in the CLI
    "history_limit": 100,
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _empty_db() -> dict:
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError):
            logger.warning("Ignoring unreadable data file %s", _DATA_FILE)
            return _empty_db()
        if isinstance(db, dict):
            db.setdefault("settings", dict(DEFAULT_SETTINGS))
            db.setdefault("history", [])
            return db
    return _empty_db()


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return stored settings merged over the defaults."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update(_load_db().get("settings", {}))
    return merged


def save_settings(settings: dict) -> None:
    db = _load_db()
    db["settings"] = settings
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def _record_id(equation: str, epoch: float) -> str:
    return hashlib.sha1(f"{equation}|{epoch}".encode("utf-8")).hexdigest()[:12]


def add_history(equation: str, answer: str) -> str:
    """Prepend a solve record and return its id."""
    db = _load_db()
    epoch = time.time()
    record = {
        "id": _record_id(equation, epoch),
        "equation": equation,
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": epoch,
    }
    db["history"].insert(0, record)  # newest first
    limit = get_settings().get("history_limit", DEFAULT_SETTINGS["history_limit"])
    db["history"] = db["history"][:limit]
    _save_db(db)
    return record["id"]


def get_history() -> list[dict]:
    """Return the history list (newest first)."""
    return _load_db().get("history", [])


def delete_history_item(record_id: str) -> None:
    db = _load_db()
    db["history"] = [r for r in db["history"] if r.get("id") != record_id]
    _save_db(db)


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
