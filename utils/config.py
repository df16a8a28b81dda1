"""Environment-driven settings for the label viewer."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
PUBLIC_DIR = BASE_DIR / "public"

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LABEL_PROVIDER = "google"


def get_port() -> int:
    """Return the listening port from PORT, falling back to 8080."""
    raw = os.getenv("PORT")
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"PORT must be an integer, got {raw!r}") from exc


def get_host() -> str:
    """Return the bind address from HOST."""
    return os.getenv("HOST") or DEFAULT_HOST


def get_label_provider() -> str:
    """Return the configured label-detection backend name, lowercased."""
    return (os.getenv("LABEL_PROVIDER") or DEFAULT_LABEL_PROVIDER).strip().lower()
