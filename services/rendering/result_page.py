"""HTML rendering for analyze results and error fragments.

All untrusted text (filenames, label descriptions, error messages) goes
through Jinja2 autoescaping; nothing is interpolated into markup directly.
"""

from pathlib import Path
from typing import Sequence

import jinja2

from models.label import Label

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

MISSING_FILE_MESSAGE = "No file uploaded. Please go back and choose an image."


def format_percent(score: float) -> str:
    """Format a [0, 1] score as a percentage with one decimal place, e.g. 0.957 -> '95.7%'."""
    return f"{score * 100:.1f}%"


def _build_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["percent"] = format_percent
    return env


_ENV = _build_environment()
_FRAGMENT = _ENV.from_string("<h2>{{ prefix }}{{ message }}</h2>")


def render_result_page(filename: str, labels: Sequence[Label]) -> str:
    """Render the full result document for one analyzed image."""
    return _ENV.get_template("result_page.html").render(filename=filename, labels=list(labels))


def render_fragment(message: str, prefix: str = "") -> str:
    """Render a single escaped heading used for error responses."""
    return _FRAGMENT.render(prefix=prefix, message=message)


def render_missing_file() -> str:
    return render_fragment(MISSING_FILE_MESSAGE)


def render_server_error(message: str) -> str:
    return render_fragment(message, prefix="Server error: ")
