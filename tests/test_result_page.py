import pytest

from models.label import Label
from services.rendering.result_page import (
    format_percent,
    render_missing_file,
    render_result_page,
    render_server_error,
)


@pytest.mark.parametrize(
    "score, expected",
    [
        (0.957, "95.7%"),
        (0.5, "50.0%"),
        (0.0, "0.0%"),
        (1.0, "100.0%"),
        (0.1234, "12.3%"),
        (0.9999, "100.0%"),
    ],
)
def test_format_percent(score, expected):
    assert format_percent(score) == expected


@pytest.mark.parametrize("char, escaped", [("<", "&lt;"), (">", "&gt;"), ("&", "&amp;"), ('"', "&#34;")])
def test_special_characters_are_escaped_everywhere(char, escaped):
    marker = f"x{char}y"
    html = render_result_page(f"file{marker}.png", [Label(marker, 0.25)])

    assert marker not in html
    assert f"filex{escaped}y.png" in html
    assert f"<td>x{escaped}y</td>" in html


def test_filename_appears_in_title_and_heading():
    html = render_result_page("a&b.png", [])

    assert "<title>Labels for a&amp;b.png</title>" in html
    assert "<em>a&amp;b.png</em>" in html


def test_rows_keep_service_order():
    labels = [Label("Zebra", 0.2), Label("Apple", 0.9), Label("Mango", 0.5)]

    html = render_result_page("fruit.png", labels)

    positions = [html.index(f"<td>{label.description}</td>") for label in labels]
    assert positions == sorted(positions)
    assert html.count("<tr>") == len(labels) + 1  # plus header row


def test_empty_labels_omit_table():
    html = render_result_page("blank.png", [])

    assert "<p>No labels found.</p>" in html
    assert "<table" not in html
    assert '<a href="/">Analyze another image</a>' in html


def test_error_fragments():
    assert render_missing_file() == "<h2>No file uploaded. Please go back and choose an image.</h2>"
    assert render_server_error("bad <b>") == "<h2>Server error: bad &lt;b&gt;</h2>"
