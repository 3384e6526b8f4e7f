"""
Pytest fixtures for the lunch API tests.
"""
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

AASTVEJ_HOT_DISH = "Braiseret svinekæber med rodfrugter"
AASTVEJ_VEGETARIAN = "Gnocchi med ratatouille."
AASTVEJ_SALAD = "Romaine salat med bagte blommer, hvedekerner, løg og salatost."


@pytest.fixture
def aastvej_html():
    """Menu page for Aastvej as served by the catering site."""
    return (FIXTURES_DIR / "aastvej.html").read_text(encoding="utf-8")


def build_menu_page(cells):
    """
    Build a menu page with one menu-row per entry in cells.

    Each entry is a list of cell texts; a row with fewer than two
    cells has no text cell.
    """
    rows = []
    for row_cells in cells:
        inner = "".join(f"<div>{text}</div>" for text in row_cells)
        rows.append(f'<div class="menu-row">{inner}</div>')
    return (
        "<html><body><div class=\"menu\">"
        + "\n".join(rows)
        + "</div></body></html>"
    )


def make_response(text="", status_code=200, content_type="text/html; charset=utf-8"):
    """Mock requests.Response for a page body."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = {"Content-Type": content_type}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error"
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_session():
    """requests.Session stand-in; set get.return_value or get.side_effect."""
    return MagicMock()
