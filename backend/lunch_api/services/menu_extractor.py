"""
Menu extraction and markdown rendering.

The catering site lays the daily menu out as a list of ``div.menu-row``
elements with a label cell and a text cell. The hot dish, vegetarian dish
and salad sit in fixed rows, so they are addressed by position. If the site
layout changes, MENU_FIELD_SELECTORS is the only thing to update.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Union

from bs4 import BeautifulSoup


logger = logging.getLogger(__name__)

# MenuRecord field -> CSS selector of the cell holding its text
MENU_FIELD_SELECTORS: Dict[str, str] = {
    "hot_dish": "div.menu-row:nth-child(2) > div:nth-child(2)",
    "vegetarian": "div.menu-row:nth-child(4) > div:nth-child(2)",
    "salad": "div.menu-row:nth-child(6) > div:nth-child(2)",
}


class ExtractionError(Exception):
    """Raised when a menu field cannot be found on the page."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Menu field not found: {field} ({reason})")


@dataclass
class MenuRecord:
    """Today's menu for one building."""
    hot_dish: str
    vegetarian: str
    salad: str


def _extract_field(soup: BeautifulSoup, field: str, selector: str) -> str:
    node = soup.select_one(selector)
    if node is None:
        raise ExtractionError(field, f"no element matches {selector!r}")

    # Only the first text run counts, nested markup after it is ignored
    first_text = next(iter(node.strings), None)
    if first_text is None:
        raise ExtractionError(field, "element has no text")

    text = first_text.strip()
    if not text:
        raise ExtractionError(field, "element text is blank")
    return text


def extract_menu(markup: Union[str, bytes]) -> MenuRecord:
    """
    Extract the three menu fields from a menu page.

    Args:
        markup: HTML of the building's menu page

    Returns:
        MenuRecord with whitespace-trimmed fields

    Raises:
        ExtractionError: If any field is missing or has no text
    """
    soup = BeautifulSoup(markup, "html.parser")

    fields = {}
    for field, selector in MENU_FIELD_SELECTORS.items():
        try:
            fields[field] = _extract_field(soup, field, selector)
        except ExtractionError as e:
            logger.warning(str(e))
            raise

    return MenuRecord(**fields)


def render_markdown(record: MenuRecord) -> str:
    """Render a menu as the markdown posted to Mattermost."""
    return "".join([
        "##### Varm ret\n  ", record.hot_dish, "\n",
        "##### Vegetar\n  ", record.vegetarian, "\n",
        "##### Salat\n  ", record.salad,
    ])
