from typing import List, Optional

from bs4 import BeautifulSoup, Tag


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def text_of(tag: Optional[Tag]) -> str:
    """Visible text of a tag with whitespace runs collapsed."""
    if tag is None:
        return ""
    return " ".join(tag.get_text(" ").split())


def attr_of(tag: Optional[Tag], name: str) -> str:
    if tag is None:
        return ""
    value = tag.get(name) or ""
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


def data_cells(row: Tag) -> List[Tag]:
    """The <td> cells of a row; empty for header rows that use <th>."""
    if row.find("th") is not None:
        return []
    return row.find_all("td", recursive=False)


def strip_label(text: str, label: str) -> str:
    """Removes a "Label:" prefix from a labelled paragraph's text."""
    text = text.strip()
    if label and text.startswith(label):
        text = text[len(label):]
    return text.lstrip(": ").strip()
