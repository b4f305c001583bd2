"""Document query abstraction over an HTML parser."""

from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup


class DocumentQuery(Protocol):
    """Minimal query surface the extractor and cleaner depend on.

    Selectors are CSS selectors. Implementations must tolerate malformed
    markup and never raise on lookups that match nothing.
    """

    def texts(self, selector: str) -> list[str]: ...

    def first_text(self, selector: str) -> str | None: ...

    def attribute_values(self, selector: str, attr: str) -> list[str | None]: ...

    def meta_content(self, attr: str, value: str) -> str: ...

    def remove(self, selector: str) -> None: ...

    def full_text(self) -> str: ...


class SoupDocument:
    """``DocumentQuery`` backed by BeautifulSoup with the stdlib parser."""

    def __init__(self, markup: str | bytes) -> None:
        self._soup = BeautifulSoup(markup or "", "html.parser")

    def texts(self, selector: str) -> list[str]:
        """Return the text of every match in document order."""
        return [el.get_text(" ", strip=True) for el in self._soup.select(selector)]

    def first_text(self, selector: str) -> str | None:
        """Return the text of the first match, or ``None`` if nothing matches."""
        el = self._soup.select_one(selector)
        if el is None:
            return None
        return el.get_text(" ")

    def attribute_values(self, selector: str, attr: str) -> list[str | None]:
        values: list[str | None] = []
        for el in self._soup.select(selector):
            value = el.get(attr)
            # multi-valued attributes (rel, class) come back as lists
            if isinstance(value, list):
                value = " ".join(value)
            values.append(value)
        return values

    def meta_content(self, attr: str, value: str) -> str:
        """Return the stripped ``content`` of the first ``<meta attr=value>``."""
        wanted = value.lower()
        for el in self._soup.find_all("meta"):
            found = el.get(attr)
            if isinstance(found, str) and found.strip().lower() == wanted:
                content = el.get("content")
                if isinstance(content, str) and content.strip():
                    return content.strip()
        return ""

    def remove(self, selector: str) -> None:
        for el in self._soup.select(selector):
            el.decompose()

    def full_text(self) -> str:
        return self._soup.get_text(" ")
