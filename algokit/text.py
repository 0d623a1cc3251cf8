"""Text helpers."""

from __future__ import annotations

__all__ = ["strip_tags"]


def strip_tags(html: str) -> str:
    """Drop everything between '<' and '>' and trim surrounding spaces."""
    inside = False
    kept: list[str] = []
    for ch in html:
        if ch == "<":
            inside = True
        elif ch == ">":
            inside = False
        elif not inside:
            kept.append(ch)
    return "".join(kept).strip(" ")