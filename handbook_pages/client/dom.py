"""Small BeautifulSoup helpers shared by the page loader and navigator."""

from __future__ import annotations

import typing as typ

from handbook_pages._constants import ROLE_SELECTOR

if typ.TYPE_CHECKING:
    from bs4 import Tag


class PageStructureError(LookupError):
    """Raised when the page shell lacks a region the client relies on."""


def require_role(root: Tag, role: str) -> Tag:
    """Return the first element carrying ``role`` or raise."""
    element = root.select_one(ROLE_SELECTOR.format(role=role))
    if element is None:
        msg = f"Page has no element with role '{role}'."
        raise PageStructureError(msg)
    return element


def closest(
    target: Tag, *, role: str | None = None, css_class: str | None = None
) -> Tag | None:
    """Return ``target`` or its nearest ancestor matching ``role``/``css_class``."""

    def _matches(tag: Tag) -> bool:
        if role is not None and tag.get("role") != role:
            return False
        return css_class is None or has_class(tag, css_class)

    if _matches(target):
        return target
    for parent in target.parents:
        if parent.name and _matches(parent):
            return parent
    return None


def has_class(tag: Tag, css_class: str) -> bool:
    """Return whether ``tag`` carries ``css_class``."""
    return css_class in (tag.get("class") or [])


def add_class(tag: Tag, css_class: str) -> None:
    """Add ``css_class`` once; repeated calls leave the tag unchanged."""
    classes = list(tag.get("class") or [])
    if css_class not in classes:
        classes.append(css_class)
    tag["class"] = classes


def remove_class(tag: Tag, css_class: str) -> None:
    """Drop ``css_class``, removing the attribute once no class is left."""
    classes = [name for name in tag.get("class") or [] if name != css_class]
    if classes:
        tag["class"] = classes
    elif tag.has_attr("class"):
        del tag["class"]


def toggle_hidden(tag: Tag) -> bool:
    """Flip the ``hidden`` attribute, returning whether ``tag`` is now visible."""
    if tag.has_attr("hidden"):
        del tag["hidden"]
        return True
    tag["hidden"] = "hidden"
    return False


__all__ = [
    "PageStructureError",
    "add_class",
    "closest",
    "has_class",
    "remove_class",
    "require_role",
    "toggle_hidden",
]
