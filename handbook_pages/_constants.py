"""Common literal values shared by the build and page pipelines.

The build output and the page loader agree on these markers and DOM roles;
keeping them here stops the producer and consumer from drifting apart.

Examples
--------
>>> from handbook_pages import _constants
>>> _constants.DOCUMENT_SEPARATOR
'\\n---\\n'
>>> _constants.ROLE_SELECTOR.format(role="item")
'[role="item"]'
"""

SENTINEL = "$"
MARKER = "$$"
DOCUMENT_SEPARATOR = "\n---\n"
DEFAULT_TOGGLE_LABEL = "[查看此处原文]"

SECTION_TITLE_CLASS = "section-title"
ROLE_SELECTOR = '[role="{role}"]'
ROLE_ITEM = "item"
ROLE_TOGGLE = "check-ori"
ROLE_ORIGINAL = "ori"
ROLE_CONTAINER = "container"
ROLE_CONTENT = "content"
ROLE_NAVBAR = "navbar"
ROLE_NAV_LIST = "nav-list"
