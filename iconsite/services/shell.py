"""Page shell: the document frame shared by every page."""

import copy
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from iconsite.models.config import BuildContext

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
SHELL_TEMPLATE = "shell.html"
CONTENT_SLOT_ID = "content"

_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=True,
    undefined=StrictUndefined,
)


def document_title(site_name: str, version: str, page_title: Optional[str] = None) -> str:
    """``"star - josemi/icons 1.2.0"``, or just the site name and version."""
    prefix = f"{page_title} - " if page_title else ""
    return f"{prefix}{site_name} {version}"


def wrap_page(content: BeautifulSoup, context: BuildContext, page_title: Optional[str] = None) -> BeautifulSoup:
    """Return a full document with a copy of *content* as its main content.

    *content* itself is left untouched, so one compiled tree can be wrapped
    any number of times.
    """
    html = _env.get_template(SHELL_TEMPLATE).render(
        site=context.site,
        version=context.version,
        repository=context.repository,
        build_info=context.build_info,
        document_title=document_title(context.site.name, context.version, page_title),
    )
    document = BeautifulSoup(html, "lxml")
    slot = document.find(id=CONTENT_SLOT_ID)
    slot.extend([copy.copy(node) for node in content.contents])
    return document
