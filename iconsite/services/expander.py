"""Template expansion: fan the template page out into one page per icon."""

import logging
from collections import Counter
from typing import Dict, List

from iconsite.errors import DuplicateOutputError, TemplatePageError
from iconsite.models.icon import Icon
from iconsite.models.page import OUTPUT_EXTENSION, Page

logger = logging.getLogger(__name__)


def find_template(pages: List[Page]) -> Page:
    """Return the single template page among *pages*.

    Raises:
        TemplatePageError: when no page, or more than one page, is marked as
            the template.
    """
    templates = [page for page in pages if page.is_template]
    if len(templates) != 1:
        names = ", ".join(page.output_name for page in templates) or "none"
        raise TemplatePageError(
            f"Expected exactly one template page, found {len(templates)} ({names})."
        )
    return templates[0]


def derive_page(template: Page, icon: Icon) -> Page:
    """Build the page for *icon* from *template*.

    Icon keys win over template metadata; the body is reused unchanged.
    """
    return Page(
        metadata={**template.metadata, "title": icon.name, "icon": icon},
        body=template.body,
        output_name=f"{icon.name}{OUTPUT_EXTENSION}",
    )


def ensure_unique_output_names(pages: List[Page]) -> None:
    counts = Counter(page.output_name for page in pages)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateOutputError(
            f"Several pages would be written to: {', '.join(duplicates)}."
        )


def expand_template(pages: List[Page], catalog: Dict[str, Icon]) -> List[Page]:
    """Replace the template page with one derived page per catalog entry.

    Ordinary pages keep their order and come first; derived pages follow in
    catalog order.
    """
    template = find_template(pages)
    derived = [derive_page(template, icon) for icon in catalog.values()]
    logger.info(
        "Expanded template '%s' into %d icon pages.", template.output_name, len(derived)
    )
    result = [page for page in pages if page is not template] + derived
    ensure_unique_output_names(result)
    return result
