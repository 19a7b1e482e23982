"""Content loader: reads the pages directory into :class:`Page` models."""

import asyncio
import logging
from pathlib import Path
from typing import List

from iconsite.errors import ParseError
from iconsite.models.page import OUTPUT_EXTENSION, Page
from iconsite.services.frontmatter import parse_front_matter

logger = logging.getLogger(__name__)

CONTENT_EXTENSION = ".mdx"


def output_name_for(file_name: str) -> str:
    """Return the output file name for a content file (``guide.mdx`` -> ``guide.html``)."""
    return Path(file_name).stem + OUTPUT_EXTENSION


async def read_page(path: Path) -> Page:
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: not valid UTF-8: {exc}") from exc
    metadata, body = parse_front_matter(text, source=str(path))
    return Page(metadata=metadata, body=body, output_name=output_name_for(path.name))


async def load_pages(folder: Path) -> List[Page]:
    """Read every content file in *folder*.

    Pages come back in directory listing order, which is not sorted.

    Raises:
        OSError: if the directory or one of its files cannot be read.
        ParseError: if a file is not valid UTF-8 or has malformed front matter.
    """
    entries = await asyncio.to_thread(lambda: list(Path(folder).iterdir()))
    files = [
        entry
        for entry in entries
        if entry.suffix == CONTENT_EXTENSION and entry.is_file()
    ]
    logger.info("Reading %d %s files from '%s'.", len(files), CONTENT_EXTENSION, folder)
    return list(await asyncio.gather(*(read_page(path) for path in files)))
