"""Output writer: persists rendered pages into the output directory."""

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


async def write_page(output_dir: Path, output_name: str, content: str) -> Path:
    """Write *content* to ``output_dir/output_name``, replacing any existing file.

    The directory must already exist.

    Raises:
        OSError: if the file cannot be written.
    """
    target = Path(output_dir) / output_name
    await asyncio.to_thread(target.write_text, content, encoding="utf-8")
    logger.info("Saved file to '%s'.", target)
    return target
