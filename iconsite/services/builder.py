"""Build orchestration: load, expand, then compile/render/write every page."""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Awaitable, Iterable, List, Optional, TypeVar

from iconsite.models.config import BuildContext, SiteConfig
from iconsite.models.page import Page
from iconsite.services.build_info import get_build_info
from iconsite.services.catalog import load_catalog, load_manifest
from iconsite.services.compiler import compile_page
from iconsite.services.components import ComponentRegistry, default_components
from iconsite.services.expander import expand_template
from iconsite.services.loader import load_pages
from iconsite.services.renderer import render_to_static_markup
from iconsite.services.shell import wrap_page
from iconsite.services.writer import write_page

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_all(jobs: Iterable[Awaitable[T]]) -> List[T]:
    """Run *jobs* concurrently and return their results in order.

    The first failure cancels every job still running and is re-raised as is.
    """
    tasks = [asyncio.ensure_future(job) for job in jobs]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def render_page(page: Page, context: BuildContext, components: ComponentRegistry) -> str:
    """Compile *page*, wrap it in the shell and return the HTML text."""
    content = compile_page(page, context, components)
    document = wrap_page(content, context, page_title=page.metadata.get("title"))
    return render_to_static_markup(document)


async def build_page(
    page: Page, context: BuildContext, components: ComponentRegistry, output_dir: Path
) -> str:
    html = render_page(page, context, components)
    await write_page(output_dir, page.output_name, html)
    return page.output_name


async def build_site(config: SiteConfig, now: Optional[datetime] = None) -> List[str]:
    """Build every page described by *config* and return the written file names.

    Files written before a failure are left in place.
    """
    logger.info("Starting build...")
    build_info = get_build_info(now)
    manifest, catalog, pages = await run_all(
        [
            load_manifest(config.manifest_path),
            load_catalog(config.icons_path),
            load_pages(config.pages_dir),
        ]
    )
    logger.info("Processing %d files.", len(pages))

    pages = expand_template(pages, catalog)
    context = BuildContext(
        version=manifest.version,
        repository=manifest.repository.url,
        catalog=catalog,
        build_info=build_info,
        site=config.site,
    )
    components = default_components(catalog)

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = await run_all(
        build_page(page, context, components, output_dir) for page in pages
    )
    logger.info("Build finished.")
    return written
