"""Loaders for the icon catalog and the package manifest."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Dict

from pydantic import ValidationError

from iconsite.errors import ConfigError
from iconsite.models.config import PackageManifest
from iconsite.models.icon import Icon

logger = logging.getLogger(__name__)


async def _read_json(path: Path):
    text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON: {exc}") from exc


def _is_file_stem(name: str) -> bool:
    # Icon names are used as output file names.
    return bool(name) and name not in (".", "..") and not any(sep in name for sep in ("/", "\\"))


def parse_catalog(data) -> Dict[str, Icon]:
    """Validate a raw ``{name: record}`` mapping, keeping its order.

    The catalog key is authoritative for the icon name.
    """
    if not isinstance(data, dict):
        raise ConfigError("Icon catalog must be a JSON object keyed by icon name.")
    catalog: Dict[str, Icon] = {}
    for name, record in data.items():
        if not _is_file_stem(name):
            raise ConfigError(f"Icon name '{name}' cannot be used as a file name.")
        if not isinstance(record, dict):
            raise ConfigError(f"Icon '{name}' must be an object, got {type(record).__name__}.")
        try:
            catalog[name] = Icon.model_validate({**record, "name": name})
        except ValidationError as exc:
            raise ConfigError(f"Icon '{name}' is invalid: {exc}") from exc
    return catalog


async def load_catalog(path: Path) -> Dict[str, Icon]:
    """Load the icon registry at *path* (a JSON object keyed by icon name)."""
    catalog = parse_catalog(await _read_json(path))
    logger.info("Loaded %d icons from '%s'.", len(catalog), path)
    return catalog


async def load_manifest(path: Path) -> PackageManifest:
    """Load version and repository information from the package manifest."""
    data = await _read_json(path)
    try:
        return PackageManifest.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: invalid package manifest: {exc}") from exc
