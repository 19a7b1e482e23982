import argparse
import asyncio
import logging
import logging.config
import sys
from pathlib import Path
from typing import List, Optional

from iconsite.errors import SiteBuildError
from iconsite.models.config import SiteConfig
from iconsite.services.builder import build_site

logger = logging.getLogger("iconsite")


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="iconsite",
        description="Build the icon documentation site into static HTML files.",
    )
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="Project root (default: current directory).")
    parser.add_argument("--pages", type=Path, default=None, help="Content directory (default: <root>/pages).")
    parser.add_argument("--output", type=Path, default=None, help="Output directory (default: <root>/www).")
    parser.add_argument("--icons", type=Path, default=None, help="Icon catalog JSON (default: <root>/icons.json).")
    parser.add_argument("--manifest", type=Path, default=None, help="Package manifest (default: <root>/package.json).")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    config = SiteConfig.from_root(
        args.root,
        pages_dir=args.pages,
        output_dir=args.output,
        icons_path=args.icons,
        manifest_path=args.manifest,
    )
    try:
        asyncio.run(build_site(config))
    except (SiteBuildError, OSError):
        logger.exception("Build failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
