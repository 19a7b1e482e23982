import json

import pytest

from iconsite.models.build_info import BuildInfo, BuildTime
from iconsite.models.config import BuildContext
from iconsite.models.icon import Icon

TEMPLATE_BODY = """# {page.title}

<Icon icon="{page.icon.name}" />

Path: {page.icon.path}
"""

GUIDE_BODY = """# Guide

Version {version}. Download it from {downloadUrl}.
"""


@pytest.fixture
def catalog():
    return {
        "star": Icon(name="star", path="M12 2l3 7h7l-6 4 2 7-6-4-6 4 2-7-6-4h7z"),
        "heart": Icon(name="heart", path="M12 21l-8-8a5 5 0 0 1 8-6 5 5 0 0 1 8 6z"),
    }


@pytest.fixture
def build_context(catalog):
    return BuildContext(
        version="1.2.0",
        repository="https://github.com/jmjuanes/icons",
        catalog=catalog,
        build_info=BuildInfo(time=BuildTime(formatted="Sunday, October 18, 2026 at 3:04:05 PM GMT+2")),
    )


@pytest.fixture
def project(tmp_path):
    """A minimal site: one template page, one guide, two icons."""
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "[slug].mdx").write_text(f"---\nlayout: icon\n---\n{TEMPLATE_BODY}", encoding="utf-8")
    (pages / "guide.mdx").write_text(f"---\ntitle: Guide\n---\n{GUIDE_BODY}", encoding="utf-8")
    (tmp_path / "icons.json").write_text(
        json.dumps({"star": {"path": "M1 1h22"}, "heart": {"path": "M2 2v20"}}),
        encoding="utf-8",
    )
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "@josemi-icons/svg",
                "version": "1.2.0",
                "repository": {"type": "git", "url": "https://github.com/jmjuanes/icons"},
            }
        ),
        encoding="utf-8",
    )
    return tmp_path
