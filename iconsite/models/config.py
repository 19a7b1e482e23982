from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from iconsite.models.build_info import BuildInfo
from iconsite.models.icon import Icon


class SiteMetadata(BaseModel):
    """Fixed branding rendered into the shell of every page."""

    name: str = "josemi/icons"
    description: str = "Enhance your projects with beautifully crafted SVG icons."
    url: str = "https://icons.josemi.xyz"
    image: str = "https://icons.josemi.xyz/og.png"
    twitter_author: str = "@jmjuanes"
    author_name: str = "Josemi"
    author_url: str = "https://josemi.xyz"


class Repository(BaseModel):
    type: Optional[str] = None
    url: str


class PackageManifest(BaseModel):
    """The subset of the package manifest (``package.json``) used by a build."""

    name: str = ""
    version: str
    repository: Repository

    @field_validator("repository", mode="before")
    @classmethod
    def _accept_shorthand(cls, value):
        # npm allows ``"repository": "https://..."`` as well as an object.
        if isinstance(value, str):
            return {"url": value}
        return value


class SiteConfig(BaseModel):
    root: Path
    pages_dir: Path
    output_dir: Path
    icons_path: Path
    manifest_path: Path
    site: SiteMetadata = SiteMetadata()

    @classmethod
    def from_root(
        cls,
        root: Path,
        pages_dir: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        icons_path: Optional[Path] = None,
        manifest_path: Optional[Path] = None,
    ) -> "SiteConfig":
        """Build a config whose unset paths default to the usual project layout.

        ``pages/`` holds the content files, ``www/`` receives the output, and
        ``icons.json`` / ``package.json`` sit at the project root.
        """
        root = Path(root)
        return cls(
            root=root,
            pages_dir=pages_dir or root / "pages",
            output_dir=output_dir or root / "www",
            icons_path=icons_path or root / "icons.json",
            manifest_path=manifest_path or root / "package.json",
        )


class BuildContext(BaseModel):
    """Read-only state shared by every page task of one build."""

    model_config = ConfigDict(frozen=True)

    version: str
    repository: str
    catalog: Dict[str, Icon]
    build_info: BuildInfo
    site: SiteMetadata = SiteMetadata()

    @property
    def download_url(self) -> str:
        return f"{self.repository}/releases/download/v{self.version}/icons.zip"

    @property
    def icons(self) -> List[Icon]:
        return list(self.catalog.values())
