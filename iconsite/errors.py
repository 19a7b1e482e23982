"""Exception hierarchy for site builds.

Filesystem failures are not wrapped: they surface as the ``OSError`` raised
by the failing read or write.
"""


class SiteBuildError(Exception):
    """Base class for every error raised by the build pipeline."""


class ConfigError(SiteBuildError):
    """The package manifest or icon catalog is missing fields or malformed."""


class ParseError(SiteBuildError):
    """A content file has a malformed front-matter block."""


class CompileError(SiteBuildError):
    """A page body cannot be compiled into a renderable tree."""


class UnknownComponentError(CompileError):
    """A page body references a component that is not in the table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown component '{name}'.")
        self.name = name


class UnknownLanguageError(CompileError):
    """A code block declares a language outside the supported set."""

    def __init__(self, language: str):
        super().__init__(f"Unsupported code block language '{language}'.")
        self.language = language


class IconLookupError(SiteBuildError, LookupError):
    """An icon component references a name that is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Icon '{name}' is not in the catalog.")
        self.name = name


class TemplatePageError(SiteBuildError):
    """The loaded pages do not contain exactly one template page."""


class DuplicateOutputError(SiteBuildError):
    """Two pages of the final page set would be written to the same file."""
