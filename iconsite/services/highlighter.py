"""Syntax highlighting for code blocks, limited to a common-languages set."""

from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from iconsite.errors import UnknownLanguageError

# The highlight.js "common" bundle.
COMMON_LANGUAGES = frozenset(
    {
        "bash", "c", "cpp", "csharp", "css", "diff", "go", "graphql", "ini",
        "java", "javascript", "json", "kotlin", "less", "lua", "makefile",
        "markdown", "objectivec", "perl", "php", "php-template", "plaintext",
        "python", "python-repl", "r", "ruby", "rust", "scss", "shell", "sql",
        "swift", "typescript", "vbnet", "wasm", "xml", "yaml",
    }
)

_ALIASES = {
    "c++": "cpp",
    "cs": "csharp",
    "golang": "go",
    "html": "xml",
    "js": "javascript",
    "jsx": "javascript",
    "md": "markdown",
    "py": "python",
    "rb": "ruby",
    "rs": "rust",
    "sh": "bash",
    "svg": "xml",
    "text": "plaintext",
    "ts": "typescript",
    "yml": "yaml",
    "zsh": "bash",
}

# Pygments lexer names for the languages whose names differ.
_LEXER_NAMES = {
    "php-template": "html+php",
    "plaintext": "text",
    "python-repl": "pycon",
    "vbnet": "vb.net",
    "wasm": "wast",
}

_FORMATTER = HtmlFormatter(nowrap=True)


def resolve_language(language: str) -> str:
    """Return the canonical name for *language*, or raise UnknownLanguageError."""
    name = language.strip().lower()
    name = _ALIASES.get(name, name)
    if name not in COMMON_LANGUAGES:
        raise UnknownLanguageError(language)
    return name


def highlight(code: str, language: str) -> str:
    """Return *code* as highlighted HTML spans (no wrapping ``<pre>``)."""
    name = resolve_language(language)
    try:
        lexer = get_lexer_by_name(_LEXER_NAMES.get(name, name))
    except ClassNotFound as exc:
        raise UnknownLanguageError(language) from exc
    return _pygments_highlight(code, lexer, _FORMATTER)
