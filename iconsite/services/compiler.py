"""Page compiler: turns a page body into a renderable BeautifulSoup tree.

Bodies are markdown with embedded components (``<Icon icon="star" />``) and
``{expressions}`` evaluated against the page's rendering context. Fenced code
blocks and inline code spans are literal: neither expressions nor component
tags inside them are interpreted.
"""

import re
from typing import Any, Dict, List

import markdown
from bs4 import BeautifulSoup
from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from iconsite.errors import CompileError
from iconsite.models.config import BuildContext
from iconsite.models.page import Page
from iconsite.services.components import ComponentRegistry

# Capitalized tag names are component references; lowercase ones are HTML.
_COMPONENT_TAG_RE = re.compile(r"</?([A-Z][A-Za-z0-9]*)")

_FENCE_RE = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[^\n]*\n.*?^(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
_CODE_SPAN_RE = re.compile(r"(?<!`)(?P<ticks>`+)(?!`)(?:(?!\n[ \t]*\n).)+?(?<!`)(?P=ticks)(?!`)", re.DOTALL)
_MASK_RE = re.compile("\x1acode(\\d+)\x1a")

# Expression output is text: HTML and markdown syntax characters become
# character references, which markdown leaves alone and the HTML parser decodes.
_LITERAL_CHARS = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "\\": "&#92;",
    "`": "&#96;",
    "*": "&#42;",
    "_": "&#95;",
    "[": "&#91;",
    "]": "&#93;",
    "#": "&#35;",
    "|": "&#124;",
}
_LITERAL_RE = re.compile("[" + re.escape("".join(_LITERAL_CHARS)) + "]")

_MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

# Fields of the page itself; metadata stays reachable as ``page.metadata.<key>``.
PAGE_FIELDS = ("body", "output_name", "metadata")


def as_literal_text(value: Any) -> Markup:
    if isinstance(value, Markup):
        return value
    return Markup(_LITERAL_RE.sub(lambda match: _LITERAL_CHARS[match.group(0)], str(value)))


_expressions = SandboxedEnvironment(
    variable_start_string="{",
    variable_end_string="}",
    block_start_string="{%",
    block_end_string="%}",
    comment_start_string="{#",
    comment_end_string="#}",
    undefined=StrictUndefined,
    autoescape=True,
    finalize=as_literal_text,
    keep_trailing_newline=True,
)


class PageFields:
    """What ``page`` means inside a body.

    ``page.body``, ``page.output_name`` and ``page.metadata`` are the page's
    own fields; every other name is a metadata key (``page.icon.path``).
    """

    __slots__ = ("_page",)

    def __init__(self, page: Page):
        self._page = page

    def __getattr__(self, name: str) -> Any:
        if name in PAGE_FIELDS:
            return getattr(self._page, name)
        try:
            return self._page.metadata[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, key: str) -> Any:
        return self._page.metadata[key]


def build_context(page: Page, context: BuildContext, components: ComponentRegistry) -> Dict[str, Any]:
    """Return the names a page body can reference."""
    return {
        "page": PageFields(page),
        "components": components,
        "icons": context.icons,
        "version": context.version,
        "repository": context.repository,
        "downloadUrl": context.download_url,
    }


def mask_code(body: str) -> tuple[str, List[str]]:
    """Swap fenced blocks and code spans for placeholders.

    Returns the masked text and the removed snippets, in placeholder order.
    """
    snippets: List[str] = []

    def _stash(match: re.Match) -> str:
        snippets.append(match.group(0))
        return f"\x1acode{len(snippets) - 1}\x1a"

    masked = _FENCE_RE.sub(_stash, body)
    return _CODE_SPAN_RE.sub(_stash, masked), snippets


def unmask_code(text: str, snippets: List[str]) -> str:
    return _MASK_RE.sub(lambda match: snippets[int(match.group(1))], text)


def check_component_references(body: str, components: ComponentRegistry) -> None:
    """Raise UnknownComponentError for the first component missing from the table."""
    for match in _COMPONENT_TAG_RE.finditer(body):
        components[match.group(1)]


def evaluate_expressions(body: str, values: Dict[str, Any]) -> str:
    try:
        return _expressions.from_string(body).render(values)
    except TemplateError as exc:
        raise CompileError(f"Cannot evaluate page expressions: {exc}") from exc


def to_html(text: str, components: ComponentRegistry) -> str:
    md = markdown.Markdown(extensions=_MARKDOWN_EXTENSIONS)
    for name in components.block_tags:
        if name not in md.block_level_elements:
            md.block_level_elements.append(name)
    return md.convert(text)


def apply_components(soup: BeautifulSoup, components: ComponentRegistry) -> BeautifulSoup:
    """Replace every component tag in *soup*, innermost first."""
    for tag in reversed(soup.find_all(True)):
        component = components.for_tag(tag.name)
        if component is None:
            continue
        props = {
            name: " ".join(value) if isinstance(value, list) else value
            for name, value in tag.attrs.items()
        }
        children = [child.extract() for child in list(tag.contents)]
        rendered = component.render(soup, props, children)
        nodes = rendered if isinstance(rendered, list) else [rendered]
        if nodes:
            tag.replace_with(*nodes)
        else:
            tag.decompose()
    return soup


def compile_page(page: Page, context: BuildContext, components: ComponentRegistry) -> BeautifulSoup:
    """Compile *page* into a tree holding its main content.

    Raises:
        CompileError: on invalid expressions or unknown component names.
        IconLookupError: when an ``Icon`` references a name outside the catalog.
    """
    masked, snippets = mask_code(page.body)
    check_component_references(masked, components)
    text = unmask_code(evaluate_expressions(masked, build_context(page, context, components)), snippets)
    soup = BeautifulSoup(to_html(text, components), "html.parser")
    return apply_components(soup, components)
