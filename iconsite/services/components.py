"""The fixed table of components a page body can use.

A component receives the tag's attributes as *props* and its already-rendered
children, and returns the node (or list of nodes) that replaces the tag.
"""

from typing import Dict, Iterator, List, Mapping, Optional, Union

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

from iconsite.errors import IconLookupError, UnknownComponentError
from iconsite.models.icon import Icon
from iconsite.services.highlighter import highlight

Rendered = Union[PageElement, List[PageElement]]

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class Component:
    # Block components are kept verbatim by the markdown stage.
    block = False

    def render(self, soup: BeautifulSoup, props: Dict[str, str], children: List[PageElement]) -> Rendered:
        raise NotImplementedError


class Element(Component):
    """A plain HTML element with fixed styling classes."""

    def __init__(self, name: str, class_name: str):
        self.name = name
        self.class_name = class_name

    def render(self, soup, props, children):
        tag = soup.new_tag(self.name, attrs={"class": self.class_name})
        tag.extend(children)
        return tag


class InlineCode(Element):
    def __init__(self):
        super().__init__("code", "font-bold text-sm font-mono")

    def render(self, soup, props, children):
        tag = super().render(soup, props, children)
        tag.insert(0, NavigableString("'"))
        tag.append(NavigableString("'"))
        return tag


class IconGlyph(Component):
    """``<Icon icon="name" />``: the catalog entry drawn as an inline SVG."""

    def __init__(self, catalog: Mapping[str, Icon]):
        self.catalog = catalog

    def render(self, soup, props, children):
        name = props.get("icon", "")
        try:
            icon = self.catalog[name]
        except KeyError:
            raise IconLookupError(name) from None

        svg = soup.new_tag(
            "svg",
            attrs={
                "xmlns": SVG_NAMESPACE,
                "width": "1em",
                "height": "1em",
                "viewBox": "0 0 24 24",
            },
        )
        svg.append(
            soup.new_tag(
                "path",
                attrs={
                    "d": icon.path,
                    "fill": "none",
                    "stroke-width": "2",
                    "stroke": "currentColor",
                    "stroke-linecap": "round",
                    "stroke-linejoin": "round",
                },
            )
        )
        return svg


class CodeBlock(Component):
    """``<CodeBlock language="js">...</CodeBlock>``.

    With a language the text is highlighted; without one it is rendered
    verbatim.
    """

    block = True
    class_name = "p-4 rounded-md bg-gray-900 text-white overflow-auto mb-8 text-sm font-mono"

    def render(self, soup, props, children):
        code = "".join(_text_of(child) for child in children).strip("\n")
        pre = soup.new_tag("pre", attrs={"class": self.class_name})
        language = props.get("language")
        if language:
            highlighted = BeautifulSoup(highlight(code, language), "html.parser")
            pre.extend(list(highlighted.contents))
        else:
            pre.string = code
        return pre


class Fragment(Component):
    """Groups children without adding an element of its own."""

    def render(self, soup, props, children):
        return list(children)


def _text_of(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


class ComponentRegistry(Mapping):
    """Read-only name -> component table.

    Lookups by name are exact; :meth:`for_tag` matches parsed tag names,
    which the HTML parser has lowercased.
    """

    def __init__(self, components: Mapping[str, Component]):
        self._components = dict(components)
        self._by_tag = {name.lower(): component for name, component in self._components.items()}

    def __getitem__(self, name: str) -> Component:
        try:
            return self._components[name]
        except KeyError:
            raise UnknownComponentError(name) from None

    def __contains__(self, name) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def get(self, name, default=None):
        return self._components.get(name, default)

    def for_tag(self, tag_name: str) -> Optional[Component]:
        return self._by_tag.get(tag_name.lower())

    @property
    def block_tags(self) -> List[str]:
        return [name for name, component in self._by_tag.items() if component.block]


def default_components(catalog: Mapping[str, Icon]) -> ComponentRegistry:
    return ComponentRegistry(
        {
            "h1": Element("h1", "mt-8 mb-4 text-gray-800 text-2xl font-bold"),
            "h2": Element("h2", "mt-8 mb-4 text-gray-800 text-xl font-bold"),
            "p": Element("p", "mt-6 mb-6"),
            "code": InlineCode(),
            "Icon": IconGlyph(catalog),
            "CodeBlock": CodeBlock(),
            "Fragment": Fragment(),
        }
    )
