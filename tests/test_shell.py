"""Tests for the page shell and the static renderer."""

from bs4 import BeautifulSoup

from iconsite.models.page import Page
from iconsite.services.compiler import compile_page
from iconsite.services.components import default_components
from iconsite.services.renderer import render_to_static_markup
from iconsite.services.shell import document_title, wrap_page


def _content(build_context):
    page = Page(metadata={}, body='# Star\n\n<Icon icon="star" />\n', output_name="star.html")
    return compile_page(page, build_context, default_components(build_context.catalog))


class TestDocumentTitle:
    def test_with_page_title(self):
        assert document_title("josemi/icons", "1.2.0", "star") == "star - josemi/icons 1.2.0"

    def test_without_page_title(self):
        assert document_title("josemi/icons", "1.2.0") == "josemi/icons 1.2.0"
        assert document_title("josemi/icons", "1.2.0", "") == "josemi/icons 1.2.0"


class TestWrapPage:
    def test_frame(self, build_context):
        document = wrap_page(_content(build_context), build_context, page_title="star")
        assert document.title.get_text() == "star - josemi/icons 1.2.0"
        assert document.find("meta", attrs={"property": "og:url"})["content"] == "https://icons.josemi.xyz"
        assert "v1.2.0" in document.get_text()
        assert document.find("a", href="https://github.com/jmjuanes/icons") is not None
        assert "Last built on Sunday, October 18, 2026 at 3:04:05 PM GMT+2." in document.get_text()

    def test_page_content_goes_in_main_slot(self, build_context):
        document = wrap_page(_content(build_context), build_context)
        slot = document.find(id="content")
        assert slot.find("h1").get_text() == "Star"
        assert slot.find("svg") is not None

    def test_content_is_not_consumed(self, build_context):
        content = _content(build_context)
        wrap_page(content, build_context)
        assert content.find("h1") is not None
        assert content.find("svg") is not None


class TestRenderToStaticMarkup:
    def test_is_a_full_document(self, build_context):
        html = render_to_static_markup(wrap_page(_content(build_context), build_context))
        assert html.startswith("<!DOCTYPE html>")
        assert "<html lang=\"en\">" in html
        assert 'viewBox="0 0 24 24"' in html

    def test_no_scripts(self, build_context):
        html = render_to_static_markup(wrap_page(_content(build_context), build_context))
        assert BeautifulSoup(html, "lxml").find("script") is None

    def test_same_tree_renders_identically(self, build_context):
        content = _content(build_context)
        first = render_to_static_markup(wrap_page(content, build_context, page_title="star"))
        second = render_to_static_markup(wrap_page(content, build_context, page_title="star"))
        assert first == second

    def test_rendering_twice_is_stable(self, build_context):
        document = wrap_page(_content(build_context), build_context)
        assert render_to_static_markup(document) == render_to_static_markup(document)
