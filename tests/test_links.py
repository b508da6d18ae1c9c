"""Tests for navigation link building."""

import pytest
from fastapi.datastructures import URL
from fastapi_atoz.config import AtoZConfig
from fastapi_atoz.links import alphabet, build_alpha_links
from fastapi_atoz.models import LETTERS, CanonicalFilter
from fastapi_atoz.normalizer import normalize
from fastapi_atoz.registry import CapabilityRegistry

BASE = "https://example.com/books/"


@pytest.fixture
def registry():
    return CapabilityRegistry(["book"])


def _current(links):
    return [link.label for link in links.links if link.current]


class TestAlphabet:
    def test_order_and_size(self):
        filters = alphabet()
        assert len(filters) == 28
        assert filters[0] == CanonicalFilter.none()
        assert filters[1] == CanonicalFilter.symbols()
        assert [f.letter for f in filters[2:]] == list(LETTERS)


class TestBuildAlphaLinks:
    def test_unsupported_category(self, registry):
        assert build_alpha_links(BASE, "author", registry) is None

    def test_labels_and_urls(self, registry):
        links = build_alpha_links(BASE, "book", registry)
        assert links.category == "book"
        assert len(links.links) == 28
        assert [link.label for link in links.links[:3]] == ["All", "#", "a"]
        assert links.links[0].url == BASE
        assert links.links[1].url == f"{BASE}?alpha_filter=sym"
        assert links.links[-1].url == f"{BASE}?alpha_filter=z"

    def test_values_round_trip(self, registry):
        links = build_alpha_links(BASE, "book", registry)
        for link, canonical in zip(links.links, alphabet()):
            assert normalize(link.value) == canonical

    def test_no_selection_marks_all_current(self, registry):
        assert _current(build_alpha_links(BASE, "book", registry)) == ["All"]
        assert _current(build_alpha_links(BASE, "book", registry, "")) == ["All"]

    @pytest.mark.parametrize(
        "current, expected",
        [("b", ["b"]), ("Banana", ["b"]), ("sym", ["#"]), ("7", ["#"]), ("Z", ["z"])],
    )
    def test_selection_marks_single_current(self, registry, current, expected):
        links = build_alpha_links(BASE, "book", registry, current)
        assert _current(links) == expected
        assert links.current == normalize(current)

    def test_existing_filter_param_replaced(self, registry):
        url = f"{BASE}?alpha_filter=q&sort_by=id"
        links = build_alpha_links(url, "book", registry, "q")
        assert links.links[0].url == f"{BASE}?sort_by=id"
        assert "alpha_filter=b" in links.links[3].url
        assert "alpha_filter=q" not in links.links[3].url
        assert "sort_by=id" in links.links[3].url

    def test_legacy_param_removed(self, registry):
        links = build_alpha_links(f"{BASE}?alpha=c", "book", registry, "c")
        assert links.links[0].url == BASE
        assert links.links[4].url == f"{BASE}?alpha_filter=c"

    def test_accepts_url_object(self, registry):
        links = build_alpha_links(URL(BASE), "book", registry)
        assert links.links[0].url == BASE

    def test_custom_config(self, registry):
        config = AtoZConfig(
            param_name="letter",
            symbols_token="9",
            all_label="Everything",
            symbols_label="0-9",
        )
        links = build_alpha_links(BASE, "book", registry, "9", config)
        assert links.links[0].label == "Everything"
        assert links.links[1].label == "0-9"
        assert links.links[1].url == f"{BASE}?letter=9"
        assert _current(links) == ["0-9"]
