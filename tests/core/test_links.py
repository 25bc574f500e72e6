"""Tests for the navigation link graph."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tagpages.core.links import INDEX_FILE, build_links, page_path


def test_page_path_naming():
    assert page_path(1) == "index.html"
    assert page_path(2) == "page2.html"
    assert page_path(12) == "page12.html"


def test_page_path_rejects_page_zero():
    with pytest.raises(ValueError):
        page_path(0)


def test_single_page_has_no_neighbours():
    (link,) = build_links(1)

    assert link.page == 1
    assert link.path == INDEX_FILE
    assert link.previous_page is None
    assert link.next_page is None
    assert link.previous_page_path is None
    assert link.next_page_path is None


def test_three_pages():
    first, second, third = build_links(3)

    assert (first.path, first.previous_page_path, first.next_page_path) == ("index.html", None, "page2.html")
    assert (first.previous_page, first.next_page) == (None, 2)

    assert (second.path, second.previous_page_path, second.next_page_path) == (
        "page2.html",
        "index.html",
        "page3.html",
    )
    assert (second.previous_page, second.next_page) == (1, 3)

    assert (third.path, third.previous_page_path, third.next_page_path) == ("page3.html", "page2.html", None)
    assert (third.previous_page, third.next_page) == (2, None)


def test_second_page_links_back_to_index_not_page1():
    second = build_links(2)[1]
    assert second.previous_page_path == INDEX_FILE
    assert second.previous_page_path != "page1.html"


@pytest.mark.parametrize("total_pages", [0, -3])
def test_build_links_needs_a_page(total_pages):
    with pytest.raises(ValueError):
        build_links(total_pages)


@given(st.integers(min_value=1, max_value=300))
def test_link_graph_invariants(total_pages):
    links = build_links(total_pages)

    assert [link.page for link in links] == list(range(1, total_pages + 1))
    assert links[0].previous_page is None
    assert links[0].previous_page_path is None
    assert links[-1].next_page is None
    assert links[-1].next_page_path is None

    for before, after in zip(links, links[1:]):
        assert before.next_page == after.page
        assert before.next_page_path == after.path
        assert after.previous_page == before.page
        assert after.previous_page_path == before.path
