# topmark:header:start
#
#   project      : DocVariant
#   file         : test_brands.py
#   file_relpath : tests/directives/test_brands.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Unit tests for brand selection and the replacement table."""

from __future__ import annotations

import pytest

from docvariant.directives.brands import DEFAULT_BRANDS, Brand, build_replacements, resolve_brand


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("freenas", "FreeNAS"),
        ("truenas", "TrueNAS"),
        ("bsg-acme", "TrueNAS"),
        ("bsg-", "TrueNAS"),
        ("FreeNAS", None),
        ("other", None),
    ],
)
def test_resolve_brand(tag: str, expected: str | None) -> None:
    """Tags select brands verbatim or by prefix; anything else selects none."""
    brand = resolve_brand(tag, DEFAULT_BRANDS)
    assert (brand.name if brand else None) == expected


def test_replacement_table_order_and_values() -> None:
    """The table lists brand entries first, then chapter and URL."""
    table = build_replacements("truenas", 3, doc_url="https://u/")
    assert list(table) == ["%brand%", "%brandplain%", "%brandlower%", "%chapternum%", "%docurl%"]
    assert table["%brand%"] == "TrueNAS\\ :sup:`®`"
    assert table["%brandplain%"] == "TrueNAS"
    assert table["%brandlower%"] == "truenas"
    assert table["%chapternum%"] == "3"
    assert table["%docurl%"] == "https://u/"


def test_unknown_tag_has_no_brand_entries() -> None:
    """Only chapter and URL are substituted for an unknown tag."""
    assert list(build_replacements("custom", 0, doc_url="u")) == ["%chapternum%", "%docurl%"]


def test_custom_brands() -> None:
    """A custom brand table replaces the built-in one."""
    brands = (Brand(name="AcmeOS", tags=("acme",), prefixes=("acme-",)),)
    table = build_replacements("acme-pro", 0, doc_url="u", brands=brands)
    assert table["%brandlower%"] == "acmeos"
    assert "%brand%" not in build_replacements("freenas", 0, doc_url="u", brands=brands)
