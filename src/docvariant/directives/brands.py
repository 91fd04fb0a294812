# topmark:header:start
#
#   project      : DocVariant
#   file         : brands.py
#   file_relpath : src/docvariant/directives/brands.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Brands and the per-file replacement table.

A build tag selects at most one `Brand`:

* a tag equal to one of the brand's canonical ``tags`` selects it;
* a tag starting with one of the brand's ``prefixes`` (private builds such as
  ``bsg-acme``) selects it;
* any other tag selects no brand. Brand placeholders are then left untouched
  while ``%chapternum%`` and ``%docurl%`` are still substituted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from docvariant.constants import (
    BRAND_LOWER_PLACEHOLDER,
    BRAND_PLACEHOLDER,
    BRAND_PLAIN_PLACEHOLDER,
    CHAPTER_NUMBER_PLACEHOLDER,
    DOC_URL_PLACEHOLDER,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class Brand:
    """A product variant that documents can be built for.

    Attributes:
        name (str): Plain product name, e.g. ``"FreeNAS"``.
        tags (tuple[str, ...]): Build tags that select this brand verbatim.
        prefixes (tuple[str, ...]): Tag prefixes that select this brand.
    """

    name: str
    tags: tuple[str, ...] = ()
    prefixes: tuple[str, ...] = ()

    @property
    def rst(self) -> str:
        """Brand name with a superscript registered sign, in reST markup."""
        return f"{self.name}\\ :sup:`®`"

    def matches(self, tag: str) -> bool:
        """Return True if ``tag`` selects this brand."""
        return tag in self.tags or any(tag.startswith(p) for p in self.prefixes)


DEFAULT_BRANDS: Final[tuple[Brand, ...]] = (
    Brand(name="FreeNAS", tags=("freenas",)),
    Brand(name="TrueNAS", tags=("truenas",), prefixes=("bsg-",)),
)


def resolve_brand(tag: str, brands: Iterable[Brand] = DEFAULT_BRANDS) -> Brand | None:
    """Return the first brand selected by ``tag``, or ``None``."""
    for brand in brands:
        if brand.matches(tag):
            return brand
    return None


def build_replacements(
    tag: str,
    chapter_index: int,
    *,
    doc_url: str,
    brands: Iterable[Brand] = DEFAULT_BRANDS,
) -> dict[str, str]:
    """Build the placeholder → literal table for one document.

    Args:
        tag (str): The active build tag.
        chapter_index (int): Zero-based position of the top-level document in the build.
        doc_url (str): Documentation URL substituted for ``%docurl%``.
        brands (Iterable[Brand]): Known brands, searched in order.

    Returns:
        dict[str, str]: The replacement table, in substitution order.
    """
    table: dict[str, str] = {}
    brand = resolve_brand(tag, brands)
    if brand is not None:
        table[BRAND_PLACEHOLDER] = brand.rst
        table[BRAND_PLAIN_PLACEHOLDER] = brand.name
        table[BRAND_LOWER_PLACEHOLDER] = brand.name.lower()
    table[CHAPTER_NUMBER_PLACEHOLDER] = str(chapter_index)
    table[DOC_URL_PLACEHOLDER] = doc_url
    return table
