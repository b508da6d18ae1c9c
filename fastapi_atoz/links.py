"""Navigation link collection for alphabetic browsing."""

from typing import Any, List, Optional

from fastapi.datastructures import URL

from fastapi_atoz.config import AtoZConfig
from fastapi_atoz.models import LETTERS, AlphaLink, AlphaLinks, CanonicalFilter
from fastapi_atoz.normalizer import normalize
from fastapi_atoz.registry import CapabilityRegistry


def alphabet() -> List[CanonicalFilter]:
    """
    All canonical filters in navigation order: All, #, a-z.

    Returns:
        List[CanonicalFilter]: 28 canonical filters
    """
    return [
        CanonicalFilter.none(),
        CanonicalFilter.symbols(),
        *(CanonicalFilter.for_letter(letter) for letter in LETTERS),
    ]


def build_alpha_links(
    base_url: Any,
    category: str,
    registry: CapabilityRegistry,
    current: Optional[str] = None,
    config: Optional[AtoZConfig] = None,
) -> Optional[AlphaLinks]:
    """
    Build the All, #, a-z navigation links for a category.

    The query parameter on each link normalizes back to the link's own
    canonical filter. A missing or empty selection marks "All" as current.

    Args:
        base_url: Listing URL the links are derived from (str or starlette URL)
        category: Category the listing is scoped to
        registry: Categories that support alphabetic sorting
        current: Raw filter value of the current request
        config: Configuration, defaults to AtoZConfig()

    Returns:
        Optional[AlphaLinks]: Links, or None if the category is unsupported

    Example:
        links = build_alpha_links("https://example.com/books/", "book", registry, "b")
        [link.label for link in links.links if link.current]  # ["b"]
    """
    if not registry.supports(category):
        return None

    config = config or AtoZConfig()
    url = base_url if isinstance(base_url, URL) else URL(str(base_url))
    root = url.remove_query_params(config.param_names())
    selected = normalize(current, config.symbols_token)

    links = []
    for canonical in alphabet():
        value = canonical.representative(config.symbols_token)
        if canonical.is_none:
            label = config.all_label
            link_url = root
        else:
            label = config.symbols_label if canonical.is_symbols else value
            link_url = root.include_query_params(**{config.param_name: value})
        links.append(
            AlphaLink(
                label=label,
                value=value,
                url=str(link_url),
                current=canonical == selected,
            )
        )

    return AlphaLinks(category=category, current=selected, links=links)
