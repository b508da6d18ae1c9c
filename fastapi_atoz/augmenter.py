"""Query augmentation for alphabetic browsing."""

import logging
from typing import Any, Optional, Sequence, Union

from fastapi_atoz.config import AtoZConfig
from fastapi_atoz.models import AlphaState, SortingOrder
from fastapi_atoz.normalizer import normalize
from fastapi_atoz.predicates import build_predicate, resolve_column
from fastapi_atoz.query import QueryState
from fastapi_atoz.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class QueryAugmenter:
    """
    Applies alphabetic ordering and initial-letter filtering to a query.

    Augmentation is an enhancement, never a requirement: an unsupported
    category, a search request or a missing query leaves the query as it
    was, and malformed filter input is coerced rather than rejected.
    """

    def __init__(self, registry: CapabilityRegistry, config: Optional[AtoZConfig] = None):
        """
        Initialize QueryAugmenter.

        Args:
            registry: Categories that support alphabetic sorting
            config: Configuration, defaults to AtoZConfig()
        """
        self.registry = registry
        self.config = config or AtoZConfig()

    def is_applicable(self, category: Union[str, Sequence[str], None], query: QueryState) -> bool:
        """
        Check whether alphabetic mode applies to a query.

        Args:
            category: Category, or categories, the listing is scoped to
            query: Query state

        Returns:
            bool: False for search requests and unsupported categories
        """
        if query.is_search:
            return False
        return self.registry.supports(category)

    def augment(
        self,
        category: Union[str, Sequence[str], None],
        raw_filter: Optional[Any],
        query: Optional[QueryState],
        is_admin: bool = False,
    ) -> Optional[QueryState]:
        """
        Augment a query with alphabetic ordering and filtering.

        Args:
            category: Category, or categories, the listing is scoped to.
                None falls back to the query's own category.
            raw_filter: Raw filter value from the request, None when absent
            query: Query state to mutate
            is_admin: True for administrative listing views

        Returns:
            Optional[QueryState]: The same query, mutated in place
        """
        if query is None:
            return None
        if category is None:
            category = query.category

        if not self.is_applicable(category, query):
            logger.debug("Alphabetic mode not applicable for category %r", category)
            query.alpha_state = AlphaState.INACTIVE
            return query

        # An explicit admin ordering wins over the alphabetic one
        if is_admin and query.has_explicit_order:
            logger.debug("Keeping explicit admin ordering on %r", query.order_by)
        else:
            query.set_order(self.config.title_field, SortingOrder.ASC)
            query.tie_breakers = list(self.config.tie_breakers)
        query.alpha_state = AlphaState.ORDERED

        if raw_filter is None:
            return query

        canonical = normalize(raw_filter, self.config.symbols_token)
        query.alpha_filter = canonical
        query.disable_search_index()

        if canonical.is_none:
            return query

        column = resolve_column(query.statement, self.config.title_field)
        if column is None:
            logger.debug("Title field %r not found, skipping filter", self.config.title_field)
            return query

        fragment = build_predicate(column, canonical)
        if fragment is not None:
            query.add_condition(fragment, prepend=True)
            query.alpha_state = AlphaState.FILTERED
            logger.debug("Applied alphabetic filter %s", canonical)
        return query
