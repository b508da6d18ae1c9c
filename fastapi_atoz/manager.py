"""FastAPI adapter for alphabetic browsing"""

import logging
from typing import Annotated, Any, Callable, Optional, Sequence, Type, Union

from fastapi import Depends, Query, Request
from sqlalchemy import Select
from sqlmodel import Session, SQLModel, select

from fastapi_atoz.augmenter import QueryAugmenter
from fastapi_atoz.config import AtoZConfig
from fastapi_atoz.links import build_alpha_links
from fastapi_atoz.models import (
    AlphaListResponse,
    AlphaLinks,
    AlphaMeta,
    SortingOrder,
    SortingQuery,
)
from fastapi_atoz.query import QueryState
from fastapi_atoz.registry import CapabilityRegistry

logger = logging.getLogger(__name__)

Category = Union[str, Sequence[str], None]


def _parse_sort(
    sort_by: Optional[str] = Query(None, alias="sort_by"),
    order: Optional[SortingOrder] = Query(SortingOrder.ASC, alias="order"),
) -> Optional[SortingQuery]:
    """
    Parse an explicit ordering from query parameters.

    Args:
        sort_by: Field to sort by
        order: Sorting order (ASC or DESC)

    Returns:
        Optional[SortingQuery]: Parsed sorting query or None if no sorting
    """
    if not sort_by:
        return None
    return SortingQuery(sort_by=sort_by, order=order)


def _parse_search(search: Optional[str] = Query(None, alias="search")) -> Optional[str]:
    """
    Parse the full-text search term from query parameters.

    Args:
        search: Search term

    Returns:
        Optional[str]: The term, or None when the request is not a search
    """
    return search or None


def _category_label(category: Category) -> Optional[str]:
    if category is None or isinstance(category, str):
        return category
    return ",".join(category)


class AtoZManager:
    """
    FastAPI alphabetic browsing manager.

    Wires the request's parameters into a QueryAugmenter and renders the
    augmented statement. One instance lives for one request.
    """

    def __init__(
        self,
        request: Request,
        registry: CapabilityRegistry,
        sorting: Optional[SortingQuery] = None,
        search: Optional[str] = None,
        is_admin: bool = False,
        config: Optional[AtoZConfig] = None,
    ):
        """
        Initialize AtoZManager.

        Args:
            request: FastAPI Request object
            registry: Categories that support alphabetic sorting
            sorting: Explicit ordering requested by the client
            search: Full-text search term; any value disables alphabetic mode
            is_admin: True for administrative listing views
            config: Configuration, defaults to AtoZConfig()
        """
        self.request = request
        self.registry = registry
        self.sorting = sorting
        self.search = search
        self.is_admin = is_admin
        self.config = config or AtoZConfig()
        self._augmenter = QueryAugmenter(registry, self.config)
        self.state: Optional[QueryState] = None

    @property
    def raw_filter(self) -> Optional[str]:
        """Raw filter value, checking the canonical then the legacy parameter names."""
        params = self.request.query_params
        for name in self.config.param_names():
            value = params.get(name)
            if value is not None:
                return value
        return None

    def apply_config(self, config: AtoZConfig) -> "AtoZManager":
        """
        Apply a configuration to this AtoZManager instance.

        Args:
            config: AtoZConfig instance with settings

        Returns:
            AtoZManager: Self for chaining
        """
        self.config = config
        self._augmenter = QueryAugmenter(self.registry, config)
        return self

    def with_sorting(self, sorting: Optional[SortingQuery]) -> "AtoZManager":
        """
        Set or override the explicit ordering.

        Args:
            sorting: Sorting configuration

        Returns:
            AtoZManager: Self for chaining
        """
        if sorting:
            self.sorting = sorting
        return self

    def build_state(self, statement: Select, category: Category) -> QueryState:
        """
        Build the request's query state from a base statement.

        Args:
            statement: Base SQLAlchemy Select query
            category: Category, or categories, the listing is scoped to

        Returns:
            QueryState: Fresh, unaugmented state
        """
        state = QueryState(
            statement=statement,
            category=category,
            is_search=self.search is not None,
        )
        if self.sorting:
            state.set_order(self.sorting.sort_by, self.sorting.order)
        return state

    def apply(self, statement: Select, category: Category) -> Select:
        """
        Augment a statement for the current request.

        Args:
            statement: Base SQLAlchemy Select query
            category: Category, or categories, the listing is scoped to

        Returns:
            Select: Statement with alphabetic ordering and filtering applied when eligible

        Raises:
            HTTPException: If strict_mode is set and a column cannot be resolved
        """
        state = self.build_state(statement, category)
        self._augmenter.augment(category, self.raw_filter, state, self.is_admin)
        self.state = state
        logger.debug(
            "Alphabetic state for %r: %s", _category_label(category), state.alpha_state
        )
        return state.to_select(strict_mode=self.config.strict_mode)

    def links(self, category: Category) -> Optional[AlphaLinks]:
        """
        Navigation links for the category, or None when it is unsupported.

        Args:
            category: Category the listing is scoped to

        Returns:
            Optional[AlphaLinks]: All, #, a-z links built from the request URL
        """
        if category is None or not isinstance(category, str):
            return None
        return build_alpha_links(
            self.request.url, category, self.registry, self.raw_filter, self.config
        )

    def fetch(self, statement: Select, session: Session, category: Category) -> Any:
        """
        Execute the augmented statement.

        Args:
            statement: Base SQLAlchemy Select query
            session: Database session
            category: Category, or categories, the listing is scoped to

        Returns:
            Any: Query results
        """
        return session.exec(self.apply(statement, category)).all()

    def generate_response(
        self, statement: Select, session: Session, category: Category
    ) -> AlphaListResponse[Any]:
        """
        Generate a complete alphabetic listing response.

        Args:
            statement: Base SQLAlchemy Select query
            session: Database session
            category: Category, or categories, the listing is scoped to

        Returns:
            AlphaListResponse: Data plus alphabetic meta and navigation links
        """
        data = self.fetch(statement, session, category)
        state = self.state
        sort = None
        if state.order_by:
            sort = SortingQuery(sort_by=state.order_by, order=state.order_direction)

        return AlphaListResponse(
            data=data,
            meta=AlphaMeta(
                category=_category_label(category),
                state=state.alpha_state,
                filter=state.alpha_filter,
                sort=sort,
                use_search_index=state.use_search_index,
            ),
            links=self.links(category) if self.config.include_links else None,
        )

    def from_model(
        self,
        model: Type[SQLModel],
        session: Session,
        category: Category = None,
    ) -> AlphaListResponse[Any]:
        """
        Convenience method to query directly from a model.

        Args:
            model: SQLModel class to query
            session: Database session
            category: Category of the listing, defaults to the model's table name

        Returns:
            AlphaListResponse: Complete alphabetic listing response

        Example:
            @app.get("/books/")
            def read_books(
                session: Session = Depends(get_session),
                atoz: AtoZManager = Depends(get_atoz),
            ):
                return atoz.from_model(Book, session)
        """
        if category is None:
            category = model.__tablename__
        return self.generate_response(select(model), session, category)


def atoz_dependency(
    registry: CapabilityRegistry,
    config: Optional[AtoZConfig] = None,
    is_admin: bool = False,
) -> Callable[..., AtoZManager]:
    """
    Create a FastAPI dependency that provides an AtoZManager per request.

    Args:
        registry: Categories that support alphabetic sorting
        config: Configuration shared by every request
        is_admin: True when the dependency serves administrative listing views

    Returns:
        Callable: Dependency to use with ``Depends``

    Example:
        registry = CapabilityRegistry(["book"])
        get_atoz = atoz_dependency(registry)

        @app.get("/books/")
        def read_books(atoz: AtoZManager = Depends(get_atoz)):
            ...
    """

    def _dependency(
        request: Request,
        sorting: Annotated[Optional[SortingQuery], Depends(_parse_sort)],
        search: Annotated[Optional[str], Depends(_parse_search)],
    ) -> AtoZManager:
        return AtoZManager(
            request,
            registry,
            sorting=sorting,
            search=search,
            is_admin=is_admin,
            config=config,
        )

    return _dependency
