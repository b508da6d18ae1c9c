"""Request-scoped query state mutated by the augmenter."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

from sqlalchemy import Select

from fastapi_atoz.models import AlphaState, CanonicalFilter, SortingOrder
from fastapi_atoz.sorting import AlphaSortEngine


@dataclass
class QueryState:
    """
    Mutable view of a listing query for the duration of one request.

    Conditions are accumulated separately from the statement and only
    rendered by :meth:`to_select`, so fragments can be prepended ahead of
    conditions other components have already added.

    Attributes:
        statement: Base SQLAlchemy Select query
        category: Category, or categories, the listing is scoped to
        order_by: Primary sort field, None when no ordering was requested
        order_direction: Direction of the primary sort field
        tie_breakers: Fields sorted ascending after the primary field
        conditions: Filter clause accumulator, AND'd together
        is_search: True when the request is a full-text search
        use_search_index: False once secondary search-index integration is disabled
        alpha_filter: Canonical filter stored for downstream consumers
        alpha_state: Progress of alphabetic mode for this request
    """

    statement: Select
    category: Union[str, Sequence[str], None] = None
    order_by: Optional[str] = None
    order_direction: SortingOrder = SortingOrder.ASC
    tie_breakers: List[str] = field(default_factory=list)
    conditions: List[Any] = field(default_factory=list)
    is_search: bool = False
    use_search_index: bool = True
    alpha_filter: Optional[CanonicalFilter] = None
    alpha_state: AlphaState = AlphaState.UNCHECKED

    @property
    def has_explicit_order(self) -> bool:
        """Whether an ordering has been set on this query."""
        return bool(self.order_by)

    def set_order(self, order_by: str, direction: SortingOrder = SortingOrder.ASC) -> None:
        self.order_by = order_by
        self.order_direction = direction

    def add_condition(self, condition: Any, prepend: bool = True) -> None:
        """
        Add a condition to the filter clause.

        Args:
            condition: SQLAlchemy condition
            prepend: Put the condition ahead of existing ones (default: True)
        """
        if condition is None:
            return
        if prepend:
            self.conditions.insert(0, condition)
        else:
            self.conditions.append(condition)

    def disable_search_index(self) -> None:
        self.use_search_index = False

    def to_select(self, strict_mode: bool = False) -> Select:
        """
        Render the state into an executable statement.

        Args:
            strict_mode: If True, raise errors for unknown sort fields

        Returns:
            Select: Statement with conditions and ordering applied

        Raises:
            HTTPException: If strict_mode is True and an unknown sort field is encountered
        """
        statement = self.statement
        if self.conditions:
            statement = statement.where(*self.conditions)
        return AlphaSortEngine(strict_mode=strict_mode).apply_order(
            statement,
            self.statement.selected_columns,
            self.order_by,
            self.order_direction,
            self.tie_breakers,
        )
