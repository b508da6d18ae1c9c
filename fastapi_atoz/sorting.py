"""Sort engine for applying title ordering to queries."""

import logging
from typing import Any, Optional, Sequence

from fastapi import HTTPException, status
from sqlalchemy import ColumnCollection, ColumnElement, Select

from fastapi_atoz.models import SortingOrder
from fastapi_atoz.predicates import get_entity_attribute

logger = logging.getLogger(__name__)


class AlphaSortEngine:
    """
    Engine for applying ordering to SQL queries.

    Handles column resolution (including computed fields), sort direction and
    the ascending tie-breaker columns that keep equal titles in a stable order.
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize AlphaSortEngine.

        Args:
            strict_mode: If True, raise errors for unknown sort fields
        """
        self.strict_mode = strict_mode

    def _resolve(
        self,
        statement: Select,
        columns_map: ColumnCollection[str, ColumnElement[Any]],
        field: str,
    ) -> Optional[ColumnElement[Any]]:
        column = columns_map.get(field)

        # Fall back to computed fields (hybrid_property, etc.)
        if column is None:
            column = get_entity_attribute(statement, field)

        if column is None:
            if self.strict_mode:
                available = ", ".join(sorted(columns_map.keys()))
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Unknown sort field '{field}'. Available fields: {available}",
                )
            logger.debug("Skipping unknown sort field %r", field)
        return column

    def apply_order(
        self,
        statement: Select,
        columns_map: ColumnCollection[str, ColumnElement[Any]],
        order_by: Optional[str],
        direction: SortingOrder = SortingOrder.ASC,
        tie_breakers: Sequence[str] = (),
    ) -> Select:
        """
        Apply ordering to a query.

        Args:
            statement: Base SQLAlchemy Select query
            columns_map: Map of column names to column elements
            order_by: Primary sort field
            direction: Direction of the primary sort field
            tie_breakers: Fields sorted ascending after the primary field

        Returns:
            Select: Query with ordering applied

        Raises:
            HTTPException: If strict_mode is True and an unknown field is encountered
        """
        if not order_by:
            return statement

        column = self._resolve(statement, columns_map, order_by)
        if column is None:
            return statement

        clauses = [column.desc() if direction == SortingOrder.DESC else column.asc()]
        for field in tie_breakers:
            if field == order_by:
                continue
            tie = self._resolve(statement, columns_map, field)
            if tie is not None:
                clauses.append(tie.asc())

        return statement.order_by(*clauses)
