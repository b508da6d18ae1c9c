"""Title predicates with strategy pattern for canonical filter handling."""

from typing import Any, Callable, Dict, Optional

from sqlalchemy import ColumnElement, Select, bindparam, func

from fastapi_atoz.models import LETTERS, CanonicalFilter, FilterKind

# Type alias for predicate strategy functions
PredicateStrategyFn = Callable[[ColumnElement[Any], CanonicalFilter], Optional[Any]]


def _first_char_lower(column: ColumnElement[Any]) -> ColumnElement[Any]:
    """
    Lowercased first character of a column.

    Args:
        column: SQLAlchemy column element

    Returns:
        ColumnElement: ``lower(substr(column, 1, 1))``
    """
    return func.lower(func.substr(column, 1, 1))


# --- Strategy functions for each filter kind ---


def _strategy_none(column: ColumnElement[Any], canonical: CanonicalFilter) -> None:
    return None


def _strategy_letter(column: ColumnElement[Any], canonical: CanonicalFilter) -> Any:
    return _first_char_lower(column) == bindparam("alpha_letter", canonical.letter, unique=True)


def _strategy_symbols(column: ColumnElement[Any], canonical: CanonicalFilter) -> Any:
    return _first_char_lower(column).not_in(
        bindparam("alpha_letters", list(LETTERS), expanding=True, unique=True)
    )


# Strategy registry: maps FilterKind -> handler function
PREDICATE_STRATEGIES: Dict[FilterKind, PredicateStrategyFn] = {
    FilterKind.NONE: _strategy_none,
    FilterKind.LETTER: _strategy_letter,
    FilterKind.SYMBOLS: _strategy_symbols,
}


def build_predicate(column: ColumnElement[Any], canonical: CanonicalFilter) -> Optional[Any]:
    """
    Build the title predicate for a canonical filter.

    Values are always bound parameters, never part of the SQL text.

    Args:
        column: Title column
        canonical: Canonical filter

    Returns:
        Optional[Any]: SQLAlchemy condition, or None when nothing should be filtered
    """
    strategy = PREDICATE_STRATEGIES.get(canonical.kind)
    if strategy is None:
        return None
    return strategy(column, canonical)


def register_strategy(kind: FilterKind, strategy: PredicateStrategyFn) -> None:
    """
    Register a custom predicate strategy for a filter kind.

    Args:
        kind: The FilterKind to register for
        strategy: A callable with signature (column, canonical) -> condition

    Example:
        def prefix_like(column, canonical):
            return column.ilike(f"{canonical.letter}%")

        register_strategy(FilterKind.LETTER, prefix_like)
    """
    PREDICATE_STRATEGIES[kind] = strategy


def get_entity_attribute(statement: Select, field: str) -> Optional[ColumnElement[Any]]:
    """
    Try to get a column-like attribute from the statement's entity.

    This enables sorting and filtering on computed titles like hybrid_property
    that have SQL expressions defined.

    Args:
        statement: SQLAlchemy Select query
        field: Name of the field/attribute to get

    Returns:
        Optional[ColumnElement]: The SQL expression if available, None otherwise
    """
    try:
        column_descriptions = statement.column_descriptions
    except Exception:
        return None
    if not column_descriptions:
        return None

    entity = column_descriptions[0].get("entity")
    if entity is None:
        return None

    attr = getattr(entity, field, None)
    if attr is None:
        return None

    if isinstance(attr, ColumnElement):
        return attr

    if hasattr(attr, "__clause_element__"):
        return attr.__clause_element__()

    return None


def resolve_column(statement: Select, field: str) -> Optional[ColumnElement[Any]]:
    """
    Resolve a field name against a statement's selected columns or entity.

    Args:
        statement: SQLAlchemy Select query
        field: Name of the field

    Returns:
        Optional[ColumnElement]: Column element, or None if it cannot be resolved
    """
    column = statement.selected_columns.get(field)
    if column is None:
        column = get_entity_attribute(statement, field)
    return column
