"""fastapi-atoz: Alphabetic ordering and initial-letter filtering for FastAPI + SQLModel."""

from . import models as models  # noqa: F401
from .augmenter import QueryAugmenter  # noqa: F401
from .config import AtoZConfig, AtoZPresets  # noqa: F401
from .links import alphabet, build_alpha_links  # noqa: F401
from .manager import AtoZManager, atoz_dependency  # noqa: F401
from .models import (  # noqa: F401
    AlphaLink,
    AlphaLinks,
    AlphaListResponse,
    AlphaMeta,
    AlphaState,
    CanonicalFilter,
    FilterKind,
    SortingOrder,
    SortingQuery,
)
from .normalizer import normalize  # noqa: F401
from .predicates import PREDICATE_STRATEGIES, build_predicate, register_strategy  # noqa: F401
from .query import QueryState  # noqa: F401
from .registry import CapabilityRegistry  # noqa: F401
from .sorting import AlphaSortEngine  # noqa: F401

__all__ = [
    # Main class
    "AtoZManager",
    "atoz_dependency",
    # Core
    "normalize",
    "QueryAugmenter",
    "QueryState",
    "CapabilityRegistry",
    # Engines
    "AlphaSortEngine",
    # Strategy registry
    "PREDICATE_STRATEGIES",
    "build_predicate",
    "register_strategy",
    # Links
    "alphabet",
    "build_alpha_links",
    # Configuration
    "AtoZConfig",
    "AtoZPresets",
    # Models
    "CanonicalFilter",
    "FilterKind",
    "AlphaState",
    "SortingOrder",
    "SortingQuery",
    "AlphaLink",
    "AlphaLinks",
    "AlphaMeta",
    "AlphaListResponse",
    # Module
    "models",
]
