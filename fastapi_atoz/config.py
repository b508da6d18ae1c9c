"""Configuration classes for fastapi-atoz."""

from dataclasses import dataclass, field
from typing import Tuple

from fastapi_atoz.models import LETTERS, SYMBOLS_TOKEN


@dataclass
class AtoZConfig:
    """
    Configuration for alphabetic browsing.

    Attributes:
        param_name: Query parameter carrying the raw filter (default: "alpha_filter")
        legacy_param_names: Older parameter names still accepted, checked in order
        title_field: Column used for ordering and the initial-letter predicate
        tie_breakers: Columns sorted ascending after the title (default: ("id",))
        symbols_token: Sentinel value selecting the symbols bucket (default: "sym")
        all_label: Label for the unfiltered link (default: "All")
        symbols_label: Label for the symbols link (default: "#")
        strict_mode: If True, raise errors for columns that cannot be resolved
        include_links: If True, responses carry the navigation links

    Example:
        config = AtoZConfig(title_field="name", tie_breakers=("menu_order", "id"))

        get_atoz = atoz_dependency(registry, config=config)

        @app.get("/books/")
        def read_books(atoz: AtoZManager = Depends(get_atoz)):
            ...
    """

    # Request settings
    param_name: str = "alpha_filter"
    legacy_param_names: Tuple[str, ...] = ("alpha",)

    # Query settings
    title_field: str = "title"
    tie_breakers: Tuple[str, ...] = ("id",)
    symbols_token: str = SYMBOLS_TOKEN

    # Link settings
    all_label: str = "All"
    symbols_label: str = "#"
    include_links: bool = True

    # Validation settings
    strict_mode: bool = False

    _extra: dict = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration values."""
        if not self.param_name:
            raise ValueError("param_name must not be empty")
        if self.param_name in self.legacy_param_names:
            raise ValueError("legacy_param_names cannot repeat param_name")
        if not self.title_field:
            raise ValueError("title_field must not be empty")
        if not self.symbols_token:
            raise ValueError("symbols_token must not be empty")
        if len(self.symbols_token) == 1 and self.symbols_token.lower() in LETTERS:
            raise ValueError("symbols_token cannot be a single letter")
        self.legacy_param_names = tuple(self.legacy_param_names)
        self.tie_breakers = tuple(self.tie_breakers)

    def param_names(self) -> Tuple[str, ...]:
        """
        Parameter names in lookup order.

        Returns:
            Tuple[str, ...]: The canonical name followed by the legacy names
        """
        return (self.param_name, *self.legacy_param_names)


class AtoZPresets:
    """Pre-defined AtoZConfig presets for common use cases."""

    @staticmethod
    def default() -> AtoZConfig:
        """Default configuration with sensible defaults."""
        return AtoZConfig()

    @staticmethod
    def strict() -> AtoZConfig:
        """Strict mode configuration - raises errors for unknown columns."""
        return AtoZConfig(strict_mode=True)

    @staticmethod
    def legacy_numeric_sentinel() -> AtoZConfig:
        """Configuration for sites whose links used ``9`` for the symbols bucket."""
        return AtoZConfig(symbols_token="9")
