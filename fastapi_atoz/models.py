"""FastAPI A-Z browsing models"""

from enum import StrEnum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

LETTERS = "abcdefghijklmnopqrstuvwxyz"
SYMBOLS_TOKEN = "sym"


class FilterKind(StrEnum):
    """Canonical filter shapes"""

    NONE = "none"  # no alphabetic restriction
    LETTER = "letter"  # title starts with a single a-z letter
    SYMBOLS = "symbols"  # title does not start with a-z


class SortingOrder(StrEnum):
    """Sorting orders"""

    ASC = "asc"  # ascending order
    DESC = "desc"  # descending order


class AlphaState(StrEnum):
    """Per-request alphabetic mode state"""

    UNCHECKED = "unchecked"  # capability not looked up yet
    INACTIVE = "inactive"  # capability check failed, query untouched
    ORDERED = "ordered"  # alphabetic ordering applied
    FILTERED = "filtered"  # ordering plus a title predicate applied


T = TypeVar("T")


class CanonicalFilter(BaseModel):
    """Normalized alphabetic selection.

    Always exactly one of three shapes: ``NONE``, ``LETTER`` holding a single
    lowercase ASCII letter, or ``SYMBOLS``.
    """

    model_config = ConfigDict(frozen=True)

    kind: FilterKind
    letter: Optional[str] = None

    @model_validator(mode="after")
    def check_shape(self) -> "CanonicalFilter":
        if self.kind == FilterKind.LETTER:
            if self.letter is None or len(self.letter) != 1 or self.letter not in LETTERS:
                raise ValueError("letter filter requires a single lowercase a-z character")
        elif self.letter is not None:
            raise ValueError(f"{self.kind} filter cannot carry a letter")
        return self

    @classmethod
    def none(cls) -> "CanonicalFilter":
        return cls(kind=FilterKind.NONE)

    @classmethod
    def for_letter(cls, letter: str) -> "CanonicalFilter":
        return cls(kind=FilterKind.LETTER, letter=letter)

    @classmethod
    def symbols(cls) -> "CanonicalFilter":
        return cls(kind=FilterKind.SYMBOLS)

    @property
    def is_none(self) -> bool:
        return self.kind == FilterKind.NONE

    @property
    def is_letter(self) -> bool:
        return self.kind == FilterKind.LETTER

    @property
    def is_symbols(self) -> bool:
        return self.kind == FilterKind.SYMBOLS

    def representative(self, symbols_token: str = SYMBOLS_TOKEN) -> str:
        """
        Raw parameter value that normalizes back to this filter.

        Args:
            symbols_token: Sentinel used for the symbols bucket

        Returns:
            str: Empty string, the letter, or the symbols sentinel
        """
        if self.kind == FilterKind.LETTER:
            return self.letter
        if self.kind == FilterKind.SYMBOLS:
            return symbols_token
        return ""


class SortingQuery(BaseModel):
    """Sorting query model"""

    sort_by: str
    order: SortingOrder


class AlphaLink(BaseModel):
    """A single navigation link"""

    label: str
    value: str
    url: str
    current: bool = False


class AlphaLinks(BaseModel):
    """Navigation links for a category: All, #, a-z"""

    category: str
    current: CanonicalFilter
    links: List[AlphaLink]


class AlphaMeta(BaseModel):
    """Meta model"""

    category: Optional[str] = None
    state: AlphaState
    filter: Optional[CanonicalFilter] = None
    sort: Optional[SortingQuery] = None
    use_search_index: bool = True


class AlphaListResponse(BaseModel, Generic[T]):
    """Alphabetic listing response model"""

    data: List[T]
    meta: AlphaMeta
    links: Optional[AlphaLinks] = None
