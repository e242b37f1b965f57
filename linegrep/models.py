from dataclasses import dataclass
from enum import Enum


class MatchMode(Enum):
    LITERAL = "literal"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Line:
    index: int
    text: str


class LineBuffer:
    """
    Ordered, index-addressable lines of one source.
    buffer[i].index == i for every line.
    """

    def __init__(self, texts=()):
        self._lines = tuple(Line(i, text) for i, text in enumerate(texts))

    def __len__(self):
        return len(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __iter__(self):
        return iter(self._lines)

    def __repr__(self):
        return f"LineBuffer({len(self._lines)} lines)"


@dataclass(frozen=True)
class MatchConfig:
    pattern: str
    mode: MatchMode = MatchMode.PATTERN
    case_insensitive: bool = False
    invert: bool = False


@dataclass(frozen=True)
class WindowSpec:
    before: int = 0
    after: int = 0

    def __post_init__(self):
        if self.before < 0 or self.after < 0:
            raise ValueError(f"window sizes must be non-negative, got before={self.before} after={self.after}")

    @classmethod
    def from_flags(cls, after=None, before=None, context=None):
        """
        Combines -A/-B/-C values. -C is the default for both sides,
        an explicit -A or -B wins for its own side.
        """
        default = context or 0
        return cls(
            before=default if before is None else before,
            after=default if after is None else after,
        )

    @property
    def is_empty(self):
        return self.before == 0 and self.after == 0


@dataclass(frozen=True)
class OutputEntry:
    index: int
    text: str
    is_hit: bool


@dataclass(frozen=True)
class SearchOptions:
    match: MatchConfig
    window: WindowSpec = WindowSpec()
    count: bool = False
    number: bool = False


@dataclass(frozen=True)
class SearchResult:
    hits: tuple
    entries: tuple = ()
    count: bool = False

    @property
    def hit_count(self):
        return len(self.hits)
