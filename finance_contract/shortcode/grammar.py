"""
Shortcode grammars.

Each grammar is a matcher returning a typed match or None. Matchers are
tried in order by match_shortcode, and a shortcode no grammar accepts
resolves to LegacyMatch:

    TYPE_SYMBOL_PAYOUT_START[F]_EXPIRY[F|T]_BARRIER1_BARRIER2   barriered
    TYPE_SYMBOL_PAYOUT_START_COUNT[T]                           barrierless
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

BARRIERED_RE = re.compile(
    r"(?P<code>[^_]+)_(?P<symbol>[\w\d]+)_(?P<payout>\d*\.?\d*)"
    r"_(?P<start>\d+)(?P<start_cond>F?)"
    r"_(?P<expiry>\d+)(?P<expiry_cond>[FT]?)"
    r"_(?P<barrier>S?-?\d+P?)_(?P<barrier2>S?-?\d+P?)"
)

BARRIERLESS_RE = re.compile(
    r"(?P<code>[^_]+)_(?P<symbol>R?_?[^_\W]+)_(?P<payout>\d*\.?\d*)"
    r"_(?P<start>\d+)_(?P<count>\d+)(?P<expiry_cond>T?)"
)

# Hour-based shortcodes from the old intraday product, e.g. "_1H30".
LEGACY_HOUR_RE = re.compile(r"_\d+H\d+")


@dataclass(frozen=True)
class BarrieredMatch:
    """Shortcode with start and expiry fields followed by two barrier tokens."""
    code: str
    underlying_symbol: str
    payout: str
    date_start: str
    forward_start: bool
    expiry: str
    expiry_cond: str        # '', 'F' (fixed expiry) or 'T' (tick count)
    barrier: str
    barrier2: str

    grammar = "barriered"

    @property
    def tick_expiry(self) -> bool:
        return self.expiry_cond == "T"

    @property
    def fixed_expiry(self) -> bool:
        return self.expiry_cond == "F"

    @property
    def tick_count(self) -> Optional[int]:
        return int(self.expiry) if self.tick_expiry else None

    @property
    def date_expiry(self) -> Optional[int]:
        return None if self.tick_expiry else int(self.expiry)

    @property
    def barrier_tokens(self) -> tuple[str, ...]:
        return (self.barrier, self.barrier2)


@dataclass(frozen=True)
class BarrierlessMatch:
    """Shortcode without barrier tokens."""
    code: str
    underlying_symbol: str
    payout: str
    date_start: str
    count: str              # tick count when tick_expiry, otherwise parsed and ignored
    tick_expiry: bool

    grammar = "barrierless"
    forward_start = False
    fixed_expiry = False
    date_expiry = None

    @property
    def tick_count(self) -> Optional[int]:
        return int(self.count) if self.tick_expiry else None

    @property
    def barrier_tokens(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class LegacyMatch:
    """Shortcode that is unknown or in a retired format."""
    reason: str

    grammar = "legacy"


ShortcodeMatch = Union[BarrieredMatch, BarrierlessMatch, LegacyMatch]


def match_barriered(shortcode: str) -> Optional[BarrieredMatch]:
    """Match the barriered grammar."""
    match = BARRIERED_RE.fullmatch(shortcode)
    if match is None:
        return None

    return BarrieredMatch(
        code=match.group("code"),
        underlying_symbol=match.group("symbol"),
        payout=match.group("payout"),
        date_start=match.group("start"),
        forward_start=match.group("start_cond") == "F",
        expiry=match.group("expiry"),
        expiry_cond=match.group("expiry_cond"),
        barrier=match.group("barrier"),
        barrier2=match.group("barrier2"),
    )


def match_barrierless(shortcode: str) -> Optional[BarrierlessMatch]:
    """Match the barrierless grammar."""
    match = BARRIERLESS_RE.fullmatch(shortcode)
    if match is None:
        return None

    return BarrierlessMatch(
        code=match.group("code"),
        underlying_symbol=match.group("symbol"),
        payout=match.group("payout"),
        date_start=match.group("start"),
        count=match.group("count"),
        tick_expiry=match.group("expiry_cond") == "T",
    )


SHORTCODE_GRAMMARS: tuple[Callable[[str], Optional[ShortcodeMatch]], ...] = (
    match_barriered,
    match_barrierless,
)


def is_legacy_format(shortcode: str) -> bool:
    """True for the retired hour-based shortcode format."""
    return LEGACY_HOUR_RE.search(shortcode) is not None


def match_shortcode(shortcode: str) -> ShortcodeMatch:
    """
    Match a shortcode against the known grammars in order.

    Returns:
        The first grammar match, or LegacyMatch if none applies
    """
    for matcher in SHORTCODE_GRAMMARS:
        result = matcher(shortcode)
        if result is not None:
            return result

    return LegacyMatch(reason="no grammar matched")
