"""
Shortcode module.

Barrier scaling, the shortcode grammars and the encode/decode codec that
maps contracts to their compact string form.
"""
from .barrier import barrier_for_shortcode_string, barrier_from_shortcode_string
from .codec import decode, encode
from .grammar import BarrieredMatch, BarrierlessMatch, LegacyMatch, match_shortcode
from .models import ContractParams

__all__ = [
    "barrier_for_shortcode_string",
    "barrier_from_shortcode_string",
    "decode",
    "encode",
    "BarrieredMatch",
    "BarrierlessMatch",
    "LegacyMatch",
    "match_shortcode",
    "ContractParams",
]
