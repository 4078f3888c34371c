"""
Contract Validation Module

Wire-форма ставки: JSON Schema контракт и кодек Bid ↔ JSON.
"""

from .codec import BidCodec, CodecConfig, MalformedBidError, decode_bid, encode_bid
from .validators import BidValidator, ContractValidator, SchemaLoader, validate_bid

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BidValidator",
    "BidCodec",
    "CodecConfig",
    "MalformedBidError",
    # Functions
    "validate_bid",
    "encode_bid",
    "decode_bid",
]
