"""
Domain models and value objects.

Contains the Bid entity, its clock capability and the ranking comparator.
"""

from bidding.domain.bid import Bid, BidStatus
from bidding.domain.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from bidding.domain.ranking import bid_sort_key, compare_bids, rank_bids, select_winning_bid

__all__ = [
    # Bid model
    "Bid",
    "BidStatus",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    # Ranking
    "compare_bids",
    "bid_sort_key",
    "rank_bids",
    "select_winning_bid",
]
