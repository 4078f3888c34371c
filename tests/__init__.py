"""
Test suite for bidding-core

Contains:
- tests/unit/          : Unit tests for the Bid model, ranking and wire contract
"""
