"""Paddock: wager ledger and payout scoring for Formula One races."""

__version__ = "0.1.0"
__author__ = "Paddock Team"

__all__ = ["__version__", "__author__"]
