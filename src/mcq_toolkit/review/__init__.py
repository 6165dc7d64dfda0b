"""
Module: review

Purpose:
    Reviewer step: fix answer detection and gate progression to variant
    generation until every question has exactly one correct option.

Key Classes:
    - ReviewSession
    - ReviewIssue
    - ReviewIncompleteError
"""

from .session import ReviewIncompleteError, ReviewIssue, ReviewSession

__all__ = [
    "ReviewSession",
    "ReviewIssue",
    "ReviewIncompleteError",
]
