"""Value objects shared across layers."""

from enum import Enum


class FilterEncoding(str, Enum):
    """How an absent product filter is expressed in the search query."""

    EXPRESSION = "expression"
    SENTINEL = "sentinel"
