"""Comparison scope shared by the diff and change queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonScope:
    """Which changes a query covers.

    The committed range ``<base>...<branch_ref>`` is always included; staged
    changes in the index are added when ``include_staged`` is set.
    """

    include_staged: bool = False
    branch_ref: str = "HEAD"
