"""Normalization package.

Text-level helpers shared by the owner pipeline: the owner-string
normalizer and casing policy (``text``), transaction-date parsing
(``dates``) and address-line detection (``address``).

The owner-string normalizer follows the contract::

    def normalize(raw: str) -> str:
        ...

and never raises.
"""
