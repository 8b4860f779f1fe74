# =============================================================================
# core/models.py  —  Data Models
# =============================================================================
#
# The upstream response is NOT modelled here.  eBird's JSON is passed through
# untouched, so the API's own shape is the contract.  The only structured
# value this system creates is the request it is about to send.
# =============================================================================

from dataclasses import dataclass, field
from typing import Union

# The primitive types the eBird query string can carry.
QueryValue = Union[str, int, float, bool]


# -----------------------------------------------------------------------------
# RequestDescriptor: one upstream GET, fully resolved
# -----------------------------------------------------------------------------
# Built per invocation by a request builder in core/endpoints.py and consumed
# by EBirdClient.call().  `params` holds upstream key names (camelCase, e.g.
# "includeProvisional") in insertion order, and never contains None: optional
# arguments the caller did not supply are simply not keys.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestDescriptor:
    """An endpoint path plus the query parameters to send with it."""

    path: str                                      # "/data/obs/US-NY/recent"
    params: dict[str, QueryValue] = field(default_factory=dict)
