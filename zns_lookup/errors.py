"""ZNS lookup exception hierarchy.

All package-specific exceptions inherit from :class:`ZNSError`.
"""

from __future__ import annotations


class ZNSError(Exception):
    """Base exception for all ZNS lookup errors."""


class InvalidChainIdError(ZNSError, ValueError):
    """Raised when an EIP-155 chain identifier cannot be decoded."""


class InvalidFormatError(InvalidChainIdError):
    """Raised when a chain identifier is not of the form ``eip155:<id>``."""


class InvalidNumberError(InvalidChainIdError):
    """Raised when the id part of a chain identifier is not a base-10 integer."""


class ResolutionUnavailable(ZNSError):
    """Raised when the ZNS API cannot be reached or returns an unusable body."""


class MethodNotFoundError(ZNSError):
    """Raised when an RPC request names a method this adapter does not serve."""
