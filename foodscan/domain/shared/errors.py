"""
Domain exceptions.

Typed exceptions for explicit error handling.
Infrastructure raises them; the product resolver catches them at its
boundary and degrades to "no data".
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# SCAN DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ScanDomainError(DomainError):
    """
    Scan trigger misuse.

    Raised when:
    - The trigger is built with a non-positive scan timeout

    Example:
        >>> raise ScanDomainError("Scan timeout must be positive, got 0")
    """

    pass


# ═══════════════════════════════════════════════════════════
# PRODUCT LOOKUP EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ProductLookupError(DomainError):
    """Base exception for product database lookups."""

    pass


class BarcodeNotFoundError(ProductLookupError):
    """
    Barcode not found in database.

    Raised when:
    - OpenFoodFacts reports status=0 for the barcode
    - Response carries no product object

    Example:
        >>> raise BarcodeNotFoundError("Barcode 123456789 not found")
    """

    pass


class ExternalServiceError(ProductLookupError):
    """
    External service call failed.

    Raised when:
    - OpenFoodFacts returns a non-2xx status
    - Connection cannot be established
    - Client used outside its async context

    Example:
        >>> raise ExternalServiceError("OpenFoodFacts API error: 503")
    """

    pass


class TimeoutError(ExternalServiceError):
    """
    External service call timed out.

    Example:
        >>> raise TimeoutError("OpenFoodFacts API timeout")
    """

    pass


class MalformedResponseError(ExternalServiceError):
    """
    External service returned a body we cannot interpret.

    Raised when:
    - Body is not JSON
    - JSON is not an object
    - Product object does not match the expected shape

    Example:
        >>> raise MalformedResponseError("Response body is not JSON")
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - Settings values are out of range
    - Required fields are missing

    Example:
        >>> raise ValidationError("FOODSCAN_SCAN_TIMEOUT_MS must be positive")
    """

    pass
