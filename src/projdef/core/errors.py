"""
Custom exception hierarchy for projdef.

Parsing itself never raises: malformed definitions degrade to partially
populated results. These exceptions cover registry misuse and calls on
definitions that have no projection bound.
"""

from typing import Any, Dict, List, Optional


class ProjdefException(Exception):
    """
    Base exception for all projdef-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ProjdefException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class RegistrationError(ProjdefException):
    """Raised when a projection cannot be added to the registry."""

    def __init__(
        self,
        message: str,
        projection_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if projection_name is not None:
            error_details["projection_name"] = projection_name

        super().__init__(
            message=message,
            error_code="REGISTRATION_ERROR",
            details=error_details,
            suggestions=["Register a Projection subclass under a non-empty name"],
        )


class UnresolvedProjectionError(ProjdefException):
    """
    Raised for a registry miss when strict projection checking is enabled.

    Without strict checking the same condition is only reported to the
    error sink.
    """

    def __init__(
        self,
        message: str,
        projection_name: Optional[str] = None,
        crs_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize UnresolvedProjectionError.

        Args:
            message: User-friendly error message
            projection_name: Projection name that was not found
            crs_code: Code of the definition being resolved
            details: Technical details
        """
        error_details = details or {}
        if projection_name is not None:
            error_details["projection_name"] = projection_name
        if crs_code:
            error_details["crs_code"] = crs_code

        super().__init__(
            message=message,
            error_code="UNRESOLVED_PROJECTION",
            details=error_details,
            suggestions=[
                "Import the module that registers this projection before parsing",
                "Check the +proj value or the WKT PROJECTION name",
            ],
        )


class UnboundProjectionError(ProjdefException):
    """Raised when forward/inverse is called on a definition with no projection bound."""

    def __init__(self, crs_code: Optional[str] = None):
        details = {"crs_code": crs_code} if crs_code else {}
        super().__init__(
            message=f"No projection is bound to definition '{crs_code or ''}'",
            error_code="UNBOUND_PROJECTION",
            details=details,
            suggestions=["Check CRSDefinition.is_bound before transforming points"],
        )
