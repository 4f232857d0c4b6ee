"""
Models package.

Contains shared Pydantic models used across multiple API modules.
Module-specific request/response models live in their api/v1 packages.
"""

from hexaparking.models.errors import ProblemDetail, ValidationErrorDetail

__all__ = [
    "ProblemDetail",
    "ValidationErrorDetail",
]
