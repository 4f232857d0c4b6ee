"""
Infrastructure layer: outbound ports and their storage adapters.

Supports multiple providers via factory pattern:
- memory: Process-local dictionaries
- local: JSON files for development
"""

from hexaparking.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]
