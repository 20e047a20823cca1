"""Domain entities for internal representation.

These are plain dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .gateway_metrics import GatewayMetrics

__all__ = ["GatewayMetrics"]
