"""Repository implementations for infrastructure layer."""

from .communication_repository import CommunicationRepository
from .local_override_repository import LocalOverrideRepository

__all__ = [
    "CommunicationRepository",
    "LocalOverrideRepository",
]
