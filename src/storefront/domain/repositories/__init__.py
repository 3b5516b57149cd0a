"""Domain Repository Interfaces - Abstract definitions."""

from .contact_repository import IContactRepository
from .order_repository import IOrderRepository
from .profile_repository import IProfileRepository

__all__ = ["IContactRepository", "IOrderRepository", "IProfileRepository"]
