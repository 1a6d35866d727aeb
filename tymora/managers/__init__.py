"""Manager classes for stored dice state."""

from tymora.managers.base import BaseManager
from tymora.managers.bag_manager import BagManager

__all__ = [
    "BaseManager",
    "BagManager",
]
