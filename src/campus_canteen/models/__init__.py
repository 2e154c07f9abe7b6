from .canteen import Canteen
from .canteen_item import CanteenItem
from .student import Student

__all__ = [
    "Canteen",
    "CanteenItem",
    "Student",
]
