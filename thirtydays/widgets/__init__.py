"""Widgets for the motorcycle cards"""

from .expand_button import ExpandButton
from .motorcycle_card import MotorcycleCard
from .motorcycle_image import MotorcycleImage

__all__ = [
    'ExpandButton',
    'MotorcycleCard',
    'MotorcycleImage',
]
