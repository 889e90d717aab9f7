from .motorcycles_list import MotorcyclesList
from .motorcycles_screen import MotorcyclesScreen

__all__ = ['MotorcyclesList', 'MotorcyclesScreen']
