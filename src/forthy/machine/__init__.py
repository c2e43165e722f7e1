from .dictionary import Dictionary
from .machine import ForthMachine, format_number
from .state import State
