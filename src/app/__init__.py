"""
Módulo de aplicaciones.
Contiene las variantes de ventana y de consola de la calculadora y el reloj.
"""

from .console_calculator import ConsoleCalculator
from .console_clock import ConsoleClock

__all__ = ['ConsoleCalculator', 'ConsoleClock']
