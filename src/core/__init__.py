"""
Módulo core con la lógica principal de la calculadora y el reloj.
Contiene el intérprete aritmético, la máquina de estados del reloj y el planificador.
"""

from .calculator import Calculator, apply_operator, format_number
from .clock import Clock
from .scheduler import IntervalScheduler

__all__ = ['Calculator', 'apply_operator', 'format_number', 'Clock', 'IntervalScheduler']
