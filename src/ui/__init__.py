"""
Módulo de interfaz de usuario.
Contiene los renderizadores de la calculadora y del reloj.
"""

from .renderer import CalculatorRenderer, ClockRenderer

__all__ = ['CalculatorRenderer', 'ClockRenderer']
