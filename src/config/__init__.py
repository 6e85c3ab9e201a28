"""
Módulo de configuración para la calculadora y el reloj.
Contiene las preferencias de la aplicación y la detección de pantalla.
"""

from .settings import AppConfig
from .display import has_display

__all__ = ['AppConfig', 'has_display']
