"""
Módulo de síntesis de voz.
Contiene el sistema de feedback auditivo de la calculadora.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
