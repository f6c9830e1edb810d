"""
Módulo de síntesis de voz.
Lee en voz alta teclas, resultados y errores de la calculadora.
"""

from .feedback import PHRASES, VoiceFeedback

__all__ = ['PHRASES', 'VoiceFeedback']
