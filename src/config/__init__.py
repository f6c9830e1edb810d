"""
Módulo de configuración de la calculadora.
Contiene la clase de configuración de ventana, colores y voz.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
