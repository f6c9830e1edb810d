"""
Módulo de la aplicación principal.
Contiene la clase que integra motor, renderizado y voz en una ventana.
"""

from .calculator_app import CalculatorApp

__all__ = ['CalculatorApp']
