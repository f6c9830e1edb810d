"""
Módulo core con la lógica principal de la calculadora.
Contiene el evaluador de expresiones y la máquina de estados del buffer.
"""

from .evaluator import ExpressionError, evaluate, parse
from .calculator import (
    Append,
    Backspace,
    CalculatorEngine,
    CalculatorState,
    Clear,
    Evaluate,
    Mode,
    apply,
)

__all__ = [
    'ExpressionError', 'evaluate', 'parse',
    'Append', 'Backspace', 'CalculatorEngine', 'CalculatorState',
    'Clear', 'Evaluate', 'Mode', 'apply',
]
