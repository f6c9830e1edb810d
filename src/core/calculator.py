"""
Máquina de estados del buffer de la calculadora.

Este módulo contiene el estado inmutable CalculatorState, los comandos que
lo transforman (Append, Backspace, Clear, Evaluate), la función pura apply()
y CalculatorEngine, que guarda el estado actual y avisa a los suscriptores
cada vez que cambia.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np
import regex

from .evaluator import ExpressionError, evaluate as evaluate_expression


INFINITE_ERROR = "Result is Infinite"
NAN_ERROR = "Result is Not a Number"


class Mode(Enum):
    """INPUT: el usuario compone una expresión. RESULT: se muestra un valor final."""
    INPUT = "input"
    RESULT = "result"


# ============================================================================
# ESTADO
# ============================================================================
@dataclass(frozen=True)
class CalculatorState:
    """
    Instantánea inmutable del estado de la calculadora.

    Attributes:
        buffer (str): Expresión en construcción o último resultado
        history (tuple): Entradas "<expresión> = <resultado>", la más reciente primero
        mode (Mode): INPUT o RESULT
        error (str): Mensaje de error; si no está vacío, buffer == "" y mode == RESULT
    """
    buffer: str = "0"
    history: tuple = ()
    mode: Mode = Mode.RESULT
    error: str = ""

    @property
    def display_text(self):
        """Texto que debe verse en el display: el error si existe, si no el buffer."""
        return self.error if self.error else self.buffer


# ============================================================================
# COMANDOS
# ============================================================================
@dataclass(frozen=True)
class Append:
    """Añade un token al buffer; los operadores usan continue_with_result=True."""
    token: str
    continue_with_result: bool = False


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Evaluate:
    pass


# ============================================================================
# TRANSICIONES
# ============================================================================
def append(state, token, continue_with_result=False):
    """
    Añade un token al buffer.

    Comportamiento:
        - Modo RESULT: el buffer se reinicia a `token`, salvo que
          continue_with_result sea True (ej: "42" + "+" → "42+")
        - Modo INPUT: `token` se concatena al buffer
        - En ambos casos el error se borra y el modo pasa a INPUT

    No se valida el token; las expresiones mal formadas fallan al evaluar.
    """
    if state.mode == Mode.RESULT:
        prefix = state.buffer if continue_with_result else ""
        return replace(state, buffer=prefix + token, mode=Mode.INPUT, error="")
    return replace(state, buffer=state.buffer + token, error="")


def backspace(state):
    """Elimina el último carácter visible (grafema) del buffer."""
    graphemes = regex.findall(r"\X", state.buffer)
    if not graphemes:
        return state
    return replace(state, buffer="".join(graphemes[:-1]))


def clear(state):
    """Vacía el buffer; modo, error e historial no cambian."""
    return replace(state, buffer="")


def format_result(value):
    """
    Formatea un resultado finito para el display.

    - 10.0 → "10" (enteros sin punto decimal)
    - 2/3 → "0.6666666666666666" (precisión completa)
    - 1e-07 → "0.0000001" (siempre notación posicional, legible por el tokenizer)
    """
    if value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, unique=True, trim="-")


def evaluate(state):
    """
    Evalúa el buffer y devuelve el nuevo estado.

    Resultados:
        - Éxito: buffer = resultado formateado, modo RESULT, entrada nueva
          al principio del historial
        - ±infinito / NaN: mensaje fijo en error, buffer vacío
        - ExpressionError: su mensaje en error, buffer vacío

    El historial solo cambia cuando la evaluación tiene éxito.
    """
    try:
        result = evaluate_expression(state.buffer)
    except ExpressionError as err:
        return _failed(state, str(err))

    if math.isinf(result):
        return _failed(state, INFINITE_ERROR)
    if math.isnan(result):
        return _failed(state, NAN_ERROR)

    result_str = format_result(result)
    return replace(
        state,
        buffer=result_str,
        mode=Mode.RESULT,
        error="",
        history=(f"{state.buffer} = {result_str}",) + state.history,
    )


def _failed(state, message):
    return replace(state, error=message, buffer="", mode=Mode.RESULT)


def apply(state, command):
    """
    Aplica un comando al estado y devuelve el estado resultante.

    Args:
        state (CalculatorState): Estado actual (no se modifica)
        command: Append, Backspace, Clear o Evaluate

    Raises:
        TypeError: Si el comando no es de un tipo conocido
    """
    if isinstance(command, Append):
        return append(state, command.token, command.continue_with_result)
    if isinstance(command, Backspace):
        return backspace(state)
    if isinstance(command, Clear):
        return clear(state)
    if isinstance(command, Evaluate):
        return evaluate(state)
    raise TypeError(f"Unknown calculator command: {command!r}")


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Dueño del estado único de la calculadora
# Responsabilidades:
#   - Guardar el estado actual (inicial: buffer "0", modo RESULT)
#   - Aplicar comandos recibidos desde la UI
#   - Notificar a los suscriptores (renderizador, voz) cuando cambia el estado
# ============================================================================
class CalculatorEngine:
    """
    Contenedor del estado de la calculadora con notificación de cambios.

    Los suscriptores reciben (estado_anterior, estado_nuevo) y solo se
    llaman cuando el estado nuevo es distinto del anterior.
    """

    def __init__(self, state=None):
        self._state = state if state is not None else CalculatorState()
        self._listeners = []

    @property
    def state(self):
        return self._state

    def subscribe(self, listener):
        """
        Registra un suscriptor.

        Returns:
            callable: Función que cancela la suscripción
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, command):
        """Aplica un comando y notifica si el estado cambió."""
        previous = self._state
        self._state = apply(previous, command)
        if self._state != previous:
            for listener in list(self._listeners):
                listener(previous, self._state)
        return self._state

    def add_to_buffer(self, token, continue_with_result=False):
        return self.dispatch(Append(token, continue_with_result))

    def backspace(self):
        return self.dispatch(Backspace())

    def clear(self):
        return self.dispatch(Clear())

    def evaluate(self):
        return self.dispatch(Evaluate())
