"""
Definición de los botones de la calculadora.

Cada botón ocupa un área de la rejilla y envía un comando a la máquina de
estados. Los operadores binarios continúan con el resultado anterior.
"""

from enum import Enum

from core.calculator import Append, Backspace, Clear, Evaluate


class ButtonType(Enum):
    OUTLINED = "outlined"
    ELEVATED = "elevated"


# Colores BGR
PURPLE = (200, 104, 186)
GREEN_ACCENT = (174, 240, 105)
BLUE = (243, 150, 33)
AMBER = (7, 193, 255)


class ButtonDefinition:
    """
    Botón de la interfaz.

    Attributes:
        area_name (str): Área de la rejilla que ocupa
        label (str): Texto mostrado
        command: Comando para CalculatorEngine.dispatch()
        color (tuple): Color BGR
        type (ButtonType): Estilo (contorno o relleno)
    """

    def __init__(self, area_name, label, command, color, type=ButtonType.OUTLINED):
        self.area_name = area_name
        self.label = label
        self.command = command
        self.color = color
        self.type = type

    def __repr__(self):
        return f"ButtonDefinition({self.area_name!r}, {self.label!r})"


def _digit(area_name, digit):
    return ButtonDefinition(area_name, digit, Append(digit), GREEN_ACCENT)


def _operator(area_name, op):
    return ButtonDefinition(area_name, op, Append(op, continue_with_result=True), AMBER)


BUTTON_DEFINITIONS = [
    ButtonDefinition('clear', 'C', Clear(), PURPLE),
    # La etiqueta "⌫" no existe en las fuentes Hershey de OpenCV
    ButtonDefinition('bkspc', '<-', Backspace(), PURPLE),
    ButtonDefinition('lparen', '(', Append('('), PURPLE),
    ButtonDefinition('rparen', ')', Append(')'), PURPLE),
    _digit('seven', '7'),
    _digit('eight', '8'),
    _digit('nine', '9'),
    _digit('four', '4'),
    _digit('five', '5'),
    _digit('six', '6'),
    _digit('one', '1'),
    _digit('two', '2'),
    _digit('three', '3'),
    _digit('zero', '0'),
    ButtonDefinition('point', '.', Append('.'), GREEN_ACCENT),
    ButtonDefinition('equals', '=', Evaluate(), BLUE, ButtonType.ELEVATED),
    _operator('plus', '+'),
    _operator('minus', '-'),
    _operator('multiply', '*'),
    _operator('divide', '/'),
]

BUTTONS_BY_AREA = {button.area_name: button for button in BUTTON_DEFINITIONS}


# ============================================================================
# TECLADO
# ============================================================================
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)


def command_for_key(key):
    """
    Traduce un código de tecla (cv2.waitKey) a un comando.

    Teclas:
        - 0-9 . ( ): se añaden al buffer
        - + - * /: se añaden continuando con el resultado
        - Enter o '=': evaluar
        - Backspace/Supr: borrar último carácter
        - 'c': vaciar buffer

    Returns:
        Comando o None si la tecla no corresponde a ninguno
    """
    if key in KEY_ENTER:
        return Evaluate()
    if key in KEY_BACKSPACE:
        return Backspace()
    if key < 0 or key > 255:
        return None

    char = chr(key)
    if char in "0123456789.()":
        return Append(char)
    if char in "+-*/":
        return Append(char, continue_with_result=True)
    if char == "=":
        return Evaluate()
    if char in "cC":
        return Clear()
    return None
