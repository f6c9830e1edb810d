"""
Evaluador de expresiones aritméticas.

Este módulo convierte una cadena como "2*(3+4)/-5" en un árbol de expresión
y lo evalúa con aritmética de coma flotante. No usa eval() de Python.

Gramática:
    expr    : term (('+' | '-') term)*
    term    : unary (('*' | '/') unary)*
    unary   : '-' unary | primary
    primary : NUMBER | '(' expr ')'
"""

import math


# ============================================================================
# ERRORES
# ============================================================================
class ExpressionError(ValueError):
    """
    Error de análisis o evaluación de una expresión.

    Attributes:
        position (int): Índice del carácter donde se detectó el error
                        (None si no aplica)
    """

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


# ============================================================================
# TOKENS
# ============================================================================
NUMBER = "NUMBER"
OPERATOR = "OPERATOR"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
EOF = "EOF"

OPERATORS = "+-*/"
DIGITS = "0123456789"


class Token:
    """Unidad léxica: tipo, valor y posición en la cadena original."""

    def __init__(self, type, value, position):
        self.type = type
        self.value = value
        self.position = position

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, {self.position})"


def _describe(token):
    if token.type == EOF:
        return "end of expression"
    return f"'{token.value}'"


# ============================================================================
# LEXER
# ============================================================================
def tokenize(text):
    """
    Divide la cadena en tokens (números, operadores y paréntesis).

    Args:
        text (str): Expresión introducida por el usuario

    Returns:
        list[Token]: Tokens en orden, terminados siempre por un token EOF

    Raises:
        ExpressionError: Carácter no válido o número mal formado ("1.2.3", ".")
    """
    tokens = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        # Literal numérico: dígitos ASCII con un único punto decimal
        if char in DIGITS or char == ".":
            start = pos
            dots = 0
            while pos < length and (text[pos] in DIGITS or text[pos] == "."):
                if text[pos] == ".":
                    dots += 1
                pos += 1
            literal = text[start:pos]
            if dots > 1:
                raise ExpressionError(f"Malformed number '{literal}'", start)
            if literal == ".":
                raise ExpressionError("Decimal point without digits", start)
            tokens.append(Token(NUMBER, literal, start))
            continue

        if char in OPERATORS:
            tokens.append(Token(OPERATOR, char, pos))
        elif char == "(":
            tokens.append(Token(LPAREN, char, pos))
        elif char == ")":
            tokens.append(Token(RPAREN, char, pos))
        else:
            raise ExpressionError(f"Invalid character '{char}'", pos)
        pos += 1

    tokens.append(Token(EOF, None, length))
    return tokens


# ============================================================================
# ÁRBOL DE EXPRESIÓN
# ============================================================================
class Number:
    """Hoja del árbol: valor literal."""

    def __init__(self, value):
        self.value = value

    def evaluate(self):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"


class Negate:
    """Menos unario."""

    def __init__(self, operand):
        self.operand = operand

    def evaluate(self):
        return -self.operand.evaluate()

    def __repr__(self):
        return f"Negate({self.operand!r})"


class BinaryOp:
    """Operación binaria (+, -, *, /) sobre dos subárboles."""

    def __init__(self, op, left, right):
        self.op = op
        self.left = left
        self.right = right

    def evaluate(self):
        left = self.left.evaluate()
        right = self.right.evaluate()
        if self.op == "+":
            return left + right
        if self.op == "-":
            return left - right
        if self.op == "*":
            return left * right
        return divide(left, right)

    def __repr__(self):
        return f"BinaryOp({self.op!r}, {self.left!r}, {self.right!r})"


def divide(left, right):
    """
    División real con semántica IEEE-754.

    Python lanza ZeroDivisionError con floats; aquí x/0 da ±infinito y
    0/0 da NaN, que el llamador trata como resultados especiales.
    """
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


# ============================================================================
# PARSER (descenso recursivo)
# ============================================================================
class Parser:
    """
    Parser de descenso recursivo con precedencia estándar.

    '*' y '/' ligan más fuerte que '+' y '-'; operadores de igual
    precedencia asocian por la izquierda; los paréntesis agrupan.
    """

    def __init__(self, text):
        self.tokens = tokenize(text)
        self.index = 0

    @property
    def current(self):
        return self.tokens[self.index]

    def advance(self):
        token = self.current
        if token.type != EOF:
            self.index += 1
        return token

    def parse(self):
        if self.current.type == EOF:
            raise ExpressionError("Empty expression", 0)
        node = self.expr()
        token = self.current
        if token.type == RPAREN:
            raise ExpressionError("Unmatched ')'", token.position)
        if token.type != EOF:
            raise ExpressionError(f"Unexpected {_describe(token)}", token.position)
        return node

    def expr(self):
        node = self.term()
        while self.current.type == OPERATOR and self.current.value in "+-":
            op = self.advance().value
            node = BinaryOp(op, node, self.term())
        return node

    def term(self):
        node = self.unary()
        while self.current.type == OPERATOR and self.current.value in "*/":
            op = self.advance().value
            node = BinaryOp(op, node, self.unary())
        return node

    def unary(self):
        if self.current.type == OPERATOR and self.current.value == "-":
            self.advance()
            return Negate(self.unary())
        return self.primary()

    def primary(self):
        token = self.current

        if token.type == NUMBER:
            self.advance()
            return Number(float(token.value))

        if token.type == LPAREN:
            self.advance()
            node = self.expr()
            if self.current.type != RPAREN:
                raise ExpressionError("Unmatched '('", token.position)
            self.advance()
            return node

        if token.type == EOF:
            raise ExpressionError("Expression ends unexpectedly", token.position)
        raise ExpressionError(f"Unexpected {_describe(token)}", token.position)


# ============================================================================
# API PÚBLICA
# ============================================================================
def parse(text):
    """
    Analiza la cadena y devuelve la raíz del árbol de expresión.

    Raises:
        ExpressionError: Si la expresión no es válida o anida demasiados paréntesis
    """
    try:
        return Parser(text).parse()
    except RecursionError:
        raise ExpressionError("Expression is nested too deeply") from None


def evaluate(text):
    """
    Evalúa una expresión aritmética.

    Args:
        text (str): Expresión (ej: "5+3*2")

    Returns:
        float: Resultado real; puede ser inf o nan (división por cero)

    Raises:
        ExpressionError: Si la expresión no es válida
    """
    try:
        return float(parse(text).evaluate())
    except RecursionError:
        raise ExpressionError("Expression is nested too deeply") from None
