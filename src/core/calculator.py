"""
Lógica de calculadora aritmética de cuatro operaciones.

Este módulo contiene la clase Calculator que interpreta las pulsaciones de
botones (dígitos, operadores, C, =) y mantiene el texto del display.
"""

import math
from decimal import Decimal


# Operadores soportados (cadena vacía = ningún operador pendiente)
NO_OPERATOR = ""
OPERATORS = ("+", "-", "*", "/")
DIGITS = "0123456789"

ERROR_TEXT = "Error"


def apply_operator(a, b, op):
    """
    Aplica un operador aritmético a dos operandos.

    Args:
        a (float): Operando izquierdo (acumulador)
        b (float): Operando derecho
        op (str): Operador ("+", "-", "*", "/") o "" si no hay operador

    Returns:
        float: Resultado de la operación

    Casos especiales:
        - División por cero → NaN (no lanza excepción)
        - Operador vacío o desconocido → devuelve b sin cambios
          (comportamiento heredado, posible bug latente)
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return math.nan if b == 0 else a / b
    return b


# Palabras que el parser acepta además de los números (con signo opcional)
SPECIAL_VALUES = ("NaN", "Infinity")


def parse_number(text):
    """
    Convierte texto a float. Lanza ValueError si no es numérico (incluye vacío).

    Más estricto que float(): rechaza separadores "_" y las formas en
    minúscula "nan", "inf"; solo se aceptan "NaN" e "Infinity".
    """
    body = text.strip()
    if "_" in body:
        raise ValueError(f"invalid number: {text!r}")
    unsigned = body.lstrip("+-")
    if unsigned[:1].isalpha() and unsigned not in SPECIAL_VALUES:
        raise ValueError(f"invalid number: {text!r}")
    return float(body)


def format_number(value):
    """
    Formatea un resultado para el display.

    Returns:
        str: "5.0", "0.25", "1.0E7", "1.5E-4", "NaN", "Infinity" o "-Infinity"

    Entre 1e-3 y 1e7 (en valor absoluto) se usa notación decimal; fuera de
    ese rango, notación científica con una cifra entera y exponente "E".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(float(value))
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return text

    number = Decimal(text)
    sign, digits, _ = number.as_tuple()
    significant = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = significant[0] + "." + (significant[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{number.adjusted()}"


# ============================================================================
# CLASE: Calculator
# Propósito: Intérprete de pulsaciones de la calculadora
# Responsabilidades:
#   - Acumular dígitos en el display
#   - Guardar operando izquierdo y operador pendiente
#   - Calcular el resultado al pulsar =
#   - Mostrar "Error" cuando el display no es un número válido
# ============================================================================
class Calculator:
    """
    Calculadora con acumulador y un único operador pendiente.

    Modelo de operación:
        1. Usuario pulsa dígitos → se concatenan en display
        2. Usuario pulsa operador → display se convierte en accumulator
        3. Usuario pulsa más dígitos → nuevo display (operando derecho)
        4. Usuario pulsa = → display muestra apply(accumulator, display, op)

    Variables de estado:
        - accumulator: Operando izquierdo capturado al pulsar un operador
        - pending_operator: Operador a la espera del segundo operando
        - display: Texto mostrado (dígitos en curso, resultado o "Error")

    Encadenado literal: cada operador confirma el display actual como
    nuevo acumulador, sin calcular nada hasta el siguiente =.
    """

    def __init__(self):
        """Inicializa calculadora en estado vacío."""
        self.accumulator = 0.0              # Operando izquierdo
        self.pending_operator = NO_OPERATOR  # Operador pendiente
        self.display = ""                   # Texto del display

    def on_digit(self, digit):
        """
        Añade un dígito al final del display.

        Args:
            digit (str): Carácter "0"-"9"

        Sin límite de longitud: el parser de float acepta números arbitrariamente largos.
        """
        self.display += str(digit)
        return self.display

    def on_clear(self):
        """Borra TODO el estado (botón C). Siempre vuelve al estado inicial."""
        self.display = ""
        self.pending_operator = NO_OPERATOR
        self.accumulator = 0.0
        return self.display

    def on_operator(self, op):
        """
        Guarda el display como operando izquierdo y fija el operador pendiente.

        Args:
            op (str): Operador ("+", "-", "*", "/")

        Returns:
            str: Nuevo texto del display ("" si éxito, "Error" si el display no es numérico)

        Si el display no se puede convertir, accumulator y pending_operator
        conservan los valores previos.
        """
        try:
            value = parse_number(self.display)
        except ValueError:
            self.display = ERROR_TEXT
            return self.display

        self.accumulator = value
        self.pending_operator = op
        self.display = ""
        return self.display

    def on_equals(self):
        """
        Calcula accumulator <op> display y muestra el resultado.

        Returns:
            str: Resultado formateado o "Error"
        """
        try:
            operand = parse_number(self.display)
        except ValueError:
            self.display = ERROR_TEXT
            return self.display

        result = apply_operator(self.accumulator, operand, self.pending_operator)
        self.display = format_number(result)
        return self.display

    def press(self, key):
        """
        Despacha una pulsación de botón o tecla a la operación correspondiente.

        Args:
            key (str): "0"-"9", "+", "-", "*", "/", "C" o "="

        Returns:
            str: Texto del display tras la pulsación

        Teclas desconocidas se ignoran.
        """
        if len(key) == 1 and key in DIGITS:
            return self.on_digit(key)
        if key == "C":
            return self.on_clear()
        if key == "=":
            return self.on_equals()
        if key in OPERATORS:
            return self.on_operator(key)
        return self.display

    def get_display(self):
        """Texto actual del display."""
        return self.display

    def is_error(self):
        """True si el display muestra un error (también "Error" seguido de dígitos)."""
        return self.display.startswith(ERROR_TEXT)
