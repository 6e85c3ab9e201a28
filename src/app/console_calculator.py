"""
Calculadora de consola para entornos sin pantalla.

Lee líneas "<número> <operador> <número>" y muestra el resultado.
"""

import sys

from core.calculator import OPERATORS, apply_operator, format_number, parse_number


BANNER = 'Simple CLI Calculator (type "exit" to quit)'
PROMPT = "Enter expression [e.g. 2 + 3] ➜ "
INVALID = "Invalid input. Try again."
GOODBYE = "Good-bye!"


def evaluate_line(line):
    """
    Evalúa una expresión de consola.

    Args:
        line (str): Texto introducido, p. ej. "4 / 0"

    Returns:
        str: "Result = <valor>" o "Invalid input. Try again."

    Cualquier desviación (número de tokens distinto de 3, operando no
    numérico, operador desconocido) se trata igual. Aquí no hay fallback
    de identidad: un operador desconocido es entrada inválida.
    """
    parts = line.split()
    if len(parts) != 3:
        return INVALID

    left, op, right = parts
    if op not in OPERATORS:
        return INVALID
    try:
        a = parse_number(left)
        b = parse_number(right)
    except ValueError:
        return INVALID

    return f"Result = {format_number(apply_operator(a, b, op))}"


class ConsoleCalculator:
    """Bucle interactivo de la calculadora de consola."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin else sys.stdin
        self.stdout = stdout if stdout else sys.stdout

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def run(self):
        """
        Lee expresiones hasta "exit" (sin distinguir mayúsculas) o fin de entrada.
        """
        self._write(BANNER + "\n")
        while True:
            self._write(PROMPT)
            line = self.stdin.readline()
            if not line:
                # EOF: sin más entrada
                self._write("\n")
                break

            line = line.strip()
            if line.lower() == "exit":
                break
            self._write(evaluate_line(line) + "\n")

        self._write(GOODBYE + "\n")
