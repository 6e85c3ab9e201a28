# ============================================================================
# PUNTO DE ENTRADA - Calculadora y reloj digital
# ============================================================================
"""
Punto de entrada de la calculadora y del reloj digital.

Cada programa comprueba una sola vez si hay pantalla y elige la variante de
ventana (OpenCV) o la de consola.

Ejecución:
    python3 main.py calculator
    python3 main.py clock [segundos]

Requisitos:
    - Python 3.10+
    - opencv-python, numpy, pyttsx3
"""

import sys
import traceback

from config.settings import AppConfig
from config.display import has_display
from core.clock import Clock
from app.console_calculator import ConsoleCalculator
from app.console_clock import ConsoleClock


USAGE = "Usage: main.py calculator | clock [seconds]"


def parse_duration(argv):
    """
    Lee la duración opcional del reloj (primer argumento).

    Args:
        argv (list): Argumentos sin el nombre del programa

    Returns:
        int: Segundos de ejecución (0 = indefinido)

    Raises:
        ValueError: Si el argumento no es un entero
    """
    if not argv:
        return 0
    return int(argv[0])


def start_calculator(config):
    """Arranca la variante adecuada de la calculadora."""
    if has_display(config):
        try:
            from app.calculator_app import CalculatorWindowApp
            app = CalculatorWindowApp(config)
        except Exception as e:
            print(f"⚠ Could not open window ({e}), switching to console mode.")
        else:
            app.run()
            return
    else:
        print("Headless environment detected – switching to console mode.")
    ConsoleCalculator().run()


def start_clock(seconds, config):
    """Arranca la variante adecuada del reloj con el límite indicado."""
    clock = Clock(seconds)
    if has_display(config):
        try:
            from app.clock_app import ClockWindowApp
            app = ClockWindowApp(clock, config)
        except Exception as e:
            print(f"⚠ Could not open window ({e}), switching to console mode.")
        else:
            app.run()
            return
    ConsoleClock(clock, config.tick_interval()).run()


def _guarded(func, *args):
    """
    Ejecuta un programa con el manejo de errores común.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre ordenado por usuario
        - Exception general: Mensaje y traceback, código de salida 1
    """
    try:
        func(*args)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


def run_calculator(argv=None):
    """Entrada de la calculadora (script `calculadora`)."""
    return _guarded(start_calculator, AppConfig())


def run_clock(argv=None):
    """
    Entrada del reloj (script `reloj`).

    Un argumento mal formado es fatal: se informa y se sale con código 2
    antes de crear el reloj.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        seconds = parse_duration(argv)
    except ValueError:
        print(f"Error: invalid duration '{argv[0]}' (expected whole seconds)")
        return 2
    return _guarded(start_clock, seconds, AppConfig())


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE)
        return 1

    command, rest = argv[0].lower(), argv[1:]
    if command == "calculator":
        return run_calculator(rest)
    if command == "clock":
        return run_clock(rest)
    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
