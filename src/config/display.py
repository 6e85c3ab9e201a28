"""
Detección de pantalla para elegir entre ventana y consola.

La comprobación se hace una sola vez al arrancar cada programa.
"""

import os
import sys


HEADLESS_ENV = "HEADLESS"
TRUE_VALUES = ("1", "true", "yes")


def has_display(config=None, environ=None, platform=None):
    """
    Indica si hay una pantalla interactiva disponible.

    Args:
        config (AppConfig): Configuración (force_headless fuerza consola)
        environ (dict): Variables de entorno (por defecto os.environ)
        platform (str): Plataforma (por defecto sys.platform)

    Returns:
        bool: True si se puede abrir una ventana

    Reglas:
        1. config.force_headless o HEADLESS=1/true/yes → sin pantalla
        2. Windows y macOS → siempre con pantalla
        3. Resto (Linux, BSD) → DISPLAY o WAYLAND_DISPLAY definidos
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    if config is not None and config.force_headless:
        return False
    if environ.get(HEADLESS_ENV, "").strip().lower() in TRUE_VALUES:
        return False

    if platform.startswith("win") or platform == "darwin":
        return True
    return bool(environ.get("DISPLAY") or environ.get("WAYLAND_DISPLAY"))
