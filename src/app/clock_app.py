"""
Aplicación de ventana del reloj digital.

Este módulo contiene la clase ClockWindowApp, que refresca la etiqueta del
reloj una vez por segundo y cierra la ventana al agotarse la cuenta atrás.
"""

from time import monotonic

import cv2
from core.clock import Clock
from core.scheduler import IntervalScheduler
from ui.renderer import ClockRenderer
from config.settings import AppConfig


KEY_ESC = 27


# ============================================================================
class ClockWindowApp:
    """
    Reloj digital con ventana gráfica.

    El planificador espera entre ticks con cv2.waitKey, así la ventana sigue
    atendiendo eventos (teclado, cierre) mientras espera el siguiente segundo.
    """

    def __init__(self, clock=None, config=None):
        """
        Args:
            clock (Clock): Máquina de estados (por defecto sin límite)
            config (AppConfig): Configuración (opcional)

        Raises:
            cv2.error: Si no se puede crear la ventana
        """
        self.config = config if config else AppConfig()
        self.window = self.config.clock_title
        self.clock = clock if clock else Clock()
        self.ui = ClockRenderer(self.config)
        self.scheduler = IntervalScheduler(self.config.tick_interval(), self.wait)

        cv2.namedWindow(self.window, cv2.WINDOW_AUTOSIZE)

    def tick(self):
        """Un tick: avanzar el reloj y repintar. Devuelve True al agotarse la cuenta atrás."""
        stopped = self.clock.tick()
        cv2.imshow(self.window, self.ui.draw(self.clock.get_display()))
        return stopped

    def wait(self, seconds):
        """Espera entre ticks atendiendo la ventana; ESC, 'q' o cerrar cancelan."""
        deadline = monotonic() + seconds
        while not self.scheduler.cancelled:
            remaining_ms = int(round((deadline - monotonic()) * 1000))
            if remaining_ms <= 0:
                return

            code = cv2.waitKey(remaining_ms)
            if code != -1 and (code & 0xFF) in (KEY_ESC, ord('q')):
                self.scheduler.cancel()
            elif not self.is_open():
                self.scheduler.cancel()

    def is_open(self):
        try:
            return cv2.getWindowProperty(self.window, cv2.WND_PROP_VISIBLE) >= 1
        except cv2.error:
            return False

    def run(self):
        # Primer tick inmediato (la etiqueta nunca empieza vacía)
        self.scheduler.run(self.tick)
        cv2.destroyAllWindows()
        print("OK Clock closed")
