"""
Reloj de consola para entornos sin pantalla.

Sobrescribe la misma línea con la hora (retorno de carro) una vez por segundo.
"""

import sys

from core.clock import Clock
from core.scheduler import IntervalScheduler


BANNER = "Console Clock — Ctrl+C to exit"


class ConsoleClock:
    """
    Reloj de consola.

    Ciclo:
        1. tick() inmediato (la primera hora mostrada nunca es antigua)
        2. Escribir "\\r" + HH:MM:SS
        3. Esperar un intervalo y repetir
        4. Al agotarse la cuenta atrás: salto de línea final y fin
    """

    def __init__(self, clock=None, interval=1.0, wait=None, stdout=None):
        """
        Args:
            clock (Clock): Máquina de estados (por defecto sin límite)
            interval (float): Segundos entre ticks
            wait (callable): Función de espera (por defecto time.sleep)
            stdout: Flujo de salida (por defecto sys.stdout)
        """
        self.clock = clock if clock else Clock()
        self.scheduler = IntervalScheduler(interval, wait)
        self.stdout = stdout if stdout else sys.stdout

    def _tick(self):
        stopped = self.clock.tick()
        self.stdout.write("\r" + self.clock.get_display())
        self.stdout.flush()
        return stopped

    def run(self):
        self.stdout.write(BANNER + "\n")
        try:
            self.scheduler.run(self._tick)
        finally:
            self.stdout.write("\n")
            self.stdout.flush()
