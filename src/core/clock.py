"""
Máquina de estados del reloj digital.

Este módulo contiene la clase Clock, que avanza un segundo lógico por tick
y señala la parada cuando se agota la cuenta atrás opcional.
"""

from datetime import datetime


TIME_FORMAT = "%H:%M:%S"

# Estados del reloj
RUNNING = "running"
STOPPED = "stopped"


def format_time(moment):
    """Formatea una hora como HH:MM:SS con ceros a la izquierda."""
    return moment.strftime(TIME_FORMAT)


# ============================================================================
# CLASE: Clock
# Propósito: Estado del reloj y transición de un tick por segundo
# Responsabilidades:
#   - Leer la hora actual de la fuente de tiempo
#   - Descontar la cuenta atrás si está activa
#   - Señalar la parada exactamente una vez
# ============================================================================
class Clock:
    """
    Reloj con límite de ejecución opcional.

    Estados:
        - RUNNING: remaining_seconds == 0 (infinito) o > 0 (cuenta atrás)
        - STOPPED: terminal, solo se alcanza al llegar a 0 desde un valor positivo

    La cuenta atrás es un contador, no un plazo de reloj: si el host se
    retrasa, cada tick avanza exactamente un segundo lógico.
    """

    def __init__(self, remaining_seconds=0, now=None):
        """
        Args:
            remaining_seconds (int): Ticks antes de parar (0 o negativo = infinito)
            now (callable): Fuente de tiempo que devuelve un datetime
                            (por defecto datetime.now)
        """
        self.remaining_seconds = max(int(remaining_seconds), 0)
        self.now = now if now else datetime.now
        self.current_time = ""
        self.state = RUNNING

    def tick(self):
        """
        Avanza un segundo lógico.

        Returns:
            bool: True solo en el tick que lleva la cuenta atrás a 0
                  (señal de terminación, se emite una única vez)

        Un reloj ya parado no cambia de estado.
        """
        if self.state == STOPPED:
            return False

        self.current_time = format_time(self.now())

        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1
            if self.remaining_seconds == 0:
                self.state = STOPPED
                return True
        return False

    def is_running(self):
        return self.state == RUNNING

    def get_display(self):
        return self.current_time
