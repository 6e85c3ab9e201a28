"""
Planificador de tareas periódicas en un único hilo lógico.

Sustituye al temporizador de la interfaz: ejecuta una tarea de inmediato y
después una vez por intervalo, hasta que la tarea pide parar o se cancela.
"""

import time


class IntervalScheduler:
    """
    Ejecuta una tarea cada `interval` segundos.

    Comportamiento:
        - Primera ejecución inmediata (sin esperar el primer intervalo)
        - Espera fija entre ejecuciones, sin recuperar ticks perdidos
        - La tarea devuelve True para detener el planificador
        - cancel() detiene el planificador desde la función de espera
    """

    def __init__(self, interval=1.0, wait=None):
        """
        Args:
            interval (float): Segundos entre ejecuciones
            wait (callable): Función de espera, recibe los segundos
                             (por defecto time.sleep)
        """
        self.interval = interval
        self.wait = wait if wait else time.sleep
        self.cancelled = False
        self.runs = 0

    def cancel(self):
        self.cancelled = True

    def run(self, task):
        """
        Bucle principal: task() → wait(interval) → task() ...

        Returns:
            bool: True si la tarea pidió parar, False si se canceló
        """
        while not self.cancelled:
            self.runs += 1
            if task():
                return True
            self.wait(self.interval)
        return False
