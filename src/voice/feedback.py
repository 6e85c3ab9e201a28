"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar las teclas y los
resultados de la calculadora, ejecutándose de forma asíncrona para no
bloquear el bucle de eventos de la ventana.
"""

import threading
import pyttsx3
from collections import deque


OPERATOR_WORDS = {
    "+": "plus",
    "-": "minus",
    "*": "times",
    "/": "divided by",
}


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz
#   - Ejecutar en hilo separado para no bloquear la ventana
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (máximo 5, los más antiguos se descartan)
        - Motor inicializado solo cuando la voz está activada
    """

    def __init__(self, config, engine=None):
        """
        Args:
            config (AppConfig): Configuración (voice_enabled, voice_volume, voice_rate)
            engine: Motor ya creado (opcional, por defecto pyttsx3.init())
        """
        self.config = config
        self.engine = engine
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self.lock = threading.Lock()          # Protege cola + is_speaking

        if self.engine is None and self.config.voice_enabled:
            self._init_engine()
        elif self.engine is not None:
            self._configure_engine()

    def _init_engine(self):
        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Voice engine initialized")
        except Exception as e:
            print(f"⚠ Warning: voice engine unavailable: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)
        except Exception as e:
            print(f"⚠ Error configuring voice: {e}")

    def toggle(self):
        """
        Activa o desactiva la voz.

        Returns:
            bool: Nuevo estado de config.voice_enabled
        """
        self.config.voice_enabled = not self.config.voice_enabled
        if self.config.voice_enabled and self.engine is None:
            self._init_engine()
        return self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Si no hay mensajes en reproducción arranca un único hilo que vacía la cola.
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self.lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno hasta vaciarla."""
        while True:
            with self.lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()

            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error playing voice: {e}")

    def speak_key(self, key):
        """
        Anuncia una tecla de la calculadora.

        Args:
            key (str): "0"-"9", "+", "-", "*", "/" o "C"
        """
        if key == "C":
            self.speak("clear")
        elif key in OPERATOR_WORDS:
            self.speak(OPERATOR_WORDS[key])
        else:
            self.speak(key)

    def speak_result(self, result):
        """
        Anuncia el resultado de un cálculo.

        Args:
            result (str): Texto del display tras pulsar = ("5.0", "NaN", "Error")
        """
        if result == "Error":
            self.speak("error")
            return
        if result == "NaN":
            self.speak("equals not a number")
            return

        # "5.0" se pronuncia "5"
        if result.endswith(".0"):
            result = result[:-2]
        result = result.replace('E', ' times ten to the ')
        self.speak(f"equals {result.replace('.', ' point ')}")
