"""
Aplicación de ventana de la calculadora.

Este módulo contiene la clase CalculatorWindowApp, que conecta la ventana de
OpenCV (ratón y teclado) con el intérprete de la calculadora.
"""

import cv2
from core.calculator import Calculator
from ui.renderer import CalculatorRenderer
from voice.feedback import VoiceFeedback
from config.settings import AppConfig


# Teclas especiales de cv2.waitKey
KEY_ESC = 27
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)


def key_from_keyboard(code):
    """
    Traduce un código de cv2.waitKey a una tecla de la calculadora.

    Returns:
        str: Tecla ("0"-"9", "+", "-", "*", "/", "=", "C") o None
    """
    if code in KEY_ENTER:
        return "="
    if code in KEY_BACKSPACE:
        return "C"
    if code < 0 or code > 255:
        return None

    char = chr(code)
    if char in "0123456789+-*/=":
        return char
    if char in "cC":
        return "C"
    return None


# ============================================================================
class CalculatorWindowApp:
    """
    Calculadora con ventana gráfica.

    Arquitectura:
        - Calculator: Intérprete y estado (accumulator, operador, display)
        - CalculatorRenderer: Campo de texto + rejilla de botones
        - VoiceFeedback: Anuncio opcional de teclas y resultados
        - CalculatorWindowApp: Coordinador y bucle de eventos

    Todo ocurre en el hilo del bucle: los callbacks de ratón de OpenCV se
    ejecutan dentro de cv2.waitKey.
    """

    def __init__(self, config=None):
        """
        Args:
            config (AppConfig): Configuración (opcional)

        Raises:
            cv2.error: Si no se puede crear la ventana
        """
        self.config = config if config else AppConfig()
        self.window = self.config.calculator_title

        self.calc = Calculator()
        self.ui = CalculatorRenderer(self.config)
        self.voice = VoiceFeedback(self.config)

        cv2.namedWindow(self.window, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(self.window, self.on_mouse)

        print(f"✓ Window: {self.ui.width}x{self.ui.height}")

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón: un clic izquierdo sobre un botón equivale a pulsarlo."""
        if event != cv2.EVENT_LBUTTONUP:
            return
        key = self.ui.button_at(x, y)
        if key is not None:
            self.process(key)

    def process(self, key):
        """
        Procesa una tecla de la calculadora y actualiza feedback visual y de voz.

        Args:
            key (str): "0"-"9", "+", "-", "*", "/", "C" o "="

        Returns:
            str: Texto del display tras la pulsación
        """
        display = self.calc.press(key)
        self.ui.highlight(key)

        if key == "=":
            self.voice.speak_result(display)
        elif self.calc.is_error():
            self.voice.speak("error")
        else:
            self.voice.speak_key(key)
        return display

    def is_open(self):
        try:
            return cv2.getWindowProperty(self.window, cv2.WND_PROP_VISIBLE) >= 1
        except cv2.error:
            return False

    def run(self):
        """
        Bucle principal de la ventana.

        Controles de teclado:
            - Dígitos y + - * /: igual que los botones
            - = o Enter: calcular
            - c o Backspace: borrar todo
            - v: activar/desactivar voz
            - ESC o 'q': salir
        """
        while True:
            frame = self.ui.draw(self.calc.get_display(), self.calc.is_error())
            cv2.imshow(self.window, frame)

            code = cv2.waitKey(self.config.poll_interval_ms)
            if code != -1:
                code &= 0xFF

                if code == KEY_ESC or code == ord('q'):
                    break
                elif code == ord('v'):
                    status = "ON" if self.voice.toggle() else "OFF"
                    print(f"Voice: {status}")
                else:
                    key = key_from_keyboard(code)
                    if key is not None:
                        self.process(key)

            # Ventana cerrada con el botón del gestor de ventanas
            if not self.is_open():
                break

        cv2.destroyAllWindows()
        print("OK Calculator closed")
