"""
Configuración de ventanas, temporización y voz.

Este módulo contiene la configuración centralizada compartida por la
calculadora y el reloj.
"""


# ============================================================================
# CLASE: AppConfig
# Propósito: Preferencias de la calculadora y del reloj
# Responsabilidades:
#   - Dimensiones, colores y fuentes de las ventanas
#   - Intervalos del reloj y del bucle de eventos
#   - Preferencias de voz (volumen, velocidad)
#   - Forzar modo consola
# ============================================================================
class AppConfig:
    """
    Configuración de la aplicación con valores por defecto.

    Los colores están en formato BGR (OpenCV).
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA CALCULADORA
        # ====================================================================
        self.calculator_title = "Calculator"
        self.calculator_size = (300, 400)       # (ancho, alto) en píxeles
        self.button_gap = 10                     # Separación entre botones
        self.display_height = 70                 # Alto del campo de texto
        self.poll_interval_ms = 20               # Espera de cv2.waitKey por vuelta

        # ====================================================================
        # VENTANA RELOJ
        # ====================================================================
        self.clock_title = "Digital Clock"
        self.clock_size = (240, 90)
        self.tick_interval_ms = 1000             # Un tick por segundo

        # ====================================================================
        # COLORES Y FUENTES
        # ====================================================================
        self.bg_color = (35, 35, 35)
        self.fg_color = (255, 255, 255)
        self.button_color = (70, 70, 70)
        self.operator_color = (0, 140, 255)
        self.error_color = (100, 100, 255)
        self.display_font_scale = 1.0
        self.button_font_scale = 0.9
        self.clock_font_scale = 1.3

        # ====================================================================
        # VOZ
        # ====================================================================
        self.voice_enabled = False               # Activar/desactivar feedback por voz
        self.voice_volume = 0.8                  # Volumen (0.0-1.0)
        self.voice_rate = 150                    # Palabras por minuto

        # ====================================================================
        # MODO DE EJECUCIÓN
        # ====================================================================
        self.force_headless = False              # True = siempre modo consola

    def tick_interval(self):
        """Intervalo del reloj en segundos."""
        return self.tick_interval_ms / 1000.0
