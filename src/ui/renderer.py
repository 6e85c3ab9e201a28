"""
Interfaz de usuario y renderizado.

Este módulo contiene los renderizadores que dibujan la calculadora (campo de
texto + rejilla de botones) y el reloj (etiqueta HH:MM:SS) sobre lienzos numpy.
"""

import cv2
import numpy as np
from config.settings import AppConfig


# Rejilla de botones (fila a fila)
BUTTON_ROWS = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", "C", "=", "+"),
)


def new_canvas(width, height, color):
    """Crea una imagen BGR de tamaño fijo rellena con un color."""
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas


def put_centered_text(img, text, box, font_scale, color, thickness=2,
                      font=cv2.FONT_HERSHEY_DUPLEX):
    """Dibuja texto centrado dentro de la caja (x, y, w, h)."""
    x, y, w, h = box
    (text_w, text_h), _ = cv2.getTextSize(text, font, font_scale, thickness)
    tx = x + (w - text_w) // 2
    ty = y + (h + text_h) // 2
    cv2.putText(img, text, (tx, ty), font, font_scale, color, thickness, cv2.LINE_AA)


# ============================================================================
# CLASE: CalculatorRenderer
# Propósito: Dibujar la ventana de la calculadora
# Responsabilidades:
#   - Campo de texto con el display de la calculadora
#   - Rejilla 4x4 de botones
#   - Traducir clics de ratón a teclas (hit test)
#   - Resaltar brevemente el botón pulsado
# ============================================================================
class CalculatorRenderer:
    """
    Renderizador de la calculadora.

    Distribución:
        - Franja superior: display (alineado a la derecha, recortado por la izquierda)
        - Resto: 4 filas x 4 columnas de botones separados por config.button_gap
    """

    def __init__(self, config=None):
        """
        Args:
            config (AppConfig): Configuración (tamaños, colores, fuentes)
        """
        self.config = config if config else AppConfig()
        self.width, self.height = self.config.calculator_size
        self.highlight_key = None            # Botón resaltado actualmente
        self.highlight_timer = 0             # Frames restantes de resaltado
        self.buttons = self._layout_buttons()

    def _layout_buttons(self):
        """
        Calcula la caja (x, y, w, h) de cada botón.

        Returns:
            dict: tecla → (x, y, w, h)
        """
        gap = self.config.button_gap
        top = self.config.display_height + gap
        rows = len(BUTTON_ROWS)
        cols = len(BUTTON_ROWS[0])
        cell_w = (self.width - gap * (cols + 1)) // cols
        cell_h = (self.height - top - gap * rows) // rows

        buttons = {}
        for r, row in enumerate(BUTTON_ROWS):
            for c, key in enumerate(row):
                x = gap + c * (cell_w + gap)
                y = top + r * (cell_h + gap)
                buttons[key] = (x, y, cell_w, cell_h)
        return buttons

    def button_at(self, x, y):
        """
        Devuelve la tecla bajo el punto (x, y) o None si cae fuera de los botones.
        """
        for key, (bx, by, bw, bh) in self.buttons.items():
            if bx <= x < bx + bw and by <= y < by + bh:
                return key
        return None

    def highlight(self, key, duration=6):
        """Resalta un botón durante `duration` frames."""
        self.highlight_key = key
        self.highlight_timer = duration

    def draw(self, display_text, is_error=False):
        """
        Dibuja la ventana completa.

        Args:
            display_text (str): Texto del display
            is_error (bool): True para pintar el texto en color de error

        Returns:
            np.array: Imagen BGR lista para cv2.imshow
        """
        cfg = self.config
        img = new_canvas(self.width, self.height, cfg.bg_color)

        self.draw_display(img, display_text, is_error)

        if self.highlight_timer > 0:
            self.highlight_timer -= 1
        else:
            self.highlight_key = None

        for key, box in self.buttons.items():
            self.draw_button(img, key, box)
        return img

    def draw_display(self, img, text, is_error=False):
        cfg = self.config
        x, y = cfg.button_gap, cfg.button_gap
        w = self.width - 2 * cfg.button_gap
        h = cfg.display_height - cfg.button_gap

        cv2.rectangle(img, (x, y), (x + w, y + h), (15, 15, 15), -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 2)

        color = cfg.error_color if is_error else cfg.fg_color
        font = cv2.FONT_HERSHEY_DUPLEX
        scale = cfg.display_font_scale

        # Recortar por la izquierda hasta que quepa (números largos)
        shown = text
        while shown and cv2.getTextSize(shown, font, scale, 2)[0][0] > w - 20:
            shown = shown[1:]

        text_w, text_h = cv2.getTextSize(shown, font, scale, 2)[0]
        cv2.putText(img, shown, (x + w - 10 - text_w, y + (h + text_h) // 2),
                    font, scale, color, 2, cv2.LINE_AA)

    def draw_button(self, img, key, box):
        cfg = self.config
        x, y, w, h = box

        if key == self.highlight_key:
            fill = (200, 200, 200)
        elif key in ("/", "*", "-", "+", "="):
            fill = cfg.operator_color
        else:
            fill = cfg.button_color

        cv2.rectangle(img, (x, y), (x + w, y + h), fill, -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (120, 120, 120), 1)
        put_centered_text(img, key, box, cfg.button_font_scale, cfg.fg_color)


# ============================================================================
# CLASE: ClockRenderer
# Propósito: Dibujar la etiqueta del reloj digital
# ============================================================================
class ClockRenderer:
    """Renderizador del reloj: una etiqueta HH:MM:SS centrada."""

    def __init__(self, config=None):
        self.config = config if config else AppConfig()
        self.width, self.height = self.config.clock_size

    def draw(self, time_text):
        cfg = self.config
        img = new_canvas(self.width, self.height, cfg.bg_color)
        put_centered_text(img, time_text, (0, 0, self.width, self.height),
                          cfg.clock_font_scale, cfg.fg_color, thickness=2)
        return img
