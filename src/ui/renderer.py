"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el estado de la
calculadora (display, botones e historial) sobre un lienzo de OpenCV.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig
from ui.buttons import BUTTON_DEFINITIONS, ButtonType
from ui.layout import GridLayout


FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_BOLD = cv2.FONT_HERSHEY_DUPLEX


def _wrap(text, font, scale, thickness, max_width):
    """Parte el texto en líneas que caben en max_width (por caracteres)."""
    lines = []
    current = ""
    for char in text:
        candidate = current + char
        if current and cv2.getTextSize(candidate, font, scale, thickness)[0][0] > max_width:
            lines.append(current)
            current = char
        else:
            current = candidate
    if current or not lines:
        lines.append(current)
    return lines


ELLIPSIS = "..."


def _ellipsize(line, font, scale, thickness, max_width):
    """Recorta la línea por la derecha y añade "..." sin pasar de max_width."""
    while line and cv2.getTextSize(line + ELLIPSIS, font, scale, thickness)[0][0] > max_width:
        line = line[:-1]
    return line + ELLIPSIS


def fit_text(text, max_width, max_height, max_scale, min_scale=0.5,
             max_lines=2, font=FONT, thickness=2):
    """
    Busca la escala de fuente más grande con la que el texto cabe en la caja.

    Reduce la escala en pasos de 10% y permite hasta max_lines líneas.
    Si ni con min_scale cabe, se descartan las líneas sobrantes y la última
    línea visible termina en "...".

    Returns:
        tuple: (líneas, escala, alto de línea en píxeles)
    """
    scale = max_scale
    while True:
        lines = _wrap(text, font, scale, thickness, max_width)
        (_, text_h), baseline = cv2.getTextSize("0", font, scale, thickness)
        line_h = text_h + baseline + int(8 * scale)
        if (len(lines) <= max_lines and line_h * len(lines) <= max_height) or scale <= min_scale:
            break
        scale = max(scale * 0.9, min_scale)

    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = _ellipsize(lines[-1], font, scale, thickness, max_width)
    return lines, scale, line_h


# ============================================================================
# CLASE: UIRenderer
# ============================================================================
class UIRenderer:
    """
    Renderizador de la calculadora.

    Componentes visuales:
        1. Display: buffer alineado a la derecha en negro, o error alineado
           a la izquierda en rojo
        2. Botones: contorno (outlined) o relleno (elevated) con su color
        3. Historial: cabecera "History" y entradas, la más reciente arriba
    """

    def __init__(self, width, height, config=None, layout=None):
        """
        Args:
            width (int): Ancho del lienzo en píxeles
            height (int): Alto del lienzo en píxeles
            config (CalculatorConfig): Configuración (opcional)
            layout (GridLayout): Rejilla de áreas (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.layout = layout if layout else GridLayout()
        self.buttons = BUTTON_DEFINITIONS
        self.pressed_area = None    # Botón resaltado tras un clic
        self.pressed_timer = 0      # Frames restantes de resaltado
        self.resize(width, height)

    def resize(self, width, height):
        """Adapta el lienzo y la rejilla a un nuevo tamaño de ventana."""
        self.width, self.height = self.config.get_window_size(width, height)
        self.layout.resize(self.width, self.height, self.config.padding)

    def button_at(self, x, y):
        """Botón bajo el punto (x, y) del lienzo, o None."""
        area = self.layout.area_at(x, y)
        for button in self.buttons:
            if button.area_name == area:
                return button
        return None

    def show_pressed(self, button, duration=6):
        """Resalta un botón durante `duration` frames."""
        self.pressed_area = button.area_name
        self.pressed_timer = duration

    def render(self, state):
        """
        Dibuja el estado completo en un lienzo nuevo.

        Args:
            state (CalculatorState): Estado a mostrar

        Returns:
            np.ndarray: Imagen BGR de height x width
        """
        img = np.full((self.height, self.width, 3), self.config.background_color, dtype=np.uint8)
        self.draw_display(img, state)
        self.draw_buttons(img)
        self.draw_history(img, state)

        if self.pressed_timer > 0:
            self.pressed_timer -= 1
            if self.pressed_timer == 0:
                self.pressed_area = None
        return img

    def draw_display(self, img, state):
        """
        Dibuja el display principal.

        El texto se ajusta de tamaño para caber en dos líneas como máximo.
        """
        x, y, w, h = self.layout.rects['display']
        pad = 8
        if state.error:
            text, color, align_right = state.error, self.config.error_color, False
        else:
            text, color, align_right = state.buffer, self.config.text_color, True

        lines, scale, line_h = fit_text(
            text, w - 2 * pad, h - 2 * pad,
            self.config.display_font_scale,
            self.config.display_min_font_scale,
            self.config.display_max_lines,
        )
        thickness = max(1, int(round(scale * 1.5)))

        # Texto anclado a la parte inferior del display
        cy = y + h - pad - line_h * (len(lines) - 1)
        for line in lines:
            text_w = cv2.getTextSize(line, FONT, scale, thickness)[0][0]
            tx = x + w - pad - text_w if align_right else x + pad
            cv2.putText(img, line, (tx, cy), FONT, scale, color, thickness, cv2.LINE_AA)
            cy += line_h

    def draw_buttons(self, img):
        """Dibuja todos los botones con su etiqueta centrada."""
        for button in self.buttons:
            x, y, w, h = self.layout.rects[button.area_name]
            # Margen interior (10 px vertical, 3 px horizontal)
            x0, y0, x1, y1 = x + 3, y + 10, x + w - 3, y + h - 10

            pressed = button.area_name == self.pressed_area
            if button.type == ButtonType.ELEVATED or pressed:
                # Sombra + relleno
                cv2.rectangle(img, (x0 + 2, y0 + 3), (x1 + 2, y1 + 3), (190, 190, 190), -1)
                fill = tuple(int(c * 0.8) for c in button.color) if pressed else button.color
                cv2.rectangle(img, (x0, y0), (x1, y1), fill, -1)
            else:
                overlay = img.copy()
                cv2.rectangle(overlay, (x0, y0), (x1, y1), button.color, -1)
                cv2.addWeighted(overlay, 0.35, img, 0.65, 0, img)
                cv2.rectangle(img, (x0, y0), (x1, y1), button.color, 2)

            (tw, th), _ = cv2.getTextSize(button.label, FONT, 0.8, 2)
            cv2.putText(img, button.label, (x0 + (x1 - x0 - tw) // 2, y0 + (y1 - y0 + th) // 2),
                        FONT, 0.8, self.config.label_color, 2, cv2.LINE_AA)

    def draw_history(self, img, state):
        """
        Dibuja el panel de historial.

        Las entradas que no caben en el panel no se dibujan.
        """
        x, y, w, h = self.layout.rects['history']
        x += 8
        w -= 16

        cv2.putText(img, "History", (x + 8, y + 36), FONT_BOLD, 0.8,
                    self.config.text_color, 2, cv2.LINE_AA)
        cv2.line(img, (x, y + 50), (x + w, y + 50), (220, 220, 220), 1)

        cy = y + 85
        for entry in state.history:
            if cy > y + h:
                break
            lines, scale, line_h = fit_text(entry, w - 16, h, 0.6, 0.35, max_lines=1)
            cv2.putText(img, lines[0], (x + 8, cy), FONT, scale,
                        self.config.text_color, 1, cv2.LINE_AA)
            cy += max(line_h, 28) + 8
