"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada de ventana, colores,
tipografía del display y feedback por voz.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la aplicación
# Responsabilidades:
#   - Definir título y tamaño (mínimo) de la ventana
#   - Definir colores (BGR) del display, historial y errores
#   - Almacenar preferencias de voz (activación, volumen, velocidad, idioma)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Los colores están en formato BGR (OpenCV).
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Simplistic Calculator"
        self.window_width = 900
        self.window_height = 600
        self.min_width = 600                # Tamaño mínimo de la ventana
        self.min_height = 500
        self.padding = 15                   # Margen exterior de la rejilla

        # ====================================================================
        # COLORES (BGR)
        # ====================================================================
        self.background_color = (255, 255, 255)
        self.text_color = (0, 0, 0)
        self.error_color = (54, 67, 244)    # Rojo
        self.label_color = (80, 80, 80)     # Texto de los botones

        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.display_font_scale = 3.0       # Escala máxima; se reduce hasta que quepa
        self.display_min_font_scale = 0.5
        self.display_max_lines = 2

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False          # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'en'          # Idioma ('en' o 'es')

    def get_window_size(self, width=None, height=None):
        """
        Ajusta un tamaño de ventana al mínimo permitido.

        Args:
            width (int): Ancho solicitado (por defecto window_width)
            height (int): Alto solicitado (por defecto window_height)

        Returns:
            tuple: (ancho, alto) nunca menores que (min_width, min_height)
        """
        width = self.window_width if width is None else width
        height = self.window_height if height is None else height
        return max(width, self.min_width), max(height, self.min_height)

    def toggle_voice(self):
        """Activa/desactiva la voz y devuelve el nuevo valor."""
        self.voice_enabled = not self.voice_enabled
        return self.voice_enabled
