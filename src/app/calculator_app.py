"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from config.settings import CalculatorConfig
from core.calculator import Append, CalculatorEngine, Clear
from ui.buttons import command_for_key
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback


KEY_ESC = 27


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - CalculatorEngine: Estado de la calculadora y notificación de cambios
        - UIRenderer: Renderizado de display, botones e historial
        - VoiceFeedback: Lectura en voz alta (opcional)
        - CalculatorApp: Coordinador y loop principal

    Cada clic o tecla se traduce en un único comando; el lienzo se vuelve a
    dibujar cuando el estado cambia.
    """

    def __init__(self, config=None, engine=None, voice=None):
        """
        Args:
            config (CalculatorConfig): Configuración (opcional)
            engine (CalculatorEngine): Motor con estado inicial (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.engine = engine if engine else CalculatorEngine()
        self.voice = voice if voice else VoiceFeedback(self.config)
        self.ui = UIRenderer(*self.config.get_window_size(), config=self.config)

        self.dirty = True       # El lienzo debe redibujarse
        self.frame = None       # Último lienzo dibujado
        self.running = False

        self.engine.subscribe(self.on_state_change)

    def on_state_change(self, previous, state):
        """
        Reacciona a un cambio de estado: redibujar y, si procede, hablar.

        - Error nuevo: se lee el mensaje
        - Historial creció: se lee el resultado
        """
        self.dirty = True
        if state.error:
            self.voice.speak_error(state.error)
        elif len(state.history) > len(previous.history):
            self.voice.speak_result(state.buffer)

    def handle_command(self, command):
        """Envía un comando al motor y da feedback por voz de la tecla."""
        if isinstance(command, Append):
            self.voice.speak_token(command.token)
        elif isinstance(command, Clear):
            self.voice.speak_clear()
        self.engine.dispatch(command)

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: un clic izquierdo pulsa el botón bajo el cursor."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        button = self.ui.button_at(x, y)
        if button is None:
            return
        self.ui.show_pressed(button)
        self.dirty = True
        self.handle_command(button.command)

    def handle_key(self, key):
        """
        Procesa una tecla.

        Returns:
            bool: False si la tecla pide salir (ESC o 'q')
        """
        if key == KEY_ESC or key == ord('q'):
            return False

        if key == ord('v'):
            status = "ON" if self.config.toggle_voice() else "OFF"
            print(f"🔊 Voice: {status}")
            self.voice.speak_voice_on()
            return True

        command = command_for_key(key)
        if command is not None:
            self.handle_command(command)
        return True

    def _sync_window_size(self):
        """Adapta el lienzo si el usuario redimensionó la ventana."""
        _, _, width, height = cv2.getWindowImageRect(self.config.window_title)
        if width <= 0 or height <= 0:
            return
        width, height = self.config.get_window_size(width, height)
        if (width, height) != (self.ui.width, self.ui.height):
            self.ui.resize(width, height)
            self.dirty = True

    def draw(self):
        """Devuelve el lienzo actual, redibujándolo solo si hace falta."""
        if self.dirty or self.frame is None or self.ui.pressed_timer > 0:
            self.frame = self.ui.render(self.engine.state)
            self.dirty = False
        return self.frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ajustar tamaño si la ventana cambió
            2. Dibujar estado (si cambió)
            3. Mostrar lienzo y procesar teclado (los clics llegan por callback)
            4. Repetir hasta ESC, 'q' o cerrar la ventana
        """
        title = self.config.window_title
        cv2.namedWindow(title, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(title, self.ui.width, self.ui.height)
        cv2.setMouseCallback(title, self.on_mouse)

        print("\n" + "=" * 50)
        print(title.upper())
        print("=" * 50)
        print("\nClick the buttons or type: 0-9 . ( ) + - * /")
        print("Enter or '=': evaluate | Backspace: delete | c: clear")
        print("v: toggle voice | ESC or 'q': quit")
        if self.config.voice_enabled:
            print("\n🔊 Voice feedback: ON")
        print("=" * 50 + "\n")

        self.running = True
        while self.running:
            self._sync_window_size()
            cv2.imshow(title, self.draw())

            key = cv2.waitKey(30)
            if key != -1:
                self.running = self.handle_key(key & 0xFF)

            # Ventana cerrada con el botón del sistema
            if self.running and cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                self.running = False

        cv2.destroyAllWindows()
        print("\nOK Calculator closed")
