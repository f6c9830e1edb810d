"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para feedback auditivo,
ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import threading
import pyttsx3
from collections import deque


PHRASES = {
    'en': {
        'tokens': {
            "+": "plus", "-": "minus", "*": "times", "/": "divided by",
            "(": "open", ")": "close", ".": "point",
        },
        'equals': "equals {}",
        'point': " point ",
        'clear': "cleared",
        'voice_on': "voice on",
    },
    'es': {
        'tokens': {
            "+": "más", "-": "menos", "*": "por", "/": "dividido",
            "(": "abre paréntesis", ")": "cierra paréntesis", ".": "coma",
        },
        'equals': "igual a {}",
        'point': " coma ",
        'clear': "borrado",
        'voice_on': "voz activada",
    },
}


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Leer en voz alta teclas, resultados y errores
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (máximo 5 pendientes)
        - Configuración de volumen y velocidad
        - Frases en inglés y español
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración de la aplicación

        Si el motor no se puede inicializar, la voz se desactiva.
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Voice engine initialized")
        except Exception as e:
            print(f"⚠ Warning: voice engine unavailable: {e}")
            self.config.voice_enabled = False

    @property
    def phrases(self):
        return PHRASES.get(self.config.voice_language, PHRASES['en'])

    def _configure_engine(self):
        """Aplica volumen, velocidad y, si existe, una voz del idioma configurado."""
        if not self.engine:
            return

        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices'):
            languages = [str(lang).lower() for lang in getattr(voice, 'languages', [])]
            if any(language in lang for lang in languages) or f"{language}-" in voice.id.lower():
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voice: {voice.name}")
                return

        print(f"⚠ No '{language}' voice found. Using default voice.")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error playing voice: {e}")

    def speak_token(self, token):
        """Lee una tecla pulsada (dígito u operador)."""
        self.speak(self.phrases['tokens'].get(token, token))

    def speak_result(self, result):
        """
        Lee un resultado (ej: "2.5" → "equals 2 point 5").

        Args:
            result (str): Resultado ya formateado
        """
        self.speak(self.phrases['equals'].format(result.replace('.', self.phrases['point'])))

    def speak_error(self, message):
        self.speak(message)

    def speak_clear(self):
        self.speak(self.phrases['clear'])

    def speak_voice_on(self):
        self.speak(self.phrases['voice_on'])
