"""
Módulo de interfaz de usuario.
Contiene la rejilla de áreas y la definición de botones; el renderizado
con OpenCV está en ui.renderer.
"""

from .layout import GridLayout
from .buttons import BUTTON_DEFINITIONS, ButtonDefinition, ButtonType, command_for_key

__all__ = ['GridLayout', 'BUTTON_DEFINITIONS', 'ButtonDefinition', 'ButtonType', 'command_for_key']
