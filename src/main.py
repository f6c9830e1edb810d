# ============================================================================
# IMPORTS
# ============================================================================
import traceback

from app.calculator_app import CalculatorApp
from config.settings import CalculatorConfig


def main():
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback

    Ejecución:
        python3 src/main.py
    """
    try:
        app = CalculatorApp(config=CalculatorConfig())
        app.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    main()
