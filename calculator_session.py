"""
Estado de la presentación de la calculadora.

Traduce pulsaciones de teclas (dígitos, operaciones, retroceso, memoria M)
en llamadas al cerebro y prepara los textos que muestra la ventana. No
depende de tkinter, así que la interfaz solo tiene que pintar.
"""

import logging

from calculator_brain import CalculatorBrain


logger = logging.getLogger(__name__)


class CalculatorSession:
    """Une la entrada tecleada con el cerebro y la tabla de variables."""

    VARIABLE_NAME = "M"
    DIGITS = frozenset("0123456789.")

    def __init__(self, brain=None):
        self.brain = brain if brain is not None else CalculatorBrain()
        self.variables: dict = {}
        self._typing = False
        self._typed_text = "0"

    # ── Entrada ──────────────────────────────────────────────────

    @property
    def is_typing(self) -> bool:
        return self._typing

    def touch_digit(self, digit: str):
        if digit not in self.DIGITS or len(digit) != 1:
            raise ValueError(f"Tecla no válida: {digit!r}")

        if self._typing:
            if digit == "." and "." in self._typed_text:
                return
            self._typed_text += digit
        else:
            self._typed_text = "0." if digit == "." else digit
            self._typing = True

    def perform_operation(self, symbol: str):
        if self._typing:
            self.brain.set_operand(self.brain.to_number(self._typed_text))
            self._typing = False
        self.brain.perform_operation(symbol)

    def backspace(self):
        if not self._typing:
            self.brain.undo()
            return

        self._typed_text = self._typed_text[:-1]
        if not self._typed_text:
            self._typed_text = "0"
            self._typing = False

    # ── Memoria M ────────────────────────────────────────────────

    def store_variable(self):
        """Asigna a M el valor que está en pantalla (→M)."""
        self.variables = {self.VARIABLE_NAME: self.display_value}
        self._typing = False
        logger.debug("%s = %s", self.VARIABLE_NAME, self.variables[self.VARIABLE_NAME])

    def recall_variable(self):
        self._typing = False
        self.brain.set_operand(self.VARIABLE_NAME)

    def clear(self):
        self.variables = {}
        self._typing = False
        self._typed_text = "0"
        self.brain.clear()

    # ── Textos para la interfaz ──────────────────────────────────

    @property
    def display_value(self):
        if self._typing:
            return self.brain.to_number(self._typed_text)
        return self.brain.evaluate(self.variables).result

    @property
    def display_text(self) -> str:
        if self._typing:
            return self._typed_text
        return self.brain.format_number(self.display_value)

    @property
    def sequence_text(self) -> str:
        evaluation = self.brain.evaluate(self.variables)
        if not evaluation.description:
            return "0"
        if evaluation.is_pending:
            return evaluation.description + " ..."
        return evaluation.description + " ="

    @property
    def variable_text(self) -> str:
        return self.brain.format_number(self.variables.get(self.VARIABLE_NAME, 0))
