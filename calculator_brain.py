"""
Cerebro de la calculadora.

Registra la secuencia de pasos introducidos (operandos, variables y
símbolos de operación) y la reproduce bajo demanda para obtener el
resultado, si hay una operación binaria pendiente y la descripción
legible de la expresión.

Contrato de interfaz:
    - set_operand(value | nombre), perform_operation(symbol)
    - clear(), undo()
    - evaluate(variables=None) -> Evaluation
    - result, description, result_is_pending
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from number_format import format_number
from operations import (
    BinaryOperation,
    Constant,
    Equals,
    PythonMathProvider,
    UnaryOperation,
    build_operations,
)


logger = logging.getLogger(__name__)


# ── Pasos del historial ──────────────────────────────────────────

@dataclass(frozen=True)
class Operand:
    value: object


@dataclass(frozen=True)
class VariableReference:
    name: str


@dataclass(frozen=True)
class OperationSymbol:
    symbol: str


class Evaluation(NamedTuple):
    result: object
    is_pending: bool
    description: str


@dataclass
class _PendingBinaryOperation:
    function: object
    first_operand: object
    describe: object
    first_description: str
    has_second_operand: bool = False

    def perform(self, second_operand):
        return self.function(self.first_operand, second_operand)

    def description_with(self, second_description: str) -> str:
        return self.describe(self.first_description, second_description)


class CalculatorBrain:
    """Acumula pasos y evalúa la expresión que describen."""

    def __init__(self, provider=None):
        self._provider = provider if provider is not None else PythonMathProvider()
        self._operations = build_operations(self._provider.build_namespace())
        self._sequence = []

    # ── Propiedad: modo angular ──────────────────────────────────

    @property
    def angle_mode(self) -> str:
        return self._provider.angle_mode

    @angle_mode.setter
    def angle_mode(self, mode: str):
        self._provider.angle_mode = mode
        self._operations = build_operations(self._provider.build_namespace())

    @property
    def history(self) -> tuple:
        return tuple(self._sequence)

    # ── Conversión y formato con la precisión del proveedor ──────

    def to_number(self, value):
        """Convierte ``value`` (número o texto tecleado) al tipo del proveedor."""
        return self._provider.to_number(value)

    def format_number(self, value) -> str:
        return format_number(value)

    # ── Mutadores ────────────────────────────────────────────────

    def set_operand(self, operand):
        """Añade un operando numérico, o una variable si recibe un nombre."""
        if isinstance(operand, str):
            self.set_variable(operand)
            return
        # Falla aquí y no durante la evaluación
        self._provider.to_number(operand)
        self._append(Operand(operand))

    def set_variable(self, name: str):
        self._append(VariableReference(name))

    def perform_operation(self, symbol: str):
        self._append(OperationSymbol(symbol))

    def clear(self):
        logger.debug("Historial vaciado (%d pasos)", len(self._sequence))
        self._sequence = []

    def undo(self):
        if self._sequence:
            step = self._sequence.pop()
            logger.debug("Deshecho: %r", step)

    def _append(self, step):
        logger.debug("Paso añadido: %r", step)
        self._sequence.append(step)

    # ── Evaluación ───────────────────────────────────────────────

    def evaluate(self, variables: Optional[dict] = None) -> Evaluation:
        """Reproduce el historial con las variables dadas (ausentes = 0)."""
        variables = variables or {}
        to_number = self._provider.to_number

        accumulator = to_number(0)
        description_accumulator = ""
        description = ""
        pending: Optional[_PendingBinaryOperation] = None

        for step in self._sequence:
            if isinstance(step, Operand):
                accumulator = to_number(step.value)
                description_accumulator = format_number(accumulator)
            elif isinstance(step, VariableReference):
                accumulator = to_number(variables.get(step.name, 0))
                description_accumulator = step.name
            else:
                operation = self._operations.get(step.symbol)
                if operation is None:
                    logger.debug("Símbolo desconocido ignorado: %s", step.symbol)
                    continue

                if isinstance(operation, Constant):
                    accumulator = to_number(operation.value)
                    description_accumulator = operation.label
                elif isinstance(operation, UnaryOperation):
                    accumulator = operation.function(accumulator)
                    description_accumulator = operation.describe(description_accumulator)
                    if pending is not None:
                        description = pending.description_with(description_accumulator)
                elif isinstance(operation, BinaryOperation):
                    if pending is not None:
                        description_accumulator = pending.description_with(description_accumulator)
                        accumulator = pending.perform(accumulator)
                    pending = _PendingBinaryOperation(
                        function=operation.function,
                        first_operand=accumulator,
                        describe=operation.describe,
                        first_description=description_accumulator,
                    )
                    description = pending.description_with("")
                    continue
                elif isinstance(operation, Equals):
                    if pending is not None:
                        description_accumulator = pending.description_with(description_accumulator)
                        accumulator = pending.perform(accumulator)
                        pending = None
                    continue

            if pending is not None:
                pending.has_second_operand = True

        if pending is None:
            return Evaluation(accumulator, False, description_accumulator)

        # Resultado provisional mientras la operación sigue abierta
        if pending.has_second_operand:
            return Evaluation(
                pending.perform(accumulator),
                True,
                pending.description_with(description_accumulator),
            )
        return Evaluation(accumulator, True, description)

    # ── Accesos derivados ────────────────────────────────────────

    @property
    def result(self):
        return self.evaluate().result

    @property
    def description(self) -> str:
        return self.evaluate().description

    @property
    def result_is_pending(self) -> bool:
        return self.evaluate().is_pending
