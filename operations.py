"""Tabla de operaciones de la calculadora y proveedor matemático de floats."""

import math
from dataclasses import dataclass
from typing import Callable, Union


# ═════════════════════════════════════════════════════════════════
#  Tipos de operación
# ═════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Constant:
    value: object
    label: str


@dataclass(frozen=True)
class UnaryOperation:
    function: Callable
    describe: Callable[[str], str]


@dataclass(frozen=True)
class BinaryOperation:
    function: Callable
    describe: Callable[[str, str], str]


@dataclass(frozen=True)
class Equals:
    pass


Operation = Union[Constant, UnaryOperation, BinaryOperation, Equals]


def _prefix(name: str) -> Callable[[str], str]:
    return lambda operand: f"{name}({operand})"


def _infix(symbol: str) -> Callable[[str, str], str]:
    return lambda left, right: f"{left}{symbol}{right}"


def build_operations(namespace: dict) -> dict:
    """Construye la tabla símbolo → operación a partir de un namespace."""
    return {
        "π": Constant(namespace["pi"], "π"),
        "e": Constant(namespace["e"], "e"),
        "√": UnaryOperation(namespace["sqrt"], _prefix("√")),
        "cos": UnaryOperation(namespace["cos"], _prefix("cos")),
        "sin": UnaryOperation(namespace["sin"], _prefix("sin")),
        "tan": UnaryOperation(namespace["tan"], _prefix("tan")),
        "+/-": UnaryOperation(namespace["negate"], _prefix("-")),
        "xʸ": BinaryOperation(namespace["pow"], _infix("^")),
        "×": BinaryOperation(namespace["multiply"], _infix("×")),
        "÷": BinaryOperation(namespace["divide"], _infix("÷")),
        "+": BinaryOperation(namespace["add"], _infix("+")),
        "−": BinaryOperation(namespace["subtract"], _infix("-")),
        "=": Equals(),
    }


# ═════════════════════════════════════════════════════════════════
#  Proveedor de floats
# ═════════════════════════════════════════════════════════════════

def _nan_on_domain_error(fn):
    def w(*args):
        try:
            return fn(*args)
        except ValueError:
            return math.nan

    return w


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == int(x) and int(x) % 2 == 1


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


class PythonMathProvider:
    """Provee las funciones de la tabla sobre float, sin lanzar excepciones
    aritméticas: los errores de dominio dan NaN y los desbordes ±∞."""

    def __init__(self, angle_mode: str = "rad"):
        self._angle_mode = "rad"
        self.angle_mode = angle_mode

    @property
    def angle_mode(self) -> str:
        return self._angle_mode

    @angle_mode.setter
    def angle_mode(self, mode: str):
        if mode not in ("rad", "deg"):
            raise ValueError("El modo debe ser 'rad' o 'deg'")
        self._angle_mode = mode

    @staticmethod
    def to_number(value) -> float:
        return float(value)

    def build_namespace(self) -> dict:
        mode = self._angle_mode

        def _trig(fn):
            def w(x):
                return fn(math.radians(x) if mode == "deg" else x)

            return _nan_on_domain_error(w)

        return {
            "pi": math.pi,
            "e": math.e,
            "sqrt": _nan_on_domain_error(math.sqrt),
            "cos": _trig(math.cos),
            "sin": _trig(math.sin),
            "tan": _trig(math.tan),
            "negate": lambda x: -x,
            "pow": _pow,
            "multiply": lambda a, b: a * b,
            "divide": _divide,
            "add": lambda a, b: a + b,
            "subtract": lambda a, b: a - b,
        }
