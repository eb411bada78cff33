"""Cerebro de la calculadora con precisión arbitraria (mpmath)."""

from __future__ import annotations

import logging

from calculator_brain import CalculatorBrain, Evaluation

try:
    from mpmath import mp
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "mpmath no está instalado. Instala con: pip install mpmath"
    ) from exc


logger = logging.getLogger(__name__)


class MPMathProvider:
    """Proveedor matemático basado en mpmath.

    Igual que el de floats, nunca lanza: raíces de negativos y potencias
    complejas dan NaN, y la división por cero da ±∞ (o NaN para 0/0).
    """

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
    def to_number(value):
        return mp.mpf(value)

    def _trig(self, fn):
        mode = self._angle_mode

        def wrapped(x):
            if not mp.isfinite(x):
                return mp.nan
            value = mp.radians(x) if mode == "deg" else x
            return fn(value)

        return wrapped

    @staticmethod
    def _sqrt(x):
        if x < 0:
            return mp.nan
        return mp.sqrt(x)

    @staticmethod
    def _divide(a, b):
        if b == 0:
            if a == 0 or mp.isnan(a):
                return mp.nan
            return mp.inf if a > 0 else -mp.inf
        return a / b

    @staticmethod
    def _pow(base, exponent):
        try:
            result = mp.power(base, exponent)
        except ZeroDivisionError:
            return mp.inf
        if isinstance(result, mp.mpc):
            return mp.nan
        return result

    def build_namespace(self) -> dict:
        return {
            "pi": mp.pi,
            "e": mp.e,
            "sqrt": self._sqrt,
            "cos": self._trig(mp.cos),
            "sin": self._trig(mp.sin),
            "tan": self._trig(mp.tan),
            "negate": lambda x: -x,
            "pow": self._pow,
            "multiply": lambda a, b: a * b,
            "divide": self._divide,
            "add": lambda a, b: a + b,
            "subtract": lambda a, b: a - b,
        }


class ArbitraryPrecisionCalculatorBrain(CalculatorBrain):
    """Evalúa el historial con mpf y ``digits`` dígitos significativos."""

    def __init__(self, digits: int = 30, angle_mode: str = "rad"):
        super().__init__(MPMathProvider(angle_mode))
        self._digits = max(8, digits)

    @property
    def digits(self) -> int:
        return self._digits

    def to_number(self, value):
        with mp.workdps(self._digits):
            return super().to_number(value)

    def format_number(self, value) -> str:
        with mp.workdps(self._digits):
            return super().format_number(value)

    def evaluate(self, variables: dict | None = None) -> Evaluation:
        logger.debug("Evaluando con %d dígitos", self._digits)
        with mp.workdps(self._digits):
            return super().evaluate(variables)
