"""Formato de números para la descripción y la pantalla de la calculadora."""

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext


MAX_FRACTION_DIGITS = 6

_QUANTUM = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)


def format_number(value) -> str:
    """Representa ``value`` en punto fijo con hasta 6 decimales.

    Al menos un dígito entero, sin ceros finales ni punto suelto y sin
    separadores de miles. Acepta int, float y mpf de mpmath.
    """
    # Comparaciones directas: un mpf enorme no debe pasar por float.
    if value != value:
        return "NaN"
    if value == math.inf:
        return "∞"
    if value == -math.inf:
        return "-∞"

    exact = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + MAX_FRACTION_DIGITS + 2)
        rounded = exact.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
