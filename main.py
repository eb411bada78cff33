"""Punto de entrada de la calculadora."""

import logging
import tkinter as tk

from calculator_brain import CalculatorBrain
from calculator_session import CalculatorSession
from calculator_ui import CalculatorApp


USE_ARBITRARY_PRECISION = False
AP_DIGITS = 30
ANGLE_MODE = "rad"
LOG_LEVEL = "WARNING"


def build_brain():
    if USE_ARBITRARY_PRECISION:
        from arbitrary_precision_brain import ArbitraryPrecisionCalculatorBrain

        return ArbitraryPrecisionCalculatorBrain(
            digits=AP_DIGITS,
            angle_mode=ANGLE_MODE,
        )
    brain = CalculatorBrain()
    brain.angle_mode = ANGLE_MODE
    return brain


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = tk.Tk()
    root.geometry("360x560")
    root.minsize(320, 520)
    CalculatorApp(root, session=CalculatorSession(build_brain()))
    root.mainloop()


if __name__ == "__main__":
    main()
