"""
Interfaz gráfica de la calculadora.

Usa tkinter. Toda la lógica vive en CalculatorSession; esta ventana
solo traduce botones y teclas en acciones y repinta los textos.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_session import CalculatorSession


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"

    KEYPAD = [
        [("C",  "clear",     "special"), ("⌫", "backspace", "special"),
         ("→M", "store", "special"), ("M", "recall", "special")],

        [("π", "op:π", "func"), ("e", "op:e", "func"),
         ("√", "op:√", "func"), ("+/-", "op:+/-", "func")],

        [("cos", "op:cos", "func"), ("sin", "op:sin", "func"),
         ("tan", "op:tan", "func"), ("xʸ", "op:xʸ", "op")],

        [("7",  "digit:7",  "num"), ("8", "digit:8", "num"),
         ("9",  "digit:9",  "num"), ("÷", "op:÷", "op")],

        [("4",  "digit:4",  "num"), ("5", "digit:5", "num"),
         ("6",  "digit:6",  "num"), ("×", "op:×", "op")],

        [("1",  "digit:1",  "num"), ("2", "digit:2", "num"),
         ("3",  "digit:3",  "num"), ("−", "op:−", "op")],

        [("0",  "digit:0",  "num"), (".", "digit:.", "num"),
         ("=",  "op:=",     "equals"), ("+", "op:+", "op")],
    ]

    # Teclas físicas → acción
    KEY_ACTIONS = {
        "+": "op:+",
        "-": "op:−",
        "*": "op:×",
        "/": "op:÷",
        "^": "op:xʸ",
        "=": "op:=",
        "Return": "op:=",
        "KP_Enter": "op:=",
        "BackSpace": "backspace",
        "Escape": "clear",
    }

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, session=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.session = session if session is not None else CalculatorSession()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.sequence_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.sequence_var, anchor="e",
            font=self._f_expr, bg=self.C["display_bg"], fg=self.C["expr_fg"],
        ).pack(fill="x", pady=(4, 0))

        self.display_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.display_var, anchor="e",
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"],
        ).pack(fill="x", pady=(2, 0))

        self.variable_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.variable_var, anchor="w",
            font=self._f_small, bg=self.C["display_bg"], fg=self.C["expr_fg"],
        ).pack(fill="x", pady=(0, 4))

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        spans[-1] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        if event.char and event.char in CalculatorSession.DIGITS:
            self._on_key(f"digit:{event.char}")
            return
        action = self.KEY_ACTIONS.get(event.char) or self.KEY_ACTIONS.get(event.keysym)
        if action is not None:
            self._on_key(action)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        if action == "clear":
            self.session.clear()
        elif action == "backspace":
            self.session.backspace()
        elif action == "store":
            self.session.store_variable()
        elif action == "recall":
            self.session.recall_variable()
        elif action.startswith("digit:"):
            self.session.touch_digit(action[6:])
        elif action.startswith("op:"):
            self.session.perform_operation(action[3:])
        self._refresh()

    def _refresh(self):
        self.sequence_var.set(self.session.sequence_text)
        self.display_var.set(self.session.display_text)
        self.variable_var.set(f"M = {self.session.variable_text}")
