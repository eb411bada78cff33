from __future__ import annotations

import math

import pytest

from calculator_brain import (
    CalculatorBrain,
    Evaluation,
    Operand,
    OperationSymbol,
    VariableReference,
)


@pytest.fixture
def brain():
    return CalculatorBrain()


def _feed(brain, *steps):
    for step in steps:
        if isinstance(step, str) and step != "M":
            brain.perform_operation(step)
        else:
            brain.set_operand(step)
    return brain


# --- Historial vacío ---

def test_empty_history_evaluates_to_zero(brain):
    assert brain.evaluate() == Evaluation(0, False, "")
    assert brain.result == 0
    assert brain.description == ""
    assert brain.result_is_pending is False


# --- Escenarios básicos ---

def test_addition_with_equals(brain):
    _feed(brain, 3, "+", 4, "=")

    assert brain.evaluate() == (7, False, "3+4")


def test_pending_addition_reports_tentative_result(brain):
    _feed(brain, 3, "+", 4)

    result, is_pending, description = brain.evaluate()

    assert result == 7
    assert is_pending is True
    assert description == "3+4"


def test_binary_without_second_operand_keeps_left_value(brain):
    _feed(brain, 3, "+")

    assert brain.evaluate() == (3, True, "3+")


def test_square_root(brain):
    _feed(brain, 9, "√")

    assert brain.evaluate() == (3, False, "√(9)")


def test_variable_reference_uses_binding(brain):
    brain.set_operand("M")
    _feed(brain, "+", 5, "=")

    assert brain.evaluate({"M": 2}) == (7, False, "M+5")


def test_missing_variable_defaults_to_zero(brain):
    brain.set_variable("M")
    _feed(brain, "+", 5, "=")

    assert brain.evaluate() == (5, False, "M+5")
    assert brain.evaluate({"X": 10}).result == 5


def test_unknown_symbol_is_ignored(brain):
    _feed(brain, 3, "+", 4)
    before = brain.evaluate()

    brain.perform_operation("%")

    assert brain.evaluate() == before


def test_unknown_symbol_does_not_count_as_second_operand(brain):
    _feed(brain, 3, "+", "%")

    assert brain.evaluate() == (3, True, "3+")


# --- Encadenado y etiquetas ---

def test_chained_binary_operations_resolve_left_to_right(brain):
    _feed(brain, 3, "+", 4, "×", 2, "=")

    assert brain.evaluate() == (14, False, "3+4×2")


def test_pending_chain_description(brain):
    _feed(brain, 3, "+", 4, "×")

    assert brain.evaluate() == (7, True, "3+4×")


def test_unary_inside_pending_binary(brain):
    _feed(brain, 3, "+", 9, "√")

    assert brain.evaluate() == (6, True, "3+√(9)")


def test_unary_after_equals_wraps_whole_expression(brain):
    _feed(brain, 3, "+", 6, "=", "√")

    assert brain.evaluate() == (3, False, "√(3+6)")


def test_equals_reuses_left_operand(brain):
    _feed(brain, 3, "+", "=")

    assert brain.evaluate() == (6, False, "3+3")


def test_constant_pi(brain):
    _feed(brain, "π", "×", 2, "=")

    result, is_pending, description = brain.evaluate()

    assert result == pytest.approx(2 * math.pi)
    assert is_pending is False
    assert description == "π×2"


def test_constant_e(brain):
    _feed(brain, "e")

    assert brain.evaluate() == (pytest.approx(math.e), False, "e")


def test_negate(brain):
    _feed(brain, 5, "+/-")

    assert brain.evaluate() == (-5, False, "-(5)")


def test_power(brain):
    _feed(brain, 2, "xʸ", 10, "=")

    assert brain.evaluate() == (1024, False, "2^10")


def test_subtract_uses_ascii_minus_in_description(brain):
    _feed(brain, 7, "−", 2, "=")

    assert brain.evaluate() == (5, False, "7-2")


def test_divide(brain):
    _feed(brain, 9, "÷", 2, "=")

    assert brain.evaluate() == (4.5, False, "9÷2")


def test_trig_functions(brain):
    _feed(brain, 0, "cos")
    assert brain.evaluate() == (1, False, "cos(0)")

    brain.clear()
    _feed(brain, 0, "sin")
    assert brain.evaluate() == (0, False, "sin(0)")

    brain.clear()
    _feed(brain, 0, "tan")
    assert brain.evaluate() == (0, False, "tan(0)")


def test_operand_description_is_formatted(brain):
    _feed(brain, 1 / 3, "+", 2.5, "=")

    assert brain.description == "0.333333+2.5"


# --- Casos de coma flotante ---

def test_division_by_zero_gives_infinity(brain):
    _feed(brain, 1, "÷", 0, "=")

    assert brain.result == math.inf
    assert brain.description == "1÷0"


def test_zero_over_zero_gives_nan(brain):
    _feed(brain, 0, "÷", 0, "=")

    assert math.isnan(brain.result)


def test_square_root_of_negative_gives_nan(brain):
    _feed(brain, -1, "√")

    result, is_pending, description = brain.evaluate()

    assert math.isnan(result)
    assert is_pending is False
    assert description == "√(-1)"


# --- Mutadores ---

def test_undo_restores_previous_evaluation(brain):
    _feed(brain, 3, "+", 4)
    before = brain.evaluate()

    brain.perform_operation("=")
    brain.undo()

    assert brain.evaluate() == before


def test_undo_on_empty_history_is_noop(brain):
    brain.undo()

    assert brain.history == ()
    assert brain.evaluate() == (0, False, "")


def test_clear_resets_to_empty_baseline(brain):
    _feed(brain, 3, "+", 4, "=")

    brain.clear()

    assert brain.history == ()
    assert brain.evaluate() == (0, False, "")


def test_history_records_steps_in_order(brain):
    brain.set_operand(3)
    brain.perform_operation("+")
    brain.set_operand("M")

    assert brain.history == (
        Operand(3),
        OperationSymbol("+"),
        VariableReference("M"),
    )


def test_history_is_a_copy(brain):
    brain.set_operand(3)

    history = brain.history
    brain.clear()

    assert history == (Operand(3),)


def test_set_operand_rejects_non_numbers(brain):
    with pytest.raises(TypeError):
        brain.set_operand(None)

    assert brain.history == ()


def test_evaluate_is_idempotent(brain):
    _feed(brain, 2, "xʸ", 3, "+")
    variables = {"M": 4}

    first = brain.evaluate(variables)
    second = brain.evaluate(variables)

    assert first == second
    assert first == (8, True, "2^3+")


# --- Modo angular ---

def test_degree_mode(brain):
    brain.angle_mode = "deg"
    _feed(brain, 90, "sin")

    assert brain.result == pytest.approx(1)
    assert brain.angle_mode == "deg"


def test_invalid_angle_mode_raises(brain):
    with pytest.raises(ValueError):
        brain.angle_mode = "grad"

    assert brain.angle_mode == "rad"
