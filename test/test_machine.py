"""Test that the machine evaluates tokens correctly"""
import io
import math

import pytest

from forthy.exceptions import (
    DivisionByZero,
    InvalidWord,
    StackUnderflow,
    UnexpectedError,
    UnknownWord,
    UserQuit,
)
from forthy.machine import ForthMachine, State, format_number
from forthy.machine.machine import MAX_SPACES
from forthy.machine import instructionset as mi
from forthy.machine.types import Definition, DefinitionBlock, Number, Word


def make_machine(*data):
    out = io.StringIO()
    return ForthMachine(State(data), out), out


@pytest.mark.parametrize(
    "instr, before, after",
    [
        (mi.Drop, [1], []),
        (mi.Dup, [1], [1, 1]),
        (mi.Swap, [1, 2], [2, 1]),
        (mi.Over, [1, 2], [1, 2, 1]),
        (mi.Rot, [1, 2, 3], [2, 3, 1]),
        (mi.TwoDrop, [1, 2], []),
        (mi.TwoDup, [1, 2], [1, 2, 1, 2]),
        (mi.TwoOver, [1, 2, 3, 4], [1, 2, 3, 4, 1, 2]),
        (mi.TwoSwap, [1, 2, 3, 4], [3, 4, 1, 2]),
    ],
)
def test_stack_effects(instr, before, after):
    m, _ = make_machine(9, *before)
    assert m.run([instr()]) is None
    assert m.state.stack == [9] + after


@pytest.mark.parametrize(
    "instr, needed",
    [
        (mi.Drop, 1),
        (mi.Dup, 1),
        (mi.Swap, 2),
        (mi.Over, 2),
        (mi.Rot, 3),
        (mi.TwoDrop, 2),
        (mi.TwoDup, 2),
        (mi.TwoOver, 4),
        (mi.TwoSwap, 4),
        (mi.Add, 2),
        (mi.Subtract, 2),
        (mi.Multiply, 2),
        (mi.Divide, 2),
        (mi.Mod, 2),
        (mi.SlashMod, 2),
        (mi.Emit, 1),
        (mi.Spaces, 1),
        (mi.Display, 1),
    ],
)
def test_underflow_leaves_stack_alone(instr, needed):
    data = list(range(1, needed))
    m, out = make_machine(*data)
    with pytest.raises(StackUnderflow) as excinfo:
        m.run([instr()])
    assert excinfo.value.needed == needed
    assert excinfo.value.available == needed - 1
    assert m.state.stack == data
    assert out.getvalue() == ""


@pytest.mark.parametrize(
    "instr, a, b, result",
    [
        (mi.Add, 20, 4, 24),
        (mi.Subtract, 20, 4, 16),
        (mi.Multiply, 20, 4, 80),
        (mi.Divide, 20, 4, 5),
        (mi.Divide, 1, 4, 0.25),
        (mi.Mod, 17, 3, 2),
        (mi.Mod, -7, 2, -1),
    ],
)
def test_arithmetic(instr, a, b, result):
    m, _ = make_machine(a, b)
    assert m.run([instr()]) == result
    assert m.state.stack == [result]


def test_slash_mod():
    m, _ = make_machine(17, 4)
    assert m.run([mi.SlashMod()]) == 4.25
    assert m.state.stack == [1, 4.25]


@pytest.mark.parametrize("instr", [mi.Divide, mi.Mod, mi.SlashMod])
def test_division_by_zero(instr):
    m, _ = make_machine(1, 0)
    with pytest.raises(DivisionByZero):
        m.run([instr()])
    assert m.state.stack == [1, 0]


def test_number_and_run_result():
    m, _ = make_machine()
    assert m.run([Number(5.0), Number(6.0), mi.Add()]) == 11.0
    assert m.run([]) is None
    assert m.run([Number(1.0), Number(2.0), Number(3.0), mi.Rot()]) is None
    assert m.state.stack == [11, 2, 3, 1]


def test_output_words():
    m, out = make_machine(72, 105, 3, 42)
    m.run(
        [
            mi.Display(),
            mi.Spaces(),
            mi.Emit(),
            mi.Emit(),
            mi.CR(),
            mi.Space(),
        ]
    )
    assert out.getvalue() == "42    iH\n "
    assert m.state.stack == []


def test_show_is_non_destructive():
    m, out = make_machine(1, 2.5)
    m.run([mi.Show()])
    assert out.getvalue() == "<2> 1 2.5 "
    assert m.state.stack == [1, 2.5]


def test_negative_spaces_write_nothing():
    m, out = make_machine(-3)
    m.run([mi.Spaces()])
    assert out.getvalue() == ""
    assert m.state.stack == []


@pytest.mark.parametrize("value", [-1, 128, math.inf, math.nan])
def test_emit_outside_ascii(value):
    m, out = make_machine(value)
    with pytest.raises(InvalidWord):
        m.run([mi.Emit()])
    assert len(m.state) == 1
    assert out.getvalue() == ""


def test_bye():
    m, _ = make_machine()
    with pytest.raises(UserQuit):
        m.run([Number(1.0), mi.Bye(), Number(2.0)])
    assert m.state.stack == [1]


def test_words():
    m, _ = make_machine()
    m.state.dictionary.define("var", Number(3.0))
    m.state.dictionary.define("seven", Definition((Number(7.0),)))
    m.state.dictionary.define("twice", Definition((mi.Dup(), mi.Add())))
    assert m.run([Word("var")]) == 3.0
    assert m.run([Word("seven")]) == 7.0
    assert m.run([Word("twice")]) is None
    assert m.state.stack == [3, 14]


def test_nested_definitions():
    m, _ = make_machine()
    five = Definition((Number(5.0),))
    inc = Definition((Number(1.0), mi.Add()))
    m.state.dictionary.define("six", Definition((five, inc)))
    m.run([Word("six"), Word("six")])
    assert m.state.stack == [6, 6]


def test_unbound_word_falls_back_to_builtins():
    m, _ = make_machine(4)
    m.run([Word("DUP")])
    assert m.state.stack == [4, 4]


def test_unknown_word():
    m, _ = make_machine()
    with pytest.raises(UnknownWord) as excinfo:
        m.run([Number(1.0), Number(2.0), mi.Add(), Word("foo")])
    assert excinfo.value.name == "foo"
    assert m.state.stack == [3]


def test_definition_blocks_are_not_evaluated():
    m, _ = make_machine()
    with pytest.raises(UnexpectedError):
        m.run([DefinitionBlock("foo", ["1"])])


@pytest.mark.parametrize(
    "value, text", [(11.0, "11"), (-2.0, "-2"), (0.5, "0.5"), (math.inf, "inf")]
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_spaces_limit():
    m, out = make_machine(MAX_SPACES + 1)
    with pytest.raises(InvalidWord):
        m.run([mi.Spaces()])
    assert m.state.stack == [MAX_SPACES + 1]
    assert out.getvalue() == ""

    m, out = make_machine(MAX_SPACES)
    m.run([mi.Spaces()])
    assert out.getvalue() == " " * MAX_SPACES


def test_deep_definition_chain():
    m, _ = make_machine()
    body = Definition((Number(0.0),))
    for _ in range(5000):
        body = Definition((body, Number(1.0), mi.Add()))
    m.state.dictionary.define("deep", body)
    assert m.run([Word("deep")]) is None
    assert m.state.stack == [5000]


def test_inner_values_do_not_become_the_result():
    m, _ = make_machine()
    m.state.dictionary.define("two", Definition((Number(1.0), Number(2.0))))
    assert m.run([Number(9.0), Word("two")]) is None
    assert m.state.stack == [9, 1, 2]
