"""Evaluator semantics: arithmetic, scoping, closures, arrays and builtins."""

import io

import pytest

from scryptlang.parser import parse
from scryptlang.evaluator import Evaluator, evaluate, NULL
from scryptlang.object import Number, Array, Closure
from scryptlang.error_reporter import (
    ScryptRuntimeError, UNKNOWN_IDENTIFIER, TYPE_MISMATCH, DIVISION_BY_ZERO,
    NOT_INTEGER_INDEX, INDEX_OUT_OF_BOUNDS, NOT_AN_ARRAY, NOT_A_FUNCTION,
    ARGUMENT_COUNT, EMPTY_POP, CONDITION_NOT_BOOL, UNEXPECTED_RETURN,
    UNCOMPARABLE, UNPRINTABLE,
)


def _runtime_error(source):
    with pytest.raises(ScryptRuntimeError) as excinfo:
        evaluate(parse(source), output=io.StringIO())
    return excinfo.value


_PRINT_CASES = [
    ("precedence", "print 2 + 3 * 4;", "14\n"),
    ("true division", "print 7 / 2;", "3.5\n"),
    ("fmod keeps the dividend sign", "print 7 % 3;\nprint -7 % 3;", "1\n-1\n"),
    ("modulo of infinity", "x = 10\ni = 0\nwhile i < 400 {\n    x = x * 10\n    i = i + 1\n}\nprint x;\nprint x % 3;", "inf\nnan\n"),
    ("comparison and logic", "print 1 < 2 && 2 >= 2;", "true\n"),
    ("exclusive or", "print true ^^ true;\nprint true ^^ false;", "false\ntrue\n"),
    ("unary operators", "print -(2 + 3);\nprint !false;", "-5\ntrue\n"),
    ("equality across types", "print 1 == true;\nprint null == null;", "false\ntrue\n"),
    ("structural array equality", "print [1, [2]] == [1, [2]];\nprint [1] != [2];", "true\ntrue\n"),
    ("assignment yields its value", "print (x = 5) + 1;\nprint x;", "6\n5\n"),
    ("chained assignment", "a = b = 2\nprint a + b;", "4\n"),
    ("null literal", "print null;", "null\n"),
    ("nested arrays", "print [1, [true, null], []];", "[1, [true, null], []]\n"),
]


@pytest.mark.parametrize("name,source,expected", _PRINT_CASES, ids=[c[0] for c in _PRINT_CASES])
def test_printed_output(run_program, name, source, expected):
    assert run_program(source) == expected


def test_evaluate_returns_last_value():
    result = evaluate(parse("x = 4\nx * 2"))
    assert isinstance(result, Number)
    assert result.value == 8


def test_evaluator_writes_to_given_stream():
    out = io.StringIO()
    evaluator = Evaluator(output=out)
    evaluator.eval_node(parse("print 1;"), evaluator.new_environment())
    assert out.getvalue() == "1\n"


class TestScoping:
    def test_loop_updates_outer_variables(self, run_program):
        source = "i = 0\nwhile i < 3 {\n    i = i + 1\n}\nprint i;"
        assert run_program(source) == "3\n"

    def test_loop_locals_do_not_leak(self, run_program):
        source = "i = 0\nwhile i < 1 {\n    t = 5\n    i = i + 1\n}\nprint t;"
        with pytest.raises(ScryptRuntimeError) as excinfo:
            run_program(source)
        assert excinfo.value.kind == UNKNOWN_IDENTIFIER

    def test_loop_definitions_of_outer_names_are_copied_back(self, run_program):
        source = (
            "f = 0\nn = 0\n"
            "while n < 1 {\n    def f() { return 7; }\n    n = n + 1\n}\n"
            "print f();"
        )
        assert run_program(source) == "7\n"

    def test_if_branch_locals_do_not_leak(self, run_program):
        with pytest.raises(ScryptRuntimeError):
            run_program("if true {\n    y = 1\n}\nprint y;")

    def test_if_branch_updates_outer_variables(self, run_program):
        assert run_program("y = 1\nif true {\n    y = 2\n}\nprint y;") == "2\n"

    def test_else_if_chain(self, run_program):
        source = (
            "def sign(x) {\n"
            "    if x < 0 { return -1; } else if x == 0 { return 0; } else { return 1; }\n"
            "}\n"
            "print sign(-5);\nprint sign(0);\nprint sign(3);"
        )
        assert run_program(source) == "-1\n0\n1\n"


class TestFunctions:
    def test_closure_captures_definition_time_bindings(self, run_program):
        source = "x = 1\ndef f() { return x; }\nx = 2\nprint f();"
        assert run_program(source) == "1\n"

    def test_recursion(self, run_program):
        source = (
            "def fact(n) {\n"
            "    if n <= 1 { return 1; }\n"
            "    return n * fact(n - 1);\n"
            "}\n"
            "print fact(5);"
        )
        assert run_program(source) == "120\n"

    def test_closure_state_persists_between_calls(self, run_program):
        source = (
            "def make() {\n"
            "    count = 0\n"
            "    def inc() {\n"
            "        count = count + 1\n"
            "        return count;\n"
            "    }\n"
            "    return inc;\n"
            "}\n"
            "c = make()\nprint c();\nprint c();"
        )
        assert run_program(source) == "1\n2\n"

    def test_return_unwinds_loops(self, run_program):
        source = (
            "def f() {\n"
            "    i = 0\n"
            "    while true {\n"
            "        i = i + 1\n"
            "        if i == 3 { return i; }\n"
            "    }\n"
            "}\n"
            "print f();"
        )
        assert run_program(source) == "3\n"

    def test_missing_return_yields_null(self, run_program):
        assert run_program("def f() {}\nprint f();\ndef g() { return; }\nprint g();") == "null\nnull\n"

    def test_parameters_shadow_outer_names(self, run_program):
        source = "a = 10\ndef f(a) { return a * 2; }\nprint f(3);\nprint a;"
        assert run_program(source) == "6\n10\n"

    def test_function_statement_binds_a_closure(self):
        evaluator = Evaluator()
        env = evaluator.new_environment()
        evaluator.eval_node(parse("def f(a, b) { return a; }"), env)
        fn = env.get("f")
        assert isinstance(fn, Closure)
        assert fn.parameters == ["a", "b"]

    def test_arguments_are_not_short_circuited(self):
        error = _runtime_error("def boom() { return 1 / 0; }\nprint false && boom();")
        assert error.kind == DIVISION_BY_ZERO


class TestArrays:
    def test_assignment_aliases(self, run_program):
        assert run_program("a = [1, 2]\nb = a\npush(b, 3)\nprint a;") == "[1, 2, 3]\n"

    def test_literal_construction_copies(self, run_program):
        assert run_program("a = [1]\nb = [a]\npush(a, 2)\nprint b;") == "[[1]]\n"

    def test_indexed_assignment_mutates_shared_storage(self, run_program):
        source = "a = [1, 2]\nb = a\nb[0] = 5\nprint a;\nprint a[0] + a[1];"
        assert run_program(source) == "[5, 2]\n7\n"

    def test_builtins(self, run_program):
        source = "a = []\npush(a, 1)\npush(a, 2)\nprint len(a);\nprint pop(a);\nprint a;"
        assert run_program(source) == "2\n2\n[1]\n"

    def test_builtins_take_precedence_over_user_functions(self, run_program):
        assert run_program("def len(a) { return 99; }\nprint len([1]);") == "1\n"

    def test_arrays_can_hold_functions(self, run_program):
        source = "def f() { return 3; }\na = [f]\nprint a[0]();\nprint len(a);"
        assert run_program(source) == "3\n1\n"

    def test_push_returns_null(self):
        assert evaluate(parse("a = []\npush(a, 1)")) is NULL


_ERROR_CASES = [
    ("unknown identifier", "print y;", UNKNOWN_IDENTIFIER, "unknown identifier `y`"),
    ("number plus boolean", "x = 1 + true;", TYPE_MISMATCH, "invalid operand type"),
    ("logic on numbers", "x = 1 && true;", CONDITION_NOT_BOOL, "condition is not a bool"),
    ("exclusive or on null", "x = true ^^ null;", CONDITION_NOT_BOOL, "condition is not a bool"),
    ("not on a number", "x = !1;", CONDITION_NOT_BOOL, "condition is not a bool"),
    ("negating a boolean", "x = -true;", TYPE_MISMATCH, "invalid operand type"),
    ("division by zero", "x = 1 / 0;", DIVISION_BY_ZERO, "division by zero"),
    ("modulo by zero", "x = 1 % 0;", DIVISION_BY_ZERO, "modulo by zero"),
    ("fractional index", "a = [1]\nprint a[0.5];", NOT_INTEGER_INDEX, "index is not an integer"),
    ("index past the end", "a = [1]\nprint a[1];", INDEX_OUT_OF_BOUNDS, "index out of bounds"),
    ("negative index", "a = [1]\nprint a[-1];", INDEX_OUT_OF_BOUNDS, "index out of bounds"),
    ("indexing a number", "x = 1\nprint x[0];", NOT_AN_ARRAY, "not an array"),
    ("index checked before array", "x = 1\nprint x[0.5];", NOT_INTEGER_INDEX, "index is not an integer"),
    ("assigning past the end", "a = []\na[0] = 1;", INDEX_OUT_OF_BOUNDS, "index out of bounds"),
    ("len of a number", "print len(1);", NOT_AN_ARRAY, "not an array"),
    ("calling a number", "x = 1\nx();", NOT_A_FUNCTION, "not a function"),
    ("too few arguments", "def f(a) { return a; }\nf();", ARGUMENT_COUNT, "incorrect argument count"),
    ("builtin arity", "a = []\npush(a);", ARGUMENT_COUNT, "incorrect argument count"),
    ("empty pop", "a = []\npop(a);", EMPTY_POP, "cannot pop from an empty array"),
    ("numeric if condition", "if 1 { print 1; }", CONDITION_NOT_BOOL, "condition is not a bool"),
    ("null while condition", "while null { print 1; }", CONDITION_NOT_BOOL, "condition is not a bool"),
    ("top-level return", "return 1;", UNEXPECTED_RETURN, "unexpected return"),
    ("printing a function", "def f() {}\nprint f;", UNPRINTABLE, "cannot print a function"),
    ("comparing functions", "def f() {}\nprint f == f;", UNCOMPARABLE, "cannot compare functions"),
]


@pytest.mark.parametrize("name,source,kind,message", _ERROR_CASES, ids=[c[0] for c in _ERROR_CASES])
def test_runtime_errors(name, source, kind, message):
    error = _runtime_error(source)
    assert error.kind == kind
    assert error.message == message
    assert str(error) == f"Runtime error: {message}."


def test_output_before_an_error_is_kept():
    out = io.StringIO()
    with pytest.raises(ScryptRuntimeError):
        evaluate(parse("print 1;\nprint 1 / 0;\nprint 2;"), output=out)
    assert out.getvalue() == "1\n"


def test_root_scope_has_builtins():
    env = Evaluator().new_environment()
    assert set(env) == {"len", "push", "pop"}
    assert isinstance(env.get("len").fn(Array([Number(1)])), Number)
