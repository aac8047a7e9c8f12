# src/scryptlang/evaluator/expressions.py
import math

from ..scrypt_ast import Identifier, IndexExpression
from ..object import Number, Array
from ..error_reporter import ScryptRuntimeError, DIVISION_BY_ZERO, INVALID_ASSIGNMENT
from .utils import (
    debug_log, native_bool_to_boolean, expect_number, expect_boolean, resolve_index,
)


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers, Arrays."""

    def eval_identifier(self, node, env):
        debug_log("eval_identifier", f"Looking up: {node.value}")
        return env.get(node.value)

    def eval_number_literal(self, node):
        return Number(float(node.value))

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if node.operator == "-":
            return Number(-expect_number(right))
        if node.operator == "!":
            return native_bool_to_boolean(not expect_boolean(right))
        raise ScryptRuntimeError(f"unknown operator: {node.operator}")

    def eval_number_infix(self, operator, left_val, right_val):
        if operator == "+":
            return Number(left_val + right_val)
        elif operator == "-":
            return Number(left_val - right_val)
        elif operator == "*":
            return Number(left_val * right_val)
        elif operator == "/":
            if right_val == 0:
                raise ScryptRuntimeError("division by zero", DIVISION_BY_ZERO)
            return Number(left_val / right_val)
        elif operator == "%":
            if right_val == 0:
                raise ScryptRuntimeError("modulo by zero", DIVISION_BY_ZERO)
            if math.isinf(left_val):
                # C fmod yields nan for an infinite dividend
                return Number(float("nan"))
            return Number(math.fmod(left_val, right_val))
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "<=":
            return native_bool_to_boolean(left_val <= right_val)
        elif operator == ">=":
            return native_bool_to_boolean(left_val >= right_val)

        raise ScryptRuntimeError(f"unknown operator: {operator}")

    def eval_infix_expression(self, node, env):
        # Both operands are always evaluated, left first; && and || do not short-circuit
        left = self.eval_node(node.left, env)
        right = self.eval_node(node.right, env)
        operator = node.operator
        debug_log("eval_infix_expression", f"{left!r} {operator} {right!r}")

        if operator == "==":
            return native_bool_to_boolean(left.equals(right))
        elif operator == "!=":
            return native_bool_to_boolean(not left.equals(right))
        elif operator == "&&":
            left_val, right_val = expect_boolean(left), expect_boolean(right)
            return native_bool_to_boolean(left_val and right_val)
        elif operator == "||":
            left_val, right_val = expect_boolean(left), expect_boolean(right)
            return native_bool_to_boolean(left_val or right_val)
        elif operator == "^^":
            left_val, right_val = expect_boolean(left), expect_boolean(right)
            return native_bool_to_boolean((left_val or right_val) and not (left_val and right_val))

        return self.eval_number_infix(operator, expect_number(left), expect_number(right))

    def eval_assignment_expression(self, node, env):
        value = self.eval_node(node.value, env)
        target = node.target

        if isinstance(target, Identifier):
            debug_log("eval_assignment_expression", f"{target.value} = {value!r}")
            env.assign(target.value, value)
            return value

        if isinstance(target, IndexExpression):
            array = self.eval_node(target.left, env)
            index = self.eval_node(target.index, env)
            position = resolve_index(array, index)
            array.elements[position] = value
            return value

        raise ScryptRuntimeError("invalid assignment target", INVALID_ASSIGNMENT)

    def eval_list_literal(self, node, env):
        # Literal construction never aliases existing storage
        return Array([self.eval_node(el, env).copy() for el in node.elements])

    def eval_index_expression(self, node, env):
        array = self.eval_node(node.left, env)
        index = self.eval_node(node.index, env)
        return array.elements[resolve_index(array, index)]
