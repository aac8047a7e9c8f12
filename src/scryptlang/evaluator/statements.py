# src/scryptlang/evaluator/statements.py
import sys

from ..object import Closure, ReturnValue
from ..error_reporter import ScryptRuntimeError, UNEXPECTED_RETURN
from ..scrypt_ast import IfStatement
from .utils import debug_log, expect_boolean, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statements and flow control."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements")

        result = NULL
        for i, stmt in enumerate(statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__)
            res = self.eval_node(stmt, env)
            if isinstance(res, ReturnValue):
                raise ScryptRuntimeError("unexpected return", UNEXPECTED_RETURN)
            result = res

        debug_log("eval_program completed", result)
        return result

    def eval_block_statement(self, block, env):
        debug_log("eval_block_statement", f"len={len(block.statements)}")

        result = NULL
        for stmt in block.statements:
            res = self.eval_node(stmt, env)
            if isinstance(res, ReturnValue):
                debug_log("  Block interrupted", res)
                return res
            result = res

        return result

    def eval_expression_statement(self, node, env):
        return self.eval_node(node.expression, env)

    # === CONTROL FLOW ===

    def eval_condition(self, node, env):
        return expect_boolean(self.eval_node(node, env))

    def eval_if_statement(self, node, env):
        if self.eval_condition(node.condition, env):
            return self.eval_block_statement(node.consequence, env.new_child())

        if node.alternative is None:
            return NULL
        if isinstance(node.alternative, IfStatement):
            return self.eval_if_statement(node.alternative, env)
        return self.eval_block_statement(node.alternative, env.new_child())

    def eval_while_statement(self, node, env):
        result = NULL
        while self.eval_condition(node.condition, env):
            loop_env = env.new_child()
            result = self.eval_block_statement(node.body, loop_env)

            # Updates to names the loop can see survive the iteration; new names do not
            for name, value in loop_env.items():
                if name in env:
                    env.assign(name, value)

            if isinstance(result, ReturnValue):
                return result

        return result

    def eval_print_statement(self, node, env):
        val = self.eval_node(node.value, env)
        print(val.inspect(), file=self.output or sys.stdout)
        return NULL

    # === FUNCTIONS ===

    def eval_function_statement(self, node, env):
        captured = env.copy()
        closure = Closure(node, captured)
        # Bound inside its own capture as well, so the body can recurse
        captured.define(node.name, closure)
        env.define(node.name, closure)
        debug_log("eval_function_statement", f"def {node.name}({', '.join(node.parameters)})")
        return NULL

    def eval_return_statement(self, node, env):
        if node.return_value is None:
            return ReturnValue(NULL)
        return ReturnValue(self.eval_node(node.return_value, env))
