# src/scryptlang/evaluator/functions.py
from ..scrypt_ast import Identifier
from ..object import Number, Builtin, Closure, ReturnValue
from ..environment import Environment
from ..error_reporter import ScryptRuntimeError, NOT_A_FUNCTION, ARGUMENT_COUNT, EMPTY_POP
from .utils import debug_log, NULL, expect_array


class FunctionEvaluatorMixin:
    """Handles function application and defines the array builtins."""

    def __init__(self):
        self.builtins = {}
        self._register_core_builtins()

    def eval_call_expression(self, node, env):
        debug_log("CallExpression node", f"Calling {node.function}")

        # Builtins win over any user binding of the same name
        fn = None
        if isinstance(node.function, Identifier):
            fn = self.builtins.get(node.function.value)
        if fn is None:
            fn = self.eval_node(node.function, env)

        args = self.eval_expressions(node.arguments, env)
        debug_log("  Arguments evaluated", f"{args} (count: {len(args)})")
        return self.apply_function(fn, args)

    def eval_expressions(self, expressions, env):
        return [self.eval_node(expr, env) for expr in expressions]

    def apply_function(self, fn, args):
        debug_log("apply_function", f"Calling {fn!r}")

        if isinstance(fn, Closure):
            if len(args) != len(fn.parameters):
                raise ScryptRuntimeError("incorrect argument count", ARGUMENT_COUNT)
            call_env = self.extend_function_env(fn, args)
            result = self.eval_block_statement(fn.body, call_env)
            if isinstance(result, ReturnValue):
                return result.value
            return NULL

        if isinstance(fn, Builtin):
            if fn.arity is not None and len(args) != fn.arity:
                raise ScryptRuntimeError("incorrect argument count", ARGUMENT_COUNT)
            return fn.fn(*args)

        raise ScryptRuntimeError("not a function", NOT_A_FUNCTION)

    def extend_function_env(self, fn, args):
        call_env = fn.env.new_child()
        for name, value in zip(fn.parameters, args):
            call_env.define(name, value)
        return call_env

    # === BUILTINS ===

    def _register_core_builtins(self):
        def _len(array):
            return Number(len(expect_array(array).elements))

        def _push(array, value):
            expect_array(array).elements.append(value)
            return NULL

        def _pop(array):
            elements = expect_array(array).elements
            if not elements:
                raise ScryptRuntimeError("cannot pop from an empty array", EMPTY_POP)
            return elements.pop()

        self.builtins.update({
            "len": Builtin(_len, "len", 1),
            "push": Builtin(_push, "push", 2),
            "pop": Builtin(_pop, "pop", 1),
        })

    def install_builtins(self, env):
        for name, builtin in self.builtins.items():
            env.define(name, builtin)
        return env

    def new_environment(self):
        """Root scope for one run, with the builtins already bound."""
        return self.install_builtins(Environment())
