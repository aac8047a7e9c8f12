# src/scryptlang/evaluator/core.py
from .. import scrypt_ast
from .utils import debug_log, NULL, native_bool_to_boolean
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self, output=None):
        # FunctionEvaluatorMixin sets up builtins
        FunctionEvaluatorMixin.__init__(self)
        # None means "whatever sys.stdout is at print time"
        self.output = output

    def eval_node(self, node, env):
        if node is None:
            debug_log("eval_node", "Node is None, returning NULL")
            return NULL

        node_type = type(node)
        debug_log("eval_node", f"Processing {node_type.__name__}")

        # === STATEMENTS ===
        if node_type == scrypt_ast.Program:
            return self.eval_program(node.statements, env)

        elif node_type == scrypt_ast.ExpressionStatement:
            return self.eval_expression_statement(node, env)

        elif node_type == scrypt_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == scrypt_ast.PrintStatement:
            return self.eval_print_statement(node, env)

        elif node_type == scrypt_ast.IfStatement:
            debug_log("  IfStatement node")
            return self.eval_if_statement(node, env)

        elif node_type == scrypt_ast.WhileStatement:
            debug_log("  WhileStatement node")
            return self.eval_while_statement(node, env)

        elif node_type == scrypt_ast.FunctionStatement:
            return self.eval_function_statement(node, env)

        elif node_type == scrypt_ast.ReturnStatement:
            debug_log("  ReturnStatement node")
            return self.eval_return_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == scrypt_ast.NumberLiteral:
            return self.eval_number_literal(node)

        elif node_type == scrypt_ast.BooleanLiteral:
            return native_bool_to_boolean(node.value)

        elif node_type == scrypt_ast.NullLiteral:
            return NULL

        elif node_type == scrypt_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == scrypt_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == scrypt_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == scrypt_ast.AssignmentExpression:
            debug_log("  AssignmentExpression node")
            return self.eval_assignment_expression(node, env)

        elif node_type == scrypt_ast.CallExpression:
            return self.eval_call_expression(node, env)

        elif node_type == scrypt_ast.ListLiteral:
            return self.eval_list_literal(node, env)

        elif node_type == scrypt_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        raise TypeError(f"cannot evaluate node of type {node_type.__name__}")


def evaluate(program, env=None, output=None):
    """Run ``program`` in ``env`` (a fresh root scope when omitted).

    Runtime errors propagate as ``ScryptRuntimeError``.
    """
    evaluator = Evaluator(output=output)
    if env is None:
        env = evaluator.new_environment()
    return evaluator.eval_node(program, env)
