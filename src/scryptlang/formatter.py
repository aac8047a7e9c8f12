# src/scryptlang/formatter.py
"""Pretty-printer that turns an AST back into canonical source text.

Binary operations are fully parenthesized, assignments are wrapped in
parentheses, simple statements end with ``;`` and blocks are indented four
spaces per level. Lexing and parsing the output gives back a program that
evaluates the same way.
"""
from . import scrypt_ast as ast

INDENT = "    "


def format_number(text):
    value = float(text)
    if value.is_integer():
        return str(int(value))
    # Literal text has no exponent, so trimming zeros keeps it exact
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Formatter:
    def __init__(self):
        self.statement_fns = {
            ast.ExpressionStatement: self.format_expression_statement,
            ast.PrintStatement: self.format_print_statement,
            ast.BlockStatement: self.format_block_statement,
            ast.IfStatement: self.format_if_statement,
            ast.WhileStatement: self.format_while_statement,
            ast.FunctionStatement: self.format_function_statement,
            ast.ReturnStatement: self.format_return_statement,
        }
        self.expression_fns = {
            ast.NumberLiteral: lambda node: format_number(node.value),
            ast.BooleanLiteral: lambda node: "true" if node.value else "false",
            ast.NullLiteral: lambda node: "null",
            ast.Identifier: lambda node: node.value,
            ast.PrefixExpression: self.format_prefix_expression,
            ast.InfixExpression: self.format_infix_expression,
            ast.AssignmentExpression: self.format_assignment_expression,
            ast.CallExpression: self.format_call_expression,
            ast.ListLiteral: self.format_list_literal,
            ast.IndexExpression: self.format_index_expression,
        }

    def format_program(self, program):
        lines = [self.format_statement(stmt, 0) for stmt in program.statements]
        return "\n".join(lines) + "\n" if lines else ""

    # === STATEMENTS ===

    def format_statement(self, node, depth):
        fn = self.statement_fns.get(type(node))
        if fn is None:
            raise TypeError(f"cannot format statement {type(node).__name__}")
        return fn(node, depth)

    def format_body(self, block, depth):
        """Statements of ``block`` one level deeper, then the closing brace."""
        inner = [self.format_statement(stmt, depth + 1) for stmt in block.statements]
        inner.append(INDENT * depth + "}")
        return "\n".join(inner)

    def format_expression_statement(self, node, depth):
        return f"{INDENT * depth}{self.format_expression(node.expression)};"

    def format_print_statement(self, node, depth):
        return f"{INDENT * depth}print {self.format_expression(node.value)};"

    def format_block_statement(self, node, depth):
        return f"{INDENT * depth}{{\n{self.format_body(node, depth)}"

    def format_if_statement(self, node, depth, chained=False):
        prefix = "" if chained else INDENT * depth
        text = f"{prefix}if {self.format_expression(node.condition)} {{\n"
        text += self.format_body(node.consequence, depth)
        if isinstance(node.alternative, ast.IfStatement):
            text += f"\n{INDENT * depth}else "
            text += self.format_if_statement(node.alternative, depth, chained=True)
        elif node.alternative is not None:
            text += f"\n{INDENT * depth}else {{\n"
            text += self.format_body(node.alternative, depth)
        return text

    def format_while_statement(self, node, depth):
        text = f"{INDENT * depth}while {self.format_expression(node.condition)} {{\n"
        return text + self.format_body(node.body, depth)

    def format_function_statement(self, node, depth):
        params = ", ".join(node.parameters)
        text = f"{INDENT * depth}def {node.name}({params}) {{\n"
        return text + self.format_body(node.body, depth)

    def format_return_statement(self, node, depth):
        if node.return_value is None:
            return f"{INDENT * depth}return;"
        return f"{INDENT * depth}return {self.format_expression(node.return_value)};"

    # === EXPRESSIONS ===

    def format_expression(self, node):
        fn = self.expression_fns.get(type(node))
        if fn is None:
            raise TypeError(f"cannot format expression {type(node).__name__}")
        return fn(node)

    def format_prefix_expression(self, node):
        return f"{node.operator}{self.format_expression(node.right)}"

    def format_infix_expression(self, node):
        left = self.format_expression(node.left)
        right = self.format_expression(node.right)
        return f"({left} {node.operator} {right})"

    def format_assignment_expression(self, node):
        target = self.format_expression(node.target)
        return f"({target} = {self.format_expression(node.value)})"

    def format_operand(self, node):
        # Calls and indexing bind tighter than unary operators
        if isinstance(node, ast.PrefixExpression):
            return f"({self.format_expression(node)})"
        return self.format_expression(node)

    def format_call_expression(self, node):
        args = ", ".join(self.format_expression(arg) for arg in node.arguments)
        return f"{self.format_operand(node.function)}({args})"

    def format_list_literal(self, node):
        return "[" + ", ".join(self.format_expression(el) for el in node.elements) + "]"

    def format_index_expression(self, node):
        return f"{self.format_operand(node.left)}[{self.format_expression(node.index)}]"


def format_program(program):
    return Formatter().format_program(program)
