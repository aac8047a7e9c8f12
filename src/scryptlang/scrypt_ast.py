# src/scryptlang/scrypt_ast.py

# Base classes
class Node:
    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__repr__()

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __ne__(self, other):
        return not self == other

    __hash__ = None


class Statement(Node): pass
class Expression(Node): pass


class Program(Node):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"Program(statements={self.statements})"


# Statement Nodes
class ExpressionStatement(Statement):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression})"


class PrintStatement(Statement):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"PrintStatement(value={self.value})"


class BlockStatement(Statement):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"BlockStatement(statements={self.statements})"


class IfStatement(Statement):
    """``alternative`` is either a BlockStatement or a nested IfStatement."""

    def __init__(self, condition, consequence, alternative=None):
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __repr__(self):
        return (f"IfStatement(condition={self.condition}, consequence={self.consequence}, "
                f"alternative={self.alternative})")


class WhileStatement(Statement):
    def __init__(self, condition, body):
        self.condition = condition
        self.body = body

    def __repr__(self):
        return f"WhileStatement(condition={self.condition}, body={self.body})"


class FunctionStatement(Statement):
    def __init__(self, name, parameters, body):
        self.name = name              # str
        self.parameters = parameters  # list of str
        self.body = body              # BlockStatement

    def __repr__(self):
        return f"FunctionStatement(name={self.name}, parameters={self.parameters}, body={self.body})"


class ReturnStatement(Statement):
    def __init__(self, return_value=None):
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value})"


# Expression Nodes
class NumberLiteral(Expression):
    """Keeps the source text; evaluation parses it as a float."""

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return type(self) is type(other) and float(self.value) == float(other.value)

    __hash__ = None

    def __repr__(self):
        return f"NumberLiteral({self.value})"


class BooleanLiteral(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"BooleanLiteral({'true' if self.value else 'false'})"


class NullLiteral(Expression):
    def __repr__(self):
        return "NullLiteral()"


class Identifier(Expression):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Identifier({self.value})"


class PrefixExpression(Expression):
    def __init__(self, operator, right):
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"PrefixExpression({self.operator}{self.right})"


class InfixExpression(Expression):
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"InfixExpression({self.left} {self.operator} {self.right})"


class AssignmentExpression(Expression):
    """``target`` is an Identifier or an IndexExpression."""

    def __init__(self, target, value):
        self.target = target
        self.value = value

    def __repr__(self):
        return f"AssignmentExpression(target={self.target}, value={self.value})"


class CallExpression(Expression):
    def __init__(self, function, arguments):
        self.function = function
        self.arguments = arguments

    def __repr__(self):
        return f"CallExpression(function={self.function}, arguments={self.arguments})"


class ListLiteral(Expression):
    def __init__(self, elements):
        self.elements = elements

    def __repr__(self):
        return f"ListLiteral(elements={self.elements})"


class IndexExpression(Expression):
    def __init__(self, left, index):
        self.left = left
        self.index = index

    def __repr__(self):
        return f"IndexExpression(left={self.left}, index={self.index})"
