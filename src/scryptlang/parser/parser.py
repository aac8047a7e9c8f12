# src/scryptlang/parser/parser.py
import logging

from ..scrypt_token import *
from ..lexer import Lexer, check_tokens
from ..scrypt_ast import *
from ..error_reporter import ScryptSyntaxError
from ..config import config

logger = logging.getLogger(__name__)

# Precedence constants
(LOWEST, ASSIGN_PREC, LOGICAL_OR, LOGICAL_XOR, LOGICAL_AND,
 EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL) = range(1, 12)

precedences = {
    ASSIGN: ASSIGN_PREC,
    OR: LOGICAL_OR,
    XOR: LOGICAL_XOR,
    AND: LOGICAL_AND,
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER, LTE: LESSGREATER, GTE: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, STAR: PRODUCT, MOD: PRODUCT,
    LPAREN: CALL,
    LBRACKET: CALL,
}

# Tokens that may legally follow a simple statement
_STATEMENT_END = {NEWLINE, SEMICOLON, RBRACE, EOF}


class Parser:
    """Recursive-descent statements over a Pratt expression parser.

    Accepts a token list or a Lexer. Syntax errors inside a statement are
    collected in ``self.errors``; the parser then skips to the next statement
    boundary and carries on, so one bad statement only loses itself.
    """

    def __init__(self, source):
        if isinstance(source, Lexer):
            tokens = source.tokenize()
        else:
            tokens = list(source)
        if not tokens or tokens[-1].type != EOF:
            last = tokens[-1] if tokens else Token(EOF, "", 1, 1)
            tokens.append(Token(EOF, "", last.line, last.column))

        self.tokens = tokens
        self.position = 0
        self.errors = []
        self.block_depth = 0

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            NUMBER: self.parse_number_literal,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            NULL: self.parse_null,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            LPAREN: self.parse_grouped_expression,
            LBRACKET: self.parse_list_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            STAR: self.parse_infix_expression,
            MOD: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
            LTE: self.parse_infix_expression,
            GTE: self.parse_infix_expression,
            AND: self.parse_infix_expression,
            OR: self.parse_infix_expression,
            XOR: self.parse_infix_expression,
            ASSIGN: self.parse_assignment_expression,
            LPAREN: self.parse_call_expression,
            LBRACKET: self.parse_index_expression,
        }

    def _log(self, message, level="normal"):
        if config.should_log(level):
            logger.debug(message)

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            if self.cur_token.type in (NEWLINE, SEMICOLON):
                self.next_token()
                continue
            stmt = self.parse_statement_tolerantly()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()

        self._log(f"Parsing complete: {len(program.statements)} statements, {len(self.errors)} errors")
        return program

    # === STATEMENTS ===

    def parse_statement_tolerantly(self):
        try:
            return self.parse_statement()
        except ScryptSyntaxError as e:
            self.errors.append(e)
            self._log(f"Parse error: {e}")
            self.recover_to_next_statement()
            return None

    def parse_statement(self):
        if self.cur_token_is(IF):
            return self.parse_if_statement()
        elif self.cur_token_is(WHILE):
            return self.parse_while_statement()
        elif self.cur_token_is(PRINT):
            return self.parse_print_statement()
        elif self.cur_token_is(DEF):
            return self.parse_function_statement()
        elif self.cur_token_is(RETURN):
            return self.parse_return_statement()
        elif self.cur_token_is(LBRACE):
            return self.parse_block_statement()
        else:
            return self.parse_expression_statement()

    def recover_to_next_statement(self):
        """Discard tokens up to the next statement boundary.

        Leaves ``cur_token`` on the last discarded token so the caller's
        ``next_token()`` lands on the restart point.
        """
        if self.block_depth and self.cur_token_is(RBRACE):
            # The enclosing block still needs its closing brace
            self.position -= 1
            return
        while not self.cur_token_is(EOF):
            if self.cur_token.type in (NEWLINE, SEMICOLON):
                return
            if self.peek_token.type in STATEMENT_KEYWORDS:
                return
            if self.block_depth and self.peek_token_is(RBRACE):
                return
            self.next_token()

    def parse_block(self):
        """Parse a required ``{ ... }`` body following the current token."""
        self.skip_peek_newlines()
        self.expect_peek(LBRACE)
        return self.parse_block_statement()

    def parse_block_statement(self):
        block = BlockStatement()
        self.block_depth += 1
        try:
            self.next_token()
            while not self.cur_token_is(RBRACE):
                if self.cur_token_is(EOF):
                    raise ScryptSyntaxError.unexpected(self.cur_token, "expected '}'")
                if self.cur_token.type in (NEWLINE, SEMICOLON):
                    self.next_token()
                    continue
                stmt = self.parse_statement_tolerantly()
                if stmt is not None:
                    block.statements.append(stmt)
                self.next_token()
        finally:
            self.block_depth -= 1
        return block

    def parse_if_statement(self):
        self.next_token()
        condition = self.parse_expression(LOWEST)
        consequence = self.parse_block()

        alternative = None
        if self.peek_past_newlines() == ELSE:
            self.skip_peek_newlines()
            self.next_token()
            self.skip_peek_newlines()
            if self.peek_token_is(IF):
                self.next_token()
                alternative = self.parse_if_statement()
            else:
                alternative = self.parse_block()

        return IfStatement(condition=condition, consequence=consequence, alternative=alternative)

    def parse_while_statement(self):
        self.next_token()
        condition = self.parse_expression(LOWEST)
        body = self.parse_block()
        return WhileStatement(condition=condition, body=body)

    def parse_print_statement(self):
        self.next_token()
        stmt = PrintStatement(value=self.parse_expression(LOWEST))
        self.expect_statement_end()
        return stmt

    def parse_function_statement(self):
        self.expect_peek(IDENT)
        name = self.cur_token.literal
        self.expect_peek(LPAREN)
        parameters = self.parse_function_parameters()
        body = self.parse_block()
        return FunctionStatement(name=name, parameters=parameters, body=body)

    def parse_function_parameters(self):
        params = []
        if self.peek_token_is(RPAREN):
            self.next_token()
            return params

        self.expect_peek(IDENT)
        params.append(self.cur_token.literal)

        while self.peek_token_is(COMMA):
            self.next_token()
            self.expect_peek(IDENT)
            if self.cur_token.literal in params:
                raise ScryptSyntaxError.unexpected(self.cur_token, "duplicate parameter name")
            params.append(self.cur_token.literal)

        self.expect_peek(RPAREN)
        return params

    def parse_return_statement(self):
        stmt = ReturnStatement(return_value=None)
        if self.peek_token.type not in _STATEMENT_END:
            self.next_token()
            stmt.return_value = self.parse_expression(LOWEST)
        self.expect_statement_end()
        return stmt

    def parse_expression_statement(self):
        stmt = ExpressionStatement(expression=self.parse_expression(LOWEST))
        self.expect_statement_end()
        return stmt

    def expect_statement_end(self):
        if self.peek_token_is(SEMICOLON):
            self.next_token()
        elif self.peek_token.type not in _STATEMENT_END:
            raise ScryptSyntaxError.unexpected(self.peek_token)

    # === EXPRESSIONS ===

    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            raise ScryptSyntaxError.unexpected(self.cur_token)
        left_exp = prefix()

        while precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp
            self.next_token()
            left_exp = infix(left_exp)

        return left_exp

    def parse_identifier(self):
        return Identifier(value=self.cur_token.literal)

    def parse_number_literal(self):
        return NumberLiteral(value=self.cur_token.literal)

    def parse_boolean(self):
        return BooleanLiteral(value=self.cur_token_is(TRUE))

    def parse_null(self):
        return NullLiteral()

    def parse_prefix_expression(self):
        operator = self.cur_token.literal
        self.next_token()
        return PrefixExpression(operator=operator, right=self.parse_expression(PREFIX))

    def parse_infix_expression(self, left):
        operator = self.cur_token.literal
        precedence = self.cur_precedence()
        self.next_token()
        return InfixExpression(left=left, operator=operator, right=self.parse_expression(precedence))

    def parse_assignment_expression(self, left):
        if not isinstance(left, (Identifier, IndexExpression)):
            raise ScryptSyntaxError.unexpected(
                self.cur_token, "assignment target must be an identifier or array element")
        self.next_token()
        # Right-associative: a = b = 1
        return AssignmentExpression(target=left, value=self.parse_expression(LOWEST))

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        self.expect_peek(RPAREN)
        return exp

    def parse_list_literal(self):
        return ListLiteral(elements=self.parse_expression_list(RBRACKET))

    def parse_call_expression(self, function):
        return CallExpression(function=function, arguments=self.parse_expression_list(RPAREN))

    def parse_index_expression(self, left):
        self.next_token()
        index = self.parse_expression(LOWEST)
        self.expect_peek(RBRACKET)
        return IndexExpression(left=left, index=index)

    def parse_expression_list(self, end):
        elements = []
        if self.peek_token_is(end):
            self.next_token()
            return elements

        self.next_token()
        elements.append(self.parse_expression(LOWEST))

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            elements.append(self.parse_expression(LOWEST))

        self.expect_peek(end)
        return elements

    # === TOKEN UTILITIES ===

    @property
    def cur_token(self):
        return self.tokens[self.position]

    @property
    def peek_token(self):
        return self.tokens[min(self.position + 1, len(self.tokens) - 1)]

    def next_token(self):
        if self.position < len(self.tokens) - 1:
            self.position += 1

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        raise ScryptSyntaxError.unexpected(self.peek_token, f"expected '{t}'")

    def peek_past_newlines(self):
        """Type of the next non-newline token, without consuming anything."""
        i = self.position + 1
        while i < len(self.tokens) - 1 and self.tokens[i].type == NEWLINE:
            i += 1
        return self.tokens[min(i, len(self.tokens) - 1)].type

    def skip_peek_newlines(self):
        while self.peek_token_is(NEWLINE):
            self.next_token()

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)


def parse(source_code):
    """Lex and parse ``source_code``, raising the first syntax error found."""
    tokens = check_tokens(Lexer(source_code).tokenize())
    parser = Parser(tokens)
    program = parser.parse_program()
    if parser.errors:
        raise parser.errors[0]
    return program
