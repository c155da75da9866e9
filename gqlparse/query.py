"""Parser for executable GraphQL documents: operations and fragments."""

from __future__ import annotations

from gqlparse.ast import (
    ExecutableDefinition,
    Field,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    OperationDefinition,
    OperationType,
    TypeName,
)
from gqlparse.lexer import Ident, Lexer, Token, _quote
from gqlparse.parsing import (
    parse_argument_list,
    parse_directives,
    parse_input_value,
)


def parse(query_string: str) -> ExecutableDefinition:
    """Parse a query document.

    Raises GraphQLSyntaxError (a QueryError) when the document is malformed.
    """
    lexer = Lexer(query_string, False)
    return _parse_executable_definition(lexer)


def _parse_executable_definition(lexer: Lexer) -> ExecutableDefinition:
    document = ExecutableDefinition()
    lexer.consume_whitespace()
    while lexer.peek() != Token.EOF:
        if lexer.peek() == "{":
            op = OperationDefinition(type=OperationType.QUERY, loc=lexer.location())
            op.selections = _parse_selection_set(lexer)
            document.operations.append(op)
            continue

        loc = lexer.location()
        keyword = lexer.consume_ident()
        if keyword == "query":
            op = _parse_operation(lexer, OperationType.QUERY)
            op.loc = loc
            document.operations.append(op)
        elif keyword == "mutation":
            document.operations.append(_parse_operation(lexer, OperationType.MUTATION))
        elif keyword == "subscription":
            document.operations.append(
                _parse_operation(lexer, OperationType.SUBSCRIPTION)
            )
        elif keyword == "fragment":
            fragment = _parse_fragment(lexer)
            fragment.loc = loc
            document.fragments.append(fragment)
        else:
            lexer.syntax_error(f'unexpected {_quote(keyword)}, expecting "fragment"')
    return document


def _parse_operation(lexer: Lexer, op_type: OperationType) -> OperationDefinition:
    op = OperationDefinition(type=op_type)
    op.name = Ident("", lexer.location())
    if lexer.peek() == Token.IDENT:
        op.name = lexer.consume_ident_with_loc()
    op.directives = parse_directives(lexer)
    if lexer.peek() == "(":
        lexer.consume_token("(")
        while lexer.peek() != ")":
            loc = lexer.location()
            lexer.consume_token("$")
            value = parse_input_value(lexer)
            value.loc = loc
            op.vars.append(value)
        lexer.consume_token(")")
    op.selections = _parse_selection_set(lexer)
    return op


def _parse_fragment(lexer: Lexer) -> FragmentDefinition:
    fragment = FragmentDefinition()
    fragment.name = lexer.consume_ident_with_loc()
    lexer.consume_keyword("on")
    on = lexer.consume_ident_with_loc()
    fragment.on = TypeName(on.name, on.loc)
    fragment.directives = parse_directives(lexer)
    fragment.selections = _parse_selection_set(lexer)
    return fragment


def _parse_selection_set(lexer: Lexer) -> list:
    selections = []
    lexer.consume_token("{")
    while lexer.peek() != "}":
        selections.append(_parse_selection(lexer))
    lexer.consume_token("}")
    return selections


def _parse_selection(lexer: Lexer):
    if lexer.peek() == ".":
        return _parse_spread(lexer)
    return _parse_field(lexer)


def _parse_field(lexer: Lexer) -> Field:
    field = Field()
    field.alias = lexer.consume_ident_with_loc()
    field.name = field.alias
    if lexer.peek() == ":":
        lexer.consume_token(":")
        field.name = lexer.consume_ident_with_loc()
    if lexer.peek() == "(":
        field.arguments = parse_argument_list(lexer)
    field.directives = parse_directives(lexer)
    if lexer.peek() == "{":
        field.selection_set_loc = lexer.location()
        field.selection_set = _parse_selection_set(lexer)
    return field


def _parse_spread(lexer: Lexer):
    loc = lexer.location()
    for _ in range(3):
        lexer.consume_token(".")

    fragment = InlineFragment(loc=loc)
    if lexer.peek() == Token.IDENT:
        ident = lexer.consume_ident_with_loc()
        if ident.name != "on":
            spread = FragmentSpread(name=ident, loc=loc)
            spread.directives = parse_directives(lexer)
            return spread
        on = lexer.consume_ident_with_loc()
        fragment.on = TypeName(on.name, on.loc)
    fragment.directives = parse_directives(lexer)
    fragment.selections = _parse_selection_set(lexer)
    return fragment