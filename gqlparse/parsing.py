"""Parsers for the pieces shared by schemas and queries."""

from __future__ import annotations

from typing import Any, Callable

from gqlparse.ast import (
    Argument,
    ArgumentList,
    Directive,
    DirectiveList,
    InputValueDefinition,
    ListType,
    ListValue,
    NonNull,
    NullValue,
    ObjectField,
    ObjectValue,
    TypeName,
    Variable,
)
from gqlparse.lexer import Ident, Lexer, Location, QueryError, Token, _quote


def parse_type(lexer: Lexer):
    """Parse a type reference such as ``[Int!]!``."""
    type_ref = _parse_null_type(lexer)
    if lexer.peek() == "!":
        lexer.consume_token("!")
        return NonNull(type_ref)
    return type_ref


def _parse_null_type(lexer: Lexer):
    if lexer.peek() == "[":
        lexer.consume_token("[")
        of_type = parse_type(lexer)
        lexer.consume_token("]")
        return ListType(of_type)
    ident = lexer.consume_ident_with_loc()
    return TypeName(ident.name, ident.loc)


def resolve_type(type_ref: Any, resolver: Callable[[str], Any]):
    """Replace type names by the definitions the resolver returns.

    Raises QueryError for names the resolver does not know.
    """
    if isinstance(type_ref, ListType):
        return ListType(resolve_type(type_ref.of_type, resolver))
    if isinstance(type_ref, NonNull):
        return NonNull(resolve_type(type_ref.of_type, resolver))
    if isinstance(type_ref, TypeName):
        resolved = resolver(type_ref.name)
        if resolved is None:
            raise QueryError(
                f"Unknown type {_quote(type_ref.name)}.",
                [type_ref.loc],
                rule="KnownTypeNames",
            )
        return resolved
    return type_ref


def parse_literal(lexer: Lexer, const_only: bool):
    """Parse a value literal; variables are refused when const_only is set."""
    loc = lexer.location()
    kind = lexer.peek()
    if kind == "$":
        if const_only:
            lexer.syntax_error("variable not allowed")
        lexer.consume_token("$")
        return Variable(lexer.consume_ident(), loc)
    if kind in (Token.INT, Token.FLOAT, Token.STRING, Token.IDENT):
        literal = lexer.consume_literal()
        if literal.type == Token.IDENT and literal.text == "null":
            return NullValue(loc)
        literal.loc = loc
        return literal
    if kind == "-":
        lexer.consume_token("-")
        literal = lexer.consume_literal()
        literal.text = "-" + literal.text
        literal.loc = loc
        return literal
    if kind == "[":
        lexer.consume_token("[")
        values = []
        while lexer.peek() != "]":
            values.append(parse_literal(lexer, const_only))
        lexer.consume_token("]")
        return ListValue(values, loc)
    if kind == "{":
        lexer.consume_token("{")
        fields = []
        while lexer.peek() != "}":
            name = lexer.consume_ident_with_loc()
            lexer.consume_token(":")
            fields.append(ObjectField(name, parse_literal(lexer, const_only)))
        lexer.consume_token("}")
        return ObjectValue(fields, loc)
    lexer.syntax_error("invalid value")


def parse_input_value(lexer: Lexer) -> InputValueDefinition:
    value = InputValueDefinition()
    value.loc = lexer.location()
    value.desc = lexer.desc_comment()
    value.name = lexer.consume_ident_with_loc()
    lexer.consume_token(":")
    value.type_loc = lexer.location()
    value.type = parse_type(lexer)
    if lexer.peek() == "=":
        lexer.consume_token("=")
        value.default = parse_literal(lexer, True)
    value.directives = parse_directives(lexer)
    return value


def parse_argument_list(lexer: Lexer) -> ArgumentList:
    args = ArgumentList()
    lexer.consume_token("(")
    while lexer.peek() != ")":
        name = lexer.consume_ident_with_loc()
        lexer.consume_token(":")
        args.append(Argument(name, parse_literal(lexer, False)))
    lexer.consume_token(")")
    return args


def parse_directives(lexer: Lexer) -> DirectiveList:
    directives = DirectiveList()
    while lexer.peek() == "@":
        lexer.consume_token("@")
        ident = lexer.consume_ident_with_loc()
        name = Ident(ident.name, Location(ident.loc.line, ident.loc.column - 1))
        directive = Directive(name)
        if lexer.peek() == "(":
            directive.arguments = parse_argument_list(lexer)
        directives.append(directive)
    return directives