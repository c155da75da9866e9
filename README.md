# gqlparse

A pure-Python parser for GraphQL documents. It reads executable documents
(queries, mutations, subscriptions and fragments) and schema definition
language (types, interfaces, unions, enums, inputs, scalars, directives and
extensions). It builds a plain object tree from them.

## Installation

```
pip install gqlparse
```

## Parsing a schema

```python
from gqlparse.schema import parse_schema

schema = parse_schema(
    """
    type Query {
        hello(name: String = "world"): String!
    }
    """,
    False,
)

query_type = schema.types["Query"]
field = query_type.fields.get("hello")
print(str(field.type))            # String!
print(schema.entry_point_names)   # {'query': 'Query'}
```

The second argument chooses where descriptions come from:

- With `False`, the `#` comments in front of a definition become its
  description.
- With `True`, string and block-string (`"""..."""`) descriptions are used
  instead. Block strings are dedented with `gqlparse.blockstring.block_string`.

Every schema holds these built-in definitions:

- the scalars `Int`, `Float`, `String`, `Boolean` and `ID`;
- the directives `@include`, `@skip` and `@deprecated`;
- the introspection types.

The schema functions are:

- `new_schema()` returns a schema that holds only the built-in definitions.
- `new_meta()` builds the schema of built-in definitions itself.
- `parse(schema, text, use_string_descriptions)` adds a document to an
  existing schema.

After parsing, type references are resolved to their definitions. Objects
are linked to the interfaces they implement, and unions to their member
types. Directives are checked against their definitions, and missing
arguments are filled in from their defaults. If the document has no
`schema { ... }` block, types named `Query`, `Mutation` and `Subscription`
become the entry points.

### Errors

Syntax errors and resolution problems raise `gqlparse.lexer.QueryError`.
Examples of resolution problems are an unknown type, a missing interface
field and a directive used in the wrong place. Syntax errors are raised as
the subclass `GraphQLSyntaxError`, which carries the line and column where
the problem was found:

```python
from gqlparse.lexer import QueryError
from gqlparse.schema import parse_schema

try:
    parse_schema("extend invalid Node { id: ID! }", False)
except QueryError as err:
    print(err)
    # graphql: syntax error: unexpected "invalid", expecting "schema", "type",
    # "enum", "interface", "union" or "input" (line 1, column 8)
```

Invalid type extensions raise `ValueError`. Examples are extending an
unknown type, extending a type with one of a different kind, and redeclaring
an existing field or value:

```python
try:
    parse_schema("extend type User { name: String! }", False)
except ValueError as err:
    print(err)   # trying to extend unknown type "User"
```

## Parsing a query

```python
from gqlparse.query import parse

doc = parse("query Greeting($who: String) { hello(name: $who) { text } }")
op = doc.operations[0]
print(op.name.name)                  # Greeting
print(op.selections[0].name.name)    # hello
```

`parse` returns an `ExecutableDefinition` with `operations` and `fragments`.
`doc.fragments.get(name)` looks up a fragment by name. A malformed document
raises `GraphQLSyntaxError`.

## Lower-level pieces

- `gqlparse.lexer.Lexer` tokenises GraphQL source. It skips commas and
  collects comments and descriptions. `Location`, `Ident`, `Token`,
  `QueryError` and `GraphQLSyntaxError` live in the same module.
- `gqlparse.parsing` holds the grammar rules that schemas and queries share:
  `parse_type`, `parse_literal`, `parse_input_value`, `parse_argument_list`,
  `parse_directives` and `resolve_type`.
- `gqlparse.blockstring.block_string` applies the GraphQL block-string
  dedent rules to raw text.
- `gqlparse.ast` defines the node classes the parsers return.

## What it does not do

This package only parses and links documents. It does not:

- validate a query against a schema;
- execute queries or call resolvers;
- serve requests.

## Running the tests

```
pip install -e ".[test]"
pytest
```