import pytest

from gqlparse.ast import (
    EnumTypeDefinition,
    InputObject,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    Schema,
    Union,
)
from gqlparse.lexer import GraphQLSyntaxError, Lexer, Location, QueryError
from gqlparse.schema import (
    new_meta,
    new_schema,
    parse,
    parse_directive_def,
    parse_enum_def,
    parse_input_def,
    parse_interface_def,
    parse_object_def,
    parse_schema,
    parse_union_def,
)


def _lexer(definition):
    lexer = Lexer(definition, False)
    lexer.consume_whitespace()
    return lexer


# -- individual definition parsers -----------------------------------------

def test_parse_interface_def():
    iface = parse_interface_def(_lexer("Greeting { field: String }"))
    assert iface.name == "Greeting"
    assert iface.loc == Location(1, 1)
    assert iface.fields.names() == ["field"]


@pytest.mark.parametrize(
    "definition, names",
    [
        ("Hello implements World { field: String }", ["World"]),
        ("Hello implements Wo & rld { field: String }", ["Wo", "rld"]),
        ("Hello implements & Wo & rld { field: String }", ["Wo", "rld"]),
        ("Hello implements Wo, rld { field: String }", ["Wo", "rld"]),
    ],
)
def test_parse_object_def(definition, names):
    obj = parse_object_def(_lexer(definition))
    assert obj.name == "Hello"
    assert obj.loc == Location(1, 1)
    assert obj.interface_names == names


def test_parse_object_def_without_brace_is_syntax_error():
    with pytest.raises(GraphQLSyntaxError):
        parse_object_def(_lexer("Hello ="))


def test_parse_union_def():
    union = parse_union_def(_lexer("Foo = Bar | Qux | Quux"))
    assert union.name == "Foo"
    assert union.type_names == ["Bar", "Qux", "Quux"]
    assert union.loc == Location(1, 1)


def test_parse_enum_def_single_line():
    enum = parse_enum_def(_lexer("Foo { BAR QUX }"))
    assert enum.name == "Foo"
    assert enum.loc == Location(1, 1)
    values = [(v.enum_value, v.loc) for v in enum.enum_values_definition]
    assert values == [("BAR", Location(1, 7)), ("QUX", Location(1, 11))]


def test_parse_enum_def_with_new_lines():
    enum = parse_enum_def(_lexer("Foo { \n\t\t\t\tBAR\n\t\t\t\tQUX\n\t\t\t}"))
    assert enum.name == "Foo"
    assert enum.loc == Location(1, 1)
    values = [(v.enum_value, v.loc) for v in enum.enum_values_definition]
    assert values == [("BAR", Location(2, 5)), ("QUX", Location(3, 5))]


def test_parse_directive_def():
    directive = parse_directive_def(_lexer("@Foo on FIELD"))
    assert directive.name == "Foo"
    assert directive.loc == Location(1, 2)
    assert directive.locations == ["FIELD"]


def test_parse_input_def():
    input_obj = parse_input_def(_lexer("Foo { qux: String }"))
    assert input_obj.name == "Foo"
    assert input_obj.loc == Location(1, 1)
    assert [v.name.name for v in input_obj.values] == ["qux"]


# -- built-in definitions --------------------------------------------------

def test_new_meta_contains_builtins():
    meta = new_meta()
    for name in ("Int", "Float", "String", "Boolean", "ID"):
        assert isinstance(meta.types[name], ScalarTypeDefinition)
    assert set(meta.directives) == {"include", "skip", "deprecated"}
    assert meta.entry_point_names == {}
    reason = meta.directives["deprecated"].arguments.get("reason")
    assert reason.default.text == '"No longer supported"'


def test_new_meta_uses_comments_as_descriptions():
    meta = new_meta()
    assert meta.types["Boolean"].desc == "The `Boolean` scalar type represents `true` or `false`."
    assert str(meta.types["__Type"].fields.get("kind").type) == "__TypeKind!"


def test_new_schema_copies_builtins():
    schema = new_schema()
    assert "__Schema" in schema.types
    assert "skip" in schema.directives
    assert schema.objects == []


# -- whole documents -------------------------------------------------------

def test_parses_interface_definition():
    schema = parse_schema("interface Greeting { message: String! }", False)
    greeting = schema.types["Greeting"]
    assert isinstance(greeting, InterfaceTypeDefinition)
    assert greeting.fields.names() == ["message"]


def test_implementing_type_without_required_fields():
    sdl = """
    interface Greeting {
        message: String!
    }
    type Welcome implements Greeting {
    }"""
    with pytest.raises(QueryError) as info:
        parse_schema(sdl, False)
    assert str(info.value) == (
        'graphql: interface "Greeting" expects field "message" but "Welcome" does not provide it'
    )


def test_type_with_description_string():
    sdl = '\n"Single line description."\ntype Type {\n  field: String\n}'
    schema = parse_schema(sdl, True)
    assert schema.types["Type"].desc == "Single line description."


def test_simple_block_string_description():
    sdl = '\n\t\t\t"""\n\t\t\tMulti-line description.\n\t\t\t"""\n\t\t\ttype Type {\n\t\t\t\tfield: String\n\t\t\t}'
    schema = parse_schema(sdl, True)
    assert schema.types["Type"].desc == "Multi-line description."


def test_empty_block_string_description():
    sdl = '\n\t\t\t"""\n\t\t\t"""\n\t\t\ttype Type {\n\t\t\t\tfield: String\n\t\t\t}'
    schema = parse_schema(sdl, True)
    assert schema.types["Type"].desc == ""


def test_multi_line_block_string_description():
    sdl = "\n".join([
        "",
        '\t\t\t"""',
        "\t\t\tFirst line of the description.",
        "",
        "\t\t\tSecond line of the description.",
        "",
        "\t\t\t\tquery {",
        "\t\t\t\t\tcode {",
        "\t\t\t\t\t\texample",
        "\t\t\t\t\t}",
        "\t\t\t\t}",
        "",
        "\t\t\tNotes:",
        "",
        "\t\t\t * First note",
        "\t\t\t * Second note",
        '\t\t\t"""',
        "\t\t\ttype Type {",
        "\t\t\t\tfield: String",
        "\t\t\t}",
    ])
    schema = parse_schema(sdl, True)
    want = (
        "First line of the description.\n\nSecond line of the description.\n\n"
        "\tquery {\n\t\tcode {\n\t\t\texample\n\t\t}\n\t}\n\nNotes:\n\n"
        " * First note\n * Second note"
    )
    assert schema.types["Type"].desc == want


def test_unindented_block_string_description():
    sdl = "\n".join([
        "",
        '\t\t\t"""',
        "First line of the description.",
        "",
        "Second line of the description.",
        '\t\t\t"""',
        "\t\t\ttype Type {",
        "\t\t\t\tfield: String",
        "\t\t\t}",
    ])
    schema = parse_schema(sdl, True)
    assert schema.types["Type"].desc == (
        "First line of the description.\n\nSecond line of the description."
    )


def test_space_indented_block_string_description():
    pad = " " * 12
    sdl = "\n".join([
        "",
        pad + '"""',
        pad + "First line of the description.",
        "",
        pad + "Second line of the description.",
        "",
        pad + "    query {",
        pad + "        code {",
        pad + "            example",
        pad + "        }",
        pad + "    }",
        pad + '"""',
        pad + "type Type {",
        pad + "    field: String",
        pad + "}",
    ])
    schema = parse_schema(sdl, True)
    want = (
        "First line of the description.\n\nSecond line of the description.\n\n"
        "    query {\n        code {\n            example\n        }\n    }"
    )
    assert schema.types["Type"].desc == want


def test_block_string_description_ignores_comments():
    sdl = (
        '\n"""\nMulti-line description with ignored comments.\n"""\n'
        "# This comment should be ignored.\ntype Type {\n  field: String\n}"
    )
    schema = parse_schema(sdl, True)
    assert schema.types["Type"].desc == "Multi-line description with ignored comments."


def test_description_not_carried_to_next_type():
    sdl = '\n"Some description."\nscalar MyInt\ntype Type {\n  field: String\n}'
    schema = parse_schema(sdl, True)
    assert schema.types["MyInt"].desc == "Some description."
    assert schema.types["Type"].desc == ""


def test_multi_line_comment_description():
    sdl = (
        '\n# Multi-line\n# comment.\n" This description should be ignored. "\n'
        "scalar MyInt\ntype Type {\n  field: String\n}"
    )
    schema = parse_schema(sdl, False)
    assert schema.types["MyInt"].desc == "Multi-line\ncomment."
    assert schema.types["Type"].desc == ""


def _check_query_and_mutation(schema):
    hello = schema.types["Query"].fields.get("hello")
    assert str(hello.type) == "String!"
    concat = schema.types["Mutation"].fields.get("concat")
    assert str(concat.type) == "String!"
    assert [str(a.type) for a in concat.arguments] == ["String!", "String!"]


def test_default_root_schema():
    sdl = """
    type Query {
        hello: String!
    }
    type Mutation {
        concat(a: String!, b: String!): String!
    }
    """
    schema = parse_schema(sdl, False)
    _check_query_and_mutation(schema)
    assert schema.entry_point_names == {"query": "Query", "mutation": "Mutation"}


def test_extend_type():
    sdl = """
    type Query {
        hello: String!
    }

    extend type Query {
        world: String!
    }"""
    schema = parse_schema(sdl, False)
    query = schema.types["Query"]
    assert str(query.fields.get("hello").type) == "String!"
    assert str(query.fields.get("world").type) == "String!"


def test_extend_schema():
    sdl = """
    schema {
        query: Query
    }
    type Query {
        hello: String!
    }
    extend schema {
        mutation: Mutation
    }
    type Mutation {
        concat(a: String!, b: String!): String!
    }
    """
    schema = parse_schema(sdl, False)
    _check_query_and_mutation(schema)
    assert schema.entry_point_names == {"query": "Query", "mutation": "Mutation"}


def test_extend_type_with_interface_implementation():
    sdl = """
    interface Named {
        name: String!
    }
    type Product {
        id: ID!
    }
    extend type Product implements Named {
        name: String!
    }"""
    schema = parse_schema(sdl, False)
    product = schema.types["Product"]
    assert str(product.fields.get("id").type) == "ID!"
    assert str(product.fields.get("name").type) == "String!"
    named = schema.types["Named"]
    assert str(named.fields.get("name").type) == "String!"
    assert named.possible_types == [product]
    assert product.interfaces == [named]


UNION_SDL = """
type Named {
    name: String!
}
type Numbered {
    num: Int!
}
union Item = Named | Numbered
type Coloured {
    Colour: String!
}
extend union Item = Coloured
"""


def test_extend_union_type():
    schema = parse_schema(UNION_SDL, False)
    item = schema.types["Item"]
    assert isinstance(item, Union)
    assert {t.name for t in item.union_member_types} == {"Coloured", "Named", "Numbered"}
    assert len(item.union_member_types) == 3


def test_extend_enum_type():
    sdl = """
    enum Currencies{
        AUD
        USD
        EUR
    }
    extend enum Currencies {
        BGN
        GBP
    }
    """
    schema = parse_schema(sdl, False)
    enum = schema.types["Currencies"]
    assert isinstance(enum, EnumTypeDefinition)
    assert [v.enum_value for v in enum.enum_values_definition] == [
        "AUD", "USD", "EUR", "BGN", "GBP",
    ]


def test_extend_input():
    sdl = """
    input Product {
        id: ID!
        name: String!
    }
    extend input Product {
        category: Category!
        tags: [String!]! = ["sale", "shoes"]
    }
    input Category {
        id: ID!
        name: String!
    }
    """
    schema = parse_schema(sdl, False)
    product = schema.types["Product"]
    assert isinstance(product, InputObject)
    assert [v.name.name for v in product.values] == ["id", "name", "category", "tags"]
    category = product.values.get("category")
    assert str(category.type) == "Category!"
    assert category.type.kind == "NON_NULL"
    assert category.type.of_type is schema.types["Category"]


def test_extend_interface_type():
    sdl = """
    interface Product {
        id: ID!
        name: String!
    }
    extend interface Product {
        category: String!
    }
    """
    schema = parse_schema(sdl, False)
    assert schema.types["Product"].fields.names() == ["id", "name", "category"]


@pytest.mark.parametrize(
    "sdl, message",
    [
        (
            "type Query { hello: String! }\nextend interface Query { name: String! }",
            'trying to extend type "OBJECT" with type "INTERFACE"',
        ),
        (
            "interface Named { name: String! }\n"
            "type Product implements Named { id: ID! name: String! }\n"
            "extend type Product implements Named {\n}",
            'interface "Named" implemented in the extension is already implemented in "Product"',
        ),
        (
            UNION_SDL.replace("extend union Item = Coloured", "extend union Item = Coloured | Named"),
            'union type "Named" already declared in "Item"',
        ),
        (
            "enum Currencies{ AUD USD EUR }\nextend enum Currencies { AUD }",
            'enum value "AUD" already declared in "Currencies"',
        ),
        (
            "input Product{ name: String! }\nextend input Product { name: String! }",
            'extended field "name" already exists',
        ),
        (
            "interface Named { name: String! }\n"
            "type Product implements Named { id: ID! name: String! }\n"
            "extend type Product { name: String! }",
            'extended field "name" already exists',
        ),
        (
            "interface Named { name: String! }\nextend interface Named { name: String! }",
            "extended field name already exists",
        ),
        (
            "extend type User {\n name: String!\n}",
            'trying to extend unknown type "User"',
        ),
    ],
)
def test_extension_errors(sdl, message):
    with pytest.raises(ValueError) as info:
        parse_schema(sdl, False)
    assert str(info.value) == message


def test_extend_invalid_syntax():
    sdl = "\n\t\t\textend invalid Node {\n\t\t\t\tid: ID!\n\t\t\t}\n\t\t\t"
    with pytest.raises(GraphQLSyntaxError) as info:
        parse_schema(sdl, False)
    assert str(info.value) == (
        'graphql: syntax error: unexpected "invalid", expecting "schema", "type", '
        '"enum", "interface", "union" or "input" (line 2, column 19)'
    )


def test_unknown_definition_keyword():
    with pytest.raises(GraphQLSyntaxError) as info:
        parse_schema("foo Bar", False)
    assert str(info.value) == (
        'graphql: syntax error: unexpected "foo", expecting "schema", "type", "enum", '
        '"interface", "union", "input", "scalar" or "directive" (line 1, column 5)'
    )


def test_parses_directives():
    sdl = """
    directive @objectdirective on OBJECT
    directive @fielddirective on FIELD_DEFINITION
    directive @enumdirective on ENUM
    directive @uniondirective on UNION
    directive @directive on SCALAR
        | OBJECT
        | FIELD_DEFINITION
        | ARGUMENT_DEFINITION
        | INTERFACE
        | UNION
        | ENUM
        | ENUM_VALUE
        | INPUT_OBJECT
        | INPUT_FIELD_DEFINITION

    interface NamedEntity @directive { name: String }

    scalar Time @directive

    type Photo @objectdirective {
        id: ID! @deprecated @fielddirective
    }

    type Person implements NamedEntity @objectdirective {
        name: String
    }

    enum Direction @enumdirective {
        NORTH @deprecated
        EAST
        SOUTH
        WEST
    }

    union Union @uniondirective = Photo | Person
    """
    schema = parse_schema(sdl, False)
    assert [d.name.name for d in schema.types["NamedEntity"].directives] == ["directive"]
    assert [d.name.name for d in schema.types["Time"].directives] == ["directive"]
    photo = schema.types["Photo"]
    assert [d.name.name for d in photo.directives] == ["objectdirective"]
    assert len(photo.fields.get("id").directives) == 2
    assert [d.name.name for d in schema.types["Direction"].directives] == ["enumdirective"]
    assert [d.name.name for d in schema.types["Union"].directives] == ["uniondirective"]
    assert len(schema.directives["directive"].locations) == 10


def test_directive_default_arguments_are_filled_in():
    schema = parse_schema("type Query { a: String @deprecated }", False)
    directive = schema.types["Query"].fields.get("a").directives.get("deprecated")
    assert directive.arguments.get("reason").text == '"No longer supported"'


def test_unknown_directive():
    with pytest.raises(QueryError) as info:
        parse_schema("type Query @unknown { a: String }", False)
    assert str(info.value) == 'graphql: directive "unknown" not found'


def test_directive_in_invalid_location():
    with pytest.raises(QueryError) as info:
        parse_schema("directive @d on ENUM\ntype Query @d { a: String }", False)
    assert str(info.value) == (
        'graphql: invalid location "OBJECT" for directive "d" (must be one of [ENUM])'
    )


def test_directive_with_invalid_argument():
    with pytest.raises(QueryError) as info:
        parse_schema('type Query { a: String @deprecated(why: "x") }', False)
    assert str(info.value) == 'graphql: invalid argument "why" for directive "deprecated"'


def test_unknown_field_type():
    with pytest.raises(QueryError) as info:
        parse_schema("type Query { a: Missing }", False)
    assert info.value.message == 'Unknown type "Missing".'
    assert info.value.rule == "KnownTypeNames"


def test_missing_entry_point_type():
    with pytest.raises(QueryError) as info:
        parse_schema("schema { query: Nope }", False)
    assert str(info.value) == 'graphql: type "Nope" not found'


def test_missing_interface():
    with pytest.raises(QueryError) as info:
        parse_schema("type Query implements Nope { a: String }", False)
    assert str(info.value) == 'graphql: interface "Nope" not found'


def test_interface_name_is_not_an_interface():
    with pytest.raises(QueryError) as info:
        parse_schema("type A { a: String }\ntype Query implements A { a: String }", False)
    assert str(info.value) == 'graphql: type "A" is not an interface'


def test_union_member_errors():
    with pytest.raises(QueryError) as info:
        parse_schema("union U = Nope", False)
    assert str(info.value) == 'graphql: object type "Nope" not found'
    with pytest.raises(QueryError) as info:
        parse_schema("scalar S\nunion U = S", False)
    assert str(info.value) == 'graphql: type "S" is not an object'


def test_parse_into_existing_schema():
    schema = new_schema()
    parse(schema, "type Query { items: [Int!] }", False)
    items = schema.types["Query"].fields.get("items")
    assert str(items.type) == "[Int!]"
    assert items.type.of_type.of_type is schema.types["Int"]
    assert isinstance(schema.types["Query"], ObjectTypeDefinition)


def test_parse_into_bare_schema_needs_builtins():
    with pytest.raises(QueryError) as info:
        parse(Schema(), "type Query { a: String }", False)
    assert info.value.message == 'Unknown type "String".'