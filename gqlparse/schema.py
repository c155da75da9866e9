"""Parser and resolver for GraphQL schema definition documents."""

from __future__ import annotations

from gqlparse.ast import (
    Argument,
    DirectiveDefinition,
    DirectiveList,
    EnumTypeDefinition,
    EnumValueDefinition,
    Extension,
    FieldDefinition,
    FieldsDefinition,
    InputObject,
    InterfaceTypeDefinition,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    Schema,
    Union,
)
from gqlparse.lexer import Lexer, QueryError, Token, _quote
from gqlparse.parsing import parse_directives, parse_input_value, parse_type, resolve_type

_META_SOURCE = """
	# The `Int` scalar type represents non-fractional signed whole numeric values. Int can represent values between -(2^31) and 2^31 - 1.
	scalar Int

	# The `Float` scalar type represents signed double-precision fractional values as specified by IEEE 754.
	scalar Float

	# The `String` scalar type represents textual data, represented as UTF-8 character sequences. The String type is most often used by GraphQL to represent free-form human-readable text.
	scalar String

	# The `Boolean` scalar type represents `true` or `false`.
	scalar Boolean

	# The `ID` scalar type represents a unique identifier, often used to refetch an object or as key for a cache. The ID type appears in a JSON response as a String; however, it is not intended to be human-readable. When expected as an input type, any string (such as `"4"`) or integer (such as `4`) input value will be accepted as an ID.
	scalar ID

	# Directs the executor to include this field or fragment only when the `if` argument is true.
	directive @include(
		# Included when true.
		if: Boolean!
	) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

	# Directs the executor to skip this field or fragment when the `if` argument is true.
	directive @skip(
		# Skipped when true.
		if: Boolean!
	) on FIELD | FRAGMENT_SPREAD | INLINE_FRAGMENT

	# Marks an element of a GraphQL schema as no longer supported.
	directive @deprecated(
		# Explains why this element was deprecated, usually also including a suggestion
		# for how to access supported similar data. Formatted in Markdown.
		reason: String = "No longer supported"
	) on FIELD_DEFINITION | ENUM_VALUE

	# A Directive provides a way to describe alternate runtime execution and type validation behavior in a GraphQL document.
	#
	# In some cases, you need to provide options to alter GraphQL's execution behavior
	# in ways field arguments will not suffice, such as conditionally including or
	# skipping a field. Directives provide this by describing additional information
	# to the executor.
	type __Directive {
		name: String!
		description: String
		locations: [__DirectiveLocation!]!
		args: [__InputValue!]!
	}

	# A Directive can be adjacent to many parts of the GraphQL language, a
	# __DirectiveLocation describes one such possible adjacencies.
	enum __DirectiveLocation {
		# Location adjacent to a query operation.
		QUERY
		# Location adjacent to a mutation operation.
		MUTATION
		# Location adjacent to a subscription operation.
		SUBSCRIPTION
		# Location adjacent to a field.
		FIELD
		# Location adjacent to a fragment definition.
		FRAGMENT_DEFINITION
		# Location adjacent to a fragment spread.
		FRAGMENT_SPREAD
		# Location adjacent to an inline fragment.
		INLINE_FRAGMENT
		# Location adjacent to a schema definition.
		SCHEMA
		# Location adjacent to a scalar definition.
		SCALAR
		# Location adjacent to an object type definition.
		OBJECT
		# Location adjacent to a field definition.
		FIELD_DEFINITION
		# Location adjacent to an argument definition.
		ARGUMENT_DEFINITION
		# Location adjacent to an interface definition.
		INTERFACE
		# Location adjacent to a union definition.
		UNION
		# Location adjacent to an enum definition.
		ENUM
		# Location adjacent to an enum value definition.
		ENUM_VALUE
		# Location adjacent to an input object type definition.
		INPUT_OBJECT
		# Location adjacent to an input object field definition.
		INPUT_FIELD_DEFINITION
	}

	# One possible value for a given Enum. Enum values are unique values, not a
	# placeholder for a string or numeric value. However an Enum value is returned in
	# a JSON response as a string.
	type __EnumValue {
		name: String!
		description: String
		isDeprecated: Boolean!
		deprecationReason: String
	}

	# Object and Interface types are described by a list of Fields, each of which has
	# a name, potentially a list of arguments, and a return type.
	type __Field {
		name: String!
		description: String
		args: [__InputValue!]!
		type: __Type!
		isDeprecated: Boolean!
		deprecationReason: String
	}

	# Arguments provided to Fields or Directives and the input fields of an
	# InputObject are represented as Input Values which describe their type and
	# optionally a default value.
	type __InputValue {
		name: String!
		description: String
		type: __Type!
		# A GraphQL-formatted string representing the default value for this input value.
		defaultValue: String
	}

	# A GraphQL Schema defines the capabilities of a GraphQL server. It exposes all
	# available types and directives on the server, as well as the entry points for
	# query, mutation, and subscription operations.
	type __Schema {
		# A list of all types supported by this server.
		types: [__Type!]!
		# The type that query operations will be rooted at.
		queryType: __Type!
		# If this server supports mutation, the type that mutation operations will be rooted at.
		mutationType: __Type
		# If this server support subscription, the type that subscription operations will be rooted at.
		subscriptionType: __Type
		# A list of all directives supported by this server.
		directives: [__Directive!]!
	}

	# The fundamental unit of any GraphQL Schema is the type. There are many kinds of
	# types in GraphQL as represented by the `__TypeKind` enum.
	#
	# Depending on the kind of a type, certain fields describe information about that
	# type. Scalar types provide no information beyond a name and description, while
	# Enum types provide their values. Object and Interface types provide the fields
	# they describe. Abstract types, Union and Interface, provide the Object types
	# possible at runtime. List and NonNull types compose other types.
	type __Type {
		kind: __TypeKind!
		name: String
		description: String
		fields(includeDeprecated: Boolean = false): [__Field!]
		interfaces: [__Type!]
		possibleTypes: [__Type!]
		enumValues(includeDeprecated: Boolean = false): [__EnumValue!]
		inputFields: [__InputValue!]
		ofType: __Type
	}

	# An enum describing what kind of type a given `__Type` is.
	enum __TypeKind {
		# Indicates this type is a scalar.
		SCALAR
		# Indicates this type is an object. `fields` and `interfaces` are valid fields.
		OBJECT
		# Indicates this type is an interface. `fields` and `possibleTypes` are valid fields.
		INTERFACE
		# Indicates this type is a union. `possibleTypes` is a valid field.
		UNION
		# Indicates this type is an enum. `enumValues` is a valid field.
		ENUM
		# Indicates this type is an input object. `inputFields` is a valid field.
		INPUT_OBJECT
		# Indicates this type is a list. `ofType` is a valid field.
		LIST
		# Indicates this type is a non-null. `ofType` is a valid field.
		NON_NULL
	}
"""

_EXTEND_EXPECTING = 'expecting "schema", "type", "enum", "interface", "union" or "input"'
_ROOTS_ATTRIBUTE = "entry_points"


def new_meta() -> Schema:
    """Build the schema holding the built-in scalars, directives and introspection types."""
    meta = Schema()
    parse(meta, _META_SOURCE, False)
    return meta


def new_schema() -> Schema:
    """Return an empty schema preloaded with the built-in definitions."""
    meta = new_meta()
    return Schema(types=dict(meta.types), directives=dict(meta.directives))


def parse_schema(schema_string: str, use_string_descriptions: bool = False) -> Schema:
    """Parse a schema document into a new schema."""
    schema = new_schema()
    parse(schema, schema_string, use_string_descriptions)
    return schema


def parse(schema: Schema, schema_string: str, use_string_descriptions: bool = False) -> None:
    """Parse a schema document into an existing schema and resolve its references.

    Raises QueryError for syntax and resolution problems and ValueError for
    invalid type extensions.
    """
    lexer = Lexer(schema_string, use_string_descriptions)
    _parse_document(schema, lexer)

    _merge_extensions(schema)

    for named in list(schema.types.values()):
        _resolve_named_type(schema, named)
    for directive in schema.directives.values():
        for arg in directive.arguments:
            arg.type = resolve_type(arg.type, schema.resolve)

    if not schema.entry_point_names:
        for key, name in (("query", "Query"), ("mutation", "Mutation"),
                          ("subscription", "Subscription")):
            if name in schema.types:
                schema.entry_point_names[key] = name
    roots: dict = {}
    setattr(schema, _ROOTS_ATTRIBUTE, roots)
    for key, name in schema.entry_point_names.items():
        if name not in schema.types:
            raise QueryError(f"type {_quote(name)} not found")
        roots[key] = schema.types[name]

    for obj in schema.objects:
        _resolve_directives(schema, obj.directives, "OBJECT")
        for fld in obj.fields:
            _resolve_directives(schema, fld.directives, "FIELD_DEFINITION")
        interfaces = []
        for intf_name in obj.interface_names:
            found = schema.types.get(intf_name)
            if found is None:
                raise QueryError(f"interface {_quote(intf_name)} not found")
            if not isinstance(found, InterfaceTypeDefinition):
                raise QueryError(f"type {_quote(intf_name)} is not an interface")
            for fname in found.fields.names():
                if obj.fields.get(fname) is None:
                    raise QueryError(
                        f"interface {_quote(intf_name)} expects field {_quote(fname)} "
                        f"but {_quote(obj.name)} does not provide it"
                    )
            interfaces.append(found)
            found.possible_types.append(obj)
        obj.interfaces = interfaces

    for union in schema.unions:
        _resolve_directives(schema, union.directives, "UNION")
        members = []
        for name in union.type_names:
            found = schema.types.get(name)
            if found is None:
                raise QueryError(f"object type {_quote(name)} not found")
            if not isinstance(found, ObjectTypeDefinition):
                raise QueryError(f"type {_quote(name)} is not an object")
            members.append(found)
        union.union_member_types = members

    for enum in schema.enums:
        _resolve_directives(schema, enum.directives, "ENUM")
        for value in enum.enum_values_definition:
            _resolve_directives(schema, value.directives, "ENUM_VALUE")


def _merge_extensions(schema: Schema) -> None:
    for ext in schema.extensions:
        original = schema.types.get(ext.type.name)
        if original is None:
            raise ValueError(f"trying to extend unknown type {_quote(ext.type.name)}")
        if original.kind != ext.type.kind:
            raise ValueError(
                f"trying to extend type {_quote(original.kind)} with type {_quote(ext.type.kind)}"
            )
        extra = ext.type
        if isinstance(original, ObjectTypeDefinition):
            for fld in extra.fields:
                if original.fields.get(fld.name) is not None:
                    raise ValueError(f"extended field {_quote(fld.name)} already exists")
            original.fields.extend(extra.fields)
            for name in extra.interface_names:
                if name in original.interface_names:
                    raise ValueError(
                        f"interface {_quote(name)} implemented in the extension is "
                        f"already implemented in {_quote(original.name)}"
                    )
            original.interface_names.extend(extra.interface_names)
        elif isinstance(original, InputObject):
            for value in extra.values:
                if original.values.get(value.name.name) is not None:
                    raise ValueError(f"extended field {_quote(value.name.name)} already exists")
            original.values.extend(extra.values)
        elif isinstance(original, InterfaceTypeDefinition):
            for fld in extra.fields:
                if original.fields.get(fld.name) is not None:
                    raise ValueError(f"extended field {fld.name} already exists")
            original.fields.extend(extra.fields)
        elif isinstance(original, Union):
            for name in extra.type_names:
                if name in original.type_names:
                    raise ValueError(
                        f"union type {_quote(name)} already declared in {_quote(original.name)}"
                    )
            original.type_names.extend(extra.type_names)
        elif isinstance(original, EnumTypeDefinition):
            existing = {v.enum_value for v in original.enum_values_definition}
            for value in extra.enum_values_definition:
                if value.enum_value in existing:
                    raise ValueError(
                        f"enum value {_quote(value.enum_value)} already declared "
                        f"in {_quote(original.name)}"
                    )
            original.enum_values_definition.extend(extra.enum_values_definition)
        else:
            raise ValueError(f"unexpected {_quote(original.name)}, {_EXTEND_EXPECTING}")


def _resolve_named_type(schema: Schema, named) -> None:
    if isinstance(named, (ObjectTypeDefinition, InterfaceTypeDefinition)):
        for fld in named.fields:
            _resolve_field(schema, fld)
    elif isinstance(named, InputObject):
        _resolve_input_values(schema, named.values)


def _resolve_field(schema: Schema, fld: FieldDefinition) -> None:
    fld.type = resolve_type(fld.type, schema.resolve)
    _resolve_directives(schema, fld.directives, "FIELD_DEFINITION")
    _resolve_input_values(schema, fld.arguments)


def _resolve_input_values(schema: Schema, values) -> None:
    for value in values:
        value.type = resolve_type(value.type, schema.resolve)


def _resolve_directives(schema: Schema, directives: DirectiveList, location: str) -> None:
    for directive in directives:
        name = directive.name.name
        definition = schema.directives.get(name)
        if definition is None:
            raise QueryError(f"directive {_quote(name)} not found")
        if location not in definition.locations:
            allowed = "[" + " ".join(definition.locations) + "]"
            raise QueryError(
                f"invalid location {_quote(location)} for directive {_quote(name)} "
                f"(must be one of {allowed})"
            )
        for arg in directive.arguments:
            if definition.arguments.get(arg.name.name) is None:
                raise QueryError(
                    f"invalid argument {_quote(arg.name.name)} for directive {_quote(name)}"
                )
        given = {arg.name.name for arg in directive.arguments}
        for arg_def in definition.arguments:
            if arg_def.name.name not in given:
                directive.arguments.append(Argument(arg_def.name, arg_def.default))


def _parse_entry_points(schema: Schema, lexer: Lexer) -> None:
    lexer.consume_token("{")
    while lexer.peek() != "}":
        name = lexer.consume_ident()
        lexer.consume_token(":")
        schema.entry_point_names[name] = lexer.consume_ident()
    lexer.consume_token("}")


def _parse_document(schema: Schema, lexer: Lexer) -> None:
    lexer.consume_whitespace()
    while lexer.peek() != Token.EOF:
        desc = lexer.desc_comment()
        keyword = lexer.consume_ident()
        if keyword == "schema":
            _parse_entry_points(schema, lexer)
        elif keyword == "type":
            obj = parse_object_def(lexer)
            obj.desc = desc
            schema.types[obj.name] = obj
            schema.objects.append(obj)
        elif keyword == "interface":
            iface = parse_interface_def(lexer)
            iface.desc = desc
            schema.types[iface.name] = iface
        elif keyword == "union":
            union = parse_union_def(lexer)
            union.desc = desc
            schema.types[union.name] = union
            schema.unions.append(union)
        elif keyword == "enum":
            enum = parse_enum_def(lexer)
            enum.desc = desc
            schema.types[enum.name] = enum
            schema.enums.append(enum)
        elif keyword == "input":
            input_obj = parse_input_def(lexer)
            input_obj.desc = desc
            schema.types[input_obj.name] = input_obj
        elif keyword == "scalar":
            loc = lexer.location()
            name = lexer.consume_ident()
            directives = parse_directives(lexer)
            schema.types[name] = ScalarTypeDefinition(
                name=name, desc=desc, directives=directives, loc=loc
            )
        elif keyword == "directive":
            directive = parse_directive_def(lexer)
            directive.desc = desc
            schema.directives[directive.name] = directive
        elif keyword == "extend":
            _parse_extension(schema, lexer)
        else:
            lexer.syntax_error(
                f'unexpected {_quote(keyword)}, expecting "schema", "type", "enum", '
                f'"interface", "union", "input", "scalar" or "directive"'
            )


def parse_object_def(lexer: Lexer) -> ObjectTypeDefinition:
    """Parse an object type definition following the ``type`` keyword."""
    loc = lexer.location()
    obj = ObjectTypeDefinition(loc=loc, name=lexer.consume_ident())
    while True:
        kind = lexer.peek()
        if kind == "@":
            obj.directives = parse_directives(lexer)
        elif kind == Token.IDENT:
            lexer.consume_keyword("implements")
            while lexer.peek() not in ("{", "@"):
                if lexer.peek() == "&":
                    lexer.consume_token("&")
                obj.interface_names.append(lexer.consume_ident())
        else:
            break
    lexer.consume_token("{")
    obj.fields = _parse_fields_def(lexer)
    lexer.consume_token("}")
    return obj


def parse_interface_def(lexer: Lexer) -> InterfaceTypeDefinition:
    """Parse an interface definition following the ``interface`` keyword."""
    loc = lexer.location()
    iface = InterfaceTypeDefinition(loc=loc, name=lexer.consume_ident())
    iface.directives = parse_directives(lexer)
    lexer.consume_token("{")
    iface.fields = _parse_fields_def(lexer)
    lexer.consume_token("}")
    return iface


def parse_union_def(lexer: Lexer) -> Union:
    """Parse a union definition following the ``union`` keyword."""
    loc = lexer.location()
    union = Union(loc=loc, name=lexer.consume_ident())
    union.directives = parse_directives(lexer)
    lexer.consume_token("=")
    union.type_names = [lexer.consume_ident()]
    while lexer.peek() == "|":
        lexer.consume_token("|")
        union.type_names.append(lexer.consume_ident())
    return union


def parse_input_def(lexer: Lexer) -> InputObject:
    """Parse an input object definition following the ``input`` keyword."""
    loc = lexer.location()
    input_obj = InputObject(loc=loc, name=lexer.consume_ident())
    input_obj.directives = parse_directives(lexer)
    lexer.consume_token("{")
    while lexer.peek() != "}":
        input_obj.values.append(parse_input_value(lexer))
    lexer.consume_token("}")
    return input_obj


def parse_enum_def(lexer: Lexer) -> EnumTypeDefinition:
    """Parse an enum definition following the ``enum`` keyword."""
    loc = lexer.location()
    enum = EnumTypeDefinition(loc=loc, name=lexer.consume_ident())
    enum.directives = parse_directives(lexer)
    lexer.consume_token("{")
    while lexer.peek() != "}":
        desc = lexer.desc_comment()
        value_loc = lexer.location()
        name = lexer.consume_ident()
        enum.enum_values_definition.append(
            EnumValueDefinition(
                enum_value=name,
                directives=parse_directives(lexer),
                desc=desc,
                loc=value_loc,
            )
        )
    lexer.consume_token("}")
    return enum


def parse_directive_def(lexer: Lexer) -> DirectiveDefinition:
    """Parse a directive definition following the ``directive`` keyword."""
    lexer.consume_token("@")
    loc = lexer.location()
    directive = DirectiveDefinition(name=lexer.consume_ident(), loc=loc)
    if lexer.peek() == "(":
        lexer.consume_token("(")
        while lexer.peek() != ")":
            directive.arguments.append(parse_input_value(lexer))
        lexer.consume_token(")")
    lexer.consume_keyword("on")
    while True:
        directive.locations.append(lexer.consume_ident())
        if lexer.peek() != "|":
            break
        lexer.consume_token("|")
    return directive


def _parse_extension(schema: Schema, lexer: Lexer) -> None:
    loc = lexer.location()
    keyword = lexer.consume_ident()
    parsers = {
        "type": parse_object_def,
        "interface": parse_interface_def,
        "union": parse_union_def,
        "enum": parse_enum_def,
        "input": parse_input_def,
    }
    if keyword == "schema":
        _parse_entry_points(schema, lexer)
    elif keyword in parsers:
        schema.extensions.append(Extension(type=parsers[keyword](lexer), loc=loc))
    else:
        lexer.syntax_error(f"unexpected {_quote(keyword)}, {_EXTEND_EXPECTING}")


def _parse_fields_def(lexer: Lexer) -> FieldsDefinition:
    fields = FieldsDefinition()
    while lexer.peek() != "}":
        fld = FieldDefinition()
        fld.desc = lexer.desc_comment()
        fld.loc = lexer.location()
        fld.name = lexer.consume_ident()
        if lexer.peek() == "(":
            lexer.consume_token("(")
            while lexer.peek() != ")":
                fld.arguments.append(parse_input_value(lexer))
            lexer.consume_token(")")
        lexer.consume_token(":")
        fld.type = parse_type(lexer)
        fld.directives = parse_directives(lexer)
        fields.append(fld)
    return fields