"""Syntax tree nodes for GraphQL schemas and executable documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Union as _U

from gqlparse.lexer import Ident, Location, Token


def _no_loc() -> Location:
    return Location(0, 0)


def _no_ident() -> Ident:
    return Ident("", Location(0, 0))


# -- type references --------------------------------------------------------

@dataclass
class TypeName:
    name: str
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "TYPE_NAME"

    def __str__(self) -> str:
        return self.name


@dataclass
class ListType:
    of_type: Any
    kind: ClassVar[str] = "LIST"

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass
class NonNull:
    of_type: Any
    kind: ClassVar[str] = "NON_NULL"

    def __str__(self) -> str:
        return f"{self.of_type}!"


# -- values -----------------------------------------------------------------

@dataclass
class Variable:
    name: str
    loc: Location = field(default_factory=_no_loc)

    def __str__(self) -> str:
        return "$" + self.name


@dataclass
class PrimitiveValue:
    type: _U[Token, str]
    text: str
    loc: Location = field(default_factory=_no_loc)

    def __str__(self) -> str:
        return self.text


@dataclass
class NullValue:
    loc: Location = field(default_factory=_no_loc)

    def __str__(self) -> str:
        return "null"


@dataclass
class ListValue:
    values: list = field(default_factory=list)
    loc: Location = field(default_factory=_no_loc)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values) + "]"


@dataclass
class ObjectField:
    name: Ident
    value: Any


@dataclass
class ObjectValue:
    fields: list = field(default_factory=list)
    loc: Location = field(default_factory=_no_loc)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{f.name.name}: {f.value}" for f in self.fields) + "}"


@dataclass
class Argument:
    name: Ident
    value: Any


class ArgumentList(list):
    """Arguments given to a field or directive."""

    def get(self, name: str):
        """Return the value of the named argument, or None."""
        return next((a.value for a in self if a.name.name == name), None)

    def must_get(self, name: str):
        value = self.get(name)
        if value is None:
            raise KeyError(f"argument {name!r} not found")
        return value


@dataclass
class Directive:
    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)


class DirectiveList(list):
    """Directives applied to a node."""

    def get(self, name: str) -> Optional[Directive]:
        return next((d for d in self if d.name.name == name), None)


# -- schema definitions -----------------------------------------------------

@dataclass(eq=False)
class InputValueDefinition:
    name: Ident = field(default_factory=_no_ident)
    type: Any = None
    default: Any = None
    desc: str = ""
    loc: Location = field(default_factory=_no_loc)
    type_loc: Location = field(default_factory=_no_loc)
    directives: DirectiveList = field(default_factory=DirectiveList)


class ArgumentsDefinition(list):
    """Input value definitions of a field, directive or input object."""

    def get(self, name: str) -> Optional[InputValueDefinition]:
        return next((v for v in self if v.name.name == name), None)


@dataclass(eq=False)
class FieldDefinition:
    name: str = ""
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    type: Any = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = field(default_factory=_no_loc)


class FieldsDefinition(list):
    """Field definitions of an object or interface."""

    def get(self, name: str) -> Optional[FieldDefinition]:
        return next((f for f in self if f.name == name), None)

    def names(self) -> list[str]:
        return [f.name for f in self]


class _Named:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class ScalarTypeDefinition(_Named):
    name: str = ""
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "SCALAR"


@dataclass(eq=False)
class ObjectTypeDefinition(_Named):
    name: str = ""
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    interface_names: list = field(default_factory=list)
    interfaces: list = field(default_factory=list, repr=False)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "OBJECT"


@dataclass(eq=False)
class InterfaceTypeDefinition(_Named):
    name: str = ""
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    possible_types: list = field(default_factory=list, repr=False)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "INTERFACE"


@dataclass(eq=False)
class Union(_Named):
    name: str = ""
    type_names: list = field(default_factory=list)
    union_member_types: list = field(default_factory=list, repr=False)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "UNION"


@dataclass(eq=False)
class EnumValueDefinition:
    enum_value: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class EnumTypeDefinition(_Named):
    name: str = ""
    enum_values_definition: list = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "ENUM"


@dataclass(eq=False)
class InputObject(_Named):
    name: str = ""
    values: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)
    kind: ClassVar[str] = "INPUT_OBJECT"


@dataclass(eq=False)
class DirectiveDefinition:
    name: str = ""
    desc: str = ""
    locations: list = field(default_factory=list)
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class Extension:
    type: Any
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class Schema:
    types: dict = field(default_factory=dict)
    directives: dict = field(default_factory=dict)
    entry_point_names: dict = field(default_factory=dict)
    entry_points: dict = field(default_factory=dict)
    objects: list = field(default_factory=list)
    unions: list = field(default_factory=list)
    enums: list = field(default_factory=list)
    extensions: list = field(default_factory=list)
    use_field_resolvers: bool = False

    def resolve(self, name: str):
        """Return the named type, or None."""
        return self.types.get(name)


# -- executable documents ---------------------------------------------------

class OperationType(str, Enum):
    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"


@dataclass(eq=False)
class Field:
    alias: Ident = field(default_factory=_no_ident)
    name: Ident = field(default_factory=_no_ident)
    arguments: ArgumentList = field(default_factory=ArgumentList)
    directives: DirectiveList = field(default_factory=DirectiveList)
    selection_set: list = field(default_factory=list)
    selection_set_loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class InlineFragment:
    on: Optional[TypeName] = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    selections: list = field(default_factory=list)
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class FragmentSpread:
    name: Ident = field(default_factory=_no_ident)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class FragmentDefinition:
    name: Ident = field(default_factory=_no_ident)
    on: Optional[TypeName] = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    selections: list = field(default_factory=list)
    loc: Location = field(default_factory=_no_loc)


class FragmentList(list):
    """Fragment definitions of a document."""

    def get(self, name: str) -> Optional[FragmentDefinition]:
        return next((f for f in self if f.name.name == name), None)


@dataclass(eq=False)
class OperationDefinition:
    type: OperationType = OperationType.QUERY
    name: Ident = field(default_factory=_no_ident)
    vars: list = field(default_factory=list)
    selections: list = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = field(default_factory=_no_loc)


@dataclass(eq=False)
class ExecutableDefinition:
    operations: list = field(default_factory=list)
    fragments: FragmentList = field(default_factory=FragmentList)