"""
Declared types as immutable values.

Each variant answers whether a candidate type is assignable to it and renders
itself back to declaration syntax. The variant set is closed and tagged by
TypeKind.
"""

import collections.abc
import enum
import functools
import types as pytypes
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from .classpath import ClassPath, default_classpath
from .errors import UnionConstructionError
from .names import TypeName


class TypeKind(enum.Enum):
    CALLABLE = "callable"
    GENERIC_OBJECT = "generic_object"
    ITERABLE = "iterable"
    MIXED = "mixed"
    NULL = "null"
    OBJECT = "object"
    SIMPLE = "simple"
    UNION = "union"
    UNKNOWN = "unknown"
    VOID = "void"


class Type(ABC):
    """Base class for all declared types."""

    kind: ClassVar[TypeKind]
    name: str

    @abstractmethod
    def is_assignable(self, other: "Type") -> bool:
        """Check if a value of type other can stand in where self is declared."""
        pass

    @abstractmethod
    def allows_null(self) -> bool:
        pass

    def as_string(self) -> str:
        return ("?" if self.allows_null() else "") + self.name

    def as_return_type_declaration(self) -> str:
        return ": " + self.as_string()

    def to_dict(self) -> dict:
        """Describe the type for JSON serialization."""
        return {
            "_type": self.__class__.__name__,
            "as_string": self.as_string(),
            "allows_null": self.allows_null(),
        }

    def is_callable(self) -> bool:
        return self.kind is TypeKind.CALLABLE

    def is_generic_object(self) -> bool:
        return self.kind is TypeKind.GENERIC_OBJECT

    def is_iterable(self) -> bool:
        return self.kind is TypeKind.ITERABLE

    def is_mixed(self) -> bool:
        return self.kind is TypeKind.MIXED

    def is_null(self) -> bool:
        return self.kind is TypeKind.NULL

    def is_object(self) -> bool:
        return self.kind is TypeKind.OBJECT

    def is_simple(self) -> bool:
        return self.kind is TypeKind.SIMPLE

    def is_union(self) -> bool:
        return self.kind is TypeKind.UNION

    def is_unknown(self) -> bool:
        return self.kind is TypeKind.UNKNOWN

    def is_void(self) -> bool:
        return self.kind is TypeKind.VOID

    @staticmethod
    def from_name(name: str, allows_null: bool,
                  classpath: Optional[ClassPath] = None) -> "Type":
        """Map a declaration keyword or class name to its type."""
        keyword = name.lower()
        if keyword == "callable":
            return CallableType(allows_null)
        if keyword == "iterable":
            return IterableType(allows_null)
        if keyword == "null":
            return NullType()
        if keyword == "object":
            return GenericObjectType(allows_null)
        if keyword == "unknown type":
            return UnknownType()
        if keyword == "mixed":
            return MixedType()
        if keyword == "void":
            return VoidType()
        if keyword in SIMPLE_TYPE_NAMES:
            return SimpleType(name, allows_null)
        return ObjectType(
            TypeName.from_qualified_name(name),
            allows_null,
            classpath or default_classpath(),
        )

    @staticmethod
    def from_value(value: Any, allows_null: bool,
                   classpath: Optional[ClassPath] = None) -> "Type":
        """Map a live Python value to the type it is an instance of."""
        if value is None:
            return NullType()
        if isinstance(value, _FUNCTION_TYPES):
            return CallableType(allows_null)
        if isinstance(value, bool):
            return SimpleType("bool", allows_null, value)
        if isinstance(value, int):
            return SimpleType("int", allows_null, value)
        if isinstance(value, float):
            return SimpleType("float", allows_null, value)
        if isinstance(value, (str, bytes)):
            return SimpleType("string", allows_null, value)
        if isinstance(value, (list, tuple, dict, set, frozenset)):
            return SimpleType("array", allows_null, value)
        return ObjectType(
            TypeName.from_class(type(value)),
            allows_null,
            classpath or default_classpath(),
        )


_FUNCTION_TYPES = (
    pytypes.FunctionType,
    pytypes.BuiltinFunctionType,
    pytypes.MethodType,
    functools.partial,
)

SIMPLE_TYPE_NAMES = {
    "[]", "array", "bool", "boolean", "double", "float", "int", "integer",
    "real", "resource", "resource (closed)", "string",
}

_NORMALIZED_NAMES = {
    "boolean": "bool",
    "real": "float",
    "double": "float",
    "integer": "int",
    "[]": "array",
}

REPRESENTATIVE_VALUES = {
    "array": (),
    "bool": False,
    "float": 0.0,
    "int": 0,
    "string": "",
}


def is_native_iterable(value: Any) -> bool:
    """Check if value is an iterable container (strings do not count)."""
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, collections.abc.Iterable)


def _frozen_value(value: Any) -> Any:
    """Copy a mutable container into its immutable counterpart."""
    if isinstance(value, dict):
        return tuple(value.items())
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, set):
        return frozenset(value)
    return value


@dataclass(frozen=True)
class NullType(Type):
    """The null type."""
    kind = TypeKind.NULL
    name = "null"

    def is_assignable(self, other: Type) -> bool:
        return other.is_null()

    def allows_null(self) -> bool:
        return True

    def as_string(self) -> str:
        return "null"


@dataclass(frozen=True)
class MixedType(Type):
    """Any value, including null."""
    kind = TypeKind.MIXED
    name = "mixed"

    def is_assignable(self, other: Type) -> bool:
        return not other.is_void()

    def allows_null(self) -> bool:
        return True

    def as_string(self) -> str:
        return "mixed"


@dataclass(frozen=True)
class VoidType(Type):
    """No return value."""
    kind = TypeKind.VOID
    name = "void"

    def is_assignable(self, other: Type) -> bool:
        return other.is_void()

    def allows_null(self) -> bool:
        return False


@dataclass(frozen=True)
class UnknownType(Type):
    """No declared type at all."""
    kind = TypeKind.UNKNOWN
    name = "unknown type"

    def is_assignable(self, other: Type) -> bool:
        return True

    def allows_null(self) -> bool:
        return True

    def as_string(self) -> str:
        return self.name


@dataclass(frozen=True)
class SimpleType(Type):
    """A scalar or array type known by name, carrying an example value."""
    kind = TypeKind.SIMPLE
    name: str
    nullable: bool = False
    value: Any = field(default=None, compare=False)

    def __post_init__(self):
        name = self.name.lower()
        name = _NORMALIZED_NAMES.get(name, name)
        object.__setattr__(self, "name", name)
        if self.value is None:
            object.__setattr__(self, "value", REPRESENTATIVE_VALUES.get(name))
        else:
            object.__setattr__(self, "value", _frozen_value(self.value))

    def is_assignable(self, other: Type) -> bool:
        if self.nullable and other.is_null():
            return True
        if other.is_simple():
            return self.name == other.name
        return False

    def allows_null(self) -> bool:
        return self.nullable


@dataclass(frozen=True)
class IterableType(Type):
    """Arrays and any class implementing iteration."""
    kind = TypeKind.ITERABLE
    name = "iterable"
    nullable: bool = False

    def is_assignable(self, other: Type) -> bool:
        if self.nullable and other.is_null():
            return True
        if other.is_iterable():
            return True
        if other.is_simple():
            return is_native_iterable(other.value)
        if other.is_object():
            return other.classpath.is_iterable(other.class_name.qualified_name())
        return False

    def allows_null(self) -> bool:
        return self.nullable


@dataclass(frozen=True)
class CallableType(Type):
    """Anything that can be called."""
    kind = TypeKind.CALLABLE
    name = "callable"
    nullable: bool = False

    def is_assignable(self, other: Type) -> bool:
        if self.nullable and other.is_null():
            return True
        if other.is_callable():
            return True
        if other.is_object():
            return other.classpath.is_invokable(other.class_name.qualified_name())
        if other.is_simple():
            return callable(other.value)
        return False

    def allows_null(self) -> bool:
        return self.nullable


@dataclass(frozen=True)
class GenericObjectType(Type):
    """The object declaration: an instance of any class."""
    kind = TypeKind.GENERIC_OBJECT
    name = "object"
    nullable: bool = False

    def is_assignable(self, other: Type) -> bool:
        if self.nullable and other.is_null():
            return True
        return other.is_object() or other.is_generic_object()

    def allows_null(self) -> bool:
        return self.nullable


@dataclass(frozen=True)
class ObjectType(Type):
    """An instance of a named class or interface."""
    kind = TypeKind.OBJECT
    class_name: TypeName
    nullable: bool = False
    classpath: ClassPath = field(default_factory=default_classpath, compare=False, repr=False)

    @property
    def name(self) -> str:
        return self.class_name.qualified_name()

    def is_assignable(self, other: Type) -> bool:
        if self.nullable and other.is_null():
            return True
        if other.is_object():
            if self.name == other.name:
                return True
            return other.classpath.is_subclass(other.name, self.name)
        return False

    def allows_null(self) -> bool:
        return self.nullable


@dataclass(frozen=True, init=False)
class UnionType(Type):
    """One of several member types."""
    kind = TypeKind.UNION
    types: tuple[Type, ...]

    def __init__(self, *types: Type):
        _ensure_minimum_of_two_types(types)
        _ensure_only_valid_types(types)
        object.__setattr__(self, "types", tuple(types))

    @property
    def name(self) -> str:
        return self.as_string()

    def is_assignable(self, other: Type) -> bool:
        return any(member.is_assignable(other) for member in self.types)

    def allows_null(self) -> bool:
        return any(member.is_null() for member in self.types)

    def as_string(self) -> str:
        return "|".join(sorted(member.as_string() for member in self.types))

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["types"] = [member.to_dict() for member in self.types]
        return result


def _ensure_minimum_of_two_types(types: tuple[Type, ...]):
    if len(types) < 2:
        raise UnionConstructionError(
            "A union type must be composed of at least two types"
        )


def _ensure_only_valid_types(types: tuple[Type, ...]):
    for member in types:
        if member.is_unknown():
            raise UnionConstructionError(
                "A union type must not be composed of an unknown type"
            )
        if member.is_void():
            raise UnionConstructionError(
                "A union type must not be composed of a void type"
            )
