"""typedecl - declared types, assignability and declaration rendering."""

from .errors import (
    TypeDeclError,
    UnionConstructionError,
    InvalidTypeNameError,
    UnresolvableClassError,
    DeclarationSyntaxError,
)
from .names import TypeName
from .classpath import (
    ClassInfo,
    ClassPath,
    MappingClassPath,
    ImportClassPath,
    default_classpath,
)
from .types import (
    TypeKind,
    Type,
    NullType,
    MixedType,
    VoidType,
    UnknownType,
    SimpleType,
    IterableType,
    CallableType,
    GenericObjectType,
    ObjectType,
    UnionType,
)
from .parser import DeclarationParser

__version__ = "0.1.0"
__all__ = [
    'TypeDeclError',
    'UnionConstructionError',
    'InvalidTypeNameError',
    'UnresolvableClassError',
    'DeclarationSyntaxError',
    'TypeName',
    'ClassInfo',
    'ClassPath',
    'MappingClassPath',
    'ImportClassPath',
    'default_classpath',
    'TypeKind',
    'Type',
    'NullType',
    'MixedType',
    'VoidType',
    'UnknownType',
    'SimpleType',
    'IterableType',
    'CallableType',
    'GenericObjectType',
    'ObjectType',
    'UnionType',
    'DeclarationParser',
]
