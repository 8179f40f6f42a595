"""
Qualified class names used by object types.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidTypeNameError


@dataclass(frozen=True)
class TypeName:
    """A class or interface name split into namespace and simple name."""
    namespace_name: Optional[str]
    simple_name: str

    def __post_init__(self):
        if not self.simple_name:
            raise InvalidTypeNameError("A type name must not be empty")

    @classmethod
    def from_qualified_name(cls, name: str) -> "TypeName":
        """Build from a dotted name: app.models.User -> (app.models, User)."""
        name = name.lstrip(".")
        if not name:
            raise InvalidTypeNameError("A type name must not be empty")
        namespace, _, simple = name.rpartition(".")
        return cls(namespace or None, simple)

    @classmethod
    def from_class(cls, klass: type) -> "TypeName":
        """Build the name of a live Python class."""
        module = klass.__module__
        if module == "builtins":
            return cls(None, klass.__qualname__)
        return cls.from_qualified_name(f"{module}.{klass.__qualname__}")

    def qualified_name(self) -> str:
        if self.namespace_name is None:
            return self.simple_name
        return f"{self.namespace_name}.{self.simple_name}"

    def is_namespaced(self) -> bool:
        return self.namespace_name is not None

    def __str__(self) -> str:
        return self.qualified_name()
