"""
Errors raised by the type algebra.
"""


class TypeDeclError(Exception):
    """Base class for all typedecl errors."""
    pass


class UnionConstructionError(TypeDeclError):
    """A union type was built from an invalid member list."""
    pass


class InvalidTypeNameError(TypeDeclError):
    """A class name could not be turned into a TypeName."""
    pass


class UnresolvableClassError(TypeDeclError):
    """A class named by an object type cannot be found on the class path."""

    def __init__(self, class_name: str):
        super().__init__(f"Class not found on class path: {class_name}")
        self.class_name = class_name


class DeclarationSyntaxError(TypeDeclError):
    """A type declaration string could not be parsed."""
    pass
