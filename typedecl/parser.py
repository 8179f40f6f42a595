"""
Type declaration parser using Lark.

Turns declaration strings such as "?int" or "app.Foo|string|null" back into
Type values.
"""

from pathlib import Path
from typing import Optional

from lark import Lark, Transformer
from lark.exceptions import LarkError, VisitError

from .classpath import ClassPath, default_classpath
from .errors import DeclarationSyntaxError
from .types import Type, UnionType


GRAMMAR_FILE = Path(__file__).parent / "declaration.lark"

# Keywords that carry their own nullability and reject the ? marker
_NOT_NULLABLE = {"void", "mixed", "null"}


class DeclarationTransformer(Transformer):
    """Transforms the Lark parse tree into Type values."""

    def __init__(self, classpath: ClassPath):
        super().__init__()
        self.classpath = classpath

    def start(self, items):
        return items[0]

    def union(self, items):
        return UnionType(*items)

    def nullable(self, items):
        name = str(items[0])
        if name.lower() in _NOT_NULLABLE:
            raise DeclarationSyntaxError(f"{name} cannot be marked nullable")
        return Type.from_name(name, True, self.classpath)

    def named(self, items):
        return Type.from_name(str(items[0]), False, self.classpath)


class DeclarationParser:
    """Main parser class for type declarations."""

    def __init__(self, classpath: Optional[ClassPath] = None):
        with open(GRAMMAR_FILE, "r") as f:
            grammar = f.read()

        self._parser = Lark(grammar, parser="lalr")
        self._transformer = DeclarationTransformer(classpath or default_classpath())

    def parse(self, source: str) -> Type:
        """Parse a declaration and return its Type."""
        source = source.strip()
        if source.startswith(":"):
            source = source[1:]
        try:
            tree = self._parser.parse(source)
        except LarkError as e:
            raise DeclarationSyntaxError(f"Invalid type declaration {source!r}: {e}") from e
        try:
            return self._transformer.transform(tree)
        except VisitError as e:
            raise e.orig_exc from e
