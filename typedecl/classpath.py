"""
Class lookup used by object, iterable and callable assignability.

The type algebra never imports or reflects on classes itself; every question
about a named class goes through a ClassPath.
"""

import builtins
import collections.abc
import importlib
import inspect
import json
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .errors import UnresolvableClassError


@dataclass(frozen=True)
class ClassInfo:
    """Resolved class or interface information."""
    name: str
    super_class: Optional[str] = None
    interfaces: tuple[str, ...] = ()
    is_interface: bool = False
    iterable: bool = False  # implements iteration itself
    invokable: bool = False  # instances can be called


class ClassPath(ABC):
    """Looks up classes by qualified name."""

    @abstractmethod
    def find_class(self, class_name: str) -> Optional[ClassInfo]:
        """Find a class by name, or None if it is not on the class path."""
        pass

    def require_class(self, class_name: str) -> ClassInfo:
        info = self.find_class(class_name)
        if info is None:
            raise UnresolvableClassError(class_name)
        return info

    def ancestors(self, class_name: str) -> Iterator[ClassInfo]:
        """Yield the class itself, then every super class and interface."""
        seen = {class_name}
        queue = deque([class_name])
        while queue:
            info = self.require_class(queue.popleft())
            yield info
            parents = ((info.super_class,) if info.super_class else ()) + info.interfaces
            for parent in parents:
                if parent not in seen:
                    seen.add(parent)
                    queue.append(parent)

    def is_subclass(self, class_name: str, parent_name: str) -> bool:
        """Check if class_name extends or implements parent_name."""
        self.require_class(parent_name)
        if class_name == parent_name:
            return False
        return any(info.name == parent_name for info in self.ancestors(class_name))

    def is_iterable(self, class_name: str) -> bool:
        return any(info.iterable for info in self.ancestors(class_name))

    def is_invokable(self, class_name: str) -> bool:
        return any(info.invokable for info in self.ancestors(class_name))


class MappingClassPath(ClassPath):
    """An in-memory table of declared classes."""

    def __init__(self, classes=()):
        self._classes: dict[str, ClassInfo] = {}
        for info in classes:
            self.add(info)

    def add(self, info: ClassInfo):
        self._classes[info.name] = info

    def find_class(self, class_name: str) -> Optional[ClassInfo]:
        return self._classes.get(class_name)

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    @classmethod
    def from_dict(cls, data: dict) -> "MappingClassPath":
        """Build from {"classes": [{"name": ..., "extends": ..., ...}]}."""
        if not isinstance(data, dict):
            raise ValueError(f"Class table must be an object, got {data!r}")
        classes = []
        for entry in data.get("classes", ()):
            if not isinstance(entry, dict):
                raise ValueError(f"Class entry must be an object: {entry!r}")
            if "name" not in entry:
                raise ValueError(f"Class entry without a name: {entry!r}")
            classes.append(ClassInfo(
                name=entry["name"],
                super_class=entry.get("extends"),
                interfaces=tuple(entry.get("implements", ())),
                is_interface=bool(entry.get("interface", False)),
                iterable=bool(entry.get("iterable", False)),
                invokable=bool(entry.get("invokable", False)),
            ))
        return cls(classes)

    @classmethod
    def from_json(cls, path: str | Path) -> "MappingClassPath":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


class ImportClassPath(ClassPath):
    """Resolves dotted names against importable Python modules."""

    def __init__(self):
        self._cache: dict[str, type] = {}

    def _load(self, class_name: str) -> Optional[type]:
        if class_name in self._cache:
            return self._cache[class_name]

        parts = class_name.split(".")
        obj = None
        if len(parts) == 1:
            obj = getattr(builtins, class_name, None)
        else:
            # Longest importable module prefix, then attribute access
            for i in range(len(parts) - 1, 0, -1):
                try:
                    obj = importlib.import_module(".".join(parts[:i]))
                except ImportError:
                    continue
                for attr in parts[i:]:
                    obj = getattr(obj, attr, None)
                    if obj is None:
                        break
                break

        if not isinstance(obj, type):
            return None
        self._cache[class_name] = obj
        return obj

    def require_type(self, class_name: str) -> type:
        klass = self._load(class_name)
        if klass is None:
            raise UnresolvableClassError(class_name)
        return klass

    def find_class(self, class_name: str) -> Optional[ClassInfo]:
        klass = self._load(class_name)
        if klass is None:
            return None
        bases = [_qualified_name(base) for base in klass.__bases__]
        return ClassInfo(
            name=class_name,
            super_class=bases[0] if bases else None,
            interfaces=tuple(bases[1:]),
            is_interface=inspect.isabstract(klass),
            iterable=issubclass(klass, collections.abc.Iterable),
            invokable=_has_call(klass),
        )

    def is_subclass(self, class_name: str, parent_name: str) -> bool:
        klass = self.require_type(class_name)
        parent = self.require_type(parent_name)
        return klass is not parent and issubclass(klass, parent)

    def is_iterable(self, class_name: str) -> bool:
        return issubclass(self.require_type(class_name), collections.abc.Iterable)

    def is_invokable(self, class_name: str) -> bool:
        return _has_call(self.require_type(class_name))


def _qualified_name(klass: type) -> str:
    if klass.__module__ == "builtins":
        return klass.__qualname__
    return f"{klass.__module__}.{klass.__qualname__}"


def _has_call(klass: type) -> bool:
    return any("__call__" in vars(k) for k in klass.__mro__)


_DEFAULT_CLASSPATH = ImportClassPath()


def default_classpath() -> ClassPath:
    """The class path used when none is injected."""
    return _DEFAULT_CLASSPATH
