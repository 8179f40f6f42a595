"""Shared fixtures for the typedecl tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from typedecl.classpath import ClassInfo, MappingClassPath


@pytest.fixture
def classpath():
    return MappingClassPath([
        ClassInfo("Traversable", is_interface=True, iterable=True),
        ClassInfo("app.Collection", interfaces=("Traversable",)),
        ClassInfo("app.TypedCollection", super_class="app.Collection"),
        ClassInfo("app.User"),
        ClassInfo("app.Admin", super_class="app.User"),
        ClassInfo("app.Handler", invokable=True),
        ClassInfo("app.AdminHandler", super_class="app.Admin", interfaces=("app.Handler",)),
        ClassInfo("app.Broken", super_class="app.Missing"),
    ])
