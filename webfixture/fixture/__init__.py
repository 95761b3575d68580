"""
Fixture surface: the per-fixture form context and the name-based fixture.
"""

from .form_context import FormContext
from .web_fixture import GenericWebFixture, LayoutMap

__all__ = [
    "FormContext",
    "GenericWebFixture",
    "LayoutMap",
]
