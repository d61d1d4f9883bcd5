"""Test factories for generating request payloads.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectCreateFactory, ...
"""

from tests.factories.base import BaseFactory, unique_suffix
from tests.factories.project import ProjectCreateFactory
from tests.factories.time_block import TimeBlockCreateFactory

__all__ = [
    "BaseFactory",
    "unique_suffix",
    "ProjectCreateFactory",
    "TimeBlockCreateFactory",
]
