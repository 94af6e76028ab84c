"""Accessor tables for the example records.

A schema compiler would generate these tables from the record definitions;
they are written by hand here to show the pattern. Each table is built once
and held by an AccessorRegistry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plumb.kernel.errors import RegistryError
from plumb.rw import RWFilter, attr_field
from plumb.starter.records import Company, Person, Team


@dataclass(frozen=True)
class PersonAccessors:
    """Accessors for Person."""
    name: RWFilter[Person, str]

    @classmethod
    def build(cls) -> PersonAccessors:
        return cls(name=attr_field("name").required())


@dataclass(frozen=True)
class TeamAccessors:
    """Accessors for Team.

    Attributes:
        manager: The team's manager, if it has one.
        members: Each member, in order.
        members_coll: The members list itself.
        name: The team's name, if it has one.
    """
    manager: RWFilter[Team, Person]
    members: RWFilter[Team, Person]
    members_coll: RWFilter[Team, list[Person]]
    name: RWFilter[Team, str]

    @classmethod
    def build(cls) -> TeamAccessors:
        members = attr_field("members")
        return cls(
            manager=attr_field("manager").optional(),
            members=members.repeated(),
            members_coll=members.required(),
            name=attr_field("name").optional(),
        )


@dataclass(frozen=True)
class CompanyAccessors:
    """Accessors for Company."""
    name: RWFilter[Company, str]
    teams: RWFilter[Company, Team]
    teams_coll: RWFilter[Company, list[Team]]

    @classmethod
    def build(cls) -> CompanyAccessors:
        teams = attr_field("teams")
        return cls(
            name=attr_field("name").required(),
            teams=teams.repeated(),
            teams_coll=teams.required(),
        )


class AccessorRegistry:
    """Registry for looking up accessor tables by record type.

    Attributes:
        _tables: Internal mapping of record types to accessor tables.
    """

    def __init__(self, tables: dict[type, Any] | None = None) -> None:
        self._tables = dict(tables or {})

    def register(self, record_type: type, table: Any) -> None:
        """Register (or replace) the accessor table for a record type."""
        self._tables[record_type] = table

    def get(self, record_type: type) -> Any:
        """Get the accessor table for a record type."""
        if record_type not in self._tables:
            raise RegistryError(record_type)
        return self._tables[record_type]

    def for_record(self, record: Any) -> Any:
        """Get the accessor table for a record's type."""
        return self.get(type(record))

    def __getitem__(self, record_type: type) -> Any:
        return self.get(record_type)

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._tables


def default_registry() -> AccessorRegistry:
    """Create a registry holding the Company, Team and Person tables."""
    registry = AccessorRegistry()
    registry.register(Company, CompanyAccessors.build())
    registry.register(Team, TeamAccessors.build())
    registry.register(Person, PersonAccessors.build())
    return registry
