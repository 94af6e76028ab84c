"""Example record types: a company of teams of people."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Person(BaseModel):
    """A person; name is required."""
    name: str = ""


class Team(BaseModel):
    """A team. Name and manager are optional; members are repeated."""
    name: str | None = None
    manager: Person | None = None
    members: list[Person] = Field(default_factory=list)


class Company(BaseModel):
    """A company. Name is required; teams are repeated."""
    name: str = ""
    teams: list[Team] = Field(default_factory=list)


def sample_company() -> Company:
    """The three-team company used throughout the examples and tests."""
    return Company(
        name="Test Company",
        teams=[
            Team(
                name="The Three Stooges",
                members=[Person(name="Curly"), Person(name="Larry"), Person(name="Moe")],
            ),
            Team(
                name="The X-Men Lite",
                manager=Person(name="Prof. X"),
                members=[Person(name="Colossus"), Person(name="Wolverine")],
            ),
            # No name, no manager.
            Team(members=[Person(name="Lone Wolf McQuade")]),
        ],
    )
