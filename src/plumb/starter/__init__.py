"""Worked example - company, team and person records with accessor tables."""

from plumb.starter.accessors import (
    AccessorRegistry,
    CompanyAccessors,
    PersonAccessors,
    TeamAccessors,
    default_registry,
)
from plumb.starter.records import Company, Person, Team, sample_company

__all__ = [
    "Company",
    "Team",
    "Person",
    "sample_company",
    "CompanyAccessors",
    "TeamAccessors",
    "PersonAccessors",
    "AccessorRegistry",
    "default_registry",
]
