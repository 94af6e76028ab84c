"""
Company pipelines example.

This example shows:
1. Read-only pipelines built by chaining accessor filters
2. Sums of filters (managers and members) and where ordering comes from
3. A read-write pipeline that renames people in place
4. Forked filters pairing managers with their members
5. Tracing an effect run
"""

import logging

from plumb import Consumer, Pointer, RunConfig, Trace, ffork, fuse, read_only, read_only_tuple, read_write
from plumb.starter import Company, Person, Team, default_registry, sample_company


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    company = sample_company()
    registry = default_registry()
    c, t, p = registry[Company], registry[Team], registry[Person]

    # =========================================================================
    # Example 1: team names (the unnamed team is skipped)
    # =========================================================================
    read_only(c.teams.into(t.name))(company)(print)

    # =========================================================================
    # Example 2: managers and members, team by team
    # =========================================================================
    everyone = c.teams.into(t.manager + t.members).into(p.name)
    print(read_only(everyone)(company).collect())

    # Distributing over the teams instead lists every manager first.
    managers_first = c.teams.into(t.manager).into(p.name) + c.teams.into(t.members).into(p.name)
    print(read_only(managers_first)(company).collect())

    # =========================================================================
    # Example 3: unmask the X-Men in place
    # =========================================================================
    unmasked = {
        "Prof. X": "Charles Xavier",
        "Colossus": "Piotr Rasputin",
        "Wolverine": "James 'Logan' Howlett",
    }

    def unmask(name: Pointer[str]) -> None:
        name.set(unmasked.get(name.get(), name.get()))

    read_write(everyone)(Pointer.root(company))(unmask)
    print(read_only(everyone)(company).collect())

    # =========================================================================
    # Example 4: managed members
    # =========================================================================
    managed = c.teams.into(ffork(t.manager.into(p.name), t.members.into(p.name)))
    read_only_tuple(managed)(company)(
        Consumer.unpacked(lambda manager, member: print(f"{member} reports to {manager}"))
    )

    # =========================================================================
    # Example 5: traced run
    # =========================================================================
    trace = Trace()
    fuse(read_only(everyone)(company), lambda _name: None).run(RunConfig(trace=trace))
    for event in trace.get_events():
        print(event.action, event.info, event.duration_ms)


if __name__ == "__main__":
    main()
