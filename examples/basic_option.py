"""
Basic options: construction, chaining, fallbacks, JSON and instrumentation.

Run: python examples/basic_option.py
"""
from optionpy import (
    Some,
    NONE,
    from_nullable,
    ConsoleLogger,
    instrument,
    dumps,
)


USERS = {1: {"name": "ada", "nick": None}, 2: {"name": "grace", "nick": "amazing"}}


def find_user(uid: int):
    return from_nullable(USERS.get(uid))


def main():
    log = ConsoleLogger("example", level="DEBUG")

    # Chain lookups: a missing user and a missing nick both end up as NONE
    for uid in (1, 2, 3):
        nick = instrument("nick", find_user(uid).and_then(lambda u: from_nullable(u["nick"])), log, tags={"uid": str(uid)})
        print(uid, nick, nick.map(str.upper).unwrap_or("<no nick>"))

    # Set-like combination
    print(Some(1) | NONE, NONE ^ Some(2), Some(1) & Some("x"))

    # Serialize with options flattened to their values
    print(dumps({uid: find_user(uid).map(lambda u: u["name"]) for uid in (1, 3)}))


if __name__ == "__main__":
    main()
