from collections.abc import Callable, Sequence

from users.domain.entities import USER_FIELDS

Lookup = Callable[[str], str | None]


def collect_clauses(
    lookup: Lookup, allowed: Sequence[str] = USER_FIELDS
) -> list[tuple[str, str]]:
    """Pair every allow-listed field with its supplied value.

    Fields outside ``allowed`` are never asked for, and a blank value counts as
    not supplied. The result keeps the allow-list order; the repository turns
    each pair into a bound ``column = :value`` fragment, joined with AND for a
    filter or with commas for an update.
    """
    clauses = []
    for name in allowed:
        value = lookup(name)
        if value:
            clauses.append((name, value))
    return clauses
