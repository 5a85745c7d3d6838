"""Cache of user names keyed by uid."""

from __future__ import annotations

from collections.abc import Callable, Iterator


def _passwd_lookup(uid: int) -> str | None:
    import pwd

    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


class UsersTable:
    """Looks up user names and remembers the ones it found."""

    def __init__(self, lookup: Callable[[int], str | None] | None = None) -> None:
        self._lookup = lookup or _passwd_lookup
        self._users: dict[int, str] = {}

    def get_ref(self, uid: int) -> str | None:
        """Name of ``uid``, or ``None`` if the system does not know it."""
        name = self._users.get(uid)
        if name is None:
            name = self._lookup(uid)
            if name is not None:
                self._users[uid] = name
        return name

    def items(self) -> Iterator[tuple[int, str]]:
        """The cached (uid, name) pairs."""
        return iter(list(self._users.items()))