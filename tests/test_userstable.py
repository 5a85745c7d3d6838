from topview.userstable import UsersTable


class _Lookup:
    def __init__(self, names):
        self.names = names
        self.calls = []

    def __call__(self, uid):
        self.calls.append(uid)
        return self.names.get(uid)


def test_get_ref_returns_known_name():
    table = UsersTable(_Lookup({1000: "alice"}))
    assert table.get_ref(1000) == "alice"


def test_get_ref_caches():
    lookup = _Lookup({1000: "alice"})
    table = UsersTable(lookup)
    table.get_ref(1000)
    table.get_ref(1000)
    assert lookup.calls == [1000]


def test_unknown_uid_returns_none_and_is_retried():
    lookup = _Lookup({})
    table = UsersTable(lookup)
    assert table.get_ref(4242) is None
    assert table.get_ref(4242) is None
    assert lookup.calls == [4242, 4242]


def test_items_lists_cached_users():
    table = UsersTable(_Lookup({0: "root", 1000: "alice"}))
    table.get_ref(0)
    table.get_ref(1000)
    table.get_ref(77)
    assert dict(table.items()) == {0: "root", 1000: "alice"}