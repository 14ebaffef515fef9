from filecheck.db import ERROR_DIGEST, Added, Modified, Moved, Removed, Renamed
from filecheck.diff import build_digest_index, diff_inventories
from filecheck.indexer import Inventory

H1 = "a" * 64
H2 = "b" * 64
H3 = "c" * 64
H4 = "d" * 64


def diff(old: dict, new: dict):
    return diff_inventories(Inventory(old), Inventory(new))


def test_identical_inventories_have_no_changes():
    inventory = {"a/x.txt": H1, "b/y.txt": H2, "z.bin": H3}

    assert diff(inventory, dict(inventory)) == []


def test_move_same_name_different_directory():
    assert diff({"a/x.txt": H1}, {"b/x.txt": H1}) == [
        Moved(old_path="a/x.txt", new_path="b/x.txt", hash=H1)
    ]


def test_rename_different_name():
    assert diff({"a/x.txt": H1}, {"a/y.txt": H1}) == [
        Renamed(old_name="a/x.txt", new_name="a/y.txt", hash=H1)
    ]


def test_rename_across_directories():
    assert diff({"a/x.txt": H1}, {"b/y.txt": H1}) == [
        Renamed(old_name="a/x.txt", new_name="b/y.txt", hash=H1)
    ]


def test_modified_carries_both_hashes():
    assert diff({"f.txt": H1}, {"f.txt": H2}) == [
        Modified(filename="f.txt", old_hash=H1, new_hash=H2)
    ]


def test_added():
    assert diff({}, {"n.txt": H1}) == [Added(filename="n.txt", hash=H1)]


def test_removed():
    assert diff({"n.txt": H1}, {}) == [Removed(filename="n.txt", hash=H1)]


def test_phase_order():
    old = {"a/x.txt": H1, "f.txt": H2, "gone.txt": H4}
    new = {"b/x.txt": H1, "f.txt": H3, "new.txt": "e" * 64}

    changes = diff(old, new)

    assert [type(c) for c in changes] == [Moved, Modified, Added, Removed]


def test_within_phase_order_follows_inventory_order():
    changes = diff({"b": H1, "a": H2}, {"d": H3, "c": H4})

    assert changes == [
        Added(filename="d", hash=H3),
        Added(filename="c", hash=H4),
        Removed(filename="b", hash=H1),
        Removed(filename="a", hash=H2),
    ]


def test_move_takes_priority_and_paths_are_not_double_counted():
    # f.txt now holds the content a/x.txt used to have, so content wins
    old = {"a/x.txt": H1, "f.txt": H2}
    new = {"b/x.txt": H1, "f.txt": H1}

    changes = diff(old, new)

    assert changes == [
        Renamed(old_name="a/x.txt", new_name="f.txt", hash=H1),
        Added(filename="b/x.txt", hash=H1),
    ]
    mentioned = []
    for change in changes:
        mentioned.extend(v for k, v in change.to_dict().items() if k in (
            "old_path", "new_path", "old_name", "new_name", "filename"))
    assert len(mentioned) == len(set(mentioned))


def test_move_and_unrelated_modification():
    changes = diff({"a/x.txt": H1, "f.txt": H2}, {"b/x.txt": H1, "f.txt": H3})

    assert changes == [
        Moved(old_path="a/x.txt", new_path="b/x.txt", hash=H1),
        Modified(filename="f.txt", old_hash=H2, new_hash=H3),
    ]


def test_duplicate_digests_only_pair_last_paths():
    # Only the last path per digest is indexed; the other copy falls
    # through and is reported as a removal instead of a move.
    old = {"a/x.txt": H1, "a/copy.txt": H1}
    new = {"b/x.txt": H1}

    changes = diff(old, new)

    assert changes == [
        Renamed(old_name="a/copy.txt", new_name="b/x.txt", hash=H1),
        Removed(filename="a/x.txt", hash=H1),
    ]


def test_new_duplicate_hides_unchanged_original():
    # The new copy is indexed over the untouched original, which is paired
    # with it as a rename; the original path is then considered processed.
    changes = diff({"a.txt": H1}, {"a.txt": H1, "b.txt": H1})

    assert changes == [Renamed(old_name="a.txt", new_name="b.txt", hash=H1)]


def test_build_digest_index_last_write_wins():
    index = build_digest_index(Inventory({"x": H1, "y": H1, "z": H2}))

    assert index == {H1: "y", H2: "z"}


def test_error_sentinel_is_not_matched_as_content():
    changes = diff({"a.txt": ERROR_DIGEST}, {"b.txt": ERROR_DIGEST})

    assert changes == [
        Added(filename="b.txt", hash=ERROR_DIGEST),
        Removed(filename="a.txt", hash=ERROR_DIGEST),
    ]


def test_unreadable_file_reported_as_modified():
    assert diff({"a.txt": H1}, {"a.txt": ERROR_DIGEST}) == [
        Modified(filename="a.txt", old_hash=H1, new_hash=ERROR_DIGEST)
    ]


def test_does_not_mutate_inputs():
    old = Inventory({"a/x.txt": H1})
    new = Inventory({"b/x.txt": H1})

    diff_inventories(old, new)

    assert old.to_dict() == {"a/x.txt": H1}
    assert new.to_dict() == {"b/x.txt": H1}
