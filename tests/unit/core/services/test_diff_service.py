from __future__ import annotations

"""
Unit tests for the Dependency Diff Service.

Verifies the text-in/text-out entry points end to end:
1. Full structural tree diff and its changes-only variant.
2. Self-diff symmetry (no '+'/'-' markers, every descendant shown).
3. Sibling canonicalization versus literal report order.
4. Flat listing idempotence and the flat diff report.
5. ParseError propagation.
"""

import pytest

from deptreediff import (
    ParseError,
    dependency_flat_changes,
    dependency_tree_diff,
    flat_dependencies,
    parse_forest,
)

# -----------------------------------------------------------------------------
# 1. Tree Diff
# -----------------------------------------------------------------------------

def test_tree_diff_of_realistic_reports(old_report, new_report):
    out = dependency_tree_diff(old_report, new_report)

    assert out.splitlines() == [
        r" +--- com.squareup.okhttp3:okhttp:4.9.0",
        r"-|    +--- com.squareup.okio:okio:2.8.0",
        r"+|    +--- com.squareup.okio:okio:2.8.0 -> 2.9.0",
        r" |    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
        r"++--- com.squareup.retrofit2:retrofit:2.9.0",
        r"+|    \--- com.squareup.okhttp3:okhttp:4.9.0 (*)",
        r" \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
    ]
    assert out.endswith("\n")


def test_tree_diff_changes_only(old_report, new_report):
    out = dependency_tree_diff(old_report, new_report, changes_only=True)

    assert out.splitlines() == [
        r" +--- com.squareup.okhttp3:okhttp:4.9.0",
        r"-|    \--- com.squareup.okio:okio:2.8.0",
        r"+|    \--- com.squareup.okio:okio:2.8.0 -> 2.9.0",
        r"+\--- com.squareup.retrofit2:retrofit:2.9.0",
        r"+     \--- com.squareup.okhttp3:okhttp:4.9.0 (*)",
    ]


def test_self_diff_is_fully_unchanged(old_report):
    out = dependency_tree_diff(old_report, old_report)
    lines = out.splitlines()

    assert len(lines) == 5
    assert all(line.startswith(" ") for line in lines)
    assert r" |    |    \--- org.jetbrains.kotlin:kotlin-stdlib:1.4.10" in lines


def test_self_diff_changes_only_is_empty(old_report):
    assert dependency_tree_diff(old_report, old_report, changes_only=True) == ""


def test_removed_sibling_next_to_unchanged_one():
    old = "\n".join([r"+--- com.foo:bar:1.0", r"\--- com.foo:baz:2.0"])
    new = r"\--- com.foo:bar:1.0"

    assert dependency_tree_diff(old, new).splitlines() == [
        r" +--- com.foo:bar:1.0",
        r"-\--- com.foo:baz:2.0",
    ]


def test_pivot_with_identical_children_renders_no_child_lines():
    old = "\n".join([r"\--- a:lib:1.0", r"     +--- x:dep:1", r"     \--- y:dep:1"])
    new = "\n".join([r"\--- a:lib:2.0", r"     +--- x:dep:1", r"     \--- y:dep:1"])

    assert dependency_tree_diff(old, new) == "-\\--- a:lib:1.0\n+\\--- a:lib:2.0\n"


def test_sibling_order_is_canonicalized():
    old = "\n".join([r"+--- b:lib:1", r"\--- a:lib:1"])
    new = "\n".join([r"+--- a:lib:1", r"\--- b:lib:1"])

    assert dependency_tree_diff(old, new) == " +--- a:lib:1\n \\--- b:lib:1\n"


def test_unsorted_input_without_canonicalization_follows_report_order():
    old = "\n".join([r"+--- b:lib:1", r"\--- a:lib:1"])
    new = "\n".join([r"+--- a:lib:1", r"\--- b:lib:1"])

    out = dependency_tree_diff(old, new, sort_siblings=False)

    assert "+" in {line[0] for line in out.splitlines()}
    assert "-" in {line[0] for line in out.splitlines()}


def test_parse_forest_builds_sorted_tree(new_report):
    forest = parse_forest(new_report)

    assert [node.coordinate for node in forest] == [
        "com.squareup.okhttp3:okhttp",
        "com.squareup.retrofit2:retrofit",
        "org.jetbrains.kotlin:kotlin-stdlib",
    ]
    assert forest[0].children[0].version == "2.8.0 -> 2.9.0"

# -----------------------------------------------------------------------------
# 2. Flat Views
# -----------------------------------------------------------------------------

def test_flat_dependencies_is_sorted_and_idempotent(new_report):
    first = flat_dependencies(new_report)

    assert first == flat_dependencies(new_report)
    assert first.splitlines() == sorted(first.splitlines())
    assert first == "\n".join([
        "com.squareup.okhttp3:okhttp:4.9.0",
        "com.squareup.okio:okio:2.9.0",
        "com.squareup.retrofit2:retrofit:2.9.0",
        "org.jetbrains.kotlin:kotlin-stdlib:1.4.10",
    ])


def test_flat_changes_of_realistic_reports(old_report, new_report):
    assert dependency_flat_changes(old_report, new_report) == (
        "VERSION CHANGE\n"
        "\n"
        "com.squareup.okio:okio:2.8.0 -> 2.9.0\n"
        "\n"
        "NEW LIBRARIES\n"
        "\n"
        "com.squareup.retrofit2:retrofit:2.9.0\n"
        "\n"
    )


def test_flat_changes_reverse_direction(old_report, new_report):
    out = dependency_flat_changes(new_report, old_report)

    assert "com.squareup.okio:okio:2.9.0 -> 2.8.0" in out
    assert "REMOVED LIBRARIES\n\ncom.squareup.retrofit2:retrofit:2.9.0\n" in out
    assert "NEW LIBRARIES" not in out

# -----------------------------------------------------------------------------
# 3. Error Propagation
# -----------------------------------------------------------------------------

def test_parse_error_propagates_from_tree_diff(old_report):
    broken = "\n".join([r"+--- a:lib:1.0", "not an entry"])

    with pytest.raises(ParseError) as exc_info:
        dependency_tree_diff(old_report, broken)

    assert exc_info.value.line == "not an entry"
