from __future__ import annotations

"""
Unit tests for the Tree Diff Renderer.

Verifies marker column, branch glyph selection and the connecting-line
indentation derived from ancestors' last-sibling flags.
"""

from deptreediff.core.rendering.tree_renderer import render_diff_events
from deptreediff.domain.dependency_models import DependencyNode, DiffEvent


def event(marker: str, token: str, depth: int, last: bool) -> DiffEvent:
    coordinate, _, version = token.rpartition(":")
    return DiffEvent(marker, DependencyNode(coordinate, version), depth, last)


def test_single_line_uses_marker_and_branch_glyph():
    out = render_diff_events([event("+", "a:lib:1.0", 0, False)])

    assert out == "++--- a:lib:1.0\n"


def test_last_sibling_uses_backslash_glyph():
    out = render_diff_events([event("-", "a:lib:1.0", 0, True)])

    assert out == "-\\--- a:lib:1.0\n"


def test_unchanged_lines_keep_a_space_marker():
    out = render_diff_events([event(" ", "a:lib:1.0", 0, True)])

    assert out.startswith(" \\--- ")


def test_children_of_non_last_parent_get_continuation_bar():
    out = render_diff_events([
        event(" ", "p:lib:1", 0, False),
        event("+", "c:lib:1", 1, False),
        event("+", "g:lib:1", 2, True),
        event("-", "d:lib:1", 1, True),
        event(" ", "q:lib:1", 0, True),
        event("+", "e:lib:1", 1, True),
    ])

    assert out.splitlines() == [
        r" +--- p:lib:1",
        r"+|    +--- c:lib:1",
        r"+|    |    \--- g:lib:1",
        r"-|    \--- d:lib:1",
        r" \--- q:lib:1",
        r"+     \--- e:lib:1",
    ]


def test_no_events_render_empty_text():
    assert render_diff_events([]) == ""
