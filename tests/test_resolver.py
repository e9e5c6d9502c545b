"""Tests for iconfind.core.resolver."""

from __future__ import annotations

import logging

from conftest import touch

from iconfind.config.lookup_config import LookupConfig
from iconfind.core.resolver import resolve_best_icon, resolve_icon
from iconfind.themes.models import DirectoryType, Theme, ThemeDirectory

FIXED_16 = ThemeDirectory(name="16x16", size=16, type=DirectoryType.FIXED)
FIXED_48 = ThemeDirectory(name="48x48", size=48, type=DirectoryType.FIXED)


class TestResolveIcon:
    def test_own_theme_first(self, roots, config):
        parent = Theme(name="P", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(parent,), directories=(FIXED_48,))
        touch(roots[0] / "P" / "48x48" / "foo.png")
        mine = touch(roots[0] / "C" / "48x48" / "foo.png")
        assert resolve_icon("foo", 48, 1, child, config) == str(mine)

    def test_inexact_match_stops_before_parents(self, roots, config):
        parent = Theme(name="P", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(parent,), directories=(FIXED_16,))
        touch(roots[0] / "P" / "48x48" / "foo.png")
        inexact = touch(roots[0] / "C" / "16x16" / "foo.png")
        assert resolve_icon("foo", 48, 1, child, config) == str(inexact)

    def test_parents_searched_in_order_depth_first(self, roots, config):
        grandparent = Theme(name="G", directories=(FIXED_48,))
        first = Theme(name="A", inherits=(grandparent,), directories=(FIXED_48,))
        second = Theme(name="B", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(first, second), directories=(FIXED_48,))
        from_grandparent = touch(roots[0] / "G" / "48x48" / "foo.png")
        touch(roots[0] / "B" / "48x48" / "foo.png")
        assert resolve_icon("foo", 48, 1, child, config) == str(from_grandparent)

    def test_not_found_anywhere(self, config):
        parent = Theme(name="P", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(parent,))
        assert resolve_icon("foo", 48, 1, child, config) is None

    def test_empty_root_theme(self, config):
        assert resolve_icon("foo", 48, 1, Theme(name="hicolor"), config) is None

    def test_cycle_terminates(self, caplog):
        calls = []

        def exists(path):
            calls.append(path)
            return False

        config = LookupConfig(base_dirs=("/r",), path_exists=exists)
        # A frozen Theme cannot point at itself, so the cycle goes through
        # a second theme carrying the same name.
        inner = Theme(name="C", directories=(FIXED_48,))
        outer = Theme(name="C", inherits=(Theme(name="P", inherits=(inner,)),), directories=(FIXED_48,))
        with caplog.at_level(logging.WARNING, logger="iconfind.core.resolver"):
            assert resolve_icon("foo", 48, 1, outer, config) is None
        assert "inheritance cycle" in caplog.text
        assert all(path.startswith("/r/C/") for path in calls)
        # Each existence check runs once per phase for the outer theme only.
        assert len(calls) == 6

    def test_shared_parent_searched_once(self):
        calls = []

        def exists(path):
            calls.append(path)
            return False

        config = LookupConfig(base_dirs=("/r",), extensions=("png",), path_exists=exists)
        shared = Theme(name="S", directories=(FIXED_48,))
        child = Theme(
            name="C",
            inherits=(Theme(name="A", inherits=(shared,)), Theme(name="B", inherits=(shared,))),
        )
        assert resolve_icon("foo", 48, 1, child, config) is None
        assert calls == ["/r/S/48x48/foo.png", "/r/S/48x48/foo.png"]


class TestResolveBestIcon:
    def test_all_names_tried_before_parents(self, roots, config):
        parent = Theme(name="P", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(parent,), directories=(FIXED_48,))
        touch(roots[0] / "P" / "48x48" / "a.png")
        second_name = touch(roots[0] / "C" / "48x48" / "b.png")
        assert resolve_best_icon(["a", "b"], 48, 1, child, config) == str(second_name)

    def test_name_order_within_theme(self, roots, config):
        theme = Theme(name="C", directories=(FIXED_48,))
        first = touch(roots[0] / "C" / "48x48" / "a.png")
        touch(roots[0] / "C" / "48x48" / "b.png")
        assert resolve_best_icon(["a", "b"], 48, 1, theme, config) == str(first)

    def test_inexact_first_name_beats_exact_second_name(self, roots, config):
        theme = Theme(name="C", directories=(FIXED_16, FIXED_48))
        inexact = touch(roots[0] / "C" / "16x16" / "a.png")
        touch(roots[0] / "C" / "48x48" / "b.png")
        assert resolve_best_icon(["a", "b"], 48, 1, theme, config) == str(inexact)

    def test_falls_through_to_parent(self, roots, config):
        parent = Theme(name="P", directories=(FIXED_48,))
        child = Theme(name="C", inherits=(parent,), directories=(FIXED_48,))
        from_parent = touch(roots[0] / "P" / "48x48" / "b.png")
        assert resolve_best_icon(["a", "b"], 48, 1, child, config) == str(from_parent)

    def test_empty_name_list(self, config):
        assert resolve_best_icon([], 48, 1, Theme(name="C", directories=(FIXED_48,)), config) is None
