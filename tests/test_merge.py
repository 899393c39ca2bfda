"""Tests for merging system recent files with editor history."""
import os
from unittest.mock import patch

from src.recent.merge import merge, union_paths


class TestUnionPaths:
    def test_filters_history_and_dedupes(self):
        history = ["/home/u/a.txt", "/home/u/z.txt"]
        system = ["/home/u/b.txt", "/home/u/a.txt"]
        merged = union_paths(system, history, include=lambda p: not p.endswith("z.txt"))
        assert set(merged) == {"/home/u/a.txt", "/home/u/b.txt"}
        assert len(merged) == 2

    def test_first_occurrence_wins(self):
        merged = union_paths(["/s/1", "/h/1"], ["/h/1", "/h/2", "/h/1"])
        assert merged == ["/h/1", "/h/2", "/s/1"]

    def test_no_predicate_keeps_all_history(self):
        assert union_paths([], ["/a", "/b"]) == ["/a", "/b"]

    def test_home_abbreviated_history_expanded(self):
        with patch.dict(os.environ, {"HOME": "/home/u"}):
            merged = union_paths(["/home/u/a.txt", "/home/u/b.txt"], ["~/a.txt"])
        assert merged == ["/home/u/a.txt", "/home/u/b.txt"]

    def test_predicate_sees_unexpanded_entry(self):
        seen = []
        with patch.dict(os.environ, {"HOME": "/home/u"}):
            union_paths([], ["~/a.txt"], include=lambda p: seen.append(p) or True)
        assert seen == ["~/a.txt"]

    def test_predicate_not_applied_to_system_paths(self):
        merged = union_paths(["/sys/z.txt"], ["/h/z.txt"], include=lambda p: False)
        assert merged == ["/sys/z.txt"]


class TestMerge:
    def test_ranked_union(self, make_file):
        a = make_file("a.txt", mtime=1_000)
        b = make_file("b.txt", mtime=3_000)
        h = make_file("h.txt", mtime=2_000)
        assert merge([b, a], [a, h]) == [b, h, a]

    def test_duplicate_appears_once(self, make_file):
        a = make_file("a.txt", mtime=1_000)
        b = make_file("b.txt", mtime=2_000)
        result = merge([b, a], [a])
        assert result.count(a) == 1
        assert result == [b, a]

    def test_missing_history_entry_sorted_last(self, make_file, tmp_path):
        a = make_file("a.txt", mtime=1_000)
        gone = str(tmp_path / "gone.txt")
        assert merge([a], [gone]) == [a, gone]

    def test_home_abbreviated_history_ranked_by_mtime(self, make_file, tmp_path):
        a = make_file("a.txt", mtime=2_000_000)
        b = make_file("b.txt", mtime=1_000_000)
        with patch.dict(os.environ, {"HOME": str(tmp_path)}):
            assert merge([b, a], ["~/files/a.txt"]) == [a, b]

    def test_excluded_history_absent(self, make_file):
        a = make_file("a.txt", mtime=1_000)
        z = make_file("z.txt", mtime=9_000)
        assert merge([a], [z], include=lambda p: p != z) == [a]
