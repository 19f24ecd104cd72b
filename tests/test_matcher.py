"""Tests for fuzzy path matching, distance, and ranking order.

Covers right-anchored position search, ASCII-only case folding, and the
distance/depth/path ordering used to rank candidates.
"""

from __future__ import annotations

import unittest

from thwack.search.matcher import MatchedPath, match, match_positions, normalize_query


def _match(query: str, starting_point: str, absolute: str) -> MatchedPath:
    matched = match(query, starting_point, absolute)
    assert matched is not None, f"{query!r} should match {absolute!r}"
    return matched


class MatchBehaviorTests(unittest.TestCase):
    def test_match_builds_relative_path_positions_and_depth(self) -> None:
        matched = _match("abc.txt", "/", "/abc/abc/abc.txt")

        self.assertEqual(matched.absolute, "/abc/abc/abc.txt")
        self.assertEqual(matched.relative, "abc/abc/abc.txt")
        self.assertEqual(matched.positions, (8, 9, 10, 11, 12, 13, 14))
        self.assertEqual(matched.absolute_positions, (9, 10, 11, 12, 13, 14, 15))
        self.assertEqual(matched.depth, 2)

    def test_match_prefers_rightmost_occurrence(self) -> None:
        matched = _match("abc", "/", "/abc/abc/abc.txt")

        self.assertEqual(matched.positions, (8, 9, 10))

    def test_match_strips_backslash_separated_prefix(self) -> None:
        matched = _match("tem", "C:\\Documents", "C:\\Documents\\Newsletters\\Summer2018.pdf")

        self.assertEqual(matched.relative, "Newsletters\\Summer2018.pdf")
        self.assertEqual(matched.positions, (7, 8, 15))
        self.assertEqual(matched.depth, 1)

    def test_match_counts_wide_characters_as_single_positions(self) -> None:
        matched = _match("foo☕t", "\\Folder\\", "\\Folder\\foo\\bar\\☕.txt")

        self.assertEqual(matched.relative, "foo\\bar\\☕.txt")
        self.assertEqual(matched.positions, (0, 1, 2, 8, 12))
        self.assertEqual(matched.depth, 2)

    def test_match_is_ascii_case_insensitive(self) -> None:
        matched = _match("README", "/home", "/home/docs/readme.md")

        self.assertEqual(matched.positions, (5, 6, 7, 8, 9, 10))

    def test_match_does_not_fold_non_ascii_case(self) -> None:
        self.assertIsNone(match("É", "/home", "/home/é.txt"))
        self.assertIsNotNone(match("é", "/home", "/home/é.txt"))

    def test_match_rejects_partial_matches(self) -> None:
        self.assertIsNone(match("abcz", "/home", "/home/abc.txt"))
        self.assertIsNone(match("cba", "/home", "/home/abc.txt"))

    def test_empty_query_matches_with_no_positions(self) -> None:
        matched = _match("", "/home", "/home/src/main.py")

        self.assertEqual(matched.positions, ())
        self.assertEqual(matched.absolute_positions, ())
        self.assertEqual(matched.distance(), 0)
        self.assertEqual(matched.depth, 1)

    def test_match_rejects_paths_outside_starting_point(self) -> None:
        with self.assertRaises(ValueError):
            match("a", "/home", "/etc/passwd")

    def test_positions_are_strictly_increasing_and_one_per_query_grapheme(self) -> None:
        cases = [
            ("abc", "/home/a/b/c/abc.txt"),
            ("s/m", "/home/src/main.rs"),
            ("aaa", "/home/banana/aardvark.txt"),
            ("🚞.t", "/home/🚞/🚞.txt"),
        ]
        for query, absolute in cases:
            with self.subTest(query=query, absolute=absolute):
                matched = _match(query, "/home", absolute)
                self.assertEqual(len(matched.positions), len(query))
                self.assertEqual(list(matched.positions), sorted(set(matched.positions)))

    def test_match_positions_treats_grapheme_clusters_as_units(self) -> None:
        positions = match_positions(["e\u0301"], "cafe\u0301/x")

        self.assertEqual(positions, (3,))
        self.assertIsNone(match_positions(["e"], "cafe\u0301"))

    def test_normalize_query_rewrites_alternate_separator(self) -> None:
        self.assertEqual(normalize_query("src/main", sep="\\", altsep="/"), "src\\main")
        self.assertEqual(normalize_query("src/main", sep="/", altsep=None), "src/main")


class DistanceTests(unittest.TestCase):
    def test_distance_sums_gaps_between_positions(self) -> None:
        self.assertEqual(_match("abc", "/home", "/home/abc.txt").distance(), 2)
        self.assertEqual(_match("abc", "/home", "/home/a123bc.txt").distance(), 5)
        self.assertEqual(_match("foo.txt", "/home", "/home/ok/foo.txt").distance(), 6)
        self.assertEqual(_match("foo.txt", "/home", "/home/ok/f1o1o/ok.txt").distance(), 11)
        self.assertEqual(_match("foo.txt", "/home", "/home/ok/foo/ok.txt").distance(), 9)

    def test_contiguous_match_distance_is_query_length_minus_one(self) -> None:
        matched = _match("abc", "/home", "/home/abc.txt")

        self.assertEqual(matched.positions, (0, 1, 2))
        self.assertEqual(matched.distance(), 2)

    def test_single_position_has_zero_distance(self) -> None:
        self.assertEqual(_match("t", "/home", "/home/abc.txt").distance(), 0)


class RankingTests(unittest.TestCase):
    def test_sort_orders_by_distance_then_depth_then_path(self) -> None:
        given = [
            "/home/src/n1/n2/abc.txt",
            "/home/lib/abc!.txt",
            "/home/abc/src/abc.txt",
            "/home/abc.txt",
            "/home/src/abc.txt",
        ]
        ranked = sorted(_match("abc.txt", "/home", path) for path in given)

        self.assertEqual(
            [path.relative for path in ranked],
            [
                "abc.txt",
                "src/abc.txt",
                "abc/src/abc.txt",
                "src/n1/n2/abc.txt",
                "lib/abc!.txt",
            ],
        )

    def test_sort_handles_full_tie_break_chain(self) -> None:
        given = [
            "/home/abc.txt",
            "/home/a12bc.txt",
            "/home/a123bc.txt",
            "/home/abc/cat.txt",
            "/home/abc/src/abc.txt",
            "/home/src/abc.txt",
            "/home/src/n1/n2/aXbc.txt",
            "/home/src/n1/n2/Foo-aXbc.txt",
            "/home/src/n1/n2/Foo-aXbXc.txt",
            "/home/src/n1/n2/abc.txt",
            "/home/lib/abc!.txt",
        ]
        ranked = sorted(
            (_match("abc.txt", "/home", path) for path in given),
            key=MatchedPath.sort_key,
        )

        self.assertEqual(
            [path.relative for path in ranked],
            [
                "abc.txt",
                "src/abc.txt",
                "abc/src/abc.txt",
                "src/n1/n2/abc.txt",
                "lib/abc!.txt",
                "src/n1/n2/Foo-aXbc.txt",
                "src/n1/n2/aXbc.txt",
                "a12bc.txt",
                "src/n1/n2/Foo-aXbXc.txt",
                "a123bc.txt",
                "abc/cat.txt",
            ],
        )

    def test_str_is_relative_path(self) -> None:
        self.assertEqual(str(_match("abc", "/home", "/home/abc.txt")), "abc.txt")


if __name__ == "__main__":
    unittest.main()
