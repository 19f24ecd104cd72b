"""Tests for grapheme-aware query editing."""

from __future__ import annotations

import unittest

from thwack.query import Query


class QueryEditingTests(unittest.TestCase):
    def test_initial_value_puts_cursor_at_end(self) -> None:
        query = Query("ab☕")

        self.assertEqual(query.graphemes, ("a", "b", "☕"))
        self.assertEqual(query.cursor, 3)
        self.assertEqual(query.cursor_column, 4)
        self.assertEqual(str(query), "ab☕")

    def test_pop_until_empty_then_noop(self) -> None:
        query = Query("ABC")

        for _ in range(3):
            query.pop()

        self.assertEqual(str(query), "")
        self.assertEqual(query.cursor, 0)
        self.assertEqual(query.pop(), 0)
        self.assertEqual(query.move_left(), 0)
        self.assertEqual(query.move_right(), 0)
        self.assertEqual(query.cursor_column, 0)

    def test_edit_sequence_tracks_cursor_and_columns(self) -> None:
        query = Query("e\u0301!")
        self.assertEqual(query.graphemes, ("e\u0301", "!"))
        self.assertEqual(query.cursor_column, 2)

        self.assertEqual(query.push("☕"), 2)
        query.push("a")
        query.push("b")
        self.assertEqual(query.graphemes, ("e\u0301", "!", "☕", "a", "b"))
        self.assertEqual((query.cursor, query.cursor_column), (5, 6))

        self.assertEqual(query.pop(), 1)
        self.assertEqual((query.cursor, query.cursor_column), (4, 5))

        self.assertEqual(query.move_left(), 1)
        self.assertEqual(query.pop(), 2)
        self.assertEqual(query.graphemes, ("e\u0301", "!", "a"))
        self.assertEqual((query.cursor, query.cursor_column), (2, 2))

        for _ in range(3):
            query.move_right()
        self.assertEqual(query.cursor, 3)

        query.push("?")
        self.assertEqual(str(query), "e\u0301!a?")

        for _ in range(6):
            query.move_left()
        self.assertEqual((query.cursor, query.cursor_column), (0, 0))

        query.push("😇")
        self.assertEqual(query.graphemes, ("😇", "e\u0301", "!", "a", "?"))
        self.assertEqual((query.cursor, query.cursor_column), (1, 2))

    def test_combining_mark_joins_previous_grapheme(self) -> None:
        query = Query("cafe")

        delta = query.push("\u0301")

        self.assertEqual(delta, 0)
        self.assertEqual(len(query), 4)
        self.assertEqual(query.graphemes[-1], "e\u0301")
        self.assertEqual(query.cursor, 4)

    def test_push_in_middle_keeps_text_right_of_cursor(self) -> None:
        query = Query("ac")
        query.move_left()

        query.push("b")

        self.assertEqual(str(query), "abc")
        self.assertEqual(query.cursor, 2)

    def test_pop_removes_whole_cluster(self) -> None:
        query = Query("x🇯🇵")

        query.pop()

        self.assertEqual(str(query), "x")

    def test_push_empty_text_is_noop(self) -> None:
        query = Query("a")

        self.assertEqual(query.push(""), 0)
        self.assertEqual(str(query), "a")


if __name__ == "__main__":
    unittest.main()
