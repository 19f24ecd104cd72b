"""Tests for the tty controller.

Verifies raw-mode lifecycle safety, buffered output, and resize detection.
These guard the low-level terminal contract used by the session loop.
"""

from __future__ import annotations

import os
import termios
import unittest
from unittest import mock

from thwack import input as input_mod
from thwack.errors import TerminalError
from thwack.terminal import RESIZE, TerminalController


def _size(columns: int, lines: int) -> os.terminal_size:
    return os.terminal_size((columns, lines))


class TerminalBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_enable_and_disable_raw_mode_restore_saved_state(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("thwack.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "thwack.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("thwack.terminal.termios.tcsetattr") as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_raw_mode()
            controller.disable_raw_mode()
            controller.disable_raw_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_disable_without_enable_is_noop(self) -> None:
        with mock.patch("thwack.terminal.termios.tcsetattr") as setattr_mock:
            TerminalController(stdin_fd=0, stdout_fd=1).disable_raw_mode()

        setattr_mock.assert_not_called()

    def test_enable_failure_raises_terminal_error(self) -> None:
        with mock.patch("thwack.terminal.termios.tcgetattr", side_effect=termios.error(25, "Not a tty")):
            with self.assertRaises(TerminalError):
                TerminalController(stdin_fd=0, stdout_fd=1).enable_raw_mode()

    def test_flush_writes_buffered_text_once(self) -> None:
        with mock.patch("thwack.terminal.os.write", side_effect=lambda fd, data: len(data)) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.write("Search: ")
            controller.write("☕")
            controller.flush()
            controller.flush()

        write_mock.assert_called_once_with(1, "Search: ☕".encode("utf-8"))

    def test_flush_retries_partial_writes(self) -> None:
        with mock.patch("thwack.terminal.os.write", side_effect=[3, 10]) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.write("abcdef")
            controller.flush()

        self.assertEqual(write_mock.call_args_list[0].args, (1, b"abcdef"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"def"))

    def test_size_change_is_reported_as_resize_event(self) -> None:
        sizes = [_size(80, 24), _size(100, 30)]
        with mock.patch("thwack.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "thwack.terminal.tty.setraw"
        ), mock.patch("thwack.terminal.shutil.get_terminal_size", side_effect=sizes + [sizes[-1]] * 4):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_raw_mode()

            self.assertTrue(controller.poll(0.0))
            self.assertEqual(controller.read_event(), RESIZE)
            self.assertEqual(controller.size(), (100, 30))

    def test_poll_times_out_without_input(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            with mock.patch("thwack.terminal.shutil.get_terminal_size", return_value=_size(80, 24)):
                controller = TerminalController(stdin_fd=read_fd, stdout_fd=write_fd)
                self.assertFalse(controller.poll(0.01))
                os.write(write_fd, b"a")
                self.assertTrue(controller.poll(0.01))
                self.assertEqual(controller.read_event(), "a")
        finally:
            os.close(read_fd)
            os.close(write_fd)


if __name__ == "__main__":
    unittest.main()
