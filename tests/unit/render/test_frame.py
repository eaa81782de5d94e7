"""Frame composition and footer help tests."""

from __future__ import annotations

import unittest
from unittest import mock

from lazyjj.keymap import KeyBinding
from lazyjj.render import compose_frame, format_help_line, render_frame
from lazyjj.ui_theme import DEFAULT_THEME, PLAIN_THEME


class FrameTests(unittest.TestCase):
    def test_compose_frame_clears_clips_and_resets_styled_rows(self) -> None:
        frame = compose_frame(["hello world", "\033[31mred\033[0m", "dropped"], width=5, height=2)

        self.assertEqual(frame, "\033[H\033[Jhello\r\n\033[31mred\033[0m\033[0m")

    def test_render_frame_writes_once_to_stdout(self) -> None:
        with mock.patch("lazyjj.render.os.write") as write_mock, mock.patch(
            "lazyjj.render.sys.stdout"
        ) as stdout_mock:
            stdout_mock.fileno.return_value = 7
            render_frame(["x"], 10, 3)

        write_mock.assert_called_once_with(7, "\033[H\033[Jx".encode("utf-8"))


class HelpLineTests(unittest.TestCase):
    bindings = [
        KeyBinding(("ESC",), "cancel"),
        KeyBinding(("d", "ENTER"), "diff"),
        KeyBinding(("s",), "split"),
    ]

    def test_pairs_are_joined_with_separator(self) -> None:
        self.assertEqual(
            format_help_line(self.bindings, PLAIN_THEME, 80),
            "esc cancel • d/enter diff • s split",
        )

    def test_pairs_that_do_not_fit_are_dropped(self) -> None:
        self.assertEqual(format_help_line(self.bindings, PLAIN_THEME, 25), "esc cancel • d/enter diff")

    def test_keys_are_styled(self) -> None:
        line = format_help_line(self.bindings[:1], DEFAULT_THEME, 80)

        self.assertTrue(line.startswith(DEFAULT_THEME.help_key + "esc"))


if __name__ == "__main__":
    unittest.main()
