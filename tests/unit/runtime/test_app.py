"""Host app tests: message routing, outcomes, diff viewer and status line.

Runs with ``background=False`` so every effect completes before the next
assertion; the runner is a scripted fake.
"""

from __future__ import annotations

import unittest

from lazyjj.context import SelectedFile, SelectionRegistry
from lazyjj.details import DetailsOperation
from lazyjj.errors import JJCommandError
from lazyjj.jj import commands as jj
from lazyjj.jj.revision import Revision
from lazyjj.jj.runner import CommandResult
from lazyjj.messages import Close, CommandCompleted, StartSquash
from lazyjj.runtime.app import STATUS_MESSAGE_SECONDS, AppOutcome, DetailsApp, render_details_once
from lazyjj.ui_theme import PLAIN_THEME

REVISION = Revision("abcdefabcdefabcdef", "0123456789abcdef")
STATUS_OUTPUT = "false false\nM a.txt\nA b.txt\n"


class ScriptedRunner:
    def __init__(self, responses: dict[str, CommandResult]) -> None:
        self.responses = responses

    def run_sync(self, command, *, timeout_seconds=None) -> CommandResult:
        return self.responses.get(str(command), CommandResult(command=command, output=""))

    def run_interactive(self, command) -> CommandResult:
        return self.run_sync(command)


def _runner(**extra: CommandResult) -> ScriptedRunner:
    status = jj.status(REVISION.change_id)
    responses = {str(status): CommandResult(command=status, output=STATUS_OUTPUT)}
    responses.update(extra)
    return ScriptedRunner(responses)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _app(runner: ScriptedRunner | None = None, clock: FakeClock | None = None) -> DetailsApp:
    operation = DetailsOperation(REVISION, SelectionRegistry(), theme=PLAIN_THEME)
    app = DetailsApp(
        operation,
        runner or _runner(),
        revision=REVISION,
        theme=PLAIN_THEME,
        no_color=True,
        background=False,
        clock=clock or FakeClock(),
    )
    app.start()
    app.drain_messages()
    return app


class DetailsAppTests(unittest.TestCase):
    def test_start_loads_files_and_tracks_selection(self) -> None:
        app = _app()

        self.assertEqual(len(app.operation.files), 2)
        self.assertEqual(app.selected_file, SelectedFile(REVISION.change_id, REVISION.commit_id, "a.txt"))
        self.assertTrue(app.running)

    def test_close_message_ends_session_without_outcome(self) -> None:
        app = _app()

        app.post(Close())
        app.drain_messages()

        self.assertFalse(app.running)
        self.assertEqual(app.outcome, AppOutcome())

    def test_file_history_key_ends_with_revset_outcome(self) -> None:
        app = _app()

        app.handle_key("*")
        app.drain_messages()

        self.assertFalse(app.running)
        self.assertEqual(app.outcome.revset, 'files("a.txt")')

    def test_squash_key_ends_with_squash_outcome(self) -> None:
        app = _app()

        app.handle_key("q")
        app.drain_messages()

        self.assertEqual(app.outcome.squash, StartSquash(REVISION, ("a.txt",)))

    def test_diff_opens_viewer_that_closes_on_escape(self) -> None:
        diff = jj.diff(REVISION.change_id, "a.txt")
        app = _app(_runner(**{str(diff): CommandResult(command=diff, output="--- a/a.txt\n+++ b/a.txt\n+hi\n")}))

        app.handle_key("d")
        app.drain_messages()

        self.assertIsNotNone(app.diff_viewer)
        lines = app.render_lines(80, 10)
        self.assertTrue(lines[0].startswith("a.txt"))
        self.assertIn("+hi", lines)

        app.handle_key("ESC")
        self.assertIsNone(app.diff_viewer)
        self.assertTrue(app.running)

    def test_ctrl_c_quits(self) -> None:
        app = _app()

        app.handle_key("CTRL_C")

        self.assertFalse(app.running)

    def test_command_failure_shows_error_until_it_expires(self) -> None:
        clock = FakeClock()
        app = _app(clock=clock)

        app.post(CommandCompleted("jj split", "", JJCommandError("jj split", 1, "nothing to split")))
        app.drain_messages()

        self.assertTrue(app.status_is_error)
        self.assertIn("nothing to split", app.render_lines(80, 24)[-1])
        clock.now += STATUS_MESSAGE_SECONDS + 0.1
        app.tick()
        self.assertEqual(app.status_message, "")

    def test_successful_command_shows_first_output_line(self) -> None:
        app = _app()

        app.post(CommandCompleted("jj absorb", "\nAbsorbed changes into 1 revisions\nmore\n"))
        app.drain_messages()

        self.assertEqual(app.status_message, "Absorbed changes into 1 revisions")
        self.assertFalse(app.status_is_error)

    def test_render_lines_frame_view_with_header_and_help(self) -> None:
        app = _app()

        lines = app.render_lines(200, 24)

        self.assertEqual(lines[0], "abcdefabcdef 0123456789ab")
        self.assertEqual(lines[1], "")
        self.assertEqual(lines[2].rstrip(), "M  a.txt <")
        self.assertEqual(lines[3].rstrip(), "A  b.txt")
        self.assertEqual(lines[4], "")
        self.assertTrue(lines[5].startswith("esc cancel"))
        self.assertEqual(lines[6], "")

    def test_split_yes_reloads_and_closes_overlay(self) -> None:
        app = _app()

        app.handle_key("s")
        self.assertTrue(app.operation.confirmation.active)
        app.handle_key("y")
        app.drain_messages()

        self.assertFalse(app.operation.confirmation.active)
        self.assertEqual(len(app.operation.files), 2)
        self.assertTrue(app.running)

    def test_header_follows_rewritten_commit_after_reload(self) -> None:
        current = jj.resolve_revision(REVISION.change_id)
        moved = CommandResult(command=current, output=f"{REVISION.change_id} fedcba987654321\n")
        app = _app(_runner(**{str(current): moved}))

        self.assertEqual(app.render_lines(80, 20)[0], "abcdefabcdef fedcba987654")
        self.assertEqual(app.operation.revision.commit_id, "fedcba987654321")


class RenderOnceTests(unittest.TestCase):
    def test_render_once_prints_every_file(self) -> None:
        text = render_details_once(_runner(), REVISION, theme=PLAIN_THEME, width=80)

        self.assertIn("M  a.txt <", text)
        self.assertIn("A  b.txt", text)

    def test_render_once_reports_load_failure(self) -> None:
        status = jj.status(REVISION.change_id)
        runner = ScriptedRunner(
            {str(status): CommandResult(command=status, output="", error=JJCommandError("jj log", 1, "bad"))}
        )

        text = render_details_once(runner, REVISION, theme=PLAIN_THEME, width=80)

        self.assertIn("No changes", text)
        self.assertIn("bad", text)


if __name__ == "__main__":
    unittest.main()
