"""Key binding, override and dispatch-table tests."""

from __future__ import annotations

import unittest

from lazyjj.input import KeyComboBinding, KeyComboRegistry
from lazyjj.keymap import DetailsKeyMap, KeyBinding


class KeyMapTests(unittest.TestCase):
    def test_help_key_uses_readable_labels(self) -> None:
        self.assertEqual(KeyBinding(("UP", "k"), "up").help_key, "↑/k")
        self.assertEqual(KeyBinding(("CTRL_R",), "refresh").help_key, "ctrl+r")
        self.assertEqual(DetailsKeyMap().toggle_select.help_key, "space/m")

    def test_overrides_replace_keys_but_keep_help(self) -> None:
        keymap = DetailsKeyMap().with_overrides({"restore": ["r", "R"], "bogus": ["z"], "split": "x", "absorb": [1]})

        self.assertEqual(keymap.restore, KeyBinding(("r", "R"), "restore"))
        self.assertEqual(keymap.split, DetailsKeyMap().split)
        self.assertEqual(keymap.absorb, DetailsKeyMap().absorb)

    def test_short_help_lists_file_actions(self) -> None:
        helps = [binding.help for binding in DetailsKeyMap().short_help()]

        self.assertEqual(helps[0], "cancel")
        for expected in ("diff", "split", "squash", "restore", "absorb", "file history"):
            self.assertIn(expected, helps)


class KeyComboRegistryTests(unittest.TestCase):
    def test_dispatch_returns_none_for_unbound_keys(self) -> None:
        registry = KeyComboRegistry()

        self.assertIsNone(registry.dispatch("x"))
        self.assertFalse(registry.handles("x"))

    def test_handler_returning_none_yields_empty_effects(self) -> None:
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("a", "b"), lambda: None),
            KeyComboBinding(("c",), lambda: ["effect"]),
        )

        self.assertEqual(registry.dispatch("b"), [])
        self.assertEqual(registry.dispatch("c"), ["effect"])

    def test_normalizer_applies_to_registration_and_lookup(self) -> None:
        registry = KeyComboRegistry(normalize=str.lower).register_binding(KeyComboBinding(("Q",), lambda: ["q"]))

        self.assertTrue(registry.handles("q"))
        self.assertEqual(registry.dispatch("Q"), ["q"])


if __name__ == "__main__":
    unittest.main()
