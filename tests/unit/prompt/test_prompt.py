"""Interactive ignore-list gate tests."""

from __future__ import annotations

import io
import unittest

from readmetree.prompt import CONFIRM_QUESTION, IGNORE_QUESTION, is_affirmative, prompt_for_ignores


def _answers(*values: str):
    pending = list(values)
    asked: list[str] = []

    def input_fn(question: str) -> str:
        asked.append(question)
        if not pending:
            raise EOFError
        return pending.pop(0)

    return input_fn, asked


class PromptTests(unittest.TestCase):
    def test_confirmed_answers_merge_with_base_set(self) -> None:
        input_fn, asked = _answers(" coverage , ,tmp ", "y")
        out = io.StringIO()

        merged = prompt_for_ignores({".git"}, input_fn=input_fn, out=out)

        self.assertEqual(merged, frozenset({".git", "coverage", "tmp"}))
        self.assertEqual(asked, [IGNORE_QUESTION, CONFIRM_QUESTION])
        self.assertEqual(out.getvalue(), "Ignoring: .git, coverage, tmp\n")

    def test_non_affirmative_answer_cancels(self) -> None:
        for answer in ("n", "", "no", "maybe"):
            with self.subTest(answer=answer):
                input_fn, _asked = _answers("", answer)
                self.assertIsNone(prompt_for_ignores({"dist"}, input_fn=input_fn, out=io.StringIO()))

    def test_end_of_input_cancels(self) -> None:
        input_fn, asked = _answers()
        self.assertIsNone(prompt_for_ignores({"dist"}, input_fn=input_fn, out=io.StringIO()))
        self.assertEqual(asked, [IGNORE_QUESTION])

    def test_empty_merged_set_is_reported(self) -> None:
        input_fn, _asked = _answers("", "YES")
        out = io.StringIO()
        self.assertEqual(prompt_for_ignores((), input_fn=input_fn, out=out), frozenset())
        self.assertEqual(out.getvalue(), "Ignoring: (nothing)\n")

    def test_is_affirmative(self) -> None:
        self.assertTrue(is_affirmative(" Y "))
        self.assertTrue(is_affirmative("yes"))
        self.assertFalse(is_affirmative(None))
        self.assertFalse(is_affirmative("yep"))


if __name__ == "__main__":
    unittest.main()
