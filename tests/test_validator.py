import io
import unittest

from wordlegen.core.constants import AbsentPolicy, CharacterStatus
from wordlegen.core.models import Cell, GridSnapshot
from wordlegen.engine.generator import CandidateGenerator, GeneratorConfig
from wordlegen.engine.validator import FeedbackValidator
from wordlegen.io.feedback import parse_guess
from wordlegen.utils.pretty import format_grid, print_candidate_stats


class FeedbackValidatorTests(unittest.TestCase):
    def test_consistent_feedback_is_ok(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("CAT:GYX")])
        result = FeedbackValidator("CAT").validate(snapshot)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_conflicting_correct_characters(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("AB:G_"), parse_guess("BA:G_")])
        result = FeedbackValidator("AB").validate(snapshot)
        self.assertFalse(result.ok)
        self.assertIn("Column 0 has conflicting correct characters AB", result.messages)

    def test_misplaced_where_correct(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("A:G"), parse_guess("A:Y")])
        result = FeedbackValidator("A").validate(snapshot)
        self.assertIn("'A' is marked misplaced at column 0 where it is also correct", result.messages)

    def test_absent_and_present_depends_on_policy(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("EE:GX")])
        self.assertFalse(FeedbackValidator("E").validate(snapshot).ok)
        self.assertTrue(FeedbackValidator("E", AbsentPolicy.ROW_AWARE).validate(snapshot).ok)

    def test_invalid_entries_are_skipped(self) -> None:
        snapshot = GridSnapshot.from_rows([[None, Cell("A", CharacterStatus.CORRECT)], ["x"]])
        result = FeedbackValidator("AB").validate(snapshot)
        self.assertTrue(result.ok)

    def test_unknown_symbols(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("Z:X")])
        result = FeedbackValidator("AB").validate(snapshot)
        self.assertEqual(result.messages, ["Character 'Z' at (0,0) is not in the alphabet"])


class PrettyTests(unittest.TestCase):
    def test_format_grid_marks_invalid_entries(self) -> None:
        rendered = format_grid(GridSnapshot.from_rows([[Cell("a", CharacterStatus.ABSENT), None]]))
        self.assertIn("A-", rendered)
        self.assertIn(" !", rendered)

    def test_format_grid_marks_statuses(self) -> None:
        snapshot = GridSnapshot.from_rows([parse_guess("CA_:GY_")])
        rendered = format_grid(snapshot)
        self.assertIn("C+", rendered)
        self.assertIn("A?", rendered)
        self.assertIn(" .", rendered)

    def test_candidate_stats(self) -> None:
        generator = CandidateGenerator(GeneratorConfig(rows=1, columns=3, alphabet="CAT"))
        result = generator.analyze([parse_guess("CAT:GYX")])
        stream = io.StringIO()
        print_candidate_stats(result, stream=stream)
        text = stream.getvalue()
        self.assertIn("Prefiltered:   CA (2)", text)
        self.assertIn("Kept:          1", text)
        self.assertIn("A:1", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
