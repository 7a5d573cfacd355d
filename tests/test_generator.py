import unittest

from wordlegen.core.constants import AlphabetMode, CharacterStatus
from wordlegen.core.exceptions import CandidateLimitError, ConfigurationError
from wordlegen.core.models import Cell, GridSnapshot
from wordlegen.engine.generator import CandidateGenerator, GeneratorConfig
from wordlegen.io.feedback import parse_guess


def make_generator(rows: int, columns: int, alphabet: str, **kwargs) -> CandidateGenerator:
    return CandidateGenerator(GeneratorConfig(rows=rows, columns=columns, alphabet=alphabet, **kwargs))


class UnconstrainedTests(unittest.TestCase):
    def test_all_unset_gives_full_product(self) -> None:
        generator = make_generator(1, 2, "AB")
        self.assertEqual(generator.generate(generator.new_grid()), ["AA", "AB", "BA", "BB"])

    def test_clear_reproduces_full_product(self) -> None:
        generator = make_generator(2, 2, "AB")
        grid = generator.new_grid()
        grid.set_row(0, parse_guess("AB:GX"))
        self.assertEqual(generator.generate(grid), ["AA"])
        grid.clear()
        self.assertEqual(generator.generate(grid), ["AA", "AB", "BA", "BB"])

    def test_default_configuration_is_five_by_five_letters(self) -> None:
        generator = CandidateGenerator()
        self.assertEqual(len(generator.alphabet), 26)
        grid = generator.new_grid()
        grid.set_row(0, parse_guess("CRANE:GGGGX"))
        candidates = generator.generate(grid)
        self.assertEqual(len(candidates), 25)
        self.assertEqual(candidates[0], "CRANA")
        self.assertNotIn("CRANE", candidates)


class FeedbackPropertyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = make_generator(2, 3, "ABC")
        self.grid = self.generator.new_grid()
        self.grid.set_row(0, parse_guess("ABC:GXY"))

    def test_combined_feedback(self) -> None:
        self.assertEqual(self.generator.generate(self.grid), ["ACA"])

    def test_properties_hold(self) -> None:
        generator = make_generator(2, 3, "ABCD")
        grid = generator.new_grid()
        grid.set_row(0, parse_guess("ABD:GXY"))
        candidates = generator.generate(grid)
        self.assertTrue(candidates)
        for word in candidates:
            self.assertEqual(word[0], "A")
            self.assertNotIn("B", word)
            self.assertNotEqual(word[2], "D")
            self.assertIn("D", word)

    def test_cat_scenario(self) -> None:
        generator = make_generator(1, 3, "CAT")
        grid = generator.new_grid()
        grid.set_row(0, parse_guess("CAT:GYX"))
        result = generator.analyze(grid)
        self.assertEqual(result.prefiltered, "CA")
        self.assertEqual(result.admissible, ["C", "C", "CA"])
        self.assertEqual(result.raw_count, 2)
        self.assertEqual(result.candidates, ["CCA"])

    def test_generate_is_idempotent_and_does_not_mutate(self) -> None:
        before = self.grid.snapshot()
        first = self.generator.generate(self.grid)
        second = self.generator.generate(self.grid)
        self.assertEqual(first, second)
        self.assertEqual(self.grid.snapshot(), before)

    def test_required_character_admissible_nowhere_gives_nothing(self) -> None:
        generator = make_generator(1, 2, "AB")
        grid = generator.new_grid()
        grid.set_row(0, [Cell("A", CharacterStatus.CORRECT), Cell("B", CharacterStatus.PRESENT_WRONG_POSITION)])
        # B is required but excluded at column 1 and column 0 is fixed to A.
        self.assertEqual(generator.generate(grid), [])


class MalformedGridTests(unittest.TestCase):
    def test_missing_cell_at_first_column_yields_empty_candidate(self) -> None:
        generator = make_generator(2, 2, "AB")
        snapshot = GridSnapshot.from_rows([[Cell(), Cell()], []])
        self.assertEqual(generator.generate(snapshot), [""])

    def test_short_row_truncates_candidates(self) -> None:
        generator = make_generator(2, 2, "AB")
        rows = [[Cell(), Cell()], [Cell()]]
        self.assertEqual(generator.generate(rows), ["A", "B"])

    def test_no_rows(self) -> None:
        generator = make_generator(1, 1, "AB")
        self.assertEqual(generator.generate([]), [""])

    def test_invalid_entry_ends_candidates_at_its_column(self) -> None:
        generator = make_generator(1, 2, "AB")
        self.assertEqual(generator.generate([[Cell(), None]]), ["A", "B"])
        result = generator.analyze([[Cell("A", CharacterStatus.ABSENT), "junk"], [None, Cell()]])
        self.assertEqual(result.candidates, [""])
        self.assertEqual(result.prefiltered, "B")

    def test_invalid_entry_skipped_by_required_scan(self) -> None:
        generator = make_generator(1, 3, "AB")
        rows = [[Cell(), Cell("B", CharacterStatus.PRESENT_WRONG_POSITION), None]]
        self.assertEqual(generator.generate(rows), ["BA"])


class RawRowNormalizationTests(unittest.TestCase):
    def test_lowercase_raw_cells_are_normalized(self) -> None:
        generator = make_generator(1, 1, "AB")
        self.assertEqual(generator.generate([[Cell("a", "ABSENT")]]), ["B"])

    def test_lowercase_correct_cell(self) -> None:
        generator = make_generator(1, 2, "ABC")
        rows = [[Cell("c", CharacterStatus.CORRECT), Cell("b", "PRESENT_WRONG_POSITION")]]
        result = generator.analyze(rows)
        self.assertEqual(result.admissible, ["C", "AC"])
        self.assertEqual(result.required, ["B"])
        self.assertEqual(result.candidates, [])


class ConfigurationTests(unittest.TestCase):
    def test_rejects_bad_configuration_eagerly(self) -> None:
        with self.assertRaises(ConfigurationError):
            CandidateGenerator(GeneratorConfig(alphabet_mode="hex"))
        with self.assertRaises(ConfigurationError):
            CandidateGenerator(GeneratorConfig(engine="fast"))
        with self.assertRaises(ConfigurationError):
            CandidateGenerator(GeneratorConfig(absent_policy="sometimes"))
        with self.assertRaises(ConfigurationError):
            CandidateGenerator(GeneratorConfig(rows=0))

    def test_mode_selects_alphabet(self) -> None:
        generator = CandidateGenerator(GeneratorConfig(alphabet_mode=AlphabetMode.DIGITS_ONLY))
        self.assertEqual(generator.alphabet, "1234567890")

    def test_candidate_cap(self) -> None:
        generator = make_generator(1, 3, "AB", max_candidates=5)
        with self.assertRaises(CandidateLimitError):
            generator.generate(generator.new_grid())


class ValidationMessageTests(unittest.TestCase):
    def test_contradictions_are_reported_not_raised(self) -> None:
        generator = make_generator(2, 2, "AB")
        rows = [parse_guess("AB:GX"), parse_guess("BA:GY")]
        result = generator.analyze(rows)
        self.assertTrue(result.validation_messages)
        self.assertEqual(result.candidates, generator.generate(rows))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
