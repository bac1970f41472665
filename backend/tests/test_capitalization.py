"""Unit tests for word-level capitalization rules."""

import unittest

from intro_validator.validation.capitalization import CapitalizationChecker


class CapitalizationCheckerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.checker = CapitalizationChecker()

    def test_title_cased_full_name_is_valid(self) -> None:
        result = self.checker.validate_name("John Doe")

        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])

    def test_single_word_name_is_rejected_even_when_capitalized(self) -> None:
        result = self.checker.validate_name("John")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.messages, ["Name must contain at least first and last name"])

    def test_each_lowercase_name_word_gets_its_own_error(self) -> None:
        result = self.checker.validate_name("john doe")

        self.assertEqual(
            result.messages,
            [
                'Name "john" must start with capital letter',
                'Name "doe" must start with capital letter',
            ],
        )

    def test_mixed_case_tail_is_not_title_case(self) -> None:
        result = self.checker.validate_name("John DOE")

        self.assertEqual(result.messages, ['Name "DOE" must start with capital letter'])

    def test_location_allows_lowercase_connectors_after_first_word(self) -> None:
        self.assertTrue(self.checker.validate_location("Port of Spain").is_valid)
        self.assertTrue(self.checker.validate_location("Navi Mumbai").is_valid)

    def test_location_connector_must_be_lowercase(self) -> None:
        result = self.checker.validate_location("Port Of Spain")

        self.assertEqual(result.messages, ['Word "Of" should be lowercase'])

    def test_location_reports_every_malformed_word(self) -> None:
        result = self.checker.validate_location("navi mumbai")

        self.assertEqual(
            result.messages,
            [
                'Location word "navi" must be properly capitalized',
                'Location word "mumbai" must be properly capitalized',
            ],
        )

    def test_branch_name_with_connector_and_abbreviation(self) -> None:
        self.assertTrue(self.checker.validate_branch_name("Electronics and Communication Engineering").is_valid)
        self.assertFalse(self.checker.validate_branch_name("Computer Science with AI and ML").is_valid)
        self.assertTrue(self.checker.validate_branch_name("CS and AI").is_valid)

    def test_abbreviation_must_be_uppercase(self) -> None:
        result = self.checker.validate_branch_name("Ai and Ml")

        self.assertEqual(
            result.messages,
            [
                'Abbreviation "Ai" should be in uppercase',
                'Abbreviation "Ml" should be in uppercase',
            ],
        )

    def test_abbreviation_takes_precedence_over_connector_rule(self) -> None:
        # "it" is checked as the abbreviation IT, never as a plain word.
        self.assertTrue(self.checker.validate_branch_name("Information Technology IT").is_valid)
        self.assertFalse(self.checker.validate_branch_name("Information Technology it").is_valid)

    def test_connector_as_first_word_needs_title_case(self) -> None:
        result = self.checker.validate_branch_name("and Engineering")

        self.assertEqual(result.messages, ['Branch name word "and" must start with capital letter'])

    def test_lowercase_branch_words_are_reported(self) -> None:
        result = self.checker.validate_branch_name("computer science engineering")

        self.assertEqual(len(result.errors), 3)
        self.assertIn('Branch name word "computer" must start with capital letter', result.messages)

    def test_suggest_capitalization(self) -> None:
        self.assertEqual(
            self.checker.suggest_capitalization("computer science AND engineering"),
            "Computer Science and Engineering",
        )
        self.assertEqual(self.checker.suggest_capitalization("ai and ml"), "AI and ML")
        self.assertEqual(self.checker.suggest_capitalization("the  hague"), "The Hague")


if __name__ == "__main__":
    unittest.main()
