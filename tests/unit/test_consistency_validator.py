"""一致性校验单元测试"""

from ember_quality.models import Severity
from ember_quality.validators.consistency import find_option_for_answer, validate_consistency


def by_name(results):
    return {r.check_name: r for r in results}


class TestConsistencyValidator:
    """答案、选项与 correct_option 一致性"""

    def test_valid_question_passes_all_checks(self, valid_question):
        results = validate_consistency(valid_question)

        assert [r.check_name for r in results] == [
            "answer_exists_in_options",
            "correct_option_matches_computed",
            "self_verification_status",
            "no_duplicate_options",
            "required_fields_present",
        ]
        assert all(r.passed for r in results)
        assert by_name(results)["self_verification_status"].severity == Severity.WARNING

    def test_answer_under_other_option_suggests_correction(self, correctable_question):
        checks = by_name(validate_consistency(correctable_question))

        mismatch = checks["correct_option_matches_computed"]
        assert mismatch.passed is False
        assert mismatch.severity == Severity.CRITICAL
        assert mismatch.suggested_option_key == "c"
        assert mismatch.details == 'MISMATCH: Option a is "7/12" but computed answer is "1 6/35"'

        suggestion = checks["suggested_correction"]
        assert suggestion.passed is False
        assert suggestion.severity == Severity.ERROR
        assert suggestion.details == 'correct_option should be "c" not "a"'
        assert checks["answer_exists_in_options"].passed is True

    def test_answer_missing_from_options(self, question_factory):
        question = question_factory(computed_answer="2")
        checks = by_name(validate_consistency(question))

        assert checks["answer_exists_in_options"].passed is False
        assert checks["answer_exists_in_options"].severity == Severity.CRITICAL
        assert checks["correct_option_matches_computed"].passed is False
        assert checks["correct_option_matches_computed"].suggested_option_key is None
        assert "suggested_correction" not in checks

    def test_normalized_match(self, question_factory):
        question = question_factory(computed_answer=" 1  6/35 ")

        assert find_option_for_answer(question) == "a"
        assert all(r.passed for r in validate_consistency(question))

    def test_correct_option_not_a_key(self, question_factory):
        checks = by_name(validate_consistency(question_factory(correct_option="z")))

        assert checks["correct_option_matches_computed"].passed is False
        assert checks["correct_option_matches_computed"].suggested_option_key == "a"

    def test_self_verification_not_verified_blocks(self, question_factory):
        question = question_factory(
            verification={"computed_answer_matches_option": False, "verification_status": "MISMATCH"}
        )
        check = by_name(validate_consistency(question))["self_verification_status"]

        assert check.passed is False
        assert check.severity == Severity.ERROR
        assert check.details == "Self-reported status: MISMATCH"

    def test_self_verification_missing(self, question_factory):
        check = by_name(validate_consistency(question_factory(verification={})))["self_verification_status"]

        assert check.passed is False
        assert check.details == "Self-reported status: MISSING"

    def test_duplicate_options(self, question_factory):
        question = question_factory(
            options={"a": "1 6/35", "b": "1/2", "c": "1/2 ", "d": "2.50", "e": "2.5"},
        )
        check = by_name(validate_consistency(question))["no_duplicate_options"]

        assert check.passed is False
        assert check.severity == Severity.ERROR
        assert check.details == "Duplicate options detected: 1/2, 2.5"

    def test_wrong_option_count(self, question_factory):
        question = question_factory(options={"a": "1 6/35", "b": "7/12", "c": "1 1/35", "d": "41/70"})
        check = by_name(validate_consistency(question))["required_fields_present"]

        assert check.passed is False
        assert check.severity == Severity.CRITICAL
        assert "expected 5 options, got 4" in check.details

    def test_missing_text_fields(self, question_factory):
        question = question_factory(question_text="", topic="  ")
        check = by_name(validate_consistency(question))["required_fields_present"]

        assert check.passed is False
        assert "topic" in check.details
        assert "question_text" in check.details

    def test_unknown_option_keys(self, question_factory):
        question = question_factory(options={"a": "1 6/35", "b": "7/12", "c": "1 1/35", "d": "41/70", "f": "6/35"})
        check = by_name(validate_consistency(question))["required_fields_present"]

        assert check.passed is False
        assert "unexpected option keys: f" in check.details

    def test_empty_option_value(self, question_factory):
        question = question_factory(options={"a": "1 6/35", "b": "7/12", "c": "  ", "d": "41/70", "e": "6/35"})
        check = by_name(validate_consistency(question))["required_fields_present"]

        assert check.passed is False
        assert check.severity == Severity.CRITICAL
        assert "empty options: c" in check.details
