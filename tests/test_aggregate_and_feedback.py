import random
import sys
import unittest
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.scoring.aggregate import (  # noqa: E402
    Rating,
    RegionalRelevance,
    classify_rating,
    classify_regional_relevance,
    overall_score,
    round_half_up,
)
from cvscore.scoring.constants import load_scoring_constants  # noqa: E402
from cvscore.scoring.features import FeatureFlags  # noqa: E402
from cvscore.scoring.feedback import (  # noqa: E402
    FeedbackContext,
    build_rules,
    evaluate_rules,
    generate_feedback,
)
from cvscore.scoring.regional import score_regional  # noqa: E402
from cvscore.scoring.structure import score_format  # noqa: E402
from cvscore.taxonomy import LocalTaxonomy  # noqa: E402

EMPTY_FLAGS = FeatureFlags(
    has_sections=False,
    has_bullet_points=False,
    has_contact_info=False,
    has_date_ranges=False,
    has_any_year=False,
    average_line_length=0.0,
    has_action_verbs=False,
    has_quantified_achievement=False,
    has_any_skill_keyword=False,
    regional_keyword_matches=0,
    has_compliance_status_mention=False,
    has_qualification_level_mention=False,
    has_regional_address_mention=False,
    text_length=2000,
)


class AggregatorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.constants = load_scoring_constants()

    def test_weighted_overall_score(self):
        weights = self.constants.weights
        self.assertEqual(overall_score(100, 100, 100, weights), 100)
        self.assertEqual(overall_score(0, 0, 0, weights), 0)
        self.assertEqual(overall_score(80, 100, 90, weights), 91)
        self.assertEqual(overall_score(25, 50, 25, weights), 35)

    def test_halves_round_up(self):
        self.assertEqual(round_half_up(4.5), 5)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(overall_score(15, 0, 0, self.constants.weights), 5)

    def test_rating_thresholds_are_inclusive(self):
        thresholds = self.constants.rating_thresholds
        expected = {
            80: Rating.EXCELLENT,
            79: Rating.GOOD,
            65: Rating.GOOD,
            64: Rating.AVERAGE,
            50: Rating.AVERAGE,
            49: Rating.NEEDS_IMPROVEMENT,
            0: Rating.NEEDS_IMPROVEMENT,
        }
        for score, rating in expected.items():
            with self.subTest(score=score):
                self.assertEqual(classify_rating(score, thresholds), rating)

    def test_regional_relevance_thresholds_are_inclusive(self):
        thresholds = self.constants.relevance_thresholds
        expected = {
            80: RegionalRelevance.EXCELLENT,
            79: RegionalRelevance.GOOD,
            60: RegionalRelevance.GOOD,
            59: RegionalRelevance.AVERAGE,
            40: RegionalRelevance.AVERAGE,
            39: RegionalRelevance.LOW,
        }
        for score, relevance in expected.items():
            with self.subTest(score=score):
                self.assertEqual(classify_regional_relevance(score, thresholds), relevance)

    def test_dimension_points_come_from_config(self):
        flags = replace(EMPTY_FLAGS, has_sections=True, has_contact_info=True)
        expected = self.constants.format.sections + self.constants.format.contact_info
        self.assertEqual(score_format(flags, self.constants.format), expected)

    def test_regional_keyword_points_are_capped(self):
        flags = replace(EMPTY_FLAGS, regional_keyword_matches=10)
        self.assertEqual(score_regional(flags, self.constants.regional), self.constants.regional.keyword_cap)
        flags = replace(EMPTY_FLAGS, regional_keyword_matches=2)
        self.assertEqual(score_regional(flags, self.constants.regional), 10)


class FeedbackRuleTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.constants = load_scoring_constants()
        cls.taxonomy = LocalTaxonomy()
        cls.rules = build_rules(cls.taxonomy)

    def _context(self, flags, regional_score=0):
        return FeedbackContext(flags=flags, regional_context_score=regional_score, limits=self.constants.feedback)

    def test_rule_ids_are_unique(self):
        rule_ids = [rule.rule_id for rule in self.rules]
        self.assertEqual(len(rule_ids), len(set(rule_ids)))

    def test_regional_suggestions_only_when_regional_score_is_weak(self):
        compliance = "Consider adding B-BBEE status information if applicable"
        qualification = "Add NQF levels to your qualifications"
        address = "Include your location in South Africa"

        weak = evaluate_rules(self.rules, self._context(EMPTY_FLAGS, regional_score=59))
        for message in (compliance, qualification, address):
            self.assertIn(message, weak.improvements)

        strong = evaluate_rules(self.rules, self._context(EMPTY_FLAGS, regional_score=60))
        for message in (compliance, qualification, address):
            self.assertNotIn(message, strong.improvements)

    def test_positive_features_become_strengths(self):
        flags = replace(
            EMPTY_FLAGS,
            has_sections=True,
            has_compliance_status_mention=True,
            regional_keyword_matches=4,
        )
        feedback = evaluate_rules(self.rules, self._context(flags, regional_score=45))
        self.assertIn("Well-structured CV with clear sections", feedback.strengths)
        self.assertIn("Includes B-BBEE status, important for South African employers", feedback.strengths)
        self.assertIn("Well-optimized for the South African job market", feedback.strengths)
        self.assertNotIn("Add clear section headings (Education, Experience, Skills)", feedback.improvements)

    def test_format_feedback_rules(self):
        flags = replace(EMPTY_FLAGS, average_line_length=250.0, text_length=6000, has_contact_info=True)
        feedback = evaluate_rules(self.rules, self._context(flags))
        self.assertEqual(
            set(feedback.format_feedback),
            {
                "Shorten your bullet points to 1-2 lines each",
                "Consider shortening your CV to 2-3 pages maximum",
                "Add dates to your work experience and education sections",
            },
        )

        short = evaluate_rules(self.rules, self._context(replace(EMPTY_FLAGS, text_length=100)))
        self.assertIn("Your CV may be too short - add more relevant details", short.format_feedback)
        self.assertIn("Add complete contact information (phone, email, LinkedIn)", short.format_feedback)

    def test_no_message_fires_twice(self):
        feedback = evaluate_rules(self.rules, self._context(EMPTY_FLAGS))
        for bucket in (feedback.strengths, feedback.improvements, feedback.format_feedback):
            self.assertEqual(len(bucket), len(set(bucket)))

    def test_generate_feedback_shuffles_then_truncates(self):
        context = self._context(EMPTY_FLAGS)
        full = evaluate_rules(self.rules, context)
        capped = generate_feedback(context, self.taxonomy, self.constants.caps, random.Random(5))

        self.assertEqual(len(capped.improvements), self.constants.caps.improvements)
        self.assertTrue(set(capped.improvements) <= set(full.improvements))
        self.assertEqual(
            capped,
            generate_feedback(context, self.taxonomy, self.constants.caps, random.Random(5)),
        )


if __name__ == "__main__":
    unittest.main()
