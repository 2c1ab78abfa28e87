import random
import sys
import unittest
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.scoring.constants import load_scoring_constants  # noqa: E402
from cvscore.scoring.job_match import JobRelevance, match_job_description  # noqa: E402
from cvscore.scoring.skills import extract_skills  # noqa: E402
from cvscore.taxonomy import LocalTaxonomy  # noqa: E402


class SkillExtractorTests(unittest.TestCase):
    TERMS = ("javascript", "java", "node.js", "c++", "css")

    def test_whole_word_matches_only(self):
        found = extract_skills("javascript and java, node.js, c++", self.TERMS, cap=10, rng=random.Random(0))
        self.assertEqual(sorted(found), sorted(["javascript", "java", "node.js", "c++"]))

    def test_java_is_not_found_inside_javascript(self):
        found = extract_skills("senior javascript engineer", self.TERMS, cap=10)
        self.assertEqual(found, ["javascript"])

    def test_cap_truncates_after_shuffle(self):
        text = "javascript java node.js c++ css"
        found = extract_skills(text, self.TERMS, cap=2, rng=random.Random(3))
        self.assertEqual(len(found), 2)
        self.assertTrue(set(found) <= set(self.TERMS))
        self.assertEqual(extract_skills(text, self.TERMS, cap=0), [])


class JobMatchTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.settings = load_scoring_constants().job_match
        cls.skills = LocalTaxonomy().terms("skills")

    def test_no_job_description_means_no_match(self):
        self.assertIsNone(match_job_description("python", None, self.skills, self.settings))
        self.assertIsNone(match_job_description("python", "   ", self.skills, self.settings))

    def test_skill_overlap(self):
        match = match_job_description(
            "python and sql developer",
            "Looking for a Python and SQL developer with AWS exposure",
            self.skills,
            self.settings,
        )
        self.assertEqual(match.matched_terms, ("python", "sql"))
        self.assertEqual(match.missing_terms, ("aws",))
        self.assertEqual(match.match_score, 67)
        self.assertEqual(match.relevance, JobRelevance.MEDIUM)

    def test_full_overlap_is_high(self):
        match = match_job_description("excel and accounting", "Excel, accounting", self.skills, self.settings)
        self.assertEqual(match.match_score, 100)
        self.assertEqual(match.relevance, JobRelevance.HIGH)

    def test_falls_back_to_content_words(self):
        match = match_job_description(
            "forklift operator with warehouse background",
            "Warehouse forklift operator needed for logistics depot",
            self.skills,
            self.settings,
        )
        self.assertEqual(match.matched_terms, ("warehouse", "forklift", "operator"))
        self.assertEqual(match.match_score, 50)
        self.assertEqual(match.relevance, JobRelevance.MEDIUM)

    def test_fallback_terms_are_capped(self):
        settings = replace(self.settings, max_reference_terms=2)
        match = match_job_description(
            "forklift",
            "Forklift forklift warehouse warehouse logistics",
            self.skills,
            settings,
        )
        self.assertEqual(match.matched_terms, ("forklift",))
        self.assertEqual(match.missing_terms, ("warehouse",))
        self.assertEqual(match.match_score, 50)

    def test_no_usable_terms_scores_zero(self):
        match = match_job_description("python", "we are a team", self.skills, self.settings)
        self.assertEqual(match.match_score, 0)
        self.assertEqual(match.relevance, JobRelevance.LOW)


if __name__ == "__main__":
    unittest.main()
