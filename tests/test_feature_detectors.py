import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.scoring import content, regional, structure  # noqa: E402
from cvscore.scoring.features import build_feature_flags  # noqa: E402
from cvscore.scoring.normalize import normalize_text  # noqa: E402
from cvscore.taxonomy import LocalTaxonomy  # noqa: E402


class NormalizerTests(unittest.TestCase):
    def test_trims_lowercases_and_drops_blank_lines(self):
        normalized = normalize_text("  Jane DOE\r\n\r\n  Skills: Python  \n\n")
        self.assertEqual(normalized.text, "jane doe\r\n\r\n  skills: python")
        self.assertEqual(normalized.lines, ("jane doe", "skills: python"))

    def test_empty_input_has_no_lines(self):
        self.assertEqual(normalize_text("").lines, ())

    def test_leading_byte_order_mark_is_dropped(self):
        normalized = normalize_text("\ufeff- led projects\nEducation")
        self.assertEqual(normalized.lines, ("- led projects", "education"))
        self.assertTrue(structure.has_bullet_points(normalized.text))


class StructuralDetectorTests(unittest.TestCase):
    def test_section_words_match_whole_words_only(self):
        self.assertTrue(structure.has_sections("work history\nacme corp"))
        self.assertTrue(structure.has_sections("personal details"))
        self.assertFalse(structure.has_sections("an experienced developer"))

    def test_bullet_glyphs_at_line_start(self):
        self.assertTrue(structure.has_bullet_points("• shipped features"))
        self.assertTrue(structure.has_bullet_points("key skills\n* python"))
        self.assertTrue(structure.has_bullet_points("summary\n   - led projects"))
        self.assertFalse(structure.has_bullet_points("a well-known b-bbee supplier"))
        self.assertFalse(structure.has_bullet_points("*starred note"))

    def test_contact_markers(self):
        self.assertTrue(structure.has_contact_info("linkedin.com/in/jane"))
        self.assertTrue(structure.has_contact_info("jane@example.com"))
        self.assertTrue(structure.has_contact_info("telephone: 011 555 0000"))
        self.assertFalse(structure.has_contact_info("software developer"))

    def test_date_ranges(self):
        for text in (
            "jan 2019 - present",
            "january 2018 to march 2020",
            "2019 - 2022",
            "2015 to current",
            "sept 2020 – 2021",
        ):
            with self.subTest(text=text):
                self.assertTrue(structure.has_date_ranges(text))
        for text in ("b-bbee level 2", "phone 082 555 1234", "joined in 2019"):
            with self.subTest(text=text):
                self.assertFalse(structure.has_date_ranges(text))

    def test_any_year_range(self):
        self.assertTrue(structure.has_any_year("class of 1900"))
        self.assertTrue(structure.has_any_year("until 2099"))
        self.assertFalse(structure.has_any_year("born 1899"))
        self.assertFalse(structure.has_any_year("order 21000"))


class ContentDetectorTests(unittest.TestCase):
    def test_average_line_length_handles_no_lines(self):
        self.assertEqual(content.average_line_length([]), 0.0)
        self.assertEqual(content.average_line_length(["abcd", "ab"]), 3.0)

    def test_action_verbs_are_whole_words(self):
        self.assertTrue(content.has_action_verbs("led the team"))
        self.assertFalse(content.has_action_verbs("leadership and teamwork"))

    def test_quantified_achievements(self):
        self.assertTrue(content.has_quantified_achievement("grew revenue 40%"))
        self.assertTrue(content.has_quantified_achievement("reduced costs by 15 percent"))
        self.assertTrue(content.has_quantified_achievement("improved by 3 points"))
        self.assertFalse(content.has_quantified_achievement("increased revenue"))
        self.assertFalse(content.has_quantified_achievement("managed 5 people"))

    def test_skill_keyword_uses_word_boundaries(self):
        self.assertFalse(content.has_any_skill_keyword("javascript developer", ("java",)))
        self.assertTrue(content.has_any_skill_keyword("java developer", ("java",)))


class RegionalDetectorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.taxonomy = LocalTaxonomy()

    def test_keyword_count_is_substring_based_and_distinct(self):
        keywords = regional.regional_keywords(self.taxonomy)
        self.assertEqual(regional.count_regional_keywords("b-bbee level 1", keywords), 2)
        self.assertEqual(regional.count_regional_keywords("durban durban durban", keywords), 1)
        self.assertEqual(regional.count_regional_keywords("nothing here", keywords), 0)

    def test_original_language_spellings_are_regional_keywords(self):
        keywords = regional.regional_keywords(self.taxonomy)
        self.assertEqual(regional.count_regional_keywords("fluent in sepedi", keywords), 1)
        self.assertEqual(regional.count_regional_keywords("fluent in swazi", keywords), 1)

    def test_abbreviations_count_as_whole_words_only(self):
        keywords = regional.regional_keywords(self.taxonomy)
        abbreviations = regional.regional_abbreviations(self.taxonomy)
        self.assertEqual(
            regional.count_regional_keywords("matric (ieb), uct graduate, rsa", keywords, abbreviations),
            4,
        )
        self.assertEqual(regional.count_regional_keywords("product manager", keywords, abbreviations), 0)

    def test_compliance_status_mentions(self):
        self.assertTrue(regional.has_compliance_status_mention("b-bbee level 2", self.taxonomy))
        self.assertTrue(regional.has_compliance_status_mention("level 4 contributor", self.taxonomy))
        self.assertTrue(
            regional.has_compliance_status_mention("broad-based black economic empowerment", self.taxonomy)
        )
        self.assertFalse(regional.has_compliance_status_mention("nqf level 5", self.taxonomy))

    def test_qualification_level_mentions(self):
        self.assertTrue(regional.has_qualification_level_mention("nqf level 7", self.taxonomy))
        self.assertTrue(regional.has_qualification_level_mention("nqf 6 diploma", self.taxonomy))
        self.assertTrue(regional.has_qualification_level_mention("national qualifications framework", self.taxonomy))
        self.assertFalse(regional.has_qualification_level_mention("level 7", self.taxonomy))

    def test_regional_address_mentions(self):
        self.assertTrue(regional.has_regional_address_mention("based in kwazulu-natal.", self.taxonomy))
        self.assertTrue(regional.has_regional_address_mention("gauteng", self.taxonomy))
        self.assertFalse(regional.has_regional_address_mention("kznx holdings", self.taxonomy))


class FeatureFlagTests(unittest.TestCase):
    def test_flags_from_degenerate_text(self):
        flags = build_feature_flags(normalize_text("..."), LocalTaxonomy())
        self.assertFalse(flags.has_sections)
        self.assertEqual(flags.regional_keyword_matches, 0)
        self.assertEqual(flags.average_line_length, 3.0)
        self.assertEqual(flags.text_length, 3)


if __name__ == "__main__":
    unittest.main()
