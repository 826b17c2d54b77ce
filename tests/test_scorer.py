import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from harvard_ats.ats.scanner import BOILERPLATE_REFERENCES, NON_ASCII, TABLE_FORMATTING  # noqa: E402
from harvard_ats.ats.scorer import completeness_gaps, keyword_coverage, keyword_terms, score  # noqa: E402
from harvard_ats.schemas.resume import (  # noqa: E402
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeRecord,
    Skills,
)


def _education() -> list[EducationEntry]:
    return [
        EducationEntry(
            institution="MIT",
            degree="BS",
            location="Cambridge, MA",
            graduation_date="05/2020",
        )
    ]


def _record(bullets: list[str] | None = None) -> ResumeRecord:
    return ResumeRecord(
        personal_info=PersonalInfo(full_name="Jane Doe", email="jane@x.com", phone="555-1234"),
        education=_education(),
        experience=[
            ExperienceEntry(
                organization="Acme",
                position="Analyst",
                location="Boston, MA",
                start_date="06/2020",
                end_date="Present",
                bullets=bullets if bullets is not None else ["Built pricing models in Python"],
            )
        ],
        skills=Skills(technical=["Python", "SQL"]),
    )


class CompatibilityScorerTests(unittest.TestCase):
    def assertConsistent(self, report):
        breakdown = report.breakdown
        self.assertEqual(
            breakdown.content_parsing + breakdown.keyword_relevance + breakdown.format_optimization,
            report.score,
        )
        self.assertTrue(0 <= report.score <= 100)
        self.assertGreaterEqual(len(report.suggestions), 3)
        self.assertEqual(len(report.suggestions), len(set(report.suggestions)))

    def test_minimal_record_with_empty_experience(self):
        record = ResumeRecord(
            personal_info=PersonalInfo(full_name="Jane Doe", email="jane@x.com", phone="555-1234"),
            education=_education(),
        )
        report = score(record)

        self.assertConsistent(report)
        self.assertLessEqual(report.breakdown.content_parsing, 30)
        self.assertEqual(report.breakdown.content_parsing, 30)
        self.assertEqual(report.breakdown.keyword_relevance, 20)
        # The contact separator is outside 7-bit ASCII.
        self.assertEqual(report.breakdown.format_optimization, 20)
        self.assertEqual(report.score, 70)
        self.assertEqual(report.suggestions[0], NON_ASCII.suggestion)
        self.assertIn(
            "Add at least one experience entry with achievement-focused bullet points.",
            report.suggestions,
        )

    def test_complete_record_without_job_description(self):
        report = score(_record())
        self.assertConsistent(report)
        self.assertEqual(report.breakdown.content_parsing, 40)
        self.assertEqual(report.breakdown.keyword_relevance, 20)
        self.assertEqual(report.score, 80)
        self.assertEqual(
            report.suggestions,
            [
                NON_ASCII.suggestion,
                "Use standard section headers (Experience, Education, Skills)",
                "Include more relevant keywords from the job description",
            ],
        )

    def test_each_finding_costs_five_format_points(self):
        report = score(_record(["Python │ SQL", "References available upon request"]))
        self.assertConsistent(report)
        self.assertEqual(report.breakdown.format_optimization, 10)
        self.assertEqual(
            report.suggestions[:3],
            [TABLE_FORMATTING.suggestion, NON_ASCII.suggestion, BOILERPLATE_REFERENCES.suggestion],
        )

    def test_full_dates_are_suggested_once(self):
        report = score(_record(["Joined 01/15/2022", "Promoted 02/01/2023"]))
        date_suggestions = [s for s in report.suggestions if "MM/YYYY" in s]
        self.assertEqual(len(date_suggestions), 1)
        self.assertEqual(report.breakdown.format_optimization, 15)

    def test_malformed_record_scores_without_failing(self):
        report = score(ResumeRecord())
        self.assertConsistent(report)
        self.assertEqual(report.breakdown.content_parsing, 0)
        self.assertEqual(report.breakdown.format_optimization, 25)
        self.assertEqual(report.score, 45)
        self.assertEqual(len(report.suggestions), 4)
        self.assertEqual(report.suggestions[1], "Add your full name at the top of the resume.")

    def test_job_description_coverage_scales_keyword_component(self):
        report = score(_record(), "Python pricing models Kubernetes")
        self.assertConsistent(report)
        self.assertEqual(report.breakdown.keyword_relevance, 26)
        self.assertIn(
            "Include job description keywords missing from your resume: kubernetes",
            report.suggestions,
        )

    def test_full_job_description_coverage(self):
        report = score(_record(), "Python pricing")
        self.assertEqual(report.breakdown.keyword_relevance, 35)
        self.assertEqual(report.score, 95)

    def test_blank_or_stopword_job_description_is_neutral(self):
        for job_description in (None, "", "   ", "the with and from"):
            with self.subTest(job_description=job_description):
                report = score(_record(), job_description)
                self.assertEqual(report.breakdown.keyword_relevance, 20)

    def test_external_keyword_signal_overrides_baseline(self):
        cases = [(0.5, 18), (1.0, 35), (2.0, 35), (-1.0, 0), (0.0, 0)]
        for signal, expected in cases:
            with self.subTest(signal=signal):
                report = score(_record(), "Kubernetes Terraform", keyword_signal=signal)
                self.assertConsistent(report)
                self.assertEqual(report.breakdown.keyword_relevance, expected)

    def test_non_finite_signal_uses_baseline(self):
        report = score(_record(), "Python pricing", keyword_signal=float("nan"))
        self.assertEqual(report.breakdown.keyword_relevance, 35)

    def test_scoring_is_deterministic(self):
        record = _record(["Python │ SQL"])
        self.assertEqual(
            score(record, "Python Kubernetes").model_dump(),
            score(record, "Python Kubernetes").model_dump(),
        )


class KeywordHelperTests(unittest.TestCase):
    def test_keyword_terms_skip_short_and_stop_words(self):
        self.assertEqual(
            keyword_terms("We need Python, python and SQL with strong Django skills"),
            ["need", "python", "django"],
        )

    def test_keyword_coverage_reports_missing_terms(self):
        fraction, missing = keyword_coverage("python developer", "Python Developer Java")
        self.assertAlmostEqual(fraction, 2 / 3)
        self.assertEqual(missing, ["java"])

    def test_keyword_coverage_without_terms(self):
        self.assertEqual(keyword_coverage("python", "a an the"), (None, []))

    def test_completeness_gaps_order(self):
        self.assertEqual(
            completeness_gaps(ResumeRecord()),
            ["missing_email", "missing_full_name", "empty_education", "empty_experience"],
        )
        self.assertEqual(completeness_gaps(_record()), [])


if __name__ == "__main__":
    unittest.main()
