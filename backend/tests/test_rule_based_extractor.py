"""Unit tests for the regex strategy pipeline, scoring and deduplication."""

from __future__ import annotations

import unittest
from datetime import date, datetime, time

from taskcapture.extraction.rule_based_extractor import RuleBasedTaskExtractor, preprocess
from taskcapture.extraction.strategies import STRATEGIES, deadlines, shopping_lists
from taskcapture.extraction.types import Priority

# Wednesday.
NOW = datetime(2026, 10, 14, 9, 30)

SAMPLE_TEXTS = (
    "Remind me to buy groceries tomorrow at 3 PM",
    "Doctor appointment next Friday",
    "don't forget to pick up milk, pick up milk today",
    "Mom: can you pick up the kids from school Friday?",
    "We need milk, eggs and bread.",
    "The quarterly report is due by Friday. Let's review it tomorrow!",
    "ok thanks",
    "1. Book flights 2. Renew passport",
    "URGENT please call the plumber right now [sent 9:14]",
)


def _titles(candidates) -> list[str]:
    return [candidate.title for candidate in candidates]


class ReferenceExampleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.extractor = RuleBasedTaskExtractor()

    def test_groceries_reminder(self) -> None:
        candidates = self.extractor.extract("Remind me to buy groceries tomorrow at 3 PM", NOW)
        self.assertEqual(len(candidates), 1)
        candidate = candidates[0]
        self.assertEqual(candidate.title, "Buy groceries")
        self.assertEqual(candidate.date, date(2026, 10, 15))
        self.assertEqual(candidate.time, time(15, 0))
        self.assertGreaterEqual(candidate.confidence, 0.8)
        self.assertEqual(candidate.suggested_category, "household")

    def test_doctor_appointment_lands_on_future_friday(self) -> None:
        candidates = self.extractor.extract("Doctor appointment next Friday", NOW)
        self.assertEqual(len(candidates), 1)
        candidate = candidates[0]
        self.assertEqual(candidate.title, "Doctor appointment")
        self.assertEqual(candidate.date, date(2026, 10, 16))
        self.assertGreater(candidate.date, NOW.date())
        self.assertEqual(candidate.suggested_category, "health")

    def test_overlapping_milk_requests_collapse(self) -> None:
        candidates = self.extractor.extract("don't forget to pick up milk, pick up milk today", NOW)
        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].title, "Pick up milk")
        self.assertEqual(candidates[0].date, date(2026, 10, 14))
        self.assertAlmostEqual(candidates[0].confidence, 1.0)

    def test_generic_text_produces_nothing(self) -> None:
        self.assertEqual(self.extractor.extract("ok", NOW), [])
        self.assertEqual(self.extractor.extract("thanks", NOW), [])
        self.assertEqual(self.extractor.extract("please thanks", NOW), [])

    def test_empty_input(self) -> None:
        self.assertEqual(self.extractor.extract("", NOW), [])
        self.assertEqual(self.extractor.extract("   ", NOW), [])


class PipelinePropertyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.extractor = RuleBasedTaskExtractor()

    def test_confidence_is_always_bounded(self) -> None:
        for text in SAMPLE_TEXTS:
            for candidate in self.extractor.extract(text, NOW):
                self.assertGreaterEqual(candidate.confidence, 0.0, text)
                self.assertLessEqual(candidate.confidence, 1.0, text)

    def test_extraction_is_deterministic(self) -> None:
        for text in SAMPLE_TEXTS:
            first = self.extractor.extract(text, NOW)
            second = self.extractor.extract(text, NOW)
            self.assertEqual(first, second, text)

    def test_results_are_ranked_by_confidence(self) -> None:
        for text in SAMPLE_TEXTS:
            scores = [candidate.confidence for candidate in self.extractor.extract(text, NOW)]
            self.assertEqual(scores, sorted(scores, reverse=True), text)

    def test_no_generic_titles(self) -> None:
        for text in SAMPLE_TEXTS:
            for title in _titles(self.extractor.extract(text, NOW)):
                self.assertNotIn(title.lower(), {"ok", "thanks", "ok thanks"})


class StrategyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.extractor = RuleBasedTaskExtractor()

    def test_strategy_table_order(self) -> None:
        self.assertEqual(
            [name for name, _ in STRATEGIES],
            [
                "direct_request",
                "scheduled_item",
                "shopping_list",
                "appointment",
                "reminder",
                "deadline",
                "action_item",
                "household",
            ],
        )

    def test_chat_request_with_speaker_prefix(self) -> None:
        candidates = self.extractor.extract("Mom: can you pick up the kids from school Friday?", NOW)
        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].title, "Pick up the kids from school")
        self.assertEqual(candidates[0].date, date(2026, 10, 16))
        self.assertEqual(candidates[0].suggested_category, "family")

    def test_shopping_list_splits_items(self) -> None:
        candidates = self.extractor.extract("We need milk, eggs and bread.", NOW)
        self.assertEqual(_titles(candidates), ["Buy milk", "Buy eggs", "Buy bread"])
        self.assertTrue(all(c.suggested_category == "household" for c in candidates))
        self.assertTrue(all(c.strategy == "shopping_list" for c in candidates))

    def test_grocery_label_at_message_start(self) -> None:
        candidates = self.extractor.extract("Groceries: milk, eggs, bread", NOW)
        self.assertEqual(_titles(candidates), ["Buy milk", "Buy eggs", "Buy bread"])
        self.assertTrue(all(c.suggested_category == "household" for c in candidates))
        self.assertTrue(all(c.strategy == "shopping_list" for c in candidates))

    def test_todo_label_at_message_start(self) -> None:
        candidates = self.extractor.extract("Todo: call the bank", NOW)
        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].title, "Call the bank")
        self.assertEqual(candidates[0].strategy, "action_item")

    def test_shopping_items_ignore_infinitives(self) -> None:
        self.assertEqual(shopping_lists("I need to call the bank"), [])

    def test_deadline_forces_high_priority(self) -> None:
        candidates = self.extractor.extract("The quarterly report is due by Friday.", NOW)
        self.assertEqual(len(candidates), 1)
        candidate = candidates[0]
        self.assertEqual(candidate.strategy, "deadline")
        self.assertEqual(candidate.inferred_priority, Priority.HIGH)
        self.assertEqual(candidate.date, date(2026, 10, 16))
        self.assertEqual(candidate.suggested_category, "work")

    def test_deadline_date_fragment_is_the_due_part(self) -> None:
        matches = deadlines("Deadline for the tax forms is next Monday")
        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].action_phrase, "the tax forms")
        self.assertEqual(matches[0].date_fragment, "next Monday")
        self.assertAlmostEqual(matches[0].confidence_boost, 0.15)

    def test_reminder_boost_is_applied(self) -> None:
        candidates = self.extractor.extract("note to self: call the plumber", NOW)
        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].title, "Call the plumber")
        self.assertEqual(candidates[0].strategy, "reminder")
        self.assertAlmostEqual(candidates[0].confidence, 0.75)

    def test_numbered_list_items(self) -> None:
        candidates = self.extractor.extract("1. Book flights 2. Renew passport", NOW)
        self.assertEqual(sorted(_titles(candidates)), ["Book flights", "Renew passport"])
        self.assertEqual(candidates[0].title, "Book flights")

    def test_household_room_need(self) -> None:
        candidates = self.extractor.extract("The kitchen needs cleaning", NOW)
        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].title, "Cleaning kitchen")
        self.assertEqual(candidates[0].suggested_category, "household")
        self.assertEqual(candidates[0].strategy, "household")

    def test_urgent_request_priority_and_metadata_removal(self) -> None:
        candidates = self.extractor.extract("please call the plumber right now [sent 9:14]", NOW)
        self.assertEqual(len(candidates), 1)
        candidate = candidates[0]
        self.assertEqual(candidate.title, "Call the plumber")
        self.assertEqual(candidate.inferred_priority, Priority.URGENT)
        self.assertEqual((candidate.date, candidate.time), (date(2026, 10, 14), time(9, 30)))
        self.assertNotIn("[", candidate.original_text)


class PreprocessTests(unittest.TestCase):
    def test_preprocess_normalises_chat_text(self) -> None:
        self.assertEqual(preprocess("  Sam:   pick up  milk [edited] "), "pick up milk")
        self.assertEqual(preprocess("call at 5 p.m. today"), "call at 5 pm today")

    def test_list_labels_are_not_speaker_prefixes(self) -> None:
        self.assertEqual(preprocess("Groceries: milk, eggs"), "Groceries: milk, eggs")
        self.assertEqual(preprocess("todo: call the bank"), "todo: call the bank")
        self.assertEqual(preprocess("Sam: todo: call the bank"), "todo: call the bank")


if __name__ == "__main__":
    unittest.main()
