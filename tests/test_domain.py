"""
Unit tests for the domain layer (clue data and reveal transitions).

Run with:
    python -m pytest tests/test_domain.py
"""
import unittest

from src.jeopardy_board.domain import (
    Category,
    Clue,
    RevealState,
    advance,
    category_from_record,
    category_ids_from_records,
    cell_id,
    clue_at,
    clue_from_record,
    next_state,
    parse_cell_id,
)
from tests.helpers import category_record


class TestClueFromRecord(unittest.TestCase):

    def test_normalizes_whitespace_and_starts_hidden(self):
        clue = clue_from_record({'question': '  Hamlet\n author ', 'answer': 'Shakespeare'})
        self.assertEqual(clue.question, 'Hamlet author')
        self.assertEqual(clue.answer, 'Shakespeare')
        self.assertIs(clue.reveal_state, RevealState.HIDDEN)

    def test_numeric_answer_becomes_text(self):
        clue = clue_from_record({'question': '2+2', 'answer': 4})
        self.assertEqual(clue.answer, '4')

    def test_missing_text_is_rejected(self):
        self.assertIsNone(clue_from_record({'question': '', 'answer': 'x'}))
        self.assertIsNone(clue_from_record({'question': 'q'}))
        self.assertIsNone(clue_from_record('not a record'))


class TestCategoryFromRecord(unittest.TestCase):

    def test_truncates_to_first_five_clues(self):
        cat = category_from_record(category_record(42, n_clues=9))
        self.assertEqual(cat.title, 'category 42')
        self.assertEqual(cat.id, 42)
        self.assertEqual(len(cat.clues), 5)
        self.assertEqual([c.question for c in cat.clues],
                         [f'question 42.{i}' for i in range(5)])
        self.assertTrue(all(c.reveal_state is RevealState.HIDDEN for c in cat.clues))

    def test_short_category_is_skipped(self):
        self.assertIsNone(category_from_record(category_record(3, n_clues=4)))

    def test_missing_title_or_clues_is_skipped(self):
        self.assertIsNone(category_from_record({'title': '', 'clues': []}))
        self.assertIsNone(category_from_record({'title': 'Math', 'clues': None}))
        self.assertIsNone(category_from_record(None))

    def test_unusable_clue_in_first_five_skips_category(self):
        rec = category_record(5, n_clues=7)
        rec['clues'][1]['answer'] = ''
        self.assertIsNone(category_from_record(rec))

    def test_unusable_clue_after_first_five_is_ignored(self):
        rec = category_record(6, n_clues=7)
        rec['clues'][5]['question'] = ''
        cat = category_from_record(rec)
        self.assertEqual([c.question for c in cat.clues],
                         [f'question 6.{i}' for i in range(5)])


class TestCategoryIds(unittest.TestCase):

    def test_collapses_duplicates_and_skips_bad_ids(self):
        records = [{'id': 3}, {'id': '4'}, {'id': 3}, {'title': 'no id'}, {'id': None}, {'id': True}, 7]
        self.assertEqual(category_ids_from_records(records), [3, 4])

    def test_non_list_raises(self):
        with self.assertRaises(TypeError):
            category_ids_from_records({'id': 1})


class TestRevealTransitions(unittest.TestCase):

    def test_next_state(self):
        self.assertIs(next_state(RevealState.HIDDEN), RevealState.QUESTION)
        self.assertIs(next_state(RevealState.QUESTION), RevealState.ANSWER)
        self.assertIsNone(next_state(RevealState.ANSWER))

    def test_advance_is_monotonic_and_stops_at_answer(self):
        clue = Clue(question='q', answer='a')
        seen = [advance(clue) for _ in range(4)]
        self.assertEqual(seen, [RevealState.QUESTION, RevealState.ANSWER, None, None])
        self.assertIs(clue.reveal_state, RevealState.ANSWER)


class TestCellIds(unittest.TestCase):

    def test_cell_id_roundtrip(self):
        self.assertEqual(cell_id(2, 3), '2-3')
        self.assertEqual(parse_cell_id('2-3'), (2, 3))

    def test_invalid_cell_ids(self):
        for bad in ('', '2', '2-3-4', 'a-b', '-1-2', '2-'):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    parse_cell_id(bad)

    def test_clue_at_bounds(self):
        board = [Category(title='t', clues=[Clue('q', 'a')])]
        self.assertIsNotNone(clue_at(board, 0, 0))
        self.assertIsNone(clue_at(board, 1, 0))
        self.assertIsNone(clue_at(board, 0, 1))
        self.assertIsNone(clue_at(board, -1, 0))


if __name__ == '__main__':
    unittest.main()
