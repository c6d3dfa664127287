"""GameSession test cases."""

import unittest

from guessgrid.models import GuessError, SessionStatus, Verdict
from guessgrid.services.candidates import Alphabet, CandidateSet
from guessgrid.services.game_session import GameSession

from support import CANDIDATES, pick, type_word


class SessionTestCase(unittest.TestCase):

    def make_session(self, secret="apple", candidates=CANDIDATES, max_tries=6):
        return GameSession(candidates, max_tries, selection=pick(secret))


class TestStart(SessionTestCase):

    def test_fresh_session(self):
        session = self.make_session("score streaks", max_tries=4)

        self.assertEqual(session.status, SessionStatus.IN_PROGRESS)
        self.assertEqual(session.cursor, (0, 0))
        self.assertEqual(session.secret_length, 13)
        self.assertEqual(session.max_tries, 4)
        self.assertEqual(len(session.grid), 4)
        self.assertTrue(all(row == ("",) * 13 for row in session.grid))
        self.assertEqual(session.letter_memory, {})
        self.assertIsNone(session.secret)

    def test_restart_discards_previous_game(self):
        session = self.make_session("apple")
        type_word(session, "crane")
        session.submit_guess()
        type_word(session, "st")

        session.selection = pick("kar98")
        session.start(CANDIDATES, 3)

        self.assertEqual(session.cursor, (0, 0))
        self.assertEqual(session.secret_length, 5)
        self.assertEqual(session.max_tries, 3)
        self.assertEqual(session.guesses, [])
        self.assertEqual(session.letter_memory, {})
        self.assertTrue(all(slot == "" for row in session.grid for slot in row))

    def test_candidates_are_normalized(self):
        session = GameSession(["CRANE", "Stone"], 6, selection=pick("stone"))
        type_word(session, "STONE")

        self.assertEqual(session.grid[0], tuple("stone"))
        self.assertEqual(session.submit_guess().status, SessionStatus.WON)

    def test_rejects_bad_max_tries(self):
        with self.assertRaises(ValueError):
            GameSession(CANDIDATES, 0)

    def test_rejects_empty_candidates(self):
        with self.assertRaises(ValueError):
            GameSession([], 6)

    def test_restart_rejects_secret_outside_alphabet(self):
        session = GameSession(CandidateSet(["abc", "cab"], Alphabet("abc")), 6, selection=pick("abc"))
        session.selection = pick("crane")

        with self.assertRaises(ValueError):
            session.start(CandidateSet(["crane"]), 6)

        # the previous game is untouched
        self.assertEqual(session.secret_length, 3)
        self.assertTrue(session.input_character("a"))


class TestInput(SessionTestCase):

    def test_input_advances_cursor(self):
        session = self.make_session()

        self.assertTrue(session.input_character("A"))
        self.assertEqual(session.cursor, (0, 1))
        self.assertEqual(session.grid[0][0], "a")

    def test_illegal_characters_are_ignored(self):
        session = self.make_session()

        for ch in ("!", "é", "ab", "", "_", None):
            self.assertFalse(session.input_character(ch))
        self.assertEqual(session.cursor, (0, 0))

    def test_space_hyphen_and_digits_are_allowed(self):
        session = self.make_session("lc-10")
        for ch in ("-", " ", "7"):
            self.assertTrue(session.input_character(ch))
        self.assertEqual(session.grid[0][:3], ("-", " ", "7"))

    def test_full_row_ignores_input(self):
        session = self.make_session()
        type_word(session, "apple")

        self.assertFalse(session.input_character("x"))
        self.assertEqual(session.cursor, (0, 5))

    def test_custom_alphabet(self):
        candidates = CandidateSet(["abc", "cab"], Alphabet("abc"))
        session = GameSession(candidates, 6, selection=pick("abc"))

        self.assertFalse(session.input_character("d"))
        self.assertTrue(session.input_character("B"))

    def test_backspace(self):
        session = self.make_session()
        self.assertFalse(session.backspace())

        type_word(session, "ap")
        self.assertTrue(session.backspace())
        self.assertEqual(session.cursor, (0, 1))
        self.assertEqual(session.grid[0], ("a", "", "", "", ""))


class TestSubmit(SessionTestCase):

    def test_winning_guess(self):
        session = self.make_session("apple")
        type_word(session, "apple")

        result = session.submit_guess()

        self.assertIsNone(result.error)
        self.assertEqual(result.feedback, (Verdict.CORRECT,) * 5)
        self.assertEqual(result.status, SessionStatus.WON)
        self.assertEqual(result.answer, "apple")
        self.assertEqual(session.secret, "apple")
        self.assertEqual(session.cursor, (0, 5))

    def test_incomplete_guess_changes_nothing(self):
        session = self.make_session("apple")
        type_word(session, "app")
        grid = session.grid

        result = session.submit_guess()

        self.assertEqual(result.error, GuessError.INCOMPLETE_GUESS)
        self.assertIsNone(result.feedback)
        self.assertEqual(result.status, SessionStatus.IN_PROGRESS)
        self.assertEqual(session.cursor, (0, 3))
        self.assertEqual(session.grid, grid)

    def test_invalid_candidate_changes_nothing(self):
        session = GameSession(["crane"], 1, selection=pick("crane"))
        type_word(session, "stone")
        grid = session.grid

        result = session.submit_guess()

        self.assertEqual(result.error, GuessError.INVALID_CANDIDATE)
        self.assertEqual(result.status, SessionStatus.IN_PROGRESS)
        self.assertIsNone(result.answer)
        self.assertEqual(session.cursor, (0, 5))
        self.assertEqual(session.grid, grid)
        self.assertEqual(session.letter_memory, {})

    def test_failed_guess_moves_to_next_row(self):
        session = self.make_session("crane")
        type_word(session, "stone")

        result = session.submit_guess()

        self.assertEqual(result.status, SessionStatus.IN_PROGRESS)
        self.assertEqual(session.cursor, (1, 0))
        self.assertEqual(session.guesses, [("stone", result.feedback)])
        self.assertIsNone(result.answer)

    def test_exhausting_tries_loses(self):
        session = self.make_session("crane", max_tries=2)
        type_word(session, "stone")
        session.submit_guess()
        type_word(session, "slate")

        result = session.submit_guess()

        self.assertEqual(result.status, SessionStatus.LOST)
        self.assertEqual(result.answer, "crane")
        self.assertEqual(session.cursor, (2, 0))
        self.assertTrue(session.is_over)

    def test_last_try_can_still_win(self):
        session = self.make_session("crane", max_tries=2)
        type_word(session, "stone")
        session.submit_guess()
        type_word(session, "crane")

        self.assertEqual(session.submit_guess().status, SessionStatus.WON)

    def test_terminal_session_is_frozen(self):
        session = self.make_session("crane", max_tries=1)
        type_word(session, "stone")
        session.submit_guess()
        cursor, grid = session.cursor, session.grid

        self.assertFalse(session.input_character("a"))
        self.assertFalse(session.backspace())
        result = session.submit_guess()

        self.assertEqual(result.error, GuessError.GAME_OVER)
        self.assertEqual(result.status, SessionStatus.LOST)
        self.assertEqual(session.cursor, cursor)
        self.assertEqual(session.grid, grid)

    def test_memory_never_downgrades(self):
        session = self.make_session("slate")
        type_word(session, "stone")
        session.submit_guess()
        self.assertEqual(session.letter_memory["s"], Verdict.CORRECT)
        self.assertEqual(session.letter_memory["o"], Verdict.ABSENT)

        type_word(session, "press")
        result = session.submit_guess()

        # 's' came back present and absent this time
        self.assertEqual(result.feedback[3:], (Verdict.PRESENT, Verdict.ABSENT))
        self.assertEqual(session.letter_memory["s"], Verdict.CORRECT)
        self.assertEqual(session.letter_memory["e"], Verdict.CORRECT)
        self.assertEqual(session.letter_memory["p"], Verdict.ABSENT)

    def test_memory_upgrades(self):
        session = self.make_session("slate")
        type_word(session, "press")
        session.submit_guess()
        self.assertEqual(session.letter_memory["e"], Verdict.PRESENT)

        type_word(session, "stone")
        session.submit_guess()
        self.assertEqual(session.letter_memory["e"], Verdict.CORRECT)


class TestRevealAndEvents(SessionTestCase):

    def test_reveal_keeps_game_going(self):
        session = self.make_session("kar98")

        self.assertEqual(session.reveal(), "kar98")
        self.assertEqual(session.secret, "kar98")
        self.assertEqual(session.status, SessionStatus.IN_PROGRESS)
        self.assertTrue(session.input_character("k"))

    def test_listeners_receive_events(self):
        session = self.make_session("crane", max_tries=1)
        events = []
        session.subscribe(lambda event, payload: events.append((event, payload)))

        session.input_character("s")
        session.submit_guess()
        type_word(session, "tone")
        session.submit_guess()

        names = [event for event, _ in events]
        self.assertEqual(names, [
            'grid_updated', 'guess_rejected',
            'grid_updated', 'grid_updated', 'grid_updated', 'grid_updated',
            'guess_evaluated', 'game_lost'
        ])
        self.assertEqual(events[1][1]['error'], 'incomplete_guess')
        self.assertEqual(events[-1][1]['answer'], 'crane')

    def test_listeners_see_completed_state(self):
        session = self.make_session("crane", max_tries=2)
        seen = []
        session.subscribe(lambda event, payload: seen.append(
            (event, session.status, session.cursor, len(session.guesses))
        ))

        type_word(session, "stone")
        session.submit_guess()
        type_word(session, "crane")
        session.submit_guess()

        evaluated = [entry for entry in seen if entry[0] in ("guess_evaluated", "game_won")]
        self.assertEqual(evaluated, [
            ("guess_evaluated", SessionStatus.IN_PROGRESS, (1, 0), 1),
            ("guess_evaluated", SessionStatus.WON, (1, 5), 2),
            ("game_won", SessionStatus.WON, (1, 5), 2),
        ])

    def test_failing_listener_leaves_guess_applied(self):
        session = self.make_session("crane", max_tries=1)

        def listener(event, payload):
            if event == "guess_evaluated":
                raise RuntimeError("render failed")
        session.subscribe(listener)

        type_word(session, "crane")
        with self.assertRaises(RuntimeError):
            session.submit_guess()

        self.assertEqual(session.status, SessionStatus.WON)
        self.assertEqual(len(session.guesses), 1)
        session.unsubscribe(listener)
        self.assertEqual(session.submit_guess().error, GuessError.GAME_OVER)

    def test_unsubscribe(self):
        session = self.make_session()
        events = []
        listener = lambda event, payload: events.append(event)
        session.subscribe(listener)
        session.unsubscribe(listener)

        session.input_character("a")
        self.assertEqual(events, [])

    def test_snapshot(self):
        session = self.make_session("crane")
        type_word(session, "stone")
        session.submit_guess()
        session.input_character("c")

        state = session.snapshot("g-1", "daily")

        self.assertEqual(state.game_id, "g-1")
        self.assertEqual(state.mode, "daily")
        self.assertEqual(state.status, "in_progress")
        self.assertFalse(state.game_over)
        self.assertEqual((state.cursor_row, state.cursor_col), (1, 1))
        self.assertEqual(state.guesses, ["stone"])
        self.assertEqual(state.feedback, [["absent", "absent", "absent", "correct", "correct"]])
        self.assertEqual(state.grid[1][0], "c")
        self.assertIsNone(state.answer)


if __name__ == '__main__':
    unittest.main()
