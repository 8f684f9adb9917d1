import unittest
from datetime import timedelta

from chesspace.pacing import build_plan, derive_total_time
from chesspace.timecontrol import TimeControlSpec


class TotalTimeTests(unittest.TestCase):
    def test_total_time_counts_credited_increments(self):
        for lichess in (False, True):
            for moves in (1, 2, 40, 61):
                with self.subTest(lichess=lichess, moves=moves):
                    spec = TimeControlSpec(5, 3, total_moves=moves, lichess_mode=lichess)
                    expected = timedelta(seconds=300 + 3 * (moves - 1 if lichess else moves))
                    self.assertEqual(derive_total_time(spec), expected)


class PacingPlanTests(unittest.TestCase):
    def test_flat_classical(self):
        plan = build_plan(TimeControlSpec(90, 30, total_moves=40))
        self.assertEqual(plan.policy, "flat")
        self.assertEqual(plan.total_time, timedelta(seconds=6600))
        self.assertEqual(plan.remaining_time_per_move, timedelta(seconds=165))
        self.assertFalse(plan.has_opening_phase)

    def test_flat_lichess(self):
        plan = build_plan(TimeControlSpec(90, 30, total_moves=40, lichess_mode=True))
        self.assertEqual(plan.total_time, timedelta(seconds=6570))
        self.assertEqual(plan.remaining_time_per_move, timedelta(seconds=164.25))
        self.assertEqual(plan.remaining_time_per_move * 40, plan.total_time)

    def test_speed_ratio_opening(self):
        plan = build_plan(TimeControlSpec(15, 10, total_moves=40, opening_moves=10))
        self.assertEqual(plan.policy, "speed-ratio")
        self.assertEqual(plan.total_time, timedelta(seconds=1300))
        self.assertAlmostEqual(plan.opening_time_per_move.total_seconds(), 18.571429, places=5)
        self.assertAlmostEqual(plan.remaining_time_per_move.total_seconds(), 37.142857, places=5)
        self.assertEqual(plan.remaining_time_per_move, 2 * plan.opening_time_per_move)
        used = plan.opening_time_per_move * 10 + plan.remaining_time_per_move * 30
        self.assertAlmostEqual(used.total_seconds(), 1300, delta=1e-3)

    def test_percentage_opening(self):
        plan = build_plan(TimeControlSpec(60, 0, total_moves=40, opening_moves=10, opening_percentage=50))
        self.assertEqual(plan.policy, "percentage")
        self.assertEqual(plan.total_time, timedelta(seconds=3600))
        self.assertEqual(plan.opening_time_per_move, timedelta(seconds=180))
        self.assertEqual(plan.remaining_time_per_move, timedelta(seconds=60))
        self.assertEqual(plan.opening_move_count, 10)

    def test_percentage_consumes_total_time(self):
        plan = build_plan(TimeControlSpec(25, 7, total_moves=57, opening_moves=13, opening_percentage=37))
        used = plan.opening_time_per_move * 13 + plan.remaining_time_per_move * 44
        self.assertAlmostEqual(used.total_seconds(), plan.total_time.total_seconds(), delta=1e-3)

    def test_time_for_move_switches_after_opening(self):
        plan = build_plan(TimeControlSpec(60, 0, opening_moves=10, opening_percentage=50))
        self.assertEqual(plan.time_for_move(1), timedelta(seconds=180))
        self.assertEqual(plan.time_for_move(10), timedelta(seconds=180))
        self.assertEqual(plan.time_for_move(11), timedelta(seconds=60))

    def test_to_dict(self):
        plan = build_plan(TimeControlSpec(60, 0, opening_moves=10, opening_percentage=50))
        self.assertEqual(
            plan.to_dict(),
            {
                "policy": "percentage",
                "total_time_s": 3600.0,
                "opening_moves": 10,
                "opening_time_per_move_s": 180.0,
                "remaining_time_per_move_s": 60.0,
            },
        )


if __name__ == "__main__":
    unittest.main()
