"""
chesspace: pace yourself in a chess game.

Components:
- timecontrol: TimeControlSpec input model and ConfigurationError
- pacing_policies: flat / speed-ratio / percentage-split per-move time policies
- pacing: total-time derivation and the resulting PacingPlan
- schedule: running-clock simulation producing the per-move Schedule
- calculator: end-to-end spec -> plan -> schedule with logging
- report: text and JSON rendering of a calculation
- cli: command-line entry point (`chesspace 90 30 --moves 40`)
"""
# Package exports are intentionally minimal; import modules directly as needed.
