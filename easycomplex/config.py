"""
Library-wide tunables. Change them at import time, e.g.

    import easycomplex.config
    easycomplex.config.POLE_TOLERANCE = 1e-30
"""

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
POLE_TOLERANCE       = 0.0     # largest 2·|cos z|² (tan) or 2·|cosh z|² (tanh) treated as a pole
ROUND_TRIP_TOLERANCE = 1e-9    # default abs_tol for isclose()
