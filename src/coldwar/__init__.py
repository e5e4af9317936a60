"""Cold War Terminal: a turn-based crisis simulation.

You are the operator of a Cold War command terminal. Read the daily cables,
spend scarce intel to decrypt and verify them, find the mole among your
advisors, and keep the world out of nuclear war for as long as you can.
"""

__version__ = "0.1.0"
