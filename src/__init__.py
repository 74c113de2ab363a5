"""
MockMate - Interview Session Lifecycle Engine

Runs a mock interview as an explicit state machine: questions, spoken
answers, quick feedback, periodic checkpoints and a final summary.
"""

__version__ = "0.1.0"
__author__ = "MockMate Team"
