"""
PodRacer - a turn-based racing agent for the pod racing referee.

Reads each turn's pod and checkpoint positions on stdin and answers with a
target point and thrust on stdout.
"""

__version__ = "0.1.0"
