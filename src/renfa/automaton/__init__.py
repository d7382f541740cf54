"""Automaton module: states, transitions and acceptance."""

from renfa.automaton.nfa import NFA, Transition

__all__ = [
    "NFA",
    "Transition",
]
