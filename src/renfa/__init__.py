"""
renfa - A generic non-deterministic finite automaton for regex engines.

This library builds automata over arbitrary hashable state and symbol types
and decides whether an input sequence is accepted by simulating every
nondeterministic branch at once.

Example usage:
    >>> from renfa import NFA
    >>> nfa = NFA("S0")
    >>> nfa.add_state("S1")
    >>> nfa.set_end_state("S1")
    >>> _ = nfa.add_transition("S0", "a", "S1")
    >>> nfa.accept("a")
    True

For more control:
    >>> from renfa import NFA, Config
    >>> nfa = NFA("S0", symbolic_name="digits", config=Config.exhaustive())
"""

from renfa.automaton.nfa import NFA, Transition
from renfa.config import Config
from renfa.exceptions import (
    RenfaError,
    InvalidArgumentError,
    StateError,
    DuplicateStateError,
    UnknownStateError,
)

__version__ = "0.1.0"

__all__ = [
    # Automaton
    "NFA",
    "Transition",
    # Configuration
    "Config",
    # Exceptions
    "RenfaError",
    "InvalidArgumentError",
    "StateError",
    "DuplicateStateError",
    "UnknownStateError",
    # Version
    "__version__",
]
