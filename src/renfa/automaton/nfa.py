"""Non-deterministic finite automaton over arbitrary state and symbol types."""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Generic, Iterable, List, Optional, Set, TypeVar

from renfa.config import Config
from renfa.exceptions import (
    DuplicateStateError,
    InvalidArgumentError,
    UnknownStateError,
)

logger = logging.getLogger(__name__)

# Type variables for state and alphabet types
S = TypeVar("S")  # State type
A = TypeVar("A")  # Alphabet type


@dataclass(frozen=True)
class Transition(Generic[S, A]):
    """A labeled edge between two states of one automaton.

    Transitions are created by ``NFA.add_transition`` and never shared
    between automata.

    Attributes:
        source: State the edge leaves.
        symbol: Input symbol that enables the edge.
        target: State the edge enters.
    """

    source: S
    symbol: A
    target: S

    def render(self, delta_symbol: str = "δ") -> str:
        return f"{delta_symbol}({self.source}, {self.symbol}) = {self.target}"

    def __str__(self) -> str:
        return self.render()


@dataclass(eq=False, repr=False)
class NFA(Generic[S, A]):
    """Non-deterministic Finite Automaton.

    The automaton is grown by adding states, transitions and end states,
    then queried with ``accept``. Every mutation checks its own
    preconditions and leaves the automaton untouched when it fails.

    Attributes:
        start_state: The unique entry state, fixed at construction.
        symbolic_name: Optional display label.
        config: Simulation and rendering options.
        states: All known states.
        end_states: Accepting states, a subset of ``states``.
        transitions: All transitions in insertion order.
    """

    start_state: S
    symbolic_name: Optional[str] = None
    config: Optional[Config] = None
    states: Set[S] = field(default_factory=set, init=False)
    end_states: Set[S] = field(default_factory=set, init=False)
    transitions: List[Transition[S, A]] = field(default_factory=list, init=False)
    # source -> outgoing transitions, insertion ordered
    _outgoing: Dict[S, List[Transition[S, A]]] = field(
        default_factory=dict, init=False
    )

    def __post_init__(self) -> None:
        if self.start_state is None:
            raise InvalidArgumentError("Start state cannot be None")
        self.config = self.config or Config.default()
        self.states.add(self.start_state)

    def __setattr__(self, name: str, value: object) -> None:
        # start_state is write-once
        if name == "start_state" and "start_state" in self.__dict__:
            raise AttributeError("Start state cannot be reassigned")
        super().__setattr__(name, value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_state(self, state: S) -> None:
        """Add a new state.

        Raises:
            DuplicateStateError: If the state is already present.
        """
        if state in self.states:
            raise DuplicateStateError("State must be unique in the automaton", state)
        self.states.add(state)
        logger.debug("Added state %r to %s", state, self._label())

    def set_end_state(self, state: S) -> None:
        """Mark an existing state as accepting. Re-marking is a no-op.

        Raises:
            UnknownStateError: If the state is not in the automaton.
        """
        if state not in self.states:
            raise UnknownStateError(
                "End state must be an existing state of the automaton", state
            )
        self.end_states.add(state)

    def add_transition(self, source: S, symbol: A, target: S) -> Transition[S, A]:
        """Add a transition between two existing states.

        Duplicate transitions and several transitions sharing the same
        source and symbol are allowed.

        Returns:
            The new transition.

        Raises:
            UnknownStateError: If either endpoint is not in the automaton.
        """
        if source not in self.states:
            raise UnknownStateError("Transition source is not in the automaton", source)
        if target not in self.states:
            raise UnknownStateError("Transition target is not in the automaton", target)

        trans = Transition(source, symbol, target)
        self.transitions.append(trans)
        self._outgoing.setdefault(source, []).append(trans)
        logger.debug(
            "Added %s to %s", trans.render(self.config.delta_symbol), self._label()
        )
        return trans

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def transitions_from(self, state: S, *symbol: A) -> List[Transition[S, A]]:
        """Get transitions leaving a state, optionally filtered by symbol.

        ``transitions_from(q)`` returns every transition out of ``q``;
        ``transitions_from(q, a)`` only those labeled ``a``. The result is
        in insertion order and empty when nothing matches.
        """
        if len(symbol) > 1:
            raise TypeError(
                f"transitions_from() takes at most one symbol ({len(symbol)} given)"
            )
        outgoing = self._outgoing.get(state, [])
        if not symbol:
            return list(outgoing)
        return [trans for trans in outgoing if trans.symbol == symbol[0]]

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, frontier: Iterable[S], symbol: A) -> FrozenSet[S]:
        """Advance a frontier by one input symbol.

        Returns the set of states reachable from any state in ``frontier``
        through a single transition labeled ``symbol``.
        """
        next_states: Set[S] = set()
        for state in frontier:
            for trans in self._outgoing.get(state, []):
                if trans.symbol == symbol:
                    next_states.add(trans.target)
        return frozenset(next_states)

    def simulate(self, word: Iterable[A]) -> FrozenSet[S]:
        """Compute every state reachable after consuming ``word``.

        The simulation tracks the frontier of simultaneously active
        states instead of exploring each branch on its own, so a state
        reached along several paths is only visited once per step.

        Raises:
            InvalidArgumentError: If ``word`` is None.
        """
        if word is None:
            raise InvalidArgumentError("Input word cannot be None")

        frontier: FrozenSet[S] = frozenset([self.start_state])
        for position, symbol in enumerate(word):
            frontier = self.step(frontier, symbol)
            if not frontier and self.config.short_circuit:
                logger.debug(
                    "%s is stuck at position %d on %r", self._label(), position, symbol
                )
                break
        return frontier

    def accept(self, word: Iterable[A]) -> bool:
        """Check whether the automaton accepts ``word``.

        Raises:
            InvalidArgumentError: If ``word`` is None.
        """
        accepted = not self.simulate(word).isdisjoint(self.end_states)
        logger.debug(
            "%s %s input", self._label(), "accepted" if accepted else "rejected"
        )
        return accepted

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def alphabet(self) -> Set[A]:
        """Return every symbol used by some transition."""
        return {trans.symbol for trans in self.transitions}

    def size(self) -> int:
        """Return number of states."""
        return len(self.states)

    def transition_count(self) -> int:
        """Return total number of transitions."""
        return len(self.transitions)

    def describe(self) -> str:
        """Render the automaton as text, one transition per line."""
        lines = [repr(self)]
        lines.extend(
            "  " + trans.render(self.config.delta_symbol) for trans in self.transitions
        )
        return "\n".join(lines)

    def _label(self) -> str:
        return self.symbolic_name or "NFA"

    def __repr__(self) -> str:
        return (
            f"NFA({self._label()!r}, start={self.start_state!r}, "
            f"states={self.size()}, end_states={len(self.end_states)}, "
            f"transitions={self.transition_count()})"
        )
