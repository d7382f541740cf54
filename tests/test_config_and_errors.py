"""Tests for configuration presets and error messages."""

import pytest

import renfa
from renfa import Config, DuplicateStateError, InvalidArgumentError, UnknownStateError
from renfa.exceptions import StateError


class TestConfig:
    """Configuration presets."""

    def test_default(self):
        config = Config.default()
        assert config.short_circuit is True
        assert config.delta_symbol == "δ"

    def test_exhaustive(self):
        assert Config.exhaustive().short_circuit is False

    def test_nfa_uses_default_config(self):
        assert renfa.NFA("S0").config == Config.default()

    def test_explicit_none_config_falls_back_to_default(self):
        nfa = renfa.NFA("S0", config=None)
        nfa.add_state("S1")
        trans = nfa.add_transition("S0", "a", "S1")
        assert nfa.config == Config.default()
        assert nfa.describe().splitlines()[1] == "  " + str(trans)
        assert nfa.simulate(["b", "a"]) == frozenset()


class TestErrorMessages:
    """Errors name the offending state."""

    @pytest.mark.parametrize(
        "exc_type,message,state,expected",
        [
            (DuplicateStateError, "already present", "S1", "already present: 'S1'"),
            (UnknownStateError, "not found", 3, "not found: 3"),
            (UnknownStateError, "not found", None, "not found"),
        ],
    )
    def test_str(self, exc_type, message, state, expected):
        assert str(exc_type(message, state)) == expected

    def test_state_errors_share_base(self):
        for exc_type in (DuplicateStateError, UnknownStateError):
            assert issubclass(exc_type, StateError)
            assert exc_type("m", "S0").state == "S0"

    def test_raised_message(self):
        nfa = renfa.NFA("S0")
        with pytest.raises(UnknownStateError, match="source is not in the automaton: 'X'"):
            nfa.add_transition("X", "a", "S0")

    def test_invalid_argument_message(self):
        with pytest.raises(InvalidArgumentError, match="Start state cannot be None"):
            renfa.NFA(None)


class TestPublicApi:
    """Package exports."""

    def test_all_exports_resolve(self):
        for name in renfa.__all__:
            assert hasattr(renfa, name), f"renfa.{name} is missing"

    def test_version(self):
        assert renfa.__version__ == "0.1.0"
