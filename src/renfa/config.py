"""Configuration for automaton simulation and rendering."""

from dataclasses import dataclass


@dataclass
class Config:
    """Automaton configuration.

    Attributes:
        short_circuit: Stop simulating as soon as the frontier is empty.
        delta_symbol: Prefix used when rendering a transition.
    """

    short_circuit: bool = True
    delta_symbol: str = "δ"

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()

    @classmethod
    def exhaustive(cls) -> "Config":
        """Create configuration that always consumes the whole input."""
        return cls(short_circuit=False)
