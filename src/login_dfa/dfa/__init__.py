from login_dfa.dfa.engine import (
    INITIAL_STATE,
    MalformedSymbolError,
    Outcome,
    State,
    Symbol,
    apply,
    parse_symbol,
    reset,
)

__all__ = [
    "INITIAL_STATE",
    "MalformedSymbolError",
    "Outcome",
    "State",
    "Symbol",
    "apply",
    "parse_symbol",
    "reset",
]
