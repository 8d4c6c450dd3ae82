# src/login_dfa/dfa/engine.py
"""
Login sequence DFA.

DFA = (Q, Sigma, delta, q0, F)
  Q     = {Q0, Q1, Q2, Q3, QE}
  Sigma = {u, p, s}
  q0    = Q0
  F     = {Q3}

Only the order of the symbols is validated, never their content.
"""

from enum import Enum


class State(Enum):
    Q0 = "Q0"  # idle
    Q1 = "Q1"  # username entered
    Q2 = "Q2"  # password entered
    Q3 = "Q3"  # login successful (accepting)
    QE = "QE"  # error (absorbing)


class Symbol(Enum):
    USERNAME = "u"
    PASSWORD = "p"
    SUBMIT = "s"


class Outcome(Enum):
    CONTINUE = "Continue"
    SUCCESS = "Login Successful"
    INVALID = "Invalid"


class MalformedSymbolError(ValueError):
    """Raised when a raw symbol is not one of u / p / s."""

    def __init__(self, raw):
        super().__init__(f"malformed symbol: {raw!r}")
        self.raw = raw


INITIAL_STATE = State.Q0

# Forward edges only; every other (state, symbol) pair goes to QE.
TRANSITIONS = {
    (State.Q0, Symbol.USERNAME): State.Q1,
    (State.Q1, Symbol.PASSWORD): State.Q2,
    (State.Q2, Symbol.SUBMIT): State.Q3,
}

_OUTCOMES = {
    State.Q1: Outcome.CONTINUE,
    State.Q2: Outcome.CONTINUE,
    State.Q3: Outcome.SUCCESS,
    State.QE: Outcome.INVALID,
}

_STATE_NAMES = {
    State.Q0: "Q0 (Idle)",
    State.Q1: "Q1 (Username Entered)",
    State.Q2: "Q2 (Password Entered)",
    State.Q3: "Q3 (Login Successful)",
    State.QE: "QE (Error)",
}


def next_state(current: State, symbol: Symbol) -> State:
    return TRANSITIONS.get((current, symbol), State.QE)


def outcome_for(state: State) -> Outcome:
    """Outcome reported after landing in ``state``.

    Q0 is never the result of a transition; it is reported as Continue.
    """
    return _OUTCOMES.get(state, Outcome.CONTINUE)


def apply(current: State, symbol: Symbol):
    """delta(current, symbol) -> (next_state, outcome). No side effects."""
    nxt = next_state(current, symbol)
    return nxt, outcome_for(nxt)


def reset() -> State:
    return INITIAL_STATE


def parse_symbol(raw) -> Symbol:
    """Validate a raw wire symbol. Anything but 'u', 'p' or 's' is rejected."""
    if not isinstance(raw, str):
        raise MalformedSymbolError(raw)
    try:
        return Symbol(raw.strip())
    except ValueError:
        raise MalformedSymbolError(raw) from None


def is_final(state: State) -> bool:
    return state is State.Q3


def is_error(state: State) -> bool:
    return state is State.QE


def state_name(state: State) -> str:
    return _STATE_NAMES[state]


def run(symbols, start=INITIAL_STATE):
    """
    Fold apply() over a sequence of symbols.
    Returns a list of (symbol, next_state, outcome) steps.
    """
    steps = []
    current = start
    for sym in symbols:
        current, outcome = apply(current, sym)
        steps.append((sym, current, outcome))
    return steps
