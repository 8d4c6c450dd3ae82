# src/login_dfa/dfa/session.py
import time
from transitions import Machine

from login_dfa.dfa import engine
from login_dfa.dfa.engine import INITIAL_STATE, State, Symbol
from login_dfa.utils.logger import get_logger

_logger = get_logger()

RESTART_TRIGGER = "rewind"


def build_machine(model):
    """
    Machine whose edges are generated from engine.apply(), one trigger per
    symbol value, plus a restart trigger from any state back to Q0.
    """
    machine = Machine(model=model, states=State, initial=INITIAL_STATE,
                      auto_transitions=False, after_state_change='_on_transition')
    for state in State:
        for sym in Symbol:
            dest, _ = engine.apply(state, sym)
            machine.add_transition(sym.value, state, dest)
    machine.add_transition(RESTART_TRIGGER, '*', INITIAL_STATE)
    return machine


class LoginSession:
    """One login attempt. Not thread safe; callers hold the store lock."""

    def __init__(self, session_id):
        self.session_id = session_id
        # symbol -> outcome of its latest application in this attempt
        self.processed = {}
        self.steps = 0
        self.created_at = time.time()
        self.last_seen = self.created_at
        self.machine = build_machine(self)

    def advance(self, symbol: Symbol, once=False):
        """Apply exactly one transition and return its Outcome.

        With once=True a symbol already submitted in this attempt is not
        re-applied; its last recorded outcome is returned, or Invalid once
        the session sits in QE.
        """
        self.last_seen = time.time()
        if once and symbol in self.processed:
            _logger.info(f"[DFA] {self.session_id}: '{symbol.value}' already processed, replaying")
            if engine.is_error(self.state):
                return engine.outcome_for(self.state)
            return self.processed[symbol]
        prev = self.state
        self.trigger(symbol.value)
        outcome = engine.outcome_for(self.state)
        self.processed[symbol] = outcome
        self.steps += 1
        _logger.info(f"[DFA] {self.session_id}: {prev.name} --{symbol.value}--> {self.state.name} ({outcome.value})")
        return outcome

    def restart(self):
        self.last_seen = time.time()
        self.trigger(RESTART_TRIGGER)
        self.processed.clear()
        self.steps = 0
        _logger.info(f"[DFA] {self.session_id}: reset to {self.state.name}")
        return self.state

    def _on_transition(self):
        if engine.is_final(self.state):
            _logger.info(f"[DFA] {self.session_id}: accepting state reached")
        elif engine.is_error(self.state):
            _logger.info(f"[DFA] {self.session_id}: in error state")

    def snapshot(self):
        return {
            "session": self.session_id,
            "state": self.state.name,
            "label": engine.state_name(self.state),
            "final": engine.is_final(self.state),
            "error": engine.is_error(self.state),
            "processed": sorted(sym.value for sym in self.processed),
            "steps": self.steps,
            "created_at": self.created_at,
            "last_seen": self.last_seen,
        }
