# src/login_dfa/gateway/protocol.py
from login_dfa.dfa.engine import MalformedSymbolError, Outcome, parse_symbol
from login_dfa.gateway.sessions import SessionStore
from login_dfa.utils.logger import get_logger

_logger = get_logger()

RESET_ACK = "Reset"


class Gateway:
    """Translates protocol requests into engine transitions on per-session state."""

    def __init__(self, store=None):
        self.store = store if store is not None else SessionStore()

    def handle_input(self, sid, raw_symbol, once=False) -> str:
        """
        submit-symbol(sym): "Continue" | "Login Successful" | "Invalid".
        A malformed symbol is answered with "Invalid" and leaves the state untouched.
        """
        try:
            symbol = parse_symbol(raw_symbol)
        except MalformedSymbolError as e:
            _logger.warning(f"[GATEWAY] {sid}: rejected {e}")
            return Outcome.INVALID.value
        with self.store.locked(sid) as session:
            outcome = session.advance(symbol, once=once)
        return outcome.value

    def handle_reset(self, sid) -> str:
        self.store.reset(sid)
        return RESET_ACK

    def describe(self, sid):
        with self.store.locked(sid) as session:
            return session.snapshot()
