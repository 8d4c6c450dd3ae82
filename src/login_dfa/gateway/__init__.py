from login_dfa.gateway.protocol import RESET_ACK, Gateway
from login_dfa.gateway.server import create_app
from login_dfa.gateway.sessions import SessionStore

__all__ = ["RESET_ACK", "Gateway", "SessionStore", "create_app"]
