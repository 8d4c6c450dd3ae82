"""Wi-Fi login sequence validator: a DFA over u / p / s symbols behind a Flask gateway."""

__version__ = "0.1.0"
