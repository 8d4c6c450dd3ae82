#!/usr/bin/env python3
"""
cli.py
Feed a symbol string through the login DFA and print each step.
Usage:
  login-dfa-run ups
  login-dfa-run u s p
"""

import argparse
import sys

from login_dfa.dfa.engine import INITIAL_STATE, MalformedSymbolError, is_final, parse_symbol, run, state_name


def parse_sequence(tokens):
    """Accepts 'ups' or 'u p s'. Raises MalformedSymbolError on the first bad symbol."""
    return [parse_symbol(ch) for tok in tokens for ch in tok]


def format_trace(steps, start=INITIAL_STATE):
    lines = [f"start -> {state_name(start)}"]
    for sym, state, outcome in steps:
        lines.append(f"{sym.value} -> {state_name(state)} [{outcome.value}]")
    return lines


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("symbols", nargs="+", help="symbols from {u,p,s}, e.g. 'ups'")
    args = ap.parse_args(argv)
    try:
        seq = parse_sequence(args.symbols)
    except MalformedSymbolError as e:
        print("Invalid:", e, file=sys.stderr)
        return 2
    steps = run(seq)
    for line in format_trace(steps):
        print(line)
    accepted = bool(steps) and is_final(steps[-1][1])
    print("accepted:", accepted)
    return 0 if accepted else 1

if __name__ == "__main__":
    sys.exit(main())
