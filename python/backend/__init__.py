"""Puzzle logic engine: grid model, rules, shuffle and timed sessions."""
