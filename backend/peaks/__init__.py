"""Conquered Peaks Package - in-memory catalog of climbed mountain peaks.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
