"""Prompting package.

Deterministic prompt-construction helpers for the study tools. It does not
perform validation beyond required-input checks, nor model invocation.
"""
