"""Test suite for tweenr.

Test Structure:
- unit/transitions/: Curve formulas, derivation, binding, registry, sampling
"""
