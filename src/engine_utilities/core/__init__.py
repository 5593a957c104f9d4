"""Numeric kernel: scalar math, vectors, matrices and rotations."""
