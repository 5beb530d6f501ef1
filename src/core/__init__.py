"""
Core building blocks shared by the verifier and the samples.

Contains the suite configuration, the per-run context object and the
exception hierarchy.
"""
