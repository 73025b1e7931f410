"""Output rendering for listings and the usage banner.

Submodules write plain text to caller-provided streams so tests can capture
stdout and stderr separately.
"""
