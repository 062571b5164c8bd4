"""Unit tests.

Every textutil operation is pure, so everything here is a unit test: no I/O,
no fakes, just inputs and expected outputs for both character widths.
"""
