"""Rendering for the finder screen.

Grapheme-aware measurement (``ansi``), highlight chunking (``chunks``), and
frame composition (``screen``). Everything here is presentation-only and
side-effect free.
"""
