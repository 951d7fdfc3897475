"""Core encoding modules.

WHY: The core package holds the whole codec — the symbol table, the
single-block transform, and the stream driver. The CLI only wires these
to files and stdout.

HOW: alphabet.py defines the immutable symbol table, block.py turns
1-3 bytes into 4 characters, stream.py drives a byte stream through
block.py and handles line breaks, models.py holds the result type.

RULES:
- Nothing in core performs file opening or argument parsing
- block.py is pure; stream.py only touches the given source and sink
"""
