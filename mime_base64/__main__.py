"""Package entry point for ``python -m mime_base64``.

WHY: Users run the encoder as ``python -m mime_base64 input.bin``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from mime_base64.cli import main

if __name__ == "__main__":
    main()
