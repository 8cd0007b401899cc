"""The ``slade-run`` program launcher."""
