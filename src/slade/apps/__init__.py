"""Sample console applications built on slade."""
