"""The ``slade-comm`` peer-to-peer messaging node (networking not implemented)."""
