"""Collaborators around the core: content loading, path escaping, rendering."""
