"""State layer.

Holds the last-known-good per-vehicle snapshot.  Snapshots are values:
every update returns a new one and the embedding client owns storage.
"""
