"""Read-only analytics over employee record snapshots."""
