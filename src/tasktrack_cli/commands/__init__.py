"""Command modules for the TaskTrack CLI."""
