"""Services for the TaskTrack CLI."""
