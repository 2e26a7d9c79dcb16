"""Point-in-time host telemetry and process termination."""
