"""Host UI adapters for the file engine."""
