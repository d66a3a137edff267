"""Runtime configuration, application context and logging."""
