"""Runtime services (telemetry) shared across strkit."""
