"""Runtime services (logging, profiling) shared by the package."""
