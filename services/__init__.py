"""Runtime services that drive the simulation."""
