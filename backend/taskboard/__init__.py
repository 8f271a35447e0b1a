"""Multi-user task board service backed by a flat JSON document."""
