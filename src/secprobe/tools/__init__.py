"""Network connectors used by SecProbe engines."""
