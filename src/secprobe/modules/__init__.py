"""SecProbe engines."""
