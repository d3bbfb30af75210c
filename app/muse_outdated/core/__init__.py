"""Core analyzer logic: configuration, paths and response building."""
