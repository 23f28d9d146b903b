"""Alumni portal communications service."""
