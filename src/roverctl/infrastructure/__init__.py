"""Infrastructure layer — filesystem access for command scripts."""
