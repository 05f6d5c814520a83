"""Click plumbing for the roverctl CLI: command base class and app context."""
