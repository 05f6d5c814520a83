"""roverctl — Mars rover plateau simulator."""

__version__ = "0.1.0"
