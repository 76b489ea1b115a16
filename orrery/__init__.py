"""A log-scaled view of the solar system: body data, scaling, scene and pygame window."""

__version__ = "0.1.0"