"""A small pygame side-scroller: camera, animation, collision, state machine and player."""

__version__ = "0.1.0"