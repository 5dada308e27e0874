"""Solutions to beginner online-judge problems, with a command for a few of them."""

__version__ = "0.1.0"
__all__ = ["basics", "cli", "geometry", "scoring", "sequences"]