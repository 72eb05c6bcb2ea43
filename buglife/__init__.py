"""Grid simulation of crawlers, hoppers and bishops that move, meet and eat each other."""

__version__ = "0.1.0"