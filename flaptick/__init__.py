"""flaptick - A gravity-and-gates arcade game on a minimal tick engine."""

__version__ = "0.1.0"
