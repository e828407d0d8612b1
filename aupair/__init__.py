"""Au pair marketplace matching and booking backend."""

__version__ = "1.0.0"
