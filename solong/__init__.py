"""A small tile game: .ber map validation and a window that shows the map."""

__version__ = "0.1.0"