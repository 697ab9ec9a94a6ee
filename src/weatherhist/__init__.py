# last seven days of weatherapi.com history for a handful of cities, in a small tk window

__version__ = "0.1.0"
