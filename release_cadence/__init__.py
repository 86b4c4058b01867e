"""Release cadence: how long each beta, rc and GA release stayed current."""

__version__ = "1.0.0"
