# Wordle API: dictionary store, round table and REST endpoints.

__version__ = "1.0.0"
