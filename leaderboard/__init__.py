"""Orders leaderboard: users, point orders and interchangeable record stores."""

__version__ = "2.0.0"
