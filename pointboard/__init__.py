"""Points leaderboard backend."""
