"""Score ranking service: leaderboard, rank lookup and score mutation."""
