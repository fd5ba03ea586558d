"""Agent Pro: sessions, player roster and agent/player messaging."""
