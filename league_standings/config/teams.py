# league_standings/config/teams.py
from typing import Dict, List

# The canonical team labels used for every total and every standings row.
CANONICAL_TEAMS: List[str] = [
    "Time will Tel 1XI",
    "Time will Tel 2XI",
    "Second Wirst 2XI",
    "What's the Wirtz that could happen 1XI",
    "What's the Wirtz that could happen 2XI",
    "Lazio FC 1XI",
    "Lazio FC 2XI",
    "MOBLANDERSON 1XI",
    "MOBLANDERSON 2XI",
    "Porro Ball Defending 1XI",
    "World Club Chumpions 1XI",
    "World Club Chumpions 2XI",
    "Middle Earth FC 1XI",
    "Middle Earth FC 2XI",
    "Ruben Murray 2XI",
    "Pecorino’s 1XI",
    "Pecorino’s 2XI",
    "Jimmy's Jokers 1XI",
    "Jimmy's Jokers 2XI",
    "Smoke AI 1XI",
    "Smoke AI 2XI",
    "Always the Wright One 1XI",
    "Always the Wright One 2XI",
    "Hugo First 1XI",
    "Chicken Cunha 1XI",
    "Thomas the Frank engine 2XI",
]

# Key: raw string exactly as it appears in the fixture feed, Value: canonical label
TEAM_ALIASES: Dict[str, str] = {
    # Time will Tel
    "1XI - Time will Tel": "Time will Tel 1XI",
    "2XI - Time will Tel": "Time will Tel 2XI",
    # Second Wirst
    "2XI - Second Wirst": "Second Wirst 2XI",
    # What's the Wirtz that could happen
    "1XI - What's the Wirtz that could happen": "What's the Wirtz that could happen 1XI",
    "2XI - What's the Wirtz that could happen": "What's the Wirtz that could happen 2XI",
    # Lazio FC
    "1XI - Lazio FC": "Lazio FC 1XI",
    "2XI - Lazio FC": "Lazio FC 2XI",
    # MOBLANDERSON
    "1XI - MOBLANDERSON": "MOBLANDERSON 1XI",
    "2XI - MOBLANDERSON": "MOBLANDERSON 2XI",
    # Porro Ball Defending
    "1XI - Porro Ball Defending": "Porro Ball Defending 1XI",
    # World Club Chumpions
    "1XI - World Club Chumpions": "World Club Chumpions 1XI",
    "2XI - World Club Chumpions": "World Club Chumpions 2XI",
    # Middle Earth FC
    "1XI - Middle Earth FC": "Middle Earth FC 1XI",
    "2XI - Middle Earth FC": "Middle Earth FC 2XI",
    # Ruben Murray
    "2XI - Ruben Murray": "Ruben Murray 2XI",
    # Pecorino’s
    "1XI - Pecorino’s": "Pecorino’s 1XI",
    "2XI - Pecorino’s": "Pecorino’s 2XI",
    # Jimmy's Jokers
    "1XI - Jimmy's Jokers": "Jimmy's Jokers 1XI",
    "2XI - Jimmy's Jokers": "Jimmy's Jokers 2XI",
    # Smoke AI
    "1XI - Smoke AI": "Smoke AI 1XI",
    "2XI - Smoke AI": "Smoke AI 2XI",
    # Always the Wright One
    "1XI - Always the Wright One": "Always the Wright One 1XI",
    "2XI - Always the Wright One": "Always the Wright One 2XI",
    # Hugo First
    "1XI - Hugo First": "Hugo First 1XI",
    # Chicken Cunha
    "1XI - Chicken Cunha": "Chicken Cunha 1XI",
    # Thomas the Frank engine
    "2XI - Thomas the Frank engine": "Thomas the Frank engine 2XI",
}
