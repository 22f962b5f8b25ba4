# Tier table, top tier first: (key, minimum xp, colour)
TIER_TABLE = [
    ("Monarch", 100000, "#9d00ff"),
    ("National Ranker", 70000, "#ffd166"),
    ("S", 30000, "#f94144"),
    ("A", 15000, "#f3722c"),
    ("B", 7000, "#f8961e"),
    ("C", 3000, "#90be6d"),
    ("D", 1000, "#4d908e"),
    ("E", 0, "#577590"),
]

# Monarch gating
MONARCH_REQUIRED_LEVEL = 100
MONARCH_MAX_USERS = 9

# Rank value meaning "not on the roster"
UNRANKED = 0
