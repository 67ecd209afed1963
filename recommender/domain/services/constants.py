# Constants for the utility scoring and ranking pipeline.

# Utility returned when a hard filter rejects a product
DISQUALIFIED = -1.0

# Utility added per (token, field) substring match
MATCH_POINT = 1.0

# Product text fields matched against phrase tokens, in scoring order
TEXT_FIELDS = ("name", "type", "brand", "description")

# Separator used when compressing whitespace runs in a phrase
TOKEN_SEPARATOR = ";"

# Redis key namespace for cached ranked results
RANK_CACHE_PREFIX = "rank"
