"""
Domain constants - table names, categories and other static data.
Centralized here for easy modification.
"""

# === Tables ===
MEMBERS_TABLE = "members"
BEST_GAMES_TABLE = "best_games"
FAQS_TABLE = "faqs"
FOOTER_RESOURCES_TABLE = "footer_resources"
ADMINS_TABLE = "admins"

# Public content tables watched by the realtime listener
CONTENT_TABLES = [MEMBERS_TABLE, BEST_GAMES_TABLE, FAQS_TABLE, FOOTER_RESOURCES_TABLE]

# === Footer ===
FOOTER_CATEGORIES = ["links", "social", "legal", "support"]

# === Languages ===
SUPPORTED_LANGUAGES = ["it", "en"]
DEFAULT_LANGUAGE = "it"
LANG_COOKIE = "lang"

# === Auth ===
ACCESS_TOKEN_COOKIE = "sb_access_token"
ACCESS_TOKEN_MAX_AGE = 60 * 60  # matches the default Supabase JWT expiry

# === Images ===
PLACEHOLDER_IMAGE = "/placeholder.svg"
IMGUR_DIRECT_HOST = "i.imgur.com"
IMGUR_DEFAULT_EXT = "jpg"

# Limits
PUBLIC_MEMBERS_LIMIT = 30
SHORT_ID_LENGTH = 8  # "ID: 1a2b3c4d..." in the admin users list
