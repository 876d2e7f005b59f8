# Collection and index definitions

USERS_COLLECTION = "users"
TAGS_COLLECTION = "tags"
POSTS_COLLECTION = "posts"
COMMENTS_COLLECTION = "comments"
PAYMENTS_COLLECTION = "payments"
ANNOUNCEMENTS_COLLECTION = "announcements"

# (collection, keys, options)
INDEXES = [
    (USERS_COLLECTION, [("email", 1)], {"unique": True}),
    (POSTS_COLLECTION, [("email", 1)], {}),
    (POSTS_COLLECTION, [("timestamp", -1)], {}),
    (POSTS_COLLECTION, [("tags", 1)], {}),
    (COMMENTS_COLLECTION, [("postId", 1)], {}),
    (ANNOUNCEMENTS_COLLECTION, [("timestamp", -1)], {}),
]

ROLE_USER = "user"
ROLE_ADMIN = "admin"

TIER_BRONZE = "Bronze"
TIER_GOLD = "Gold"

# Bronze members may hold at most this many posts
BRONZE_POST_LIMIT = 5
