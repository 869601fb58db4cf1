"""
Default data for a fresh BuzzHub install.

Seeds six categories, the ``admin`` super-admin account, three published
sample posts and the five built-in site settings. Each part is only seeded
when missing, so restarting against a persistent database adds no duplicates.
"""

from __future__ import annotations

from datetime import timedelta

from ..database.base import utc_now
from ..database.entities import Category, Post, Setting, User
from ..logging_config import get_logger
from .base import BlogStorage

logger = get_logger(__name__)

DEFAULT_CATEGORIES = [
    {
        "name": "Trending News",
        "description": "Latest trending news from around the world",
        "color": "#FF6B6B",
        "icon": "📰",
        "is_trending": True,
        "post_count": 15,
    },
    {
        "name": "Viral Videos",
        "description": "Most viral videos on the internet",
        "color": "#4ECDC4",
        "icon": "📹",
        "is_trending": True,
        "post_count": 28,
    },
    {
        "name": "Memes & GIFs",
        "description": "Funny memes and trending GIFs",
        "color": "#45B7D1",
        "icon": "😂",
        "is_trending": True,
        "post_count": 42,
    },
    {
        "name": "Listicles",
        "description": "Top 10 lists and viral content",
        "color": "#96CEB4",
        "icon": "📝",
        "is_trending": False,
        "post_count": 12,
    },
    {
        "name": "Polls & Quizzes",
        "description": "Interactive polls and fun quizzes",
        "color": "#FFEAA7",
        "icon": "📊",
        "is_trending": False,
        "post_count": 8,
    },
    {
        "name": "Technology",
        "description": "Latest tech news and innovations",
        "color": "#FF7675",
        "icon": "💻",
        "is_trending": True,
        "post_count": 23,
    },
]

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@buzzhub.com",
    "password": "admin123",
    "role": "super_admin",
    "badges": ["Admin", "Founder", "Top Creator"],
    "working_score": 1000,
}

# (post fields, hours since publication)
SAMPLE_POSTS = [
    (
        {
            "title": "This AI-Generated City is Breaking the Internet! 🤯",
            "content": (
                "An incredible AI-generated cityscape has gone viral on social media, leaving viewers amazed at "
                "the level of detail and realism. The image, created using advanced machine learning algorithms, "
                "showcases a futuristic metropolis with towering skyscrapers, intricate street layouts, and "
                "stunning lighting effects that rival real photography."
            ),
            "slug": "ai-generated-city-breaking-internet",
            "excerpt": (
                "An incredible AI-generated cityscape has gone viral on social media, leaving viewers amazed at "
                "the level of detail and realism..."
            ),
            "featured_image": (
                "https://images.unsplash.com/photo-1541899481282-d53bffe3c35d"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"
            ),
            "category": "Technology",
            "tags": ["AI", "Technology", "Viral", "Art"],
            "seo_score": 95,
            "views": 12543,
            "likes": 2341,
            "comments": 456,
            "shares": 789,
            "is_trending": True,
            "is_featured": True,
        },
        2,
    ),
    (
        {
            "title": "Cat Goes Viral with Epic Yarn Ball Performance! 🐱",
            "content": (
                "A hilarious video of a cat's elaborate yarn ball performance has taken the internet by storm. "
                "The feline's acrobatic moves and comedic timing have earned millions of views and countless "
                "shares across social media platforms."
            ),
            "slug": "cat-viral-yarn-ball-performance",
            "excerpt": "A hilarious video of a cat's elaborate yarn ball performance has taken the internet by storm...",
            "featured_image": (
                "https://images.unsplash.com/photo-1574158622682-e40e69881006"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"
            ),
            "category": "Viral Videos",
            "tags": ["Cats", "Funny", "Viral", "Animals"],
            "seo_score": 88,
            "views": 8976,
            "likes": 1456,
            "comments": 234,
            "shares": 567,
            "is_trending": True,
            "is_featured": False,
        },
        6,
    ),
    (
        {
            "title": "Hidden Mountain Paradise Discovered by Drone! 🏔️",
            "content": (
                "A breathtaking mountain paradise has been captured by drone footage, revealing stunning "
                "landscapes that few have ever seen. The pristine wilderness showcases snow-capped peaks, "
                "crystal-clear lakes, and untouched forests that seem almost too beautiful to be real."
            ),
            "slug": "hidden-mountain-paradise-drone",
            "excerpt": (
                "A breathtaking mountain paradise has been captured by drone footage, revealing stunning "
                "landscapes that few have ever seen..."
            ),
            "featured_image": (
                "https://images.unsplash.com/photo-1506905925346-21bda4d32df4"
                "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"
            ),
            "category": "Trending News",
            "tags": ["Nature", "Travel", "Drone", "Photography"],
            "seo_score": 92,
            "views": 15432,
            "likes": 2890,
            "comments": 412,
            "shares": 678,
            "is_trending": True,
            "is_featured": False,
        },
        3,
    ),
]

DEFAULT_SETTINGS = [
    {"key": "site_title", "value": "BuzzHub", "category": "general", "description": "Website title"},
    {
        "key": "site_description",
        "value": "Your ultimate destination for viral content",
        "category": "general",
        "description": "Website description",
    },
    {"key": "posts_per_page", "value": "20", "category": "content", "description": "Number of posts per page"},
    {"key": "enable_comments", "value": "true", "category": "content", "description": "Allow comments on posts"},
    {
        "key": "auto_approve_comments",
        "value": "false",
        "category": "content",
        "description": "Auto-approve new comments",
    },
]


async def seed_default_data(storage: BlogStorage) -> bool:
    """Populate the storage with whatever part of the default data is missing.

    Categories and settings are matched by name/key, the admin by username;
    sample posts are only added when the storage has no posts at all.

    Args:
        storage: Target storage backend

    Returns:
        True if anything was added
    """
    added = {"categories": 0, "users": 0, "posts": 0, "settings": 0}

    for fields in DEFAULT_CATEGORIES:
        if await storage.get_category_by_name(fields["name"]) is None:
            await storage.create_category(Category(**fields))
            added["categories"] += 1

    admin = await storage.get_user_by_username(DEFAULT_ADMIN["username"])
    if admin is None:
        admin = await storage.create_user(User(**DEFAULT_ADMIN))
        added["users"] += 1

    if not await storage.get_posts(limit=1):
        now = utc_now()
        for fields, hours_ago in SAMPLE_POSTS:
            published_at = now - timedelta(hours=hours_ago)
            await storage.create_post(
                Post(**fields, status="published", author_id=admin.id, published_at=published_at)
            )
            added["posts"] += 1

    for fields in DEFAULT_SETTINGS:
        if await storage.get_setting(fields["key"]) is None:
            await storage.create_setting(Setting(**fields))
            added["settings"] += 1

    if not any(added.values()):
        logger.info("Default data already present; nothing seeded")
        return False
    logger.info(
        f"Seeded default data: {added['categories']} categories, {added['users']} users, "
        f"{added['posts']} posts, {added['settings']} settings"
    )
    return True
