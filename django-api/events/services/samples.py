"""Built-in sample events for bootstrapping an empty list."""

SAMPLE_EVENTS = (
    {
        "title": "Music Festival",
        "date": "2026-04-10",
        "category": "Entertainment",
        "description": "Outdoor live music festival.",
    },
    {
        "title": "Startup Meetup",
        "date": "2026-05-05",
        "category": "Networking",
        "description": "Meet local entrepreneurs and investors.",
    },
    {
        "title": "Web Development Workshop",
        "date": "2026-06-20",
        "category": "Workshop",
        "description": "Hands-on coding session.",
    },
    {
        "title": "AI Conference 2026",
        "date": "2026-07-18",
        "category": "Conference",
        "description": "Future of Artificial Intelligence.",
    },
)
