"""Infrastructure adapters: Redis, origin HTTP fetcher, Telegram Bot API."""
