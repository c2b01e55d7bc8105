import asyncio
import logging
import os
from datetime import date
from typing import List, Optional

import discord
from dotenv import load_dotenv

from daily_news import InvalidArgument, NewsFetcher, NewsItem

logger = logging.getLogger(__name__)

MAX_MESSAGE_LEN = 2000
HELP_TEXT = (
    "Commands: `!news [n]`, `!sources`, `!topics`, `!topic <name>`, `!source <name>`, "
    "`!search <keyword>`, `!author <name>`, `!top [n]`, `!date <DD-MM-YYYY>`"
)


def truncate(text: str, limit: int = MAX_MESSAGE_LEN) -> str:
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


def format_items(title: str, items: List[NewsItem]) -> str:
    if not items:
        return "No news found."
    lines = [f"📰 {title}", ""]
    for it in items:
        lines.append(f"**{it.item.title}**")
        meta = it.item.source
        if it.item.published_at:
            meta += f" - {it.item.published_at.strftime('%Y-%m-%d %H:%M')}"
        lines.append(f"*{meta}*")
        if it.item.links:
            lines.append(f"<{it.item.links[0]}>")
        lines.append("")
    return truncate("\n".join(lines))


def _int_arg(arg: str, default: int) -> int:
    try:
        return int(arg) if arg else default
    except ValueError:
        return default


def handle_command(fetcher: NewsFetcher, content: str) -> Optional[str]:
    """Run one `!` command against `fetcher` and return the reply, or None if it isn't one."""
    if not content.startswith("!"):
        return None
    command, _, arg = content[1:].partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command == "news":
        n = _int_arg(arg, 3)
        return format_items(f"Latest {n} news", fetcher.return_latest_news(n))
    if command == "sources":
        sources = fetcher.return_all_sources()
        return truncate("Sources: " + ", ".join(sources)) if sources else "No sources found."
    if command == "topics":
        topics = fetcher.return_all_topics()
        return truncate("Topics: " + ", ".join(topics)) if topics else "No topics found."
    if command == "top":
        ranked = fetcher.return_top_sources_by_article_count(_int_arg(arg, 5))
        if not ranked:
            return "No sources found."
        return truncate("\n".join(f"{i}. {r.source} ({r.count})" for i, r in enumerate(ranked, 1)))
    if command == "date":
        try:
            d, m, y = (int(p) for p in arg.split("-"))
            fetcher.set_date(d, m, y)
        except (ValueError, InvalidArgument) as e:
            return f"Invalid date `{arg}`: {e}"
        return f"Now reading news for {fetcher.date_context.path()}"

    if command in {"topic", "source", "search", "author"} and not arg:
        return f"Usage: `!{command} <value>`"
    if command == "topic":
        return format_items(f"Topic: {arg}", fetcher.return_news_with_a_topic(arg))
    if command == "source":
        return format_items(f"Source: {arg}", fetcher.return_news_from_source(arg))
    if command == "search":
        return format_items(f"Search: {arg}", fetcher.search_news_by_keyword(arg))
    if command == "author":
        return format_items(f"Author: {arg}", fetcher.return_news_by_author(arg))
    if command == "help":
        return HELP_TEXT
    return None


def create_client(fetcher: NewsFetcher) -> discord.Client:
    # message_content intent is required to read commands
    intents = discord.Intents.default()
    intents.message_content = True

    client = discord.Client(intents=intents)

    @client.event
    async def on_ready():
        logger.info("Logged in as %s", client.user)

    @client.event
    async def on_message(message):
        if message.author == client.user:
            return
        try:
            # fetches block, keep them off the event loop
            reply = await asyncio.to_thread(handle_command, fetcher, message.content)
        except Exception:
            logger.exception("Command failed: %s", message.content)
            await message.channel.send("Something went wrong while fetching the news.")
            return
        if reply:
            await message.channel.send(reply)

    return client


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    # Loads DISCORD_BOT_TOKEN and NEWS_BASE_URL from .env
    load_dotenv()

    token = os.getenv("DISCORD_BOT_TOKEN")
    base_url = os.getenv("NEWS_BASE_URL")
    if not token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    if not base_url:
        raise ValueError("NEWS_BASE_URL is not set. Check your .env file.")

    fetcher = NewsFetcher.for_day(base_url, date.today(), timeout=15)
    create_client(fetcher).run(token)


if __name__ == "__main__":
    main()
