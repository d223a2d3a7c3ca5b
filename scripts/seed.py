"""Seed the posts table with a realistic mix of categories, drafts and broadcasts."""
import argparse
import asyncio
import logging
import random
import time
from datetime import datetime, timedelta, timezone

from blogsite.cache import cache
from blogsite.database import Base, async_session, engine
from blogsite.models import Post, PostCategory

logger = logging.getLogger("seed")

AUTHORS = ["Ada Byron", "Grace Hopper", "Ken Thompson", "Barbara Liskov", "Guido van Rossum"]
TOPICS = ["async IO", "connection pooling", "caching", "release trains", "observability",
          "schema migrations", "type hints", "packaging", "testing", "profiling"]


def _body(topic: str) -> str:
    paragraphs = [
        f"This post walks through {topic} and what we learned shipping it. " * 3,
        f"Background on {topic} and the constraints we had to work within. " * 5,
        f"Closing notes and follow-up reading on {topic}. " * 2,
    ]
    return "\n\n".join(p.strip() for p in paragraphs)


async def seed(small: bool = False) -> None:
    num_posts = 100 if small else 5000
    logger.info("Seeding %d posts", num_posts)
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    counts = {"draft": 0, "broadcast": 0}
    async with async_session() as session:
        batch_size = 500
        for batch_start in range(0, num_posts, batch_size):
            for i in range(batch_start, min(batch_start + batch_size, num_posts)):
                created = datetime.now(timezone.utc) - timedelta(minutes=random.randint(0, 525600))
                topic = random.choice(TOPICS)
                draft = random.random() < 0.1
                broadcast = not draft and random.random() < 0.05
                counts["draft"] += draft
                counts["broadcast"] += broadcast
                session.add(
                    Post(
                        title=f"Post {i}: notes on {topic}",
                        author=random.choice(AUTHORS),
                        category=random.choice(list(PostCategory)),
                        draft=draft,
                        broadcast=broadcast,
                        raw_content=_body(topic),
                        created_at=created,
                        published_at=None if draft else created,
                    )
                )
            await session.flush()
            logger.info("  batch %d-%d flushed", batch_start, batch_start + batch_size)
        await session.commit()

    # Cached listings refer to the rows that were just dropped.
    await cache.connect()
    await cache.invalidate_posts()
    await cache.disconnect()

    logger.info(
        "Seeding complete in %.1fs: %d posts (%d drafts, %d broadcasts)",
        time.perf_counter() - start, num_posts, counts["draft"], counts["broadcast"],
    )


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (100 posts)")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
