"""Default season 8 episodes, inserted once into an empty database."""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models.episode import EpisodeORM

logger = logging.getLogger(__name__)

# (episode, title, description, air date)
DEFAULT_EPISODES: list[tuple[int, str, str, date]] = [
    (
        1,
        "Summer of All Fears",
        "To punish Morty and Summer, Rick puts them in a simulation.",
        date(2025, 5, 25),
    ),
    (
        2,
        "Valkyrick",
        "Space Beth calls her dad for a ride, broh.",
        date(2025, 6, 1),
    ),
    (
        3,
        "The Rick, The Mort & The Ugly",
        "Some guys wanna rebuild the citadel, broh. Seems like a bad idea, broh. Yeehaw stuff, broh.",
        date(2025, 6, 8),
    ),
    (
        4,
        "The Last Temptation of Jerry",
        "Broh is risen. The Smiths learn the true meaning of Easter. Kind of. Broh.",
        date(2025, 6, 15),
    ),
    (
        5,
        "Cryo Mort a Rickver",
        "Rick and Morty wanna rob a ship in cryosleep, but people are light sleepers.",
        date(2025, 6, 22),
    ),
    (
        6,
        "The Curicksous Case of Bethjamin Button",
        "The brohs goes to a theme park Rick loves. Beth and Space Beth stay behind and regress or something.",
        date(2025, 6, 29),
    ),
    (
        7,
        "Ricker Than Fiction",
        "Rick and Morty write the next installment of their favorite movie franchise.",
        date(2025, 7, 6),
    ),
    (
        8,
        "Nomortland",
        "Jerry makes a friend just as jobless as he is.",
        date(2025, 7, 13),
    ),
    (
        9,
        "Morty Daddy",
        "Summer and Rick dine out. Morty reconnects with someone from his past.",
        date(2025, 7, 20),
    ),
    (
        10,
        "Hot Rick",
        "Sometimes we try weird stuff to let go of the past.",
        date(2025, 7, 27),
    ),
]

DEFAULT_SEASON = 8


async def seed_episodes(session: AsyncSession) -> int:
    """
    Insert the default episodes if the episodes table is empty.

    Args:
        session: Database session (committed by the caller)

    Returns:
        Number of episodes inserted
    """
    existing = await session.scalar(select(func.count()).select_from(EpisodeORM))
    if existing:
        logger.info("Episodes already exist, skipping default data insertion")
        return 0

    session.add_all(
        EpisodeORM(
            title=title,
            description=description,
            season=DEFAULT_SEASON,
            episode=number,
            air_date=air_date,
        )
        for number, title, description, air_date in DEFAULT_EPISODES
    )
    await session.flush()

    logger.info(f"Inserted {len(DEFAULT_EPISODES)} default episodes")
    return len(DEFAULT_EPISODES)
