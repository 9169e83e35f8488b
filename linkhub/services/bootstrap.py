import logging

from linkhub.domain.entities import Link
from linkhub.ui.context import LinkHubContext

logger = logging.getLogger(__name__)


def bootstrap_state(ctx: LinkHubContext, seed_demo: bool | None = None) -> None:
    """
    Load persisted state into the store at startup.

    When demo seeding is enabled and no links exist, the sample links from
    the rules are shown; they are saved only with the next mutation.
    """
    ctx.store.load()

    demo = ctx.rules.demo
    if seed_demo is None:
        seed_demo = demo.seed_when_empty
    if not seed_demo:
        return

    sample = [Link(title=item.title, url=item.url) for item in demo.links]
    if ctx.store.seed_links(sample):
        logger.info(f"Showing {len(sample)} sample links")
