"""扑克牌组命令行入口.

生成一副标准牌组并按默认布局输出到控制台。
"""

import logging

import click

from ..core.config import configure_logging
from ..core.deck import build_standard_deck, render_deck


@click.command()
def main() -> None:
    """打印一副标准的52张扑克牌."""
    configure_logging()
    logger = logging.getLogger(__name__)

    deck = build_standard_deck()
    logger.info(f"输出标准牌组: {len(deck)}张")
    render_deck(deck)


if __name__ == "__main__":
    main()
