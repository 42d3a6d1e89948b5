import sys

from loguru import logger

PALETTE = {
    "search": "green",
    "cli": "blue",
}

LEVEL_PER_COMPONENT = {
    "search": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    session = record["extra"].get("session", "")
    colour = PALETTE.get(comp, "white")

    # markup is resolved from the returned template, not from extras
    if session:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8} | {session:<10}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<8}</> | "
            "<level>{message}</level>\n"
        )


def set_level(level: str, component: str = "search") -> None:
    """Change the minimum level shown for one component."""
    logger.level(level)  # raises ValueError for unknown levels
    LEVEL_PER_COMPONENT[component] = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
