import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


class Tier(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SAMPLE = "sample"


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """One source in a panel's chain: fetch a raw payload, then shape it."""

    name: str
    fetch: Callable[[], Awaitable[Any]]
    transform: Callable[[Any], T]
    enabled: bool = True


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    value: T
    tier: Tier
    source: str


SAMPLE_SOURCE = "sample"


async def resilient_fetch(
    panel: str,
    attempts: Sequence[Attempt[T]],
    sample: Callable[[], T],
) -> FetchResult[T]:
    """Try each attempt in order and fall back to sample data.

    The first attempt counts as the primary tier, later ones as secondary.
    Any error from an attempt's fetch or transform moves on to the next one;
    the sample step does not touch the network and is expected never to fail.
    """
    for index, attempt in enumerate(attempts):
        if not attempt.enabled:
            logging.info("%s: %s not configured, skipping", panel, attempt.name)
            continue
        try:
            logging.info("%s: fetching from %s", panel, attempt.name)
            raw = await attempt.fetch()
            value = attempt.transform(raw)
        except Exception as e:
            logging.warning("%s: %s failed: %s", panel, attempt.name, e)
            continue
        tier = Tier.PRIMARY if index == 0 else Tier.SECONDARY
        return FetchResult(value=value, tier=tier, source=attempt.name)

    logging.warning("%s: all sources failed, using sample data", panel)
    return FetchResult(value=sample(), tier=Tier.SAMPLE, source=SAMPLE_SOURCE)
