import logging
from collections import defaultdict

import httpx

logger = logging.getLogger("wordgrid")


def format_message(words: list[str], grid_size: int, words_per_group: int = 10) -> tuple[str, str]:
    """Build the (title, body) of a solve notification."""
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)

    title = f"Word grid {grid_size}x{grid_size} - {len(words)} words"

    selected = []
    for length in sorted(by_length):
        selected.extend(sorted(by_length[length])[:words_per_group])

    counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items()))
    return title, ",".join(selected) + "\n\n" + counts


async def send_notification(
    words: list[str],
    grid_size: int,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    words_per_group: int = 10,
):
    """Send solve results to ntfy.sh. Best-effort: failures are logged, not raised."""
    title, body = format_message(words, grid_size, words_per_group)
    try:
        async with httpx.AsyncClient(timeout=10.0) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Tags": "abc",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)

    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Failed to send notification: %s", e)
