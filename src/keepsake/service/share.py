# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from keepsake import time
from keepsake.model.entry import Entry
from keepsake.model.share_link import ShareLink
from keepsake.repository.entry import EntryRepository
from keepsake.repository.share_link import ShareLinkRepository

logger = logging.getLogger(__name__)


def share_url(origin: str, code: str) -> str:
    return f"{origin.rstrip('/')}/share/{code}"


def is_expired(link: ShareLink, now: Optional[pendulum.DateTime] = None) -> bool:
    if link["expires_at"] is None:
        return False
    if now is None:
        now = time.now_utc()
    return link["expires_at"] <= now


def resolve(
    share_links: ShareLinkRepository,
    entries: EntryRepository,
    code: str,
    now: Optional[pendulum.DateTime] = None,
) -> Optional[Entry]:
    """
    Look up the entry behind a share code.

    Returns None for unknown codes, expired links, and links whose entry
    has since been deleted.
    """
    link = share_links.get_by_code(code)
    if link is None:
        return None
    if is_expired(link, now):
        logger.info(f"Share link {code} has expired")
        return None
    entry = entries.get(link["entry_id"])
    if entry is None:
        logger.info(f"Share link {code} points at missing entry {link['entry_id']}")
    return entry
