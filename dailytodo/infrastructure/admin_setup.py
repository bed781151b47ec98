# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dailytodo.domain.users.repositories import UserRepository
from dailytodo.shared.logging import logger


def setup_admin_user(users: UserRepository, admin_username: str | None) -> bool:
    """Promote ``admin_username`` to admin if that user already exists.

    Returns True when a promotion happened. A missing user is not an error:
    registering that name later creates it as admin.
    """

    if not admin_username:
        logger.info("admin_setup: no ADMIN_USERNAME configured, skipping")
        return False

    user = users.find_by_username(admin_username)
    if user is None:
        logger.info(f"admin_setup: '{admin_username}' not registered yet")
        return False
    if user.role == "admin":
        logger.info(f"admin_setup: '{admin_username}' already has admin role")
        return False

    users.set_role(user.id, "admin")
    logger.info(f"admin_setup: granted admin role to '{admin_username}'")
    return True


__all__ = ["setup_admin_user"]
