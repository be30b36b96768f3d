from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy import DateTime, bindparam, text

from shortlink_app.config import settings
from shortlink_app.database.connection import EdgeDatabase
from shortlink_app.schemas import (
    AffiliateProps,
    ApiKeyUser,
    DomainProps,
    LinkProps,
    RootDomainLink,
    WorkspaceProps,
    parse_row,
)
from shortlink_app.services.key_generator import KeyGenerator
from shortlink_app.utils.keys import normalize_key, strip_workspace_prefix

UPDATE_TOKEN_LAST_USED = text(
    "UPDATE Token SET lastUsed = :last_used WHERE hashedKey = :hashed_key"
).bindparams(bindparam("last_used", type_=DateTime()))


class EdgeService:
    """
    Edge queries with the database handle injected.

    Every method is one round trip (get_random_key loops over one-trip checks)
    and every method returns None straight away when the handle is disabled,
    without touching the network.

    Not-found is None (records) or False (existence checks). Database errors
    are not caught here.

    Note: Methods are async so request handlers can await them; the SQLAlchemy
    calls inside are sync.
    """

    def __init__(
        self,
        db: EdgeDatabase,
        key_generator: Optional[KeyGenerator] = None
    ):
        """
        Args:
            db: Database handle (may be disabled)
            key_generator: Random key generator (default: bounded, settings-sized)
        """
        self.db = db
        self.key_generator = key_generator or KeyGenerator()

    # Workspaces

    async def get_workspace(self, workspace_id: str) -> Optional[WorkspaceProps]:
        """Workspace by id. Accepts the external `ws_` form."""
        if not self.db.enabled:
            return None

        row = self.db.fetch_one(
            "SELECT * FROM Project WHERE id = :id",
            {"id": strip_workspace_prefix(workspace_id, settings.workspace_id_prefix)},
        )
        return parse_row(WorkspaceProps, row, "Project") if row else None

    async def increment_workspace_ai_usage(self, workspace_id: str) -> Optional[int]:
        """
        Bump Project.aiUsage by exactly one.

        Returns the number of rows updated (0 when the workspace doesn't exist,
        nothing is created).
        """
        if not self.db.enabled:
            return None

        return self.db.execute(
            "UPDATE Project SET aiUsage = aiUsage + 1 WHERE id = :id",
            {"id": strip_workspace_prefix(workspace_id, settings.workspace_id_prefix)},
        )

    async def get_affiliate(self, project_id: str, username: str) -> Optional[AffiliateProps]:
        if not self.db.enabled:
            return None

        row = self.db.fetch_one(
            "SELECT * FROM Affiliate WHERE projectId = :project_id AND username = :username",
            {"project_id": project_id, "username": username},
        )
        return parse_row(AffiliateProps, row, "Affiliate") if row else None

    # Domains and links

    async def get_domain(self, domain: str) -> Optional[DomainProps]:
        if not self.db.enabled:
            return None

        row = self.db.fetch_one("SELECT * FROM Domain WHERE slug = :slug", {"slug": domain})
        return parse_row(DomainProps, row, "Domain") if row else None

    async def check_if_key_exists(self, domain: str, key: str) -> Optional[bool]:
        if not self.db.enabled:
            return None

        row = self.db.fetch_one(
            "SELECT 1 FROM Link WHERE domain = :domain AND `key` = :key LIMIT 1",
            {"domain": domain, "key": normalize_key(key)},
        )
        return row is not None

    async def get_link(self, domain: str, key: str) -> Optional[LinkProps]:
        """Link by domain and key. The key is normalized to its stored form first."""
        if not self.db.enabled:
            return None

        row = self.db.fetch_one(
            "SELECT * FROM Link WHERE domain = :domain AND `key` = :key",
            {"domain": domain, "key": normalize_key(key)},
        )
        return parse_row(LinkProps, row, "Link") if row else None

    async def get_link_by_url(self, url: str) -> Optional[LinkProps]:
        """First link pointing at `url` (exact match)"""
        if not self.db.enabled:
            return None

        row = self.db.fetch_one("SELECT * FROM Link WHERE url = :url", {"url": url})
        return parse_row(LinkProps, row, "Link") if row else None

    async def get_domain_or_link(
        self,
        domain: str,
        key: Optional[str] = None
    ) -> Union[RootDomainLink, LinkProps, None]:
        """
        Resolve a (domain, key) pair.

        No key (or the root key) resolves to the domain itself, shaped like a
        link: its columns plus key=_root and url=<domain target>. Any other key
        is a plain link lookup.
        """
        if not key or key == settings.root_key:
            data = await self.get_domain(domain)
            if not data:
                return None
            return RootDomainLink.model_validate({
                **data.model_dump(by_alias=True),
                "key": settings.root_key,
                "url": data.target,
            })

        return await self.get_link(domain, key)

    async def get_random_key(
        self,
        domain: str,
        prefix: Optional[str] = None,
        long: bool = False
    ) -> str:
        """
        Random key that is free on `domain`.

        Args:
            domain: Domain slug the key must be unique within
            prefix: Optional path prefix, e.g. "/docs/" -> "docs/<key>"
            long: Use the long key space

        Raises:
            KeyGenerationError: every candidate collided
        """
        return await self.key_generator.generate(
            domain, self.check_if_key_exists, prefix=prefix, long=long
        )

    # Users and API tokens

    async def check_if_user_exists(self, user_id: str) -> Optional[bool]:
        if not self.db.enabled:
            return None

        row = self.db.fetch_one("SELECT 1 FROM User WHERE id = :id LIMIT 1", {"id": user_id})
        return row is not None

    async def get_user_from_api_key(self, hashed_key: str) -> Optional[ApiKeyUser]:
        """Owner of the token with this hashed key"""
        if not self.db.enabled:
            return None

        # User columns only: Token also has an `id` that would shadow the user's
        row = self.db.fetch_one(
            "SELECT u.id, u.name, u.email FROM User u "
            "INNER JOIN Token t ON u.id = t.userId "
            "WHERE t.hashedKey = :hashed_key LIMIT 1",
            {"hashed_key": hashed_key},
        )
        return parse_row(ApiKeyUser, row, "User") if row else None

    async def update_api_key(
        self,
        hashed_key: str,
        last_used: Optional[datetime] = None
    ) -> Optional[int]:
        """Set Token.lastUsed (defaults to now, UTC). Returns rows updated."""
        if not self.db.enabled:
            return None

        if last_used is None:
            last_used = datetime.now(timezone.utc)

        return self.db.execute(
            UPDATE_TOKEN_LAST_USED,
            {"last_used": last_used, "hashed_key": hashed_key},
        )
