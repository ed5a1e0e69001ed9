"""Fetch entries of a content type and project them into per-locale records."""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from cms_locale.parsing.locales import LocaleSpec, parse_locale_specs, project_fields
from cms_locale.retrieval.client import ClientConfig, DeliveryClient
from cms_locale.retrieval.models import Entry, EntryCollection
from cms_locale.utils.logging import get_logger

logger = get_logger(__name__)

WILDCARD_LOCALE = "*"


class EntriesSource(Protocol):
    """Anything that can answer an entries query."""

    def get_entries(self, params: Dict[str, Any]) -> Dict[str, Any]:
        ...


class LocaleProjector:
    """
    Turns multi-locale entries into flat records, one per configured locale.

    With no locales configured, each entry yields one record holding the
    stripped sys block merged with the raw locale-keyed field maps.
    """

    def __init__(
        self,
        space_id: str,
        access_token: str,
        host: Optional[str] = None,
        locales: Optional[Sequence[Any]] = None,
        *,
        environment: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        client: Optional[EntriesSource] = None,
    ):
        """
        Prepare the projector. No network I/O happens here.

        Args:
            space_id: Space identifier
            access_token: Delivery API token
            host: Optional host override (e.g. preview.contentful.com)
            locales: Locale codes or fallback lists, in output order
            environment: Environment id (defaults to master)
            timeout_seconds: Request timeout for the default client
            client: Entries source to use instead of a DeliveryClient
        """
        self.locales: Tuple[LocaleSpec, ...] = parse_locale_specs(locales)

        if client is None:
            config_kwargs: Dict[str, Any] = {
                "space": space_id,
                "access_token": access_token,
                "host": host,
            }
            if environment:
                config_kwargs["environment"] = environment
            if timeout_seconds is not None:
                config_kwargs["timeout_seconds"] = timeout_seconds
            client = DeliveryClient(ClientConfig(**config_kwargs))
        self.client = client

    @classmethod
    def from_config(cls, config: ClientConfig, locales: Optional[Sequence[Any]] = None) -> "LocaleProjector":
        return cls(
            config.space,
            config.access_token,
            host=config.host,
            locales=locales,
            environment=config.environment,
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def localized(self) -> bool:
        return bool(self.locales)

    def fetch_projected(self, content_type_id: str) -> List[Dict[str, Any]]:
        """
        Fetch all entries of a content type and project them.

        Returns:
            Flat list of records, entry-major then locale-minor

        Raises:
            ValueError: If content_type_id is empty
            FetchError: If the entries request fails (propagated as raised
                by the client)
            DataShapeError: If an entry lacks a usable sys/fields structure
        """
        if not isinstance(content_type_id, str) or not content_type_id.strip():
            raise ValueError("content_type_id must be a non-empty string")

        logger.info(f"Fetching entries for content type '{content_type_id}'")
        response = self.client.get_entries({
            "content_type": content_type_id,
            "locale": WILDCARD_LOCALE,
        })
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Raw entries response: {json.dumps(response, default=str, ensure_ascii=False)}")

        collection = EntryCollection.from_response(response)
        records = self.project_entries(collection.items)
        logger.info(
            f"Projected {len(collection.items)} entries into {len(records)} records "
            f"for content type '{content_type_id}'"
        )
        return records

    def project_entries(self, items: Sequence[Any]) -> List[Dict[str, Any]]:
        """Project already-fetched raw items. All items are validated before any record is built."""
        entries = [Entry.from_item(item, position) for position, item in enumerate(items)]

        records: List[Dict[str, Any]] = []
        for entry in entries:
            records.extend(self.project_entry(entry))
        return records

    def project_entry(self, entry: Entry) -> List[Dict[str, Any]]:
        sys_meta = entry.stripped_sys()

        if not self.locales:
            return [{**sys_meta, **entry.field_values}]

        return [
            {**sys_meta, **project_fields(entry.field_values, spec)}
            for spec in self.locales
        ]
