from __future__ import annotations

import html
import logging
from enum import Enum
from typing import Dict, Tuple, Union

logger = logging.getLogger(__name__)


class DBSource(str, Enum):
    NCBI = "NCBI"
    UNIPROT = "UniProt"
    ORTHODB = "OrthoDB"
    OMA = "OMA"


class LinkType(str, Enum):
    GROUP = "group"
    GENE = "gene"


ORTHODB_DEFAULT_HOST = "www.orthodb.org"

# (source, link type) -> URL template.
# Placeholders: {id}, {host} (OrthoDB only)
URL_TEMPLATES: Dict[Tuple[DBSource, LinkType], str] = {
    (DBSource.NCBI, LinkType.GROUP): "https://www.ncbi.nlm.nih.gov/protein/{id}",
    (DBSource.NCBI, LinkType.GENE): "https://www.ncbi.nlm.nih.gov/protein/{id}",
    (DBSource.UNIPROT, LinkType.GROUP): "https://www.uniprot.org/uniprot/{id}",
    (DBSource.UNIPROT, LinkType.GENE): "https://www.uniprot.org/uniprot/{id}",
    (DBSource.ORTHODB, LinkType.GROUP): "https://{host}/?query={id}",
    (DBSource.ORTHODB, LinkType.GENE): "https://{host}/?gene={id}",
    (DBSource.OMA, LinkType.GROUP): "https://omabrowser.org/oma/omagroup/{id}/members/",
    (DBSource.OMA, LinkType.GENE): "https://omabrowser.org/oma/info/{id}",
}


def _orthodb_host(version: str) -> str:
    if not version:
        return ORTHODB_DEFAULT_HOST
    return f"v{version.replace('.', '-')}.orthodb.org"


def _parse_source(source: Union[DBSource, str]) -> DBSource | None:
    if isinstance(source, DBSource):
        return source
    try:
        return DBSource(source)
    except ValueError:
        logger.warning("Unknown database source %r", source)
        return None


def _parse_link_type(link_type: Union[LinkType, str, None]) -> LinkType:
    # Anything other than "gene" links to the group page
    if isinstance(link_type, LinkType):
        return link_type
    return LinkType.GENE if link_type == LinkType.GENE.value else LinkType.GROUP


def create_db_link(
        entry_id: str,
        source: Union[DBSource, str],
        link_type: Union[LinkType, str, None] = LinkType.GROUP,
        version: str = "",
) -> str:
    """
    Build the URL of an entry in a public database.

    :param entry_id: protein / group / gene ID
    :param source: one of DBSource (or its string value)
    :param link_type: "gene" links to the gene page, anything else to the group page
    :param version: OrthoDB release, e.g. "10.1"; empty uses the current release
    :return: the URL, or "" for an unknown source
    """
    db = _parse_source(source)
    if db is None:
        return ""

    kind = _parse_link_type(link_type)
    template = URL_TEMPLATES[(db, kind)]

    url_id = str(entry_id)
    if db is DBSource.ORTHODB and kind is LinkType.GENE:
        url_id = url_id.replace(":", "%3A")

    return template.format(id=url_id, host=_orthodb_host(version or ""))


def db_link_html(
        entry_id: str,
        source: Union[DBSource, str],
        link_type: Union[LinkType, str, None] = LinkType.GROUP,
        version: str = "",
) -> str:
    """HTML paragraph linking to the database entry, or "" when no URL can be built."""
    url = create_db_link(entry_id, source, link_type, version)
    if not url:
        return ""
    label = source.value if isinstance(source, DBSource) else str(source)
    return (
        f"<p><a href='{html.escape(url, quote=True)}' target='_blank'>"
        f"{html.escape(label)} entry for <strong>{html.escape(str(entry_id))}</strong></a></p>"
    )
