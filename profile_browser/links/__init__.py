from .db_links import DBSource, LinkType, create_db_link, db_link_html

__all__ = ["DBSource", "LinkType", "create_db_link", "db_link_html"]
