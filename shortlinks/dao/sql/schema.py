from sqlalchemy import Column, MetaData, String, Table, Text


__all__ = ['SHORTCODE_MAX_LENGTH', 'short_links_table']

SHORTCODE_MAX_LENGTH = 32


def short_links_table(metadata: MetaData, name: str = 'short_links') -> Table:
    """Describe the short links table: `short_id` is the primary key, so the
    database rejects a second row with the same shortcode."""
    return Table(
        name,
        metadata,
        Column('short_id', String(SHORTCODE_MAX_LENGTH), primary_key=True),
        Column('long_url', Text, nullable=False),
    )
