"""Record codec for the append-only short link log

Each record is one encoded line: `<shortcode>\\t<target>\\n`. The line is split
on the first tab only, so targets may contain tabs. Newlines can't be
represented and are rejected when encoding, as are characters the log's
encoding can't represent (e.g. lone surrogates in UTF-8).
"""

from shortlinks.models import ShortLinkModel


__all__ = ['SEPARATOR', 'TERMINATOR', 'encode_record', 'decode_record']

SEPARATOR = '\t'
TERMINATOR = '\n'


def encode_record(short_link: ShortLinkModel, encoding: str = 'utf-8') -> bytes:
    """Encode a short link as one log line (terminator included).

    Raises:
        ValueError:
            If the shortcode is empty or contains a tab or newline, the target
            contains a newline, or the record can't be encoded with `encoding`.
    """
    if not short_link.shortcode or any(c in short_link.shortcode for c in (SEPARATOR, TERMINATOR)):
        raise ValueError(f'Shortcode {short_link.shortcode!r} cannot be stored in the log.')
    if TERMINATOR in short_link.target:
        raise ValueError(f'Target for shortcode {short_link.shortcode!r} contains a newline.')

    line = f'{short_link.shortcode}{SEPARATOR}{short_link.target}{TERMINATOR}'
    try:
        return line.encode(encoding)
    except UnicodeEncodeError as e:
        raise ValueError(f'Short link {short_link.shortcode!r} cannot be encoded as {encoding}.') from e


def decode_record(line: str) -> ShortLinkModel | None:
    """Decode one (already decoded) log line.

    Returns:
        ShortLinkModel | None:
            The decoded short link, or None if the line is malformed
            (no separator or an empty shortcode).
    """
    line = line.removesuffix(TERMINATOR)
    shortcode, separator, target = line.partition(SEPARATOR)
    if not separator or not shortcode:
        return None
    return ShortLinkModel(target=target, shortcode=shortcode)
