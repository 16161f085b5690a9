from shortlinks.dao.file.short_link_file_dao import ShortLinkFileDAO


__all__ = ['ShortLinkFileDAO']
