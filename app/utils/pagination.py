DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def validate_pagination(page=None, page_size=None):
    """Clamp paging arguments to a usable (page, page_size) pair.

    A missing or non-positive page size falls back to DEFAULT_PAGE_SIZE.
    """
    valid_page = max(1, page or 1)
    if not page_size or page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    valid_page_size = min(MAX_PAGE_SIZE, page_size)
    return valid_page, valid_page_size


def paginate(query, page=None, page_size=None):
    page, page_size = validate_pagination(page, page_size)
    offset = (page - 1) * page_size
    total = query.count()
    items = query.offset(offset).limit(page_size).all()
    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
    }
