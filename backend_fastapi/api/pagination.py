from core.domain.models.page import Direction, PageRequest, SortOrder

# JSON property names accepted in `sort`, mapped to task attributes.
_SORT_ALIASES = {"dueDate": "due_date"}

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000


def parse_sort(values: list[str] | None) -> tuple[SortOrder, ...]:
    """
    Parse `sort` query values of the form "field[,field...][,asc|desc]".

    Each value may name several fields that share the trailing direction,
    e.g. "dueDate,title,desc". The direction defaults to ascending.
    Field names are not checked here.
    """
    orders: list[SortOrder] = []
    for value in values or []:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            continue
        direction = Direction.ASC
        if parts[-1].lower() in {"asc", "desc"}:
            direction = Direction(parts.pop().lower())
        for name in parts:
            orders.append(SortOrder(_SORT_ALIASES.get(name, name), direction))
    return tuple(orders)


def page_request(page: int, size: int, sort: list[str] | None) -> PageRequest:
    return PageRequest(page=page, size=size, sort=parse_sort(sort))
