"""
Response helpers shared by the catalog routes.
"""

from typing import Any, Dict, List

from services.pagination import PageWindow, build_links


def paginated_response(items: List[Any], window: PageWindow, base_path: str) -> Dict[str, Any]:
    """List body: items, page metadata and navigation links"""
    return {
        "items": items,
        "pageNumber": window.page,
        "totalPages": window.last_page,
        "pageSize": window.page_size,
        "totalCount": window.total_count,
        "links": build_links(base_path, window),
    }


def created_response(entity_id: Any, rel: str, path: str) -> Dict[str, Any]:
    """201 body with the new identity and a link to the resource"""
    return {"id": entity_id, "links": {rel: path}}
