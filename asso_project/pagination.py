"""
Automatic pagination for function-based views.

Works with the standard response envelope:
{
    "status": "success",
    "message": "",
    "data": {"count": ..., "results": [...], ...}
}
"""
from functools import wraps

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    """
    Query Parameters:
    - page: Page number (default: 1)
    - page_size: Items per page (default: 20, max: 100)
    """
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response({
            'status': 'success',
            'message': '',
            'data': {
                'count': self.page.paginator.count,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data
            }
        })


def auto_paginate(view_func):
    """
    Paginate list responses of GET requests.

    The wrapped view returns either a bare list or a success envelope whose
    ``data`` is a list; both are sliced into a page. Detail views and
    non-GET requests pass through untouched.

    Usage:
        @api_view(['GET', 'POST'])
        @auto_paginate
        def event_list(request):
            ...
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)

        if request.method != 'GET' or not isinstance(response, Response):
            return response
        if response.status_code != 200:
            return response

        items = response.data
        if isinstance(items, dict) and isinstance(items.get('data'), list):
            items = items['data']
        if not isinstance(items, list):
            return response

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(items, request)
        if page is None:
            return response
        return paginator.get_paginated_response(page)

    return wrapper
