"""
Cache for public GET responses.

Public endpoints (events, pages, site configuration, home) render the same
body for every visitor, so their successful responses are kept in the
Django cache for ``PUBLIC_PAGE_CACHE_TTL`` seconds. Mutations call
``revalidate_paths`` with the paths they affect, which drops every cached
variant (query strings included) of those paths.
"""
import logging
from functools import wraps

from django.conf import settings
from django.core.cache import cache
from rest_framework.response import Response

logger = logging.getLogger(__name__)

BODY_KEY_PREFIX = 'public_page:'
INDEX_KEY_PREFIX = 'public_page_index:'


def _body_key(full_path):
    return f'{BODY_KEY_PREFIX}{full_path}'


def _index_key(path):
    return f'{INDEX_KEY_PREFIX}{path}'


def cache_public_response(view_func):
    """
    Cache the body of successful GET responses per full request path.

    Place it below ``@api_view`` so the cached body still goes through the
    renderer:

        @api_view(['GET'])
        @permission_classes([AllowAny])
        @cache_public_response
        def event_list(request):
            ...
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if request.method != 'GET':
            return view_func(request, *args, **kwargs)

        ttl = settings.PUBLIC_PAGE_CACHE_TTL
        full_path = request.get_full_path()
        key = _body_key(full_path)

        cached = cache.get(key)
        if cached is not None:
            return Response(cached)

        response = view_func(request, *args, **kwargs)
        if ttl and isinstance(response, Response) and response.status_code == 200:
            cache.set(key, response.data, ttl)
            index_key = _index_key(request.path)
            variants = set(cache.get(index_key) or ())
            variants.add(full_path)
            cache.set(index_key, variants, ttl)
        return response

    return wrapper


def revalidate_paths(*paths):
    """Drop cached public responses for the given paths."""
    keys = []
    for path in paths:
        index_key = _index_key(path)
        variants = cache.get(index_key) or ()
        keys.extend(_body_key(variant) for variant in variants)
        keys.append(_body_key(path))
        keys.append(index_key)
    if keys:
        cache.delete_many(keys)
        logger.debug("Revalidated public paths: %s", ', '.join(paths))
