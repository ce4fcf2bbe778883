from django.utils.deprecation import MiddlewareMixin

from apps.api.gate import gate_request
from apps.common import get_logger

logger = get_logger(__name__).bind(component='api', layer='middleware')


class AccessGateMiddleware(MiddlewareMixin):
    """
    Resolves the session identity and applies the role policy before any
    view logic runs. Views opt in per HTTP method through their ``access`` map.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):
        view_class = getattr(view_func, 'view_class', None)
        if not view_class:
            return None
        logger.debug(
            'Gating request',
            view=getattr(view_class, '__name__', str(view_class)),
            method=getattr(request, 'method', None),
        )
        return gate_request(request, view_class, view_kwargs)
