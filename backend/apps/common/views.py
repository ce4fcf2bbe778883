import os
import time

from django.conf import settings
from django.core.cache import caches
from django.db import DEFAULT_DB_ALIAS, connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')

_CACHE_PROBE_KEY = 'health:probe'


def _db_check(alias=DEFAULT_DB_ALIAS):
    started = time.time()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def _cache_check(alias='default'):
    # The cache fails open (IGNORE_EXCEPTIONS), so a dead backend shows up as a miss.
    token = str(time.time())
    try:
        backend = caches[alias]
        backend.set(_CACHE_PROBE_KEY, token, timeout=5)
        ok = backend.get(_CACHE_PROBE_KEY) == token
    except Exception as e:
        logger.warning('Cache health check failed', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if not ok:
        logger.warning('Cache health check round-trip mismatch', alias=alias)
        return {'status': 'fail', 'error': 'round-trip mismatch'}
    return {'status': 'ok'}


def _media_check():
    media_root = str(getattr(settings, 'MEDIA_ROOT', '') or '')
    if not media_root:
        return {'status': 'skipped', 'detail': 'MEDIA_ROOT not set'}
    if not os.path.isdir(media_root):
        # Created on first upload.
        return {'status': 'ok', 'detail': 'not created yet'}
    if not os.access(media_root, os.W_OK):
        logger.warning('Media directory not writable', path=media_root)
        return {'status': 'fail', 'error': 'not writable'}
    return {'status': 'ok'}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the store, the cache and the upload directory."""
    checks = {
        'database': _db_check(),
        'cache': _cache_check(),
        'media': _media_check(),
    }
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse({'status': overall_status, 'checks': checks}, status=http_status)
