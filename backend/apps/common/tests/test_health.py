import json
import unittest
from unittest import mock
from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @mock.patch('apps.common.views._media_check', return_value={'status': 'ok'})
    @mock.patch('apps.common.views._cache_check', return_value={'status': 'ok'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_dependencies_pass(self, mock_db_check, _mock_cache, _mock_media):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)

    @mock.patch('apps.common.views._media_check', return_value={'status': 'ok'})
    @mock.patch('apps.common.views._cache_check', return_value={'status': 'fail', 'error': 'round-trip mismatch'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'fail', 'error': 'db down'})
    def test_ready_health_degraded_on_dependency_failure(self, mock_db_check, mock_cache_check, _mock_media):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['cache'], mock_cache_check.return_value)

    def test_media_check_skipped_without_media_root(self):
        with mock.patch.object(views.settings, 'MEDIA_ROOT', ''):
            self.assertEqual(views._media_check()['status'], 'skipped')

    def test_cache_check_round_trip(self):
        self.assertEqual(views._cache_check(), {'status': 'ok'})
