import json
import unittest
from rest_framework import status
from apps.api.utils import error_json_response, error_response, message_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "missing", {"id": 1})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"id": 1})

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(resp.data["error"]["message"], "oops")

    def test_error_response_supports_hint_and_extra(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Invalid value",
            hint="Use a positive price",
            extra={"field": "itemPrice"},
        )
        payload = resp.data["error"]
        self.assertEqual(payload["hint"], "Use a positive price")
        self.assertEqual(payload["extra"], {"field": "itemPrice"})

    def test_access_codes_map_to_forbidden(self):
        for code in ("UNAUTHENTICATED", "INVALID_TOKEN", "FORBIDDEN"):
            resp = error_response(code, "denied")
            self.assertEqual(resp.status_code, status.HTTP_403_FORBIDDEN)

    def test_rejects_blank_code_or_message(self):
        with self.assertRaises(ValueError):
            error_response("  ", "missing")
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "")


class JsonAndMessageResponseTests(unittest.TestCase):
    def test_error_json_response_uses_same_envelope(self):
        resp = error_json_response("EMPTY_CART", "The cart is empty", {"cart_id": "3"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        body = json.loads(resp.content)
        self.assertEqual(body["error"]["code"], "EMPTY_CART")
        self.assertEqual(body["error"]["details"], {"cart_id": "3"})

    def test_message_response(self):
        resp = message_response("Logged out", status.HTTP_200_OK)
        self.assertEqual(resp.data, {"message": "Logged out"})
