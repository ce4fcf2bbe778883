from django.urls import reverse
from rest_framework.test import APITestCase
from rest_framework import status
from apps.users.models import User

class TestAuth(APITestCase):
    def setUp(self):
        self.register_url = reverse('auth-register')
        self.login_url = reverse('auth-login')
        self.logout_url = reverse('auth-logout')
        self.password_url = reverse('auth-edit-password')
        self.user_data = {
            'name': 'Alice',
            'email': 'alice@example.com',
            'psw': 'secret1',
        }

    def _register_and_login(self):
        self.client.post(self.register_url, self.user_data, format='json')
        return self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'secret1'}, format='json'
        )

    def test_register(self):
        response = self.client.post(self.register_url, self.user_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = User.objects.get(email='alice@example.com')
        self.assertEqual(user.role, 'customer')
        self.assertTrue(user.password.startswith('bcrypt$$2b$10$'))
        self.assertNotIn('psw', response.data)

    def test_register_duplicate_email_any_case(self):
        self.client.post(self.register_url, self.user_data, format='json')
        dup = dict(self.user_data, email='ALICE@example.com')
        response = self.client.post(self.register_url, dup, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(User.objects.count(), 1)

    def test_login_sets_cookie(self):
        response = self._register_and_login()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('auth_token', response.cookies)
        self.assertTrue(response.cookies['auth_token']['httponly'])

    def test_login_unknown_email(self):
        response = self.client.post(
            self.login_url, {'email': 'ghost@example.com', 'psw': 'secret1'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_login_wrong_password(self):
        self.client.post(self.register_url, self.user_data, format='json')
        response = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'wrong1'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_change_password_then_login_with_new_one(self):
        self._register_and_login()
        response = self.client.put(self.password_url, {'psw': 'newsecret'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.client.post(self.logout_url)
        old = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'secret1'}, format='json'
        )
        self.assertEqual(old.status_code, status.HTTP_401_UNAUTHORIZED)
        new = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'newsecret'}, format='json'
        )
        self.assertEqual(new.status_code, status.HTTP_200_OK)

    def test_change_password_without_cookie(self):
        response = self.client.put(self.password_url, {'psw': 'newsecret'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['error']['code'], 'UNAUTHENTICATED')

    def test_logout_then_gated_call_is_rejected(self):
        self._register_and_login()
        self.client.post(self.logout_url)
        response = self.client.get('/api/cart/getItems')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_register_duplicate_leaves_original_row_untouched(self):
        self.client.post(self.register_url, self.user_data, format='json')
        original = User.objects.get(email='alice@example.com')
        dup = {'name': 'Mallory', 'email': 'ALICE@example.com', 'psw': 'takeover1'}
        response = self.client.post(self.register_url, dup, format='json')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()['error']['code'], 'DUPLICATE_EMAIL')
        current = User.objects.get(pk=original.pk)
        self.assertEqual(current.name, original.name)
        self.assertEqual(current.password, original.password)

    def test_register_multibyte_password_then_login(self):
        data = dict(self.user_data, psw='é' * 40)
        response = self.client.post(self.register_url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        login = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'é' * 40}, format='json'
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)

    def test_change_password_multibyte(self):
        self._register_and_login()
        response = self.client.put(self.password_url, {'psw': '€' * 30}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.client.post(self.logout_url)
        login = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': '€' * 30}, format='json'
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)

    def test_login_with_overlong_wrong_password(self):
        self.client.post(self.register_url, self.user_data, format='json')
        response = self.client.post(
            self.login_url, {'email': 'alice@example.com', 'psw': 'x' * 100}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['error']['code'], 'INVALID_CREDENTIALS')
