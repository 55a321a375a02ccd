import json
from datetime import datetime, timedelta, timezone

import jwt
from django.test import TestCase, Client, RequestFactory

from .models import User, UserRole
from .permissions import get_user_permissions, Permissions
from .jwt_auth import (
    JWT_ALGORITHM,
    create_access_token,
    decode_token,
    get_jwt_secret,
    get_token_from_request,
    get_user_id_from_token,
)


class RBACTest(TestCase):
    def test_member_permissions(self):
        user = User.objects.create_user(username="member", password="pw", role=UserRole.MEMBER)
        perms = get_user_permissions(user)
        self.assertIn(Permissions.TASKS_LIST, perms)
        self.assertIn(Permissions.TASKS_CREATE, perms)
        self.assertNotIn(Permissions.IDENTITY_MANAGE_USER, perms)

    def test_guest_permissions(self):
        user = User.objects.create_user(username="guest", password="pw", role=UserRole.GUEST)
        perms = get_user_permissions(user)
        self.assertIn(Permissions.TASKS_CREATE, perms)
        self.assertNotIn(Permissions.TASKS_LIST, perms)

    def test_admin_permissions(self):
        user = User.objects.create_user(username="admin", password="pw", role=UserRole.ADMIN)
        perms = get_user_permissions(user)
        self.assertIn(Permissions.TASKS_LIST, perms)
        self.assertIn(Permissions.IDENTITY_MANAGE_USER, perms)

    def test_inactive_user_has_no_permissions(self):
        user = User.objects.create_user(username="gone", password="pw", is_active=False)
        self.assertEqual(get_user_permissions(user), [])


class JWTTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="tok", password="pw")

    def test_token_round_trip(self):
        token = create_access_token(self.user.id, self.user.role)
        self.assertEqual(get_user_id_from_token(token), self.user.id)
        self.assertEqual(decode_token(token)["role"], UserRole.MEMBER)

    def test_expired_token_is_rejected(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": str(self.user.id), "type": "access", "iat": past, "exp": past + timedelta(minutes=1)},
            get_jwt_secret(),
            algorithm=JWT_ALGORITHM,
        )
        self.assertIsNone(decode_token(token))
        self.assertIsNone(get_user_id_from_token(token))

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"sub": str(self.user.id), "type": "access"}, "not-the-secret", algorithm=JWT_ALGORITHM)
        self.assertIsNone(get_user_id_from_token(token))

    def test_non_access_token_is_rejected(self):
        token = jwt.encode({"sub": str(self.user.id), "type": "refresh"}, get_jwt_secret(), algorithm=JWT_ALGORITHM)
        self.assertIsNone(get_user_id_from_token(token))

    def test_token_read_from_header_then_cookie(self):
        factory = RequestFactory()

        request = factory.get("/", HTTP_AUTHORIZATION="Bearer abc")
        request.COOKIES["access_token"] = "cookie"
        self.assertEqual(get_token_from_request(request), "abc")

        request = factory.get("/")
        request.COOKIES["access_token"] = "cookie"
        self.assertEqual(get_token_from_request(request), "cookie")

        request = factory.get("/", HTTP_AUTHORIZATION="Basic abc")
        self.assertIsNone(get_token_from_request(request))


class AuthAPITest(TestCase):
    def setUp(self):
        self.client = Client()

    def post_json(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_register(self):
        response = self.post_json("/api/register", {
            "username": "newbie",
            "email": "newbie@test.com",
            "password": "longenough",
        })
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data["token_type"], "bearer")
        self.assertEqual(data["user"]["username"], "newbie")
        self.assertEqual(data["user"]["role"], UserRole.MEMBER)

        user = User.objects.get(username="newbie")
        self.assertTrue(user.check_password("longenough"))
        self.assertEqual(get_user_id_from_token(data["token"]), user.id)

    def test_register_duplicate_username(self):
        User.objects.create_user(username="taken", password="pw")
        response = self.post_json("/api/register", {"username": "taken", "password": "longenough"})
        self.assertEqual(response.status_code, 422)
        self.assertIn("username", response.json()["errors"])

    def test_register_short_password(self):
        response = self.post_json("/api/register", {"username": "shorty", "password": "short"})
        self.assertEqual(response.status_code, 422)
        self.assertIn("password", response.json()["errors"])
        self.assertFalse(User.objects.filter(username="shorty").exists())

    def test_login(self):
        user = User.objects.create_user(username="carol", password="testpass123")
        response = self.post_json("/api/login", {"username": "carol", "password": "testpass123"})
        self.assertEqual(response.status_code, 200)

        token = response.json()["token"]
        self.assertEqual(get_user_id_from_token(token), user.id)

        listing = self.client.get("/api/tasks", HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(listing.status_code, 200)

    def test_login_wrong_password(self):
        User.objects.create_user(username="carol", password="testpass123")
        response = self.post_json("/api/login", {"username": "carol", "password": "wrong"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Invalid username or password"})

    def test_login_disabled_account(self):
        User.objects.create_user(username="dave", password="testpass123", is_active=False)
        response = self.post_json("/api/login", {"username": "dave", "password": "testpass123"})
        self.assertEqual(response.status_code, 401)
