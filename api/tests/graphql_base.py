"""
Base test case for GraphQL API tests.

Loads the seed campaigns, catalog and characters once per test class and
provides helpers for posting GraphQL documents and signing users in.
"""

import json

from django.conf import settings
from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework.test import APITestCase

from core.seed_data import load_seed_data
from users.tokens import issue_auth_token

User = get_user_model()

TEST_PASSWORD = "correct-horse-battery"


class GraphQLAPITestCase(APITestCase):
    """Base test case with seed data and GraphQL helpers."""

    @classmethod
    def setUpTestData(cls):
        load_seed_data()

    def setUp(self):
        self.url = reverse("api:graphql")

    def graphql(self, query, variables=None, **extra):
        """POST a GraphQL document as JSON and return the response."""
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        return self.client.post(
            self.url,
            data=json.dumps(payload),
            content_type="application/json",
            **extra,
        )

    def create_user(self, email, password=TEST_PASSWORD):
        return User.objects.create_account(email=email, password=password)

    def login_as(self, user):
        """Attach a valid session cookie for ``user`` to the test client."""
        token = issue_auth_token(user.id, settings.AUTH_SECRET)
        self.client.cookies[settings.AUTH_COOKIE_NAME] = token
        return token

    def logout_client(self):
        self.client.cookies.pop(settings.AUTH_COOKIE_NAME, None)

    def assertGraphQLError(self, response, message):
        """Assert the request succeeded at the HTTP level with ``message``."""
        self.assertEqual(response.status_code, 200)
        errors = response.json().get("errors")
        self.assertTrue(errors, f"expected errors, got {response.json()}")
        self.assertEqual(errors[0]["message"], message)

    def assertNoErrors(self, response):
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertNotIn("errors", body, body.get("errors"))
        return body["data"]
