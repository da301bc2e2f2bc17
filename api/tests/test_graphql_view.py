"""
Tests for the HTTP layer of the GraphQL endpoint: methods, content types and
Origin checks on mutation requests.
"""

import json

from django.test import RequestFactory, SimpleTestCase, override_settings

from api.csrf import check_origin, is_mutation_request, origin_of
from api.tests.graphql_base import GraphQLAPITestCase

LOGOUT = "mutation { logout }"


class OriginOfTest(SimpleTestCase):
    def test_drops_path_and_default_port(self):
        self.assertEqual(origin_of("https://Example.com:443/a?b=c"), "https://example.com")
        self.assertEqual(origin_of("http://example.com:80/"), "http://example.com")

    def test_keeps_explicit_port(self):
        self.assertEqual(origin_of("http://localhost:3000/x"), "http://localhost:3000")

    def test_rejects_non_http_urls(self):
        self.assertIsNone(origin_of("null"))
        self.assertIsNone(origin_of("ftp://example.com"))
        self.assertIsNone(origin_of(""))
        self.assertIsNone(origin_of(None))
        self.assertIsNone(origin_of("http://example.com:notaport"))


class MutationDetectionTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def post_json(self, body):
        return self.factory.post(
            "/api/graphql", data=body, content_type="application/json"
        )

    def test_get_is_never_a_mutation_request(self):
        self.assertFalse(is_mutation_request(self.factory.get("/api/graphql")))

    def test_json_query_is_not_a_mutation(self):
        request = self.post_json(json.dumps({"query": "query { me { id } }"}))
        self.assertFalse(is_mutation_request(request))

    def test_json_mutation(self):
        request = self.post_json(json.dumps({"query": "  mutation { logout }"}))
        self.assertTrue(is_mutation_request(request))

    def test_unparsable_body_counts_as_mutation(self):
        self.assertTrue(is_mutation_request(self.post_json("{not json")))

    def test_non_json_content_type_counts_as_mutation(self):
        request = self.factory.post(
            "/api/graphql", data="query { me { id } }", content_type="text/plain"
        )
        self.assertTrue(is_mutation_request(request))


@override_settings(APP_BASE_URL="http://localhost:3000")
class CheckOriginTest(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def request(self, **headers):
        return self.factory.post("/api/graphql", **headers)

    def test_own_origin_allowed(self):
        self.assertTrue(check_origin(self.request(HTTP_ORIGIN="http://testserver")))

    def test_app_base_url_origin_allowed(self):
        self.assertTrue(check_origin(self.request(HTTP_ORIGIN="http://localhost:3000")))

    def test_foreign_origin_rejected(self):
        self.assertFalse(check_origin(self.request(HTTP_ORIGIN="https://evil.example")))

    def test_referer_used_when_origin_missing(self):
        self.assertTrue(
            check_origin(self.request(HTTP_REFERER="http://localhost:3000/invite?x=1"))
        )
        self.assertFalse(
            check_origin(self.request(HTTP_REFERER="https://evil.example/page"))
        )

    def test_missing_headers_allowed_outside_production(self):
        self.assertTrue(check_origin(self.request()))

    @override_settings(IS_PRODUCTION=True)
    def test_missing_headers_rejected_in_production(self):
        self.assertFalse(check_origin(self.request()))


@override_settings(APP_BASE_URL="http://localhost:3000")
class GraphQLEndpointTest(GraphQLAPITestCase):
    def test_foreign_origin_mutation_is_forbidden(self):
        response = self.graphql(LOGOUT, HTTP_ORIGIN="https://evil.example")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.content, b"Forbidden")

    def test_same_origin_mutation_succeeds(self):
        response = self.graphql(LOGOUT, HTTP_ORIGIN="http://testserver")
        self.assertEqual(self.assertNoErrors(response), {"logout": True})

    def test_app_origin_mutation_succeeds(self):
        response = self.graphql(LOGOUT, HTTP_ORIGIN="http://localhost:3000")
        self.assertEqual(response.status_code, 200)

    def test_foreign_referer_mutation_is_forbidden(self):
        response = self.graphql(LOGOUT, HTTP_REFERER="https://evil.example/x")
        self.assertEqual(response.status_code, 403)

    def test_foreign_origin_query_is_allowed(self):
        response = self.graphql("query { me { id } }", HTTP_ORIGIN="https://evil.example")
        self.assertEqual(self.assertNoErrors(response), {"me": None})

    def test_missing_origin_allowed_in_development(self):
        response = self.graphql(LOGOUT)
        self.assertEqual(response.status_code, 200)

    @override_settings(IS_PRODUCTION=True)
    def test_missing_origin_forbidden_in_production(self):
        response = self.graphql(LOGOUT)
        self.assertEqual(response.status_code, 403)

    def test_non_json_post_from_foreign_origin_is_forbidden(self):
        response = self.client.post(
            self.url,
            data="mutation { logout }",
            content_type="text/plain",
            HTTP_ORIGIN="https://evil.example",
        )
        self.assertEqual(response.status_code, 403)

    def test_non_json_post_is_bad_request(self):
        response = self.client.post(
            self.url,
            data="query { me { id } }",
            content_type="text/plain",
            HTTP_ORIGIN="http://testserver",
        )
        self.assertEqual(response.status_code, 400)

    def test_malformed_json_is_bad_request(self):
        response = self.client.post(
            self.url,
            data="{not json",
            content_type="application/json",
            HTTP_ORIGIN="http://testserver",
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["errors"][0]["message"], "POST body sent invalid JSON."
        )

    def test_malformed_json_from_foreign_origin_is_forbidden(self):
        response = self.client.post(
            self.url,
            data="{not json",
            content_type="application/json",
            HTTP_ORIGIN="https://evil.example",
        )
        self.assertEqual(response.status_code, 403)

    def test_missing_query_is_bad_request(self):
        response = self.client.post(
            self.url, data=json.dumps({"variables": {}}), content_type="application/json"
        )
        self.assertEqual(response.status_code, 400)

    def test_syntax_error_is_bad_request(self):
        response = self.graphql("query { me { id }")
        self.assertEqual(response.status_code, 400)
        self.assertIn("errors", response.json())

    def test_unknown_field_is_bad_request(self):
        response = self.graphql("query { nope }")
        self.assertEqual(response.status_code, 400)

    def test_get_query(self):
        response = self.client.get(self.url, {"query": "{ vehicles { id } }"})
        self.assertEqual(self.assertNoErrors(response), {"vehicles": [{"id": "v_1"}]})

    def test_get_query_with_variables(self):
        response = self.client.get(
            self.url,
            {
                "query": "query W($id: ID!) { weapon(id: $id) { name } }",
                "variables": json.dumps({"id": "w_1"}),
            },
        )
        data = self.assertNoErrors(response)
        self.assertEqual(data["weapon"], {"name": "Mono-Katana"})

    def test_get_mutation_is_not_allowed(self):
        response = self.client.get(self.url, {"query": LOGOUT})

        self.assertEqual(response.status_code, 405)
        self.assertEqual(
            response.json()["errors"][0]["message"],
            "Can only perform a mutation operation from a POST request.",
        )

    def test_get_without_query_is_bad_request(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 400)

    def test_resolver_errors_use_status_200(self):
        response = self.graphql("query { characters { id } }")
        self.assertGraphQLError(response, "Not authenticated")
        self.assertIsNone(response.json()["data"])

    def test_failed_mutation_uses_status_200(self):
        response = self.graphql(
            'mutation { login(email: "nobody@example.com", password: "nopenope") '
            "{ user { id } } }",
            HTTP_ORIGIN="http://testserver",
        )
        self.assertGraphQLError(response, "Invalid credentials")
        self.assertIsNone(response.json()["data"])

    def test_non_ascii_bearer_token_is_anonymous(self):
        response = self.graphql(
            "query { me { id } cybernetics { id } }",
            HTTP_AUTHORIZATION="Bearer é.abc",
        )
        data = self.assertNoErrors(response)
        self.assertIsNone(data["me"])
        self.assertTrue(data["cybernetics"])
