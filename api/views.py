"""
The GraphQL endpoint.

GET runs queries from the query string; POST runs queries and mutations
from a JSON body. Mutation requests pass an Origin check before anything is
parsed or executed, and session cookie changes recorded by resolvers are
applied to the response.
"""

import json
import logging

from ariadne import graphql_sync
from django.conf import settings
from django.http import HttpResponse
from graphql import GraphQLError, OperationType, parse
from graphql.language import OperationDefinitionNode
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import SessionTokenAuthentication
from .context import GraphQLContext
from .csrf import check_origin, is_json_request, is_mutation_request
from .messages import ErrorMessages
from .schema import schema

logger = logging.getLogger(__name__)


def error_response(message, status_code, headers=None):
    return Response(
        {"errors": [{"message": message}]}, status=status_code, headers=headers
    )


def requests_mutation(query, operation_name=None) -> bool:
    """Return True when the operation selected from ``query`` is a mutation."""
    try:
        document = parse(query)
    except GraphQLError:
        # Syntax errors are reported by execution
        return False

    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]
    if operation_name:
        operations = [
            op for op in operations if op.name and op.name.value == operation_name
        ]
    elif len(operations) != 1:
        return False
    return any(op.operation == OperationType.MUTATION for op in operations)


class GraphQLView(APIView):
    """Execute GraphQL documents against the application schema."""

    authentication_classes = [SessionTokenAuthentication]
    permission_classes = [AllowAny]
    renderer_classes = [JSONRenderer]

    def get(self, request):
        params = request.query_params
        query = params.get("query")
        if not query:
            return error_response(
                ErrorMessages.QUERY_REQUIRED, status.HTTP_400_BAD_REQUEST
            )

        variables = params.get("variables")
        if variables:
            try:
                variables = json.loads(variables)
            except ValueError:
                return error_response(
                    ErrorMessages.BAD_REQUEST, status.HTTP_400_BAD_REQUEST
                )

        operation_name = params.get("operationName") or None
        if requests_mutation(query, operation_name):
            logger.info("Refused mutation sent over GET")
            return error_response(
                ErrorMessages.MUTATION_OVER_GET,
                status.HTTP_405_METHOD_NOT_ALLOWED,
                headers={"Allow": "POST"},
            )

        return self.execute(
            request,
            {"query": query, "variables": variables, "operationName": operation_name},
        )

    def post(self, request):
        if is_mutation_request(request) and not check_origin(request):
            return HttpResponse(ErrorMessages.FORBIDDEN, status=403)

        if not is_json_request(request):
            return error_response(
                ErrorMessages.UNSUPPORTED_CONTENT_TYPE, status.HTTP_400_BAD_REQUEST
            )

        try:
            data = json.loads(request.body or b"")
        except ValueError:
            return error_response(
                ErrorMessages.INVALID_JSON, status.HTTP_400_BAD_REQUEST
            )

        if not isinstance(data, dict):
            return error_response(ErrorMessages.BAD_REQUEST, status.HTTP_400_BAD_REQUEST)
        if not data.get("query"):
            return error_response(
                ErrorMessages.QUERY_REQUIRED, status.HTTP_400_BAD_REQUEST
            )

        return self.execute(request, data)

    def execute(self, request, data):
        context = GraphQLContext(request, user=request.user)
        _, result = graphql_sync(
            schema,
            data,
            context_value=context,
            debug=settings.DEBUG,
            logger="api.graphql",
        )

        # Only documents that fail to parse or validate come back without "data"
        executed = "data" in result
        response = Response(
            result,
            status=status.HTTP_200_OK if executed else status.HTTP_400_BAD_REQUEST,
        )
        context.apply_cookies(response)
        return response
