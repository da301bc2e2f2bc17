"""Account resolvers: register, login, logout and the current user."""

from ariadne import MutationType, QueryType

from api.errors import graphql_errors, validated_data
from api.serializers import LoginSerializer, RegisterSerializer
from users.services import AccountService

query = QueryType()
mutation = MutationType()


@query.field("me")
def resolve_me(_, info):
    user = info.context.user
    if user is None or not user.is_authenticated:
        return None
    return user


@mutation.field("register")
@graphql_errors
def resolve_register(_, info, email, password):
    data = validated_data(RegisterSerializer, {"email": email, "password": password})
    service = AccountService()
    user = service.register(data["email"], data["password"])
    info.context.set_session(service.issue_token(user))
    return {"user": user}


@mutation.field("login")
@graphql_errors
def resolve_login(_, info, email, password):
    data = validated_data(LoginSerializer, {"email": email, "password": password})
    service = AccountService()
    user = service.authenticate(data["email"], data["password"])
    info.context.set_session(service.issue_token(user))
    return {"user": user}


@mutation.field("logout")
def resolve_logout(_, info):
    info.context.clear_session()
    return True


auth_bindables = [query, mutation]
