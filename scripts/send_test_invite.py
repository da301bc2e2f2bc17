#!/usr/bin/env python3
"""
Create a campaign invite against a running server.

Signs in as the campaign owner (registering the account on first use), joins
the campaign so a fresh owner becomes its first member, then creates an
invite for INVITE_EMAIL. When email is enabled on the server, the invite is
also delivered by mail.

Usage:
    python scripts/send_test_invite.py
    python scripts/send_test_invite.py --campaign-id camp_2 --invite-email a@b.co

Environment:
    GRAPHQL_URL      Endpoint; defaults to APP_BASE_URL + /api/graphql
    APP_BASE_URL     Defaults to http://localhost:3001
    OWNER_EMAIL      Defaults to owner+<timestamp>@example.com
    OWNER_PASSWORD   Defaults to password1234!
    CAMPAIGN_ID      Defaults to camp_1
    INVITE_EMAIL     Defaults to invitee@example.com
"""

import argparse
import os
import re
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import requests

SESSION_COOKIE_NAME = "cyberdallasSession"

LOGIN_MUTATION = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) { user { id } }
}
"""

REGISTER_MUTATION = """
mutation Register($email: String!, $password: String!) {
  register(email: $email, password: $password) { user { id } }
}
"""

JOIN_MUTATION = """
mutation Join($campaignId: ID!) {
  joinCampaign(campaignId: $campaignId) { id }
}
"""

CREATE_INVITE_MUTATION = """
mutation CreateInvite($campaignId: ID!, $email: String!) {
  createCampaignInvite(campaignId: $campaignId, email: $email) { token expiresAt }
}
"""


class InviteScriptError(Exception):
    """Raised when a step of the invite flow fails."""


@dataclass
class SendTestInviteOptions:
    graphql_url: str
    owner_email: str
    owner_password: str
    campaign_id: str
    invite_email: str


def first_error_message(body: Optional[Dict[str, Any]]) -> str:
    errors = (body or {}).get("errors") or []
    if not errors:
        return ""
    return str(errors[0].get("message") or "")


class GraphQLClient:
    """Minimal GraphQL client that keeps the session cookie between calls."""

    def __init__(self, url: str, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()
        parts = urlsplit(url)
        self.origin = f"{parts.scheme}://{parts.netloc}"

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None):
        """POST a document and return ``(body, session_cookie_or_None)``."""
        response = self.session.post(
            self.url,
            json={"query": query, "variables": variables},
            headers={"Origin": self.origin},
        )
        try:
            body = response.json() if response.text else None
        except ValueError:
            raise InviteScriptError(
                f"Non-JSON response from GraphQL ({response.status_code})"
            )

        if not response.ok:
            raise InviteScriptError(f"GraphQL HTTP {response.status_code}")

        return body or {}, response.cookies.get(SESSION_COOKIE_NAME)


def _user_id(body: Dict[str, Any], field: str) -> Optional[str]:
    payload = (body.get("data") or {}).get(field) or {}
    return (payload.get("user") or {}).get("id")


def authenticate(client: GraphQLClient, options: SendTestInviteOptions) -> None:
    """
    Sign in as the owner, registering the account if it does not exist yet.

    A registration that loses to an existing account falls back to one more
    login attempt.
    """
    credentials = {"email": options.owner_email, "password": options.owner_password}

    body, cookie = client.execute(LOGIN_MUTATION, credentials)
    if _user_id(body, "login") and cookie:
        return

    message = first_error_message(body)
    if not re.search(r"invalid credentials|not authenticated", message, re.I):
        raise InviteScriptError(message or "Login failed")

    body, cookie = client.execute(REGISTER_MUTATION, credentials)
    if _user_id(body, "register") and cookie:
        return

    message = first_error_message(body)
    if not re.search(r"already exists", message, re.I):
        raise InviteScriptError(message or "Register failed")

    body, cookie = client.execute(LOGIN_MUTATION, credentials)
    if _user_id(body, "login") and cookie:
        return
    raise InviteScriptError(first_error_message(body) or "Login failed")


def run_send_test_invite(
    options: SendTestInviteOptions, session: Optional[requests.Session] = None
) -> Dict[str, str]:
    """Run the invite flow and return ``{"invite_token", "expires_at"}``."""
    client = GraphQLClient(options.graphql_url, session=session)
    authenticate(client, options)

    body, _ = client.execute(JOIN_MUTATION, {"campaignId": options.campaign_id})
    if not ((body.get("data") or {}).get("joinCampaign") or {}).get("id"):
        raise InviteScriptError(first_error_message(body) or "joinCampaign failed")

    body, _ = client.execute(
        CREATE_INVITE_MUTATION,
        {"campaignId": options.campaign_id, "email": options.invite_email},
    )
    invite = (body.get("data") or {}).get("createCampaignInvite") or {}
    if not invite.get("token"):
        raise InviteScriptError(
            first_error_message(body) or "createCampaignInvite failed"
        )

    return {"invite_token": invite["token"], "expires_at": invite["expiresAt"]}


def default_graphql_url() -> str:
    base = os.environ.get("APP_BASE_URL") or "http://localhost:3001"
    return f"{base.rstrip('/')}/api/graphql"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a campaign invite against a running server"
    )
    parser.add_argument(
        "--graphql-url",
        default=os.environ.get("GRAPHQL_URL") or default_graphql_url(),
        help="GraphQL endpoint URL",
    )
    parser.add_argument(
        "--owner-email",
        default=os.environ.get("OWNER_EMAIL")
        or f"owner+{int(time.time() * 1000)}@example.com",
        help="Campaign owner account",
    )
    parser.add_argument(
        "--owner-password",
        default=os.environ.get("OWNER_PASSWORD") or "password1234!",
        help="Campaign owner password",
    )
    parser.add_argument(
        "--campaign-id",
        default=os.environ.get("CAMPAIGN_ID") or "camp_1",
        help="Campaign to invite into",
    )
    parser.add_argument(
        "--invite-email",
        default=os.environ.get("INVITE_EMAIL") or "invitee@example.com",
        help="Address to invite",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    options = SendTestInviteOptions(
        graphql_url=args.graphql_url,
        owner_email=args.owner_email,
        owner_password=args.owner_password,
        campaign_id=args.campaign_id,
        invite_email=args.invite_email,
    )

    try:
        result = run_send_test_invite(options)
    except (InviteScriptError, requests.exceptions.RequestException) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"Invite created for {options.invite_email}")
    print(f"Campaign: {options.campaign_id}")
    print(f"Expires at: {result['expires_at']}")
    print(f"Token: {result['invite_token']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
