"""
Campaign invite email.

Sent through Django's mail API so the backend (SMTP in production, locmem in
tests) comes from settings.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.mail import send_mail
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

SMTP_BACKEND = "django.core.mail.backends.smtp.EmailBackend"


def _check_smtp_settings() -> None:
    if settings.EMAIL_BACKEND != SMTP_BACKEND:
        return
    if not settings.EMAIL_HOST:
        raise ImproperlyConfigured("Email not configured: SMTP_HOST is missing")
    if not settings.DEFAULT_FROM_EMAIL:
        raise ImproperlyConfigured("Email not configured: SMTP_FROM is missing")


def send_campaign_invite_email(
    to: str, campaign_name: str, invite_url: str, expires_at: str
) -> bool:
    """
    Send the invite email for a campaign.

    Args:
        to: Recipient address
        campaign_name: Name of the campaign being joined
        invite_url: Link that accepts the invite
        expires_at: ISO-8601 expiry timestamp shown to the recipient

    Returns:
        bool: True if an email was handed to the backend, False when disabled

    Raises:
        ImproperlyConfigured: SMTP backend without host or sender
    """
    if getattr(settings, "DISABLE_EMAIL", False):
        logger.info(f"Email disabled; skipping campaign invite to {to}")
        return False

    _check_smtp_settings()

    context = {
        "campaign_name": campaign_name,
        "invite_url": invite_url,
        "expires_at": expires_at,
    }
    send_mail(
        subject=f"You've been invited to join {campaign_name}",
        message=render_to_string("campaigns/emails/campaign_invite.txt", context),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[to],
        fail_silently=False,
    )
    logger.info(f"Campaign invite email sent to {to}")
    return True
