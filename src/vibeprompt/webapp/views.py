"""Relay view: forwards chat-completion bodies to the model provider."""

import time

import requests
from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from vibeprompt.core.logging import get_logger

logger = get_logger("vibeprompt.relay")

METHOD_NOT_ALLOWED = {"error": "Method not allowed"}
KEY_NOT_CONFIGURED = {"error": "OpenAI API key not configured on server"}
PROVIDER_FAILED = {"error": "Failed to fetch from model provider"}


# Every method is routed here so non-POST requests get the relay's own 405 body
@api_view(["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def relay_chat(request):
    """
    Forward a chat-completion request with the server's credential attached.

    The request body is passed through untouched; the provider's status code
    and JSON body come back unchanged.
    """
    if request.method != "POST":
        return Response(METHOD_NOT_ALLOWED, status=status.HTTP_405_METHOD_NOT_ALLOWED)

    api_key = settings.VIBEPROMPT_PROVIDER_API_KEY
    if not api_key:
        logger.error(
            "Relay called without a configured provider key",
            context={"event_type": "relay_misconfigured"},
        )
        return Response(KEY_NOT_CONFIGURED, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    start_time = time.time()
    try:
        upstream = requests.post(
            settings.VIBEPROMPT_PROVIDER_URL,
            data=request.body,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
        )
        data = upstream.json()
    except Exception as e:
        logger.error(
            f"Relay forwarding failed: {e}",
            context={
                "event_type": "relay_failed",
                "error_type": type(e).__name__,
                "latency_ms": (time.time() - start_time) * 1000,
            },
        )
        return Response(PROVIDER_FAILED, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info(
        f"Relayed chat completion: HTTP {upstream.status_code}",
        context={
            "event_type": "relay_call",
            "status_code": upstream.status_code,
            "latency_ms": (time.time() - start_time) * 1000,
        },
    )
    return Response(data, status=upstream.status_code)
