"""Shared fixtures."""

import os
from unittest.mock import MagicMock

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vibeprompt.webapp.settings")
django.setup()

from vibeprompt.core.config import GatewayConfig  # noqa: E402
from vibeprompt.core.gateway import ModelGateway  # noqa: E402
from vibeprompt.schemas.project import (  # noqa: E402
    ProfessionalRequirements,
    ProjectAnswer,
    TechStack,
    TestingPlan,
)


def chat_response(content):
    """Chat-completion response body with a single choice."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


@pytest.fixture
def mock_transport():
    """Transport double answering with a fixed reply."""
    transport = MagicMock()
    transport.name = "mock"
    transport.send.return_value = chat_response("Hello from the model")
    return transport


@pytest.fixture
def gateway_config():
    return GatewayConfig(mode="direct", model="gpt-4", api_key="sk-test-key")


@pytest.fixture
def gateway(gateway_config, mock_transport):
    return ModelGateway(gateway_config, transport=mock_transport)


@pytest.fixture
def sample_answer():
    """Complete answers for a small web app."""
    return ProjectAnswer(
        project_type="web-app",
        project_name="TaskFlow",
        description="A shared to-do list for small teams with due dates and reminders",
        target_audience="Small remote teams",
        core_features=["Auth", "Dashboard", "Search"],
        tech_stack=TechStack(frontend="react", backend="node", database="supabase", hosting="vercel"),
        testing=TestingPlan.for_approach("comprehensive"),
        professional_requirements=ProfessionalRequirements(user_accounts=True, payments=True),
        additional_requirements=["Dark mode"],
    )
