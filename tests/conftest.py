"""Shared test fixtures for the Edgy test suite."""

import json

import pytest

from edgy.analysis.application.analyzer import EdgeCaseAnalyzer
from edgy.knowledge.infrastructure.loader import KnowledgeBaseLoader
from tests.helpers.builders import FIXED_NOW, make_screen


@pytest.fixture
def knowledge_base():
    """The packaged default knowledge base."""
    return KnowledgeBaseLoader().load()


@pytest.fixture
def analyzer(knowledge_base):
    """Analyzer with a fixed clock."""
    return EdgeCaseAnalyzer(knowledge_base, clock=lambda: FIXED_NOW)


@pytest.fixture
def login_screen():
    return make_screen("1:1", "Login Form", ["Submit Button"], targets=["1:2"])


@pytest.fixture
def screen_export():
    """Plugin-style export with three connected screens."""
    return {
        "projectName": "Checkout",
        "timestamp": "2025-03-14T09:00:00.000Z",
        "screens": [
            {
                "id": "1:1",
                "name": "Login Form",
                "width": 375,
                "height": 812,
                "children": [
                    {"id": "1:10", "name": "Email Input", "type": "INSTANCE", "visible": True},
                    {
                        "id": "1:11",
                        "name": "Actions",
                        "type": "FRAME",
                        "visible": True,
                        "children": [
                            {"id": "1:12", "name": "Submit Button", "type": "INSTANCE", "visible": True}
                        ],
                    },
                ],
                "connections": [
                    {
                        "triggerNodeId": "1:12",
                        "triggerNodeName": "Submit Button",
                        "targetFrameId": "2:1",
                        "targetFrameName": "Order List",
                    }
                ],
            },
            {
                "id": "2:1",
                "name": "Order List",
                "width": 375,
                "height": 812,
                "children": [
                    {"id": "2:10", "name": "Order Row", "type": "INSTANCE", "visible": True},
                    {"id": "2:11", "name": "Delete Order", "type": "INSTANCE", "visible": True},
                ],
                "connections": [
                    {
                        "triggerNodeId": "2:10",
                        "triggerNodeName": "Order Row",
                        "targetFrameId": "3:1",
                        "targetFrameName": "Order Details",
                    }
                ],
            },
            {
                "id": "3:1",
                "name": "Order Details",
                "width": 375,
                "height": 812,
                "children": [
                    {"id": "3:10", "name": "Header", "type": "TEXT", "visible": True}
                ],
                "connections": [],
            },
        ],
    }


@pytest.fixture
def screen_file(tmp_path, screen_export):
    """The screen export written to disk."""
    path = tmp_path / "checkout.json"
    path.write_text(json.dumps(screen_export), encoding="utf-8")
    return path
