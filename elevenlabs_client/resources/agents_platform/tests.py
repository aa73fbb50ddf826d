"""
ElevenLabs Python Client - Agent Tests Resource

This module provides methods for defining agent tests and running them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class TestsResource(BaseResource):
    """
    Resource for agent tests.

    A test replays a chat history against an agent and checks the reply
    against a success condition.

    Example:
        >>> test = client.tests.create(
        ...     name="Greets the caller",
        ...     chat_history=[{"role": "user", "message": "Hello", "time_in_call_secs": 0}],
        ...     success_condition="The agent greets the user",
        ...     success_examples=[{"response": "Hi there!", "type": "success"}],
        ...     failure_examples=[{"response": "Goodbye", "type": "failure"}],
        ... )
        >>> client.tests.run_on_agent("agent_123", tests=[{"test_id": test["id"]}])
    """

    # Not a pytest test class.
    __test__ = False

    def list(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        return self._get(
            Endpoints.AGENT_TESTS,
            params={"cursor": cursor, "page_size": page_size, "search": search},
        )

    def get(self, test_id: str) -> Dict[str, Any]:
        self._require(test_id=test_id)
        return self._get(self._path(Endpoints.AGENT_TEST, test_id=test_id))

    def _test_body(
        self,
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        options: Dict[str, Any],
    ) -> Dict[str, Any]:
        self._require(
            name=name,
            chat_history=chat_history,
            success_condition=success_condition,
            success_examples=success_examples,
            failure_examples=failure_examples,
        )
        return compact({
            "name": name,
            "chat_history": chat_history,
            "success_condition": success_condition,
            "success_examples": success_examples,
            "failure_examples": failure_examples,
            **options,
        })

    def create(
        self,
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create a test.

        Args:
            name: Test name
            chat_history: Conversation leading up to the evaluated turn
            success_condition: Natural-language condition the reply must satisfy
            success_examples: Replies that satisfy the condition
            failure_examples: Replies that do not
            **options: Extra fields (``tool_call_parameters``, ``dynamic_variables``, ...)
        """
        body = self._test_body(
            name, chat_history, success_condition, success_examples, failure_examples, options
        )
        return self._post(Endpoints.AGENT_TEST_CREATE, json=body)

    def update(
        self,
        test_id: str,
        name: str,
        chat_history: List[Dict[str, Any]],
        success_condition: str,
        success_examples: List[Dict[str, Any]],
        failure_examples: List[Dict[str, Any]],
        **options: Any,
    ) -> Dict[str, Any]:
        """Replace a test definition. Takes the same fields as ``create``."""
        self._require(test_id=test_id)
        body = self._test_body(
            name, chat_history, success_condition, success_examples, failure_examples, options
        )
        return self._put(self._path(Endpoints.AGENT_TEST, test_id=test_id), json=body)

    def delete(self, test_id: str) -> Dict[str, Any]:
        self._require(test_id=test_id)
        return self._delete(self._path(Endpoints.AGENT_TEST, test_id=test_id))

    def get_summaries(self, test_ids: List[str]) -> Dict[str, Any]:
        """Get summaries for several tests at once."""
        self._require(test_ids=test_ids)
        return self._post(Endpoints.AGENT_TEST_SUMMARIES, json={"test_ids": test_ids})

    def run_on_agent(
        self,
        agent_id: str,
        tests: List[Dict[str, Any]],
        agent_config_override: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Run tests against an agent.

        Returns:
            The test invocation, whose ``id`` can be polled with
            ``client.test_invocations.get``
        """
        self._require(agent_id=agent_id, tests=tests)
        body = compact({"tests": tests, "agent_config_override": agent_config_override})
        return self._post(self._path(Endpoints.AGENT_RUN_TESTS, agent_id=agent_id), json=body)
