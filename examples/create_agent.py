#!/usr/bin/env python3
"""
Agent Example

Creates a conversational agent, attaches a knowledge base document to
it and prints a signed URL for starting a conversation.

Environment:
    ELEVENLABS_API_KEY: API key (required)
    AGENT_NAME: Name of the agent
    KNOWLEDGE_URL: Web page to add to the knowledge base
    CLEANUP: Set to "1" to delete the agent and document afterwards
"""

import logging
import os
import sys

from elevenlabs_client import ElevenLabsClient, ElevenLabsError

logger = logging.getLogger("examples.create_agent")

AGENT_NAME = os.environ.get("AGENT_NAME", "Support Agent")
KNOWLEDGE_URL = os.environ.get("KNOWLEDGE_URL", "https://elevenlabs.io/docs/overview")
CLEANUP = os.environ.get("CLEANUP") == "1"


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        with ElevenLabsClient() as client:
            document = client.knowledge_base.create_from_url(KNOWLEDGE_URL)
            logger.info(f"Created document {document['id']}")

            agent = client.agents.create(
                name=AGENT_NAME,
                conversation_config={
                    "agent": {
                        "first_message": "Hi! How can I help you today?",
                        "prompt": {
                            "prompt": "You are a friendly support agent. Keep answers short.",
                            "knowledge_base": [
                                {"type": "url", "name": document["name"], "id": document["id"]},
                            ],
                        },
                    },
                },
                tags=["example"],
            )
            agent_id = agent["agent_id"]
            logger.info(f"Created agent {agent_id}")

            signed = client.conversations.get_signed_url(agent_id)
            print(signed["signed_url"])

            if CLEANUP:
                client.agents.delete(agent_id)
                client.knowledge_base.delete(document["id"], force=True)
                logger.info("Cleaned up agent and document")
    except ElevenLabsError as e:
        logger.error(f"Agent setup failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
