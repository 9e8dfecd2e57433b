"""
Atlassian Document Format (ADF) utilities.

This module builds the rich-text document wrapper Jira expects for
description and comment bodies.
"""

from typing import Any


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in a single-paragraph ADF document.

    A new structure is built on every call, so callers may embed the result
    in a request payload without sharing it.

    Args:
        text: The plain text to wrap

    Returns:
        ADF document dict
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {
                        "type": "text",
                        "text": text,
                    }
                ],
            }
        ],
    }
