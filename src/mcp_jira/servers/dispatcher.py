"""Tool dispatch boundary for the MCP Jira server.

Every tool call goes through :meth:`ToolDispatcher.dispatch`, which validates
the raw arguments, runs the handler and folds any failure into a
:class:`ToolFailure`. :func:`render_outcome` turns either outcome into the text
returned to the MCP client, so no exception ever reaches the transport.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from anyio import to_thread
from fastmcp.tools import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from mcp_jira import __version__
from mcp_jira.exceptions import MCPJiraError, ToolValidationError
from mcp_jira.logging_config import log_operation

if TYPE_CHECKING:
    from mcp_jira.jira import JiraFetcher

logger = logging.getLogger("mcp-jira.server.dispatcher")

# Longest argument value copied into the logging context
MAX_CONTEXT_VALUE_LENGTH = 80

ToolHandler = Callable[["JiraFetcher", Any], str]


@dataclass(frozen=True)
class ToolSpec:
    """Static description of one tool: its contract and its handler."""

    name: str
    title: str
    description: str
    params_model: type[BaseModel]
    handler: ToolHandler
    read_only: bool = True
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, using the wire (camelCase) names."""
        return self.params_model.model_json_schema(by_alias=True)


@dataclass(frozen=True)
class ToolSuccess:
    """Successful tool call; ``text`` is returned to the client verbatim."""

    text: str


@dataclass(frozen=True)
class ToolFailure:
    """Failed tool call, rendered as ``Error: <message>``."""

    message: str
    error: BaseException | None = None


ToolOutcome = ToolSuccess | ToolFailure


def render_outcome(outcome: ToolOutcome) -> str:
    """Render a tool outcome as the text payload sent back to the client."""
    if isinstance(outcome, ToolFailure):
        return f"Error: {outcome.message}"
    return outcome.text


def format_validation_error(tool_name: str, error: PydanticValidationError) -> str:
    """Build a one-line message from a pydantic validation error."""
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        location = location or "arguments"
        problems.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return f"Invalid arguments for {tool_name}: {'; '.join(problems)}"


def summarize_arguments(arguments: dict[str, Any]) -> dict[str, str]:
    """Shorten argument values so they can be attached to log records."""
    summary = {}
    for key, value in arguments.items():
        text = str(value)
        if len(text) > MAX_CONTEXT_VALUE_LENGTH:
            text = text[: MAX_CONTEXT_VALUE_LENGTH - 3] + "..."
        summary[key] = text
    return summary


class ToolDispatcher:
    """Validates and executes tool calls against a shared JiraFetcher."""

    def __init__(self, fetcher: JiraFetcher, tools: Iterable[ToolSpec]) -> None:
        self.fetcher = fetcher
        self._tools: dict[str, ToolSpec] = {}
        for spec in tools:
            if spec.name in self._tools:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._tools[spec.name] = spec

    @property
    def tools(self) -> tuple[ToolSpec, ...]:
        """The registered tools, in registration order."""
        return tuple(self._tools.values())

    def get_tool(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolValidationError(f"Unknown tool: {name}") from None

    def validate(self, spec: ToolSpec, arguments: dict[str, Any]) -> BaseModel:
        """Validate raw arguments against the tool's parameter model.

        Raises:
            ToolValidationError: If the arguments do not match the schema
        """
        try:
            return spec.params_model.model_validate(arguments)
        except PydanticValidationError as e:
            raise ToolValidationError(format_validation_error(spec.name, e)) from e

    def dispatch(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> ToolOutcome:
        """Run one tool call and return its outcome.

        Never raises: validation problems, Jira API errors, network errors and
        unexpected exceptions all come back as :class:`ToolFailure`.
        """
        arguments = arguments or {}
        summary: dict[str, str] = {}
        try:
            summary = summarize_arguments(arguments)
            with log_operation(
                logger, name, app_version=__version__, arguments=summary
            ):
                spec = self.get_tool(name)
                params = self.validate(spec, arguments)
                return ToolSuccess(spec.handler(self.fetcher, params))
        except MCPJiraError as e:
            logger.error(f"Error in {name}: {e} (arguments={summary})")
            return ToolFailure(str(e), e)
        except Exception as e:  # noqa: BLE001 - every failure becomes a text result
            logger.exception(f"Unexpected error in {name} (arguments={summary})")
            return ToolFailure(str(e) or type(e).__name__, e)


class DispatchedTool(Tool):
    """FastMCP tool that hands its raw arguments to a ToolDispatcher.

    Argument validation is left to the dispatcher so that invalid input is
    answered with an ``Error:`` text result like every other failure.
    """

    dispatcher: Any = Field(exclude=True, repr=False)

    @classmethod
    def from_spec(cls, spec: ToolSpec, dispatcher: ToolDispatcher) -> DispatchedTool:
        return cls(
            name=spec.name,
            title=spec.title,
            description=spec.description,
            parameters=spec.input_schema,
            tags=set(spec.tags),
            annotations=ToolAnnotations(
                title=spec.title, read_only_hint=spec.read_only
            ),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        # The Jira client is blocking; keep the event loop free for other calls
        outcome = await to_thread.run_sync(
            self.dispatcher.dispatch, self.name, arguments
        )
        text = render_outcome(outcome)
        return ToolResult(content=[TextContent(type="text", text=text)])
