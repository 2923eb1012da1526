"""Remote menu generation through a Dify chat app, with the local planner as fallback.

The chat app answers in free text; the _strip_code_fences / _remove_trailing_commas /
_extract_json_by_balancing helpers dig the JSON menu out of that text before it is validated.
"""
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from json import JSONDecodeError
from typing import Any, Callable, Dict, Optional

import httpx
from fastapi import APIRouter, Body
from pydantic import ValidationError as PydanticValidationError

from kondate.api.remote_schema import RemoteMenuResponse, build_remote_request, to_menu_plan
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.logic.menu.planner import MenuPlanner, PlannerSettings
from kondate.utilities import config
from kondate.utilities.errors import (
    RemoteStrategyError,
    RemoteTimeout,
    RemoteUnavailable,
    ResponseParseError,
)
from kondate.utilities.validators import RemoteConfigInput

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat-messages"
TEST_USER = "test-user"


@dataclass
class RemoteResult:
    """Outcome of one remote generation: a plan or the error that prevented it."""
    plan: Optional[MenuPlan] = None
    error: Optional[RemoteStrategyError] = None

    @property
    def ok(self) -> bool:
        return self.plan is not None

    @classmethod
    def success(cls, plan: MenuPlan) -> "RemoteResult":
        return cls(plan=plan)

    @classmethod
    def failure(cls, error: RemoteStrategyError) -> "RemoteResult":
        return cls(error=error)

    def or_else(self, fallback: Callable[[RemoteStrategyError], MenuPlan]) -> MenuPlan:
        if self.ok:
            return self.plan
        return fallback(self.error)


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Return the body of the first ```json fenced block, or the text itself without stray fences."""
    match = re.search(r"```(?:json)?\s*(.*?)\s*```", text, flags=re.S)
    if match:
        return match.group(1).strip()
    text = re.sub(r"^```|```$", "", text.strip())
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove common trailing commas in JSON-like text to help json.loads succeed."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if ch == '"' and not escape:
            in_string = not in_string
        if in_string and ch == "\\" and not escape:
            escape = True
            continue
        else:
            escape = False

        if not in_string:
            if ch in "{[":
                if start is None:
                    start = i
                stack.append(ch)
            elif ch in "}]":
                if not stack:
                    continue
                opening = stack.pop()
                if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                    return None
                if not stack and start is not None:
                    return text[start:i + 1]
    return None


def parse_answer(answer: str) -> RemoteMenuResponse:
    """Parse the chat app's `answer` text into a validated response."""
    if not isinstance(answer, str):
        raise ResponseParseError("Remote answer is not text")
    if not answer.strip():
        raise ResponseParseError("Remote answer is empty")
    cleaned = _strip_code_fences(answer)
    try:
        data = json.loads(cleaned)
    except JSONDecodeError:
        candidate = _extract_json_by_balancing(_remove_trailing_commas(cleaned))
        if not candidate:
            raise ResponseParseError("Remote answer contains no JSON object") from None
        try:
            data = json.loads(_remove_trailing_commas(candidate))
        except JSONDecodeError as e:
            logger.exception("Failed to decode extracted JSON from remote answer")
            raise ResponseParseError(f"Remote answer is not valid JSON: {e}") from e
    try:
        return RemoteMenuResponse.model_validate(data)
    except PydanticValidationError as e:
        raise ResponseParseError(f"Remote answer does not match the menu schema: {e.error_count()} errors") from e


def chat_payload(query: Dict[str, Any], user: str) -> Dict[str, Any]:
    """Body of a blocking, new-conversation chat message."""
    return {
        "inputs": {},
        "query": json.dumps(query, ensure_ascii=False),
        "response_mode": "blocking",
        "conversation_id": "",
        "user": user,
    }


class RemoteMenuStrategy:
    """Menu generation delegated to a Dify chat app.

    generate() never raises for remote trouble; it returns a RemoteResult whose
    error is RemoteUnavailable, RemoteTimeout or ResponseParseError.
    """

    def __init__(self, endpoint: Optional[str] = None, api_key: Optional[str] = None, *,
                 timeout: float = config.REMOTE_TIMEOUT_SECONDS,
                 test_timeout: float = config.REMOTE_TEST_TIMEOUT_SECONDS,
                 settings: Optional[PlannerSettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 user: str = config.REMOTE_USER,
                 today: Optional[date] = None):
        self.endpoint = (config.DIFY_API_ENDPOINT if endpoint is None else endpoint).rstrip("/")
        self.api_key = config.DIFY_API_KEY if api_key is None else api_key
        self.timeout = timeout
        self.test_timeout = test_timeout
        self.settings = settings or PlannerSettings()
        self.user = user
        self._transport = transport
        self._today = today

    @property
    def configured(self) -> bool:
        return bool(self.endpoint and self.api_key)

    @property
    def url(self) -> str:
        return self.endpoint + CHAT_PATH

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Authorization": f"Bearer {self.api_key}"}

    async def _post(self, payload: Dict[str, Any], timeout: float) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
            return await client.post(self.url, json=payload, headers=self._headers())

    async def generate(self, request: MenuRequest) -> RemoteResult:
        if not self.configured:
            return RemoteResult.failure(RemoteUnavailable("Remote menu generator is not configured"))
        try:
            plan = await asyncio.wait_for(self._generate(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Remote menu generation exceeded %.0f s", self.timeout)
            return RemoteResult.failure(RemoteTimeout(f"No answer within {self.timeout:g} s"))
        except RemoteStrategyError as e:
            logger.warning("Remote menu generation failed: %s", e)
            return RemoteResult.failure(e)
        logger.info("Remote menu generation returned %d recipes", len(plan.recipes))
        return RemoteResult.success(plan)

    async def _generate(self, request: MenuRequest) -> MenuPlan:
        query = build_remote_request(
            request, self._today or date.today(),
            daily_time_limit=self.settings.daily_time_limit,
            busy_day_time_limit=self.settings.busy_day_time_limit,
        ).model_dump(mode="json")
        try:
            response = await self._post(chat_payload(query, self.user), self.timeout)
        except httpx.TimeoutException as e:
            raise RemoteTimeout(f"Remote call timed out: {e}") from e
        except httpx.HTTPError as e:
            raise RemoteUnavailable(f"Remote call failed: {e}") from e

        if response.status_code >= 400:
            logger.error("Remote generator answered %s: %s", response.status_code, response.text[:500])
            raise RemoteUnavailable(f"HTTP {response.status_code}: {response.reason_phrase}")
        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError("Remote response body is not JSON") from e
        answer = body.get("answer") if isinstance(body, dict) else None
        if not answer:
            raise ResponseParseError("Remote response has no answer field")
        if not isinstance(answer, str):
            raise ResponseParseError("Remote answer is not text")

        parsed = parse_answer(answer)
        return to_menu_plan(parsed, request)

    async def test_connection(self) -> Dict[str, Any]:
        """Minimal round trip; returns {success, error?, details?, data?}."""
        if not self.configured:
            return {"success": False, "error": "Remote menu generator is not configured"}
        payload = chat_payload({"test": True, "message": "Connection test"}, TEST_USER)
        try:
            response = await asyncio.wait_for(self._post(payload, self.test_timeout), timeout=self.test_timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return {"success": False, "error": f"No answer within {self.test_timeout:g} s"}
        except httpx.HTTPError as e:
            logger.warning("Remote connection test failed: %s", e)
            return {"success": False, "error": str(e)}

        if response.status_code >= 400:
            return {
                "success": False,
                "error": f"HTTP {response.status_code}: {response.reason_phrase}",
                "details": response.text[:200],
            }
        try:
            data = response.json()
        except ValueError:
            return {"success": False, "error": "Response body is not JSON", "details": response.text[:200]}
        return {"success": True, "data": data}


async def generate_menu(request: MenuRequest, planner: MenuPlanner,
                        remote: Optional[RemoteMenuStrategy] = None) -> MenuPlan:
    """Remote generation when configured, the local planner otherwise or on any remote failure.

    Input validation errors still propagate; remote errors never do.
    """
    request.validate()
    if remote is None or not remote.configured:
        return planner.plan(request)

    def _fallback(error: RemoteStrategyError) -> MenuPlan:
        logger.warning("Falling back to the local planner (%s: %s)", type(error).__name__, error)
        return planner.plan(request)

    result = await remote.generate(request)
    return result.or_else(_fallback)


# === FastAPI Endpoint ===
router = APIRouter()


@router.post("/api/remote/test")
async def remote_test(payload: Optional[RemoteConfigInput] = Body(default=None)):
    payload = payload or RemoteConfigInput()
    strategy = RemoteMenuStrategy(endpoint=payload.api_endpoint, api_key=payload.api_key)
    return await strategy.test_connection()


__all__ = [
    'RemoteResult', 'RemoteMenuStrategy', 'generate_menu', 'parse_answer', 'chat_payload', 'router',
]
