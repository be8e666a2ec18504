"""
Salmon Supply Chain Django Adapter Views
==========================================
Pass-through HTTP views over the chaincode dispatcher.

    POST /v1/chaincodes/salmon/init     chaincode Init hook
    POST /v1/chaincodes/salmon/invoke   {"fcn": "...", "args": ["..."]}
    GET  /v1/chaincodes/salmon/query    ?fcn=...&args=["..."]

Queries accept only read-only functions. Their args are a JSON list;
single quotes are accepted in place of double quotes.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.responses import chaincode_envelope, error_envelope
from adapters.django_api.wiring import build_dependencies
from core.chaincode.errors import ChaincodeError
from core.chaincode.functions import ChaincodeFunction
from core.chaincode.response import ChaincodeResponse

logger = logging.getLogger("salmon.http")


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_envelope(code, message),
        status=status,
    )


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        "METHOD_NOT_ALLOWED",
        "Method not allowed for this endpoint.",
        status=405,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _require_fcn(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError("Missing fcn")
    return value


def _require_args(value: Any) -> list[str]:
    if value is None:
        raise ValueError("Missing args")
    if not isinstance(value, list):
        raise ValueError("args must be a list of strings.")
    if not all(isinstance(arg, str) for arg in value):
        raise ValueError("args must be a list of strings.")
    return value


def _parse_query_args(raw: str | None) -> list[str]:
    if raw is None:
        raise ValueError("Missing args")
    try:
        parsed = json.loads(raw.replace("'", '"'))
    except ValueError as exc:
        raise ValueError("args must be a JSON list.") from exc
    return _require_args(parsed)


def _payload_text(payload: bytes) -> str:
    return payload.decode("utf-8", errors="replace")


def _payload_json(payload: bytes) -> Any:
    if not payload:
        return None
    text = _payload_text(payload)
    try:
        return json.loads(text)
    except ValueError:
        return text


def _respond(response: ChaincodeResponse, data: Any) -> JsonResponse:
    body, status = chaincode_envelope(response, data)
    return JsonResponse(body, status=status)


@csrf_exempt
def chaincode_init_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    response = build_dependencies().init()
    return _respond(response, None)


@csrf_exempt
def chaincode_invoke_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        fcn = _require_fcn(body.get("fcn"))
        args = _require_args(body.get("args"))
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    logger.debug(f"Invoke {fcn} with {len(args)} args")
    response = build_dependencies().invoke(fcn, args)
    return _respond(response, _payload_text(response.payload))


def chaincode_query_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    try:
        fcn = _require_fcn(request.GET.get("fcn"))
        args = _parse_query_args(request.GET.get("args"))
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    try:
        function = ChaincodeFunction.resolve(fcn)
    except ChaincodeError as exc:
        return _respond(ChaincodeResponse.error(exc), None)

    if not function.read_only:
        return _json_error(
            "NOT_A_QUERY",
            f"Function {fcn} changes the ledger. Use the invoke endpoint.",
            status=400,
        )

    logger.debug(f"Query {fcn} with {len(args)} args")
    response = build_dependencies().invoke(fcn, args)
    return _respond(response, _payload_json(response.payload))
