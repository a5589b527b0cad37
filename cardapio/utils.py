import math
import re
from datetime import datetime, timezone

from flask import request

from cardapio.exceptions import RequisicaoInvalida

EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def get_json_body():
    """Return the request body as a dict, treating an empty body as ``{}``.

    A body that is not valid JSON makes Flask raise ``BadRequest`` (400).
    """
    if not request.get_data():
        return {}
    data = request.get_json()
    if not isinstance(data, dict):
        raise RequisicaoInvalida('O corpo da requisição deve ser um objeto JSON')
    return data


def is_valid_number(value):
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_valid_id(value):
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_email(email):
    return isinstance(email, str) and EMAIL_REGEX.match(email.strip()) is not None


def normalize_email(email):
    return email.strip().lower()


def parse_datetime(value, field='data_lancamento'):
    """Parse an ISO 8601 date or datetime into a naive UTC datetime."""
    if not isinstance(value, str) or not value.strip():
        raise RequisicaoInvalida(f'{field} deve ser uma data no formato ISO 8601')
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise RequisicaoInvalida(f'{field} deve ser uma data no formato ISO 8601')
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_id_list(value, message):
    """Validate a non-empty list of integer ids, dropping repeated ids."""
    if not isinstance(value, list) or not value:
        raise RequisicaoInvalida(message)
    if not all(is_valid_id(item) for item in value):
        raise RequisicaoInvalida(message)
    return list(dict.fromkeys(value))
