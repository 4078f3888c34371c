"""
Bid Codec — кодирование ставки в JSON wire-форму и обратно

decode(encode(bid)) == bid для любой созданной или снятой ставки.

Декодирование в два этапа:
1. JSON Schema контракт (bid.json): строгие типы, запрет лишних полей
2. Pydantic модель Bid: timezone-aware timestamps, нормализация в UTC

Любая ошибка на границе превращается в MalformedBidError; частично
собранная ставка наружу не возвращается.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError as ModelValidationError

from bidding.contracts.validators import BidValidator
from bidding.domain.bid import Bid

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================


class MalformedBidError(ValueError):
    """Wire-форма ставки не может быть декодирована"""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        details = "; ".join(self.errors)
        super().__init__(f"{message}: {details}" if details else message)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CodecConfig:
    """Конфигурация кодека.

    - validate_schema: проверять JSON Schema перед построением модели
    - indent: отступ при кодировании (None: компактный JSON)
    """
    validate_schema: bool = True
    indent: Optional[int] = None


# =============================================================================
# CODEC
# =============================================================================


class BidCodec:
    """Кодек Bid ↔ JSON"""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self._validator = BidValidator() if self.config.validate_schema else None

    def encode(self, bid: Bid) -> str:
        """Bid → JSON строка"""
        return bid.model_dump_json(indent=self.config.indent)

    def to_payload(self, bid: Bid) -> dict:
        """Bid → JSON-совместимый dict (timestamps как RFC 3339 строки)"""
        return bid.model_dump(mode="json")

    def decode(self, data: Union[str, bytes, Mapping[str, Any]]) -> Bid:
        """
        JSON (строка, bytes или уже разобранный dict) → Bid.

        Args:
            data: Wire-форма ставки

        Returns:
            Декодированная ставка

        Raises:
            MalformedBidError: Невалидный JSON, нарушение схемы или модели
        """
        payload = self._parse(data)

        if self._validator is not None:
            schema_errors = sorted(
                self._validator.iter_errors(payload),
                key=lambda e: [str(p) for p in e.absolute_path],
            )
            if schema_errors:
                errors = [_format_schema_error(e) for e in schema_errors]
                logger.debug("Bid payload rejected by schema: %s", errors)
                raise MalformedBidError("Bid payload violates contract", errors)

        try:
            return Bid.model_validate(payload)
        except ModelValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            logger.debug("Bid payload rejected by model: %s", errors)
            raise MalformedBidError("Bid payload is not a valid bid", errors) from e

    def _parse(self, data: Union[str, bytes, Mapping[str, Any]]) -> Any:
        if isinstance(data, Mapping):
            return dict(data)

        # ValueError покрывает JSONDecodeError, UnicodeDecodeError и лимит
        # длины целых (sys.get_int_max_str_digits); RecursionError: глубокая вложенность
        try:
            return json.loads(data)
        except (ValueError, TypeError, RecursionError) as e:
            logger.debug("Bid payload is not valid JSON: %s", e)
            raise MalformedBidError("Bid payload is not valid JSON", [str(e)]) from e


def _format_schema_error(error: Any) -> str:
    location = ".".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def encode_bid(bid: Bid) -> str:
    """Кодирование ставки в компактный JSON"""
    return BidCodec().encode(bid)


def decode_bid(data: Union[str, bytes, Mapping[str, Any]]) -> Bid:
    """
    Декодирование ставки из JSON.

    Raises:
        MalformedBidError: Если данные не являются валидной ставкой
    """
    return BidCodec().decode(data)
