"""Event and response shapes exchanged with the hosting runtime.

Events follow the API Gateway proxy format. Both the HTTP API (v2) layout,
where the method sits under ``requestContext.http.method``, and the flatter
``httpMethod``/``method`` keys are accepted.
"""

import base64
import binascii
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from movie_catalog.domain.exceptions import ValidationError

JSON_HEADERS = {"Content-Type": "application/json"}


class ProxyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    method: str
    path_parameters: Optional[Dict[str, str]] = Field(default=None, alias="pathParameters")
    body: Optional[str] = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")

    @model_validator(mode="before")
    @classmethod
    def _extract_method(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("method"):
            request_context = data.get("requestContext")
            http = request_context.get("http") if isinstance(request_context, dict) else None
            if not isinstance(http, dict):
                http = {}
            method = http.get("method") or data.get("httpMethod")
            if method:
                data = {**data, "method": method}
        return data

    @field_validator("method")
    @classmethod
    def _normalize_method(cls, value: str) -> str:
        return value.strip().upper()

    def path_parameter(self, key: str) -> Optional[str]:
        return (self.path_parameters or {}).get(key)

    def has_path_parameter(self, key: str) -> bool:
        return key in (self.path_parameters or {})

    def decoded_body(self) -> Optional[str]:
        if self.body is None or not self.is_base64_encoded:
            return self.body
        try:
            return base64.b64decode(self.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValidationError("Request body could not be decoded as UTF-8 text") from e


class ProxyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    body: str
    headers: Optional[Dict[str, str]] = None

    def to_event(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
