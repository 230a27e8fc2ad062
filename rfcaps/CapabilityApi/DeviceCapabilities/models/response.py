# models/response.py

from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class GraphQLError(BaseModel):
    message: str
    path: Optional[List[Any]] = None
    extensions: Optional[Dict[str, Any]] = None


class Response(BaseModel):
    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[GraphQLError]] = None
