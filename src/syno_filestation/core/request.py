"""
Pure functions for composing File Station requests.

A request is identified by a RemoteCallDescriptor and carries a flat
ParameterSet: the API triple, caller parameters and the session id.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError, InvalidInputError
from ..models import Session
from .params import ParameterSet

BASE_PARAMETERS = ("api", "version", "method")


@dataclass(frozen=True)
class RemoteCallDescriptor:
    """Identifies one remote operation on the wire."""

    path: str
    api: str
    version: int
    method: str
    http_method: str = "GET"
    sid_param: str = "_sid"


def build_base_parameters(descriptor: RemoteCallDescriptor) -> dict:
    return {
        "api": descriptor.api,
        "version": descriptor.version,
        "method": descriptor.method,
    }


def check_reserved_names(params: Optional[Mapping]) -> None:
    """Reject caller parameters that would shadow the API triple."""
    for name in BASE_PARAMETERS:
        if params and name in params:
            raise InvalidInputError(
                f"Parameter '{name}' is set by the request builder",
                {"parameter": name},
            )


class RequestBuilder:
    """
    Builds the final parameter set for a remote call.

    The session is validated once here and reused for every request; the
    builder keeps no other state, so ``build`` can be called from several
    threads at once.
    """

    def __init__(self, session: Session):
        if session is None:
            raise ConfigurationError("A session is required")
        if not isinstance(session.sid, str) or not session.sid.strip():
            raise ConfigurationError("Session id is empty")
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def build(
        self,
        descriptor: RemoteCallDescriptor,
        required: Optional[Mapping] = None,
        optional: Optional[Mapping] = None,
    ) -> ParameterSet:
        """
        Compose base, required and optional parameters plus the session id.

        The session id is always the last entry; a value supplied by the
        caller under the same name is discarded.
        """
        sid_param = descriptor.sid_param
        required = {k: v for k, v in (required or {}).items() if k != sid_param}
        optional = {k: v for k, v in (optional or {}).items() if k != sid_param}

        check_reserved_names(required)
        check_reserved_names(optional)

        params = ParameterSet.merge({**build_base_parameters(descriptor), **required}, optional)
        return params.with_entry(sid_param, self._session.sid)
