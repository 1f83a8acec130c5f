"""HTTP controller translating requests into greeting logic calls."""

from __future__ import annotations

from dataclasses import dataclass

from starlette.requests import Request
from starlette.responses import PlainTextResponse

from greeter.application.ports import Logger, Logic
from greeter.domain.errors import UnknownUserError

#: Diagnostic line logged on entry to :meth:`Controller.say_hello`.
SAY_HELLO_TRACE = "SayHello内: "

#: Query parameter carrying the user identifier.
USER_ID_PARAM = "user_id"


@dataclass(frozen=True, slots=True)
class Controller:
    """Starlette endpoint holder depending only on the Logger and Logic ports.

    The controller is the single place where :class:`UnknownUserError` is
    turned into a transport-level answer (HTTP 400 with the error text).
    """

    logger: Logger
    logic: Logic

    async def say_hello(self, request: Request) -> PlainTextResponse:
        """Answer ``GET /hello?user_id=<id>`` with a greeting or a 400."""
        self.logger.log(SAY_HELLO_TRACE)
        # the first value wins when user_id is repeated
        values = request.query_params.getlist(USER_ID_PARAM)
        user_id = values[0] if values else ""
        try:
            message = self.logic.say_hello(user_id)
        except UnknownUserError as exc:
            return PlainTextResponse(str(exc), status_code=400)
        return PlainTextResponse(message)


def new_controller(logger: Logger, logic: Logic) -> Controller:
    """Factory accepting the two ports and returning the wired controller."""
    return Controller(logger=logger, logic=logic)


__all__ = ["SAY_HELLO_TRACE", "USER_ID_PARAM", "Controller", "new_controller"]
