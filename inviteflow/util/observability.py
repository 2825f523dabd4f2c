"""Logfire setup.

Service code calls ``logfire`` directly::

    with logfire.span("invite_service.accept", invite_id=str(invite_id)):
        logfire.info("Invite accepted", invite_id=str(invite.id))

Until ``configure_logfire`` runs those calls are no-ops apart from a
one-time warning, so tests need no setup.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from inviteflow import __version__
from inviteflow.config import ObservabilitySettings, Settings

SERVICE_NAME = "inviteflow"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship spans to Logfire cloud;
    without it output stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
