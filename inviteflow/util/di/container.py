"""Production container."""

from dishka import AsyncContainer, Provider, make_async_container

from inviteflow.util.di import PROVIDERS, get_provider


def create_container(*extra: Provider) -> AsyncContainer:
    """Build the production container.

    Settings come from the environment. A host application passes its
    own providers in ``extra``, e.g. one that supplies accept callbacks.

    Usage:
        container = create_container()
        events = await container.get(InviteEvents)
        events.register_accept_callback(grant_referral_bonus)

        async with container() as request:
            service = await request.get(InviteService)
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, *extra)
