"""Test container with per-component mocking."""

from dishka import AsyncContainer, make_async_container

from inviteflow.util.di import PROVIDERS, Component, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that mocks every component not listed in ``unmock``.

    Examples:
        # Unit tests - in-memory repository, recording mailer
        container = build_test_container()

        # Integration tests - real PostgreSQL, recording mailer
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If ``unmock`` names a component without a mock
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        base.implementation(
            use_mock=base.is_mockable() and base.__mock_component__ not in unmock
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
