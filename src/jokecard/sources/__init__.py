"""Joke source registry for jokecard."""

# Source registry
_SOURCES: dict[str, type] = {}


def register_source(cls: type) -> type:
    """Decorator to register a joke source class.

    Usage:
        @register_source
        class JokeApiSource(JokeSource):
            ...
    """
    if not hasattr(cls, "metadata"):
        raise ValueError(f"Source {cls.__name__} must define metadata ClassVar")

    _SOURCES[cls.metadata.id] = cls
    return cls


def get_source(source_id: str) -> type | None:
    """Get a source class by ID."""
    return _SOURCES.get(source_id)


def get_all_sources() -> dict[str, type]:
    """Get all registered sources, in registration order."""
    return dict(_SOURCES)


def list_source_ids() -> list[str]:
    """List all registered source IDs."""
    return list(_SOURCES.keys())


def create_source(source_id: str, **kwargs):
    """Create an instance of a source.

    Args:
        source_id: Source identifier
        **kwargs: Passed through to the source constructor

    Returns:
        Source instance

    Raises:
        ValueError: If source_id is not registered
    """
    cls = get_source(source_id)
    if cls is None:
        raise ValueError(
            f"Unknown joke source: {source_id!r} "
            f"(available: {', '.join(list_source_ids())})"
        )
    return cls(**kwargs)


# Import sources to register them
from jokecard.sources import jokeapi  # noqa: E402, F401
from jokecard.sources import dadjoke  # noqa: E402, F401
