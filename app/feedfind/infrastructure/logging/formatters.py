"""Structlog processors added to production log records."""

from typing import Any, Callable, Dict

EventDict = Dict[str, Any]


def add_app_info(
    app_name: str, app_version: str = "unknown", git_sha: str = ""
) -> Callable[[Any, str, EventDict], EventDict]:
    """Build a processor stamping each record with the build identity.

    ``git_sha`` is only added when known.

    Example:
        add_app_info("feedfind", "0.1.0", "3f2a9c1")
    """
    identity = {"app_name": app_name, "app_version": app_version}
    if git_sha:
        identity["git_sha"] = git_sha

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.update(identity)
        return event_dict

    return processor
