from types import MappingProxyType
from typing import Any

from shared.exceptions import NotFoundError
from shared.interfaces.mirror import MirrorModel
from shared.logging import get_logger
from users.interfaces.commands import CreateUserCommand, CreateUserResult
from users.interfaces.queries import GetUserQuery, GetUserResult

logger = get_logger(__name__)

MODELS: MappingProxyType[str, type[MirrorModel]] = MappingProxyType(
    {
        model.qualified_name(): model
        for model in (CreateUserCommand, CreateUserResult, GetUserQuery, GetUserResult)
    }
)


def available_models() -> list[str]:
    return sorted(MODELS)


def resolve_model(name: str) -> type[MirrorModel]:
    try:
        return MODELS[name]
    except KeyError:
        raise NotFoundError("Model", name) from None


def decode_payload(name: str, source: Any = None, *, strict: bool | None = None) -> MirrorModel:
    """Decode a payload into the model registered under a qualified name."""
    model = resolve_model(name)
    logger.debug("Decoding %s payload", name)
    return model.decode(source, strict=strict)


def encode_payload(instance: MirrorModel) -> dict[str, Any]:
    return instance.encode()
